"""Mood signal produced by the upstream sentiment classifier"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class MoodProfile:
    """
    Read-only mood input.

    energy, intensity and confidence are on a 0-100 scale.
    """

    primary: str
    energy: float = 50.0
    intensity: float = 50.0
    confidence: float = 100.0
    keywords: Tuple[str, ...] = ()
