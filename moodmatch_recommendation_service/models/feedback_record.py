"""User feedback on a recommended item"""
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Optional, Tuple

FEEDBACK_TYPES = ("like", "dislike", "comment")
CONTENT_TYPES = ("movie", "song", "podcast")


@dataclass(frozen=True)
class FeedbackRecord:
    """One like, dislike or comment, with the mood it was given in."""

    item_id: str
    item_title: str
    type: str
    content_type: str
    mood: str
    session_id: str
    energy: float = 50.0
    intensity: float = 50.0
    tags: Tuple[str, ...] = ()
    creator: Optional[str] = None  # artist or host
    rating: Optional[float] = None
    comment: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __repr__(self):
        return f"<FeedbackRecord(item_id='{self.item_id}', type='{self.type}', mood='{self.mood}')>"
