"""Podcast catalog entry"""
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from moodmatch_recommendation_service.ml.text_processor import combine_text_features


@dataclass(frozen=True)
class Podcast:
    """A podcast show."""

    content_type: ClassVar[str] = "podcast"

    id: str
    title: str
    host: str = ""
    categories: Tuple[str, ...] = ()
    description: str = ""
    rating: float = 0.0
    language: Optional[str] = None
    episodes: Optional[int] = None

    @property
    def tags(self) -> Tuple[str, ...]:
        return self.categories

    @property
    def text(self) -> str:
        return combine_text_features(
            self.description,
            [*self.categories, self.host]
        )

    def __repr__(self):
        return f"<Podcast(id='{self.id}', title='{self.title}')>"
