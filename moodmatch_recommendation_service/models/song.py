"""Song catalog entry"""
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from moodmatch_recommendation_service.ml.text_processor import combine_text_features


@dataclass(frozen=True)
class Song:
    """A song with a mood label and an energy level (0-100)."""

    content_type: ClassVar[str] = "song"

    id: str
    title: str
    artist: str = ""
    album: Optional[str] = None
    genres: Tuple[str, ...] = ()
    mood: str = ""
    energy: float = 50.0
    rating: float = 0.0
    release_year: Optional[int] = None
    duration: Optional[int] = None  # seconds
    description: str = ""

    @property
    def tags(self) -> Tuple[str, ...]:
        return self.genres

    @property
    def text(self) -> str:
        return combine_text_features(
            self.description,
            [*self.genres, self.mood, self.artist, self.album]
        )

    def __repr__(self):
        return f"<Song(id='{self.id}', title='{self.title}', artist='{self.artist}')>"
