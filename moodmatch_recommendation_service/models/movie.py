"""Movie catalog entry"""
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from moodmatch_recommendation_service.ml.text_processor import combine_text_features


@dataclass(frozen=True)
class Movie:
    """A movie, rating normalized to 0-5."""

    content_type: ClassVar[str] = "movie"

    id: str
    title: str
    genres: Tuple[str, ...] = ()
    cast: Tuple[str, ...] = ()
    director: Optional[str] = None
    overview: str = ""
    rating: float = 0.0
    language: Optional[str] = None
    poster_path: Optional[str] = None

    @property
    def tags(self) -> Tuple[str, ...]:
        return self.genres

    @property
    def text(self) -> str:
        return combine_text_features(
            self.overview,
            [*self.genres, *self.cast, self.director]
        )

    def __repr__(self):
        return f"<Movie(id='{self.id}', title='{self.title}')>"
