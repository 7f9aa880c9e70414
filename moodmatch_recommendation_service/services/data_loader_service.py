"""Service to turn raw catalog and rating records into model objects"""
from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging

import pandas as pd

from moodmatch_recommendation_service.models import CatalogItem, Movie, Podcast, Rating, Song

logger = logging.getLogger(__name__)

RATING_MAX = 5.0

Records = Iterable[Dict[str, Any]] | pd.DataFrame


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, set)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _clean(value: Any) -> Any:
    """Map NaN-like values to None."""
    return None if _is_missing(value) else value


def _as_tuple(value: Any) -> Tuple[str, ...]:
    """Normalize list-like or comma-separated values to a tuple of strings."""
    if _is_missing(value):
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(v) for v in value if not _is_missing(v))


def _first(record: Dict[str, Any], *keys: str) -> Any:
    """First non-missing value among alternative keys."""
    for key in keys:
        value = record.get(key)
        if not _is_missing(value):
            return value
    return None


def normalize_rating(value: Any, scale: Optional[float] = None) -> float:
    """
    Normalize an external quality score to 0-5.

    Args:
        value: Raw score
        scale: Upper bound of the raw scale; when omitted, scores above 5
            are assumed to be on a 0-10 scale

    Returns:
        Score in [0, 5]; 0 when missing or not numeric
    """
    if _is_missing(value):
        return 0.0
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0.0

    if scale:
        score = score / scale * RATING_MAX
    elif score > RATING_MAX:
        score = score / 2.0

    return min(max(score, 0.0), RATING_MAX)


class CatalogDataLoader:
    """Build catalog items and ratings from dict records or a DataFrame."""

    def __init__(self, rating_scale: Optional[float] = None):
        """
        Args:
            rating_scale: Upper bound of the raw quality scores (None = auto-detect)
        """
        self.rating_scale = rating_scale

    def _records(self, records: Records) -> List[Dict[str, Any]]:
        if isinstance(records, pd.DataFrame):
            return records.to_dict(orient="records")
        return list(records)

    def _load(self, records: Records, build, kind: str) -> List[Any]:
        items = []
        for record in self._records(records):
            item_id = _first(record, "id")
            title = _first(record, "title", "name")
            if item_id is None or title is None:
                logger.warning(f"Skipping {kind} record without id/title: {record!r}")
                continue
            items.append(build(str(item_id), str(title), record))

        logger.info(f"✓ Loaded {len(items)} {kind}s")
        return items

    # ===== CATALOGS =====

    def load_movies(self, records: Records) -> List[Movie]:
        """Build Movie objects (rating 0-10 or 0-5, normalized to 0-5)."""
        return self._load(records, lambda item_id, title, r: Movie(
            id=item_id,
            title=title,
            genres=_as_tuple(r.get("genres")),
            cast=_as_tuple(r.get("cast")),
            director=_clean(r.get("director")),
            overview=_first(r, "overview", "description") or "",
            rating=normalize_rating(r.get("rating"), self.rating_scale),
            language=_clean(r.get("language")),
            poster_path=_clean(r.get("poster_path")),
        ), "movie")

    def load_songs(self, records: Records) -> List[Song]:
        """Build Song objects."""
        def build(item_id: str, title: str, r: Dict[str, Any]) -> Song:
            energy = _clean(r.get("energy"))
            year = _clean(_first(r, "release_year", "releaseYear"))
            duration = _clean(r.get("duration"))
            return Song(
                id=item_id,
                title=title,
                artist=_clean(r.get("artist")) or "",
                album=_clean(r.get("album")),
                genres=_as_tuple(r.get("genres")),
                mood=str(_clean(r.get("mood")) or "").lower(),
                energy=float(energy) if energy is not None else 50.0,
                rating=normalize_rating(r.get("rating"), self.rating_scale),
                release_year=int(year) if year is not None else None,
                duration=int(duration) if duration is not None else None,
                description=_clean(r.get("description")) or "",
            )

        return self._load(records, build, "song")

    def load_podcasts(self, records: Records) -> List[Podcast]:
        """Build Podcast objects."""
        def build(item_id: str, title: str, r: Dict[str, Any]) -> Podcast:
            episodes = _clean(r.get("episodes"))
            return Podcast(
                id=item_id,
                title=title,
                host=_clean(r.get("host")) or "",
                categories=_as_tuple(r.get("categories")),
                description=_clean(r.get("description")) or "",
                rating=normalize_rating(r.get("rating"), self.rating_scale),
                language=_clean(r.get("language")),
                episodes=int(episodes) if episodes is not None else None,
            )

        return self._load(records, build, "podcast")

    def load_items(self, domain: str, records: Records) -> List[CatalogItem]:
        """
        Build catalog items for a domain.

        Raises:
            ValueError: If the domain is unknown
        """
        loaders = {
            "movies": self.load_movies,
            "music": self.load_songs,
            "podcasts": self.load_podcasts,
        }
        if domain not in loaders:
            raise ValueError(f"Unknown domain '{domain}', expected one of {sorted(loaders)}")
        return loaders[domain](records)

    # ===== RATINGS =====

    def load_ratings(self, records: Records) -> List[Rating]:
        """
        Build Rating objects.

        Accepts user_id/userId and item_id/itemId/movieId/songId/podcastId keys.
        Records without a user, item or numeric rating are skipped.
        """
        ratings = []
        for record in self._records(records):
            user_id = _first(record, "user_id", "userId")
            item_id = _first(record, "item_id", "itemId", "movieId", "songId", "podcastId")
            value = _clean(record.get("rating"))

            try:
                rating = float(value) if value is not None else None
            except (TypeError, ValueError):
                rating = None

            if user_id is None or item_id is None or rating is None:
                logger.warning(f"Skipping incomplete rating record: {record!r}")
                continue

            ratings.append(Rating(
                user_id=str(user_id),
                item_id=str(item_id),
                rating=rating,
                timestamp=float(_clean(record.get("timestamp")) or 0.0),
            ))

        logger.info(f"✓ Loaded {len(ratings)} ratings")
        return ratings
