"""User rating of a catalog item"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Rating:
    """One (user, item, rating) observation. Ratings are append-only."""

    user_id: str
    item_id: str
    rating: float
    timestamp: float = 0.0
