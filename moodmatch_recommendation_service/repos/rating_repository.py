"""In-memory append-only rating store."""

from typing import Dict, Iterable, List
import logging

from moodmatch_recommendation_service.models import Rating

logger = logging.getLogger(__name__)


class RatingRepository:
    """
    Append-only store of user ratings.

    Duplicate (user, item) pairs are kept; callers that need one rating per
    pair must dedupe before storing.
    """

    def __init__(self):
        self._ratings: List[Rating] = []
        self._by_user: Dict[str, Dict[str, float]] = {}

    def store_ratings(self, ratings: Iterable[Rating]) -> int:
        """
        Append ratings.

        Args:
            ratings: Rating records

        Returns:
            Number of ratings appended
        """
        count = 0
        for rating in ratings:
            self._ratings.append(rating)
            # Later writes win in the per-user view
            self._by_user.setdefault(rating.user_id, {})[rating.item_id] = float(rating.rating)
            count += 1

        logger.debug(f"Stored {count} ratings ({len(self._ratings)} total)")
        return count

    def copy(self) -> "RatingRepository":
        """Independent copy; later writes to either store are not shared."""
        clone = RatingRepository()
        clone._ratings = list(self._ratings)
        clone._by_user = {user_id: dict(items) for user_id, items in self._by_user.items()}
        return clone

    def get_all_ratings(self) -> List[Rating]:
        """Get every stored rating in insertion order."""
        return list(self._ratings)

    def get_user_ratings(self, user_id: str) -> Dict[str, float]:
        """
        Get a user's latest rating per item.

        Returns:
            item_id -> rating, empty for unknown users
        """
        return dict(self._by_user.get(user_id, {}))

    def get_user_ids(self) -> List[str]:
        """Get all users in first-seen order."""
        return list(self._by_user)

    def get_item_ids(self) -> List[str]:
        """Get all rated items in first-seen order."""
        seen: Dict[str, None] = {}
        for rating in self._ratings:
            seen.setdefault(rating.item_id, None)
        return list(seen)

    def get_rating_stats(self) -> Dict:
        """
        Get statistics about stored ratings.

        Returns:
            Dict with total_ratings, unique_users, unique_items, avg_rating
        """
        total = len(self._ratings)
        return {
            'total_ratings': total,
            'unique_users': len(self._by_user),
            'unique_items': len(self.get_item_ids()),
            'avg_rating': (sum(r.rating for r in self._ratings) / total) if total else 0.0,
        }

    def count_ratings(self) -> int:
        """Count stored ratings, duplicates included."""
        return len(self._ratings)
