"""Hybrid recommendations blending content and collaborative scores."""
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import logging

from moodmatch_recommendation_service.models import CatalogItem, HybridScore, MoodProfile, Rating
from moodmatch_recommendation_service.policies import DomainPolicy
from moodmatch_recommendation_service.repos import CatalogRepository
from moodmatch_recommendation_service.services.collaborative_filter_service import CollaborativeFilter
from moodmatch_recommendation_service.services.content_filter_service import ContentSimilarityFilter

logger = logging.getLogger(__name__)


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _normalize_to_best(scored: List[Tuple[str, float]]) -> List[Tuple[str, float]]:
    """
    Divide scores by the best one so the top candidate scores 1.0.

    Order and relative gaps are kept; an all-zero pool is returned unchanged.
    """
    best = max((score for _, score in scored), default=0.0)
    if best <= 0:
        return scored
    return [(item_id, score / best) for item_id, score in scored]


class HybridRecommender:
    """
    Combine a ContentSimilarityFilter and a CollaborativeFilter for one domain.

    hybrid_score = content_weight * content_score
                   + collaborative_weight * collaborative_score

    Both inputs are normalized to [0, 1]: mood scores against the best
    possible match, history scores against the best candidate in the pool,
    collaborative scores by the rating maximum. An item found by only one source
    gets 0 from the other. The result is clamped to [0, 1].
    """

    def __init__(
        self,
        policy: DomainPolicy,
        content_filter: Optional[ContentSimilarityFilter] = None,
        collaborative_filter: Optional[CollaborativeFilter] = None,
        content_weight: float = 0.7,
        collaborative_weight: float = 0.3
    ):
        """
        Initialize the recommender.

        Args:
            policy: Domain policy
            content_filter: Content source (default: built from the policy)
            collaborative_filter: Collaborative source (default: new filter)
            content_weight: Weight of the content score (>= 0)
            collaborative_weight: Weight of the collaborative score (>= 0)

        Raises:
            ValueError: If a weight is negative
        """
        if content_weight < 0 or collaborative_weight < 0:
            raise ValueError(
                f"Weights must be non-negative, got content={content_weight}, "
                f"collaborative={collaborative_weight}"
            )

        self.policy = policy
        self.content_filter = content_filter or ContentSimilarityFilter(policy)
        self.collaborative_filter = collaborative_filter or CollaborativeFilter(rating_max=policy.rating_max)
        self.content_weight = content_weight
        self.collaborative_weight = collaborative_weight
        self.catalog = CatalogRepository()

        logger.info(
            f"Initialized {policy.name} HybridRecommender - "
            f"Content: {content_weight}, Collaborative: {collaborative_weight}"
        )

    def load_catalog(self, items: Iterable[CatalogItem]) -> int:
        """
        Load the domain catalog into both sources.

        Returns:
            Number of items loaded
        """
        items = list(items)
        count = self.catalog.bulk_store_items(items)
        self.content_filter.load_catalog(items)
        self.collaborative_filter.load_catalog(items)
        return count

    def load_ratings(self, ratings: Iterable[Rating]) -> int:
        """
        Add user ratings to the collaborative source.

        Returns:
            Number of ratings added
        """
        return self.collaborative_filter.add_ratings(ratings)

    def recommend(
        self,
        user_id: str,
        mood: str | MoodProfile | None = None,
        seen_item_ids: Optional[Sequence[str]] = None,
        top_k: int = 10
    ) -> List[HybridScore]:
        """
        Get blended recommendations.

        The content source is mood-driven when a mood is given and
        history-driven over the seen items otherwise. Each source is asked
        for 2 * top_k candidates.

        Args:
            user_id: User identifier
            mood: Mood key or MoodProfile
            seen_item_ids: Items to exclude (also the history for the content source)
            top_k: Number of results

        Returns:
            HybridScore records sorted by hybrid score (ties in catalog
            order), never containing a seen item, at most top_k long
        """
        if top_k <= 0:
            return []

        seen = list(seen_item_ids or [])
        seen_set = set(seen)
        pool_size = top_k * 2

        if mood:
            content_recs = self.content_filter.recommend_for_mood(mood, pool_size)
        else:
            content_recs = _normalize_to_best(
                self.content_filter.recommend_for_history(seen, pool_size)
            )

        collaborative_recs = self.collaborative_filter.recommend(user_id, pool_size)

        # item_id -> [content_score, collaborative_score]
        combined: Dict[str, List[float]] = {}

        for item_id, score in content_recs:
            combined.setdefault(item_id, [0.0, 0.0])[0] = _clamp(score)

        for item_id, score in collaborative_recs:
            combined.setdefault(item_id, [0.0, 0.0])[1] = _clamp(score / self.policy.rating_max)

        results = []
        for item_id, (content_score, collaborative_score) in combined.items():
            if item_id in seen_set:
                continue

            item = self.catalog.get_item(item_id)
            if item is None:
                # Rated somewhere but not in the catalog, nothing to join to
                continue

            results.append(HybridScore(
                item_id=item_id,
                title=item.title,
                content_score=content_score,
                collaborative_score=collaborative_score,
                hybrid_score=_clamp(
                    self.content_weight * content_score
                    + self.collaborative_weight * collaborative_score
                )
            ))

        results.sort(key=lambda r: (-r.hybrid_score, self.catalog.position(r.item_id)))

        logger.debug(
            f"{self.policy.name}: {len(content_recs)} content + {len(collaborative_recs)} collaborative "
            f"candidates -> {min(len(results), top_k)} recommendations for user {user_id}"
        )

        return results[:top_k]

    def get_stats(self) -> Dict:
        """Get statistics about this recommender."""
        return {
            'domain': self.policy.name,
            'catalog_items': self.catalog.count_items(),
            'collaborative': self.collaborative_filter.get_stats(),
            'weights': {
                'content': self.content_weight,
                'collaborative': self.collaborative_weight
            }
        }
