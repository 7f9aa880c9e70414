"""Service that owns the movie, music and podcast recommenders."""
from typing import Dict, Iterable, List, Optional, Sequence
import logging
import threading

from moodmatch_recommendation_service.config import (
    get_collaborative_weight,
    get_content_weight,
    get_mf_epochs,
    get_mf_factors,
    get_mf_min_ratings,
    get_mf_random_seed
)
from moodmatch_recommendation_service.ml.matrix_factorization import MatrixFactorization
from moodmatch_recommendation_service.models import CatalogItem, MoodProfile, Rating
from moodmatch_recommendation_service.policies import POLICIES, get_policy
from moodmatch_recommendation_service.services.collaborative_filter_service import CollaborativeFilter
from moodmatch_recommendation_service.services.content_filter_service import ContentSimilarityFilter
from moodmatch_recommendation_service.services.data_loader_service import CatalogDataLoader
from moodmatch_recommendation_service.services.hybrid_recommender_service import HybridRecommender
from moodmatch_recommendation_service.services.user_learning_service import UserLearningService

logger = logging.getLogger(__name__)

HYBRID_ID_PREFIX = "hybrid_"


class RecommendationService:
    """
    Long-lived entry point: one HybridRecommender per domain plus the
    session's feedback learning.

    Catalog and rating loads for a domain are serialized by that domain's
    lock. Queries do not lock; they read whatever state the last load
    published.
    """

    def __init__(
        self,
        content_weight: Optional[float] = None,
        collaborative_weight: Optional[float] = None,
        mf_min_ratings: Optional[int] = None,
        mf_epochs: Optional[int] = None,
        mf_factors: Optional[int] = None,
        random_state: Optional[int] = None,
        learning_service: Optional[UserLearningService] = None
    ):
        """
        Initialize the service. Unset arguments come from configuration.

        Args:
            content_weight: Hybrid content weight
            collaborative_weight: Hybrid collaborative weight
            mf_min_ratings: Rating count that must be exceeded to use MF
            mf_epochs: SGD epochs per training run
            mf_factors: Latent factor count
            random_state: Seed for MF training
            learning_service: Feedback learner (default: new session)
        """
        self.content_weight = get_content_weight() if content_weight is None else content_weight
        self.collaborative_weight = (
            get_collaborative_weight() if collaborative_weight is None else collaborative_weight
        )
        self.mf_min_ratings = get_mf_min_ratings() if mf_min_ratings is None else mf_min_ratings
        self.mf_epochs = get_mf_epochs() if mf_epochs is None else mf_epochs
        self.mf_factors = get_mf_factors() if mf_factors is None else mf_factors
        self.random_state = get_mf_random_seed() if random_state is None else random_state

        self.learning = learning_service or UserLearningService()
        self.loader = CatalogDataLoader()

        self._recommenders: Dict[str, HybridRecommender] = {}
        self._locks: Dict[str, threading.Lock] = {}

        for domain, policy in POLICIES.items():
            collaborative = CollaborativeFilter(
                matrix_factorization=MatrixFactorization(
                    n_factors=self.mf_factors,
                    rating_max=policy.rating_max
                ),
                mf_min_ratings=self.mf_min_ratings,
                epochs=self.mf_epochs,
                rating_max=policy.rating_max,
                random_state=self.random_state
            )
            self._recommenders[domain] = HybridRecommender(
                policy,
                content_filter=ContentSimilarityFilter(policy),
                collaborative_filter=collaborative,
                content_weight=self.content_weight,
                collaborative_weight=self.collaborative_weight
            )
            self._locks[domain] = threading.Lock()

        logger.info(f"Initialized RecommendationService for domains: {', '.join(self._recommenders)}")

    @classmethod
    def from_seed_data(cls, **kwargs) -> "RecommendationService":
        """Build a service with the bundled seed catalogs and ratings loaded."""
        from moodmatch_recommendation_service.datasets import SEED_DATA

        service = cls(**kwargs)
        for domain, (items, ratings) in SEED_DATA.items():
            service.load_catalog(domain, service.loader.load_items(domain, items))
            service.load_ratings(domain, service.loader.load_ratings(ratings))

        return service

    def get_recommender(self, domain: str) -> HybridRecommender:
        """
        Get the recommender for a domain.

        Raises:
            ValueError: If the domain is unknown
        """
        get_policy(domain)
        return self._recommenders[domain]

    def load_catalog(self, domain: str, items: Iterable[CatalogItem]) -> int:
        """Load a domain catalog; blocks other writers for that domain."""
        recommender = self.get_recommender(domain)
        with self._locks[domain]:
            count = recommender.load_catalog(items)

        logger.info(f"✓ Loaded {count} {domain} catalog items")
        return count

    def load_ratings(self, domain: str, ratings: Iterable[Rating]) -> int:
        """Add ratings to a domain; blocks other writers for that domain."""
        recommender = self.get_recommender(domain)
        with self._locks[domain]:
            count = recommender.load_ratings(ratings)

        logger.info(f"✓ Added {count} {domain} ratings")
        return count

    def recommend(
        self,
        domain: str,
        user_id: str,
        mood: str | MoodProfile | None = None,
        seen_item_ids: Optional[Sequence[str]] = None,
        top_k: int = 10,
        scale: Optional[int] = None
    ) -> List[Dict]:
        """
        Get hybrid recommendations as plain dicts.

        Args:
            domain: movies, music or podcasts
            user_id: User identifier
            mood: Mood key or MoodProfile
            seen_item_ids: Items to exclude; hybrid_-prefixed ids are accepted
            top_k: Number of results
            scale: Rescale scores to ints in [0, scale] (e.g. 100)

        Returns:
            List of dicts with item_id, title, content_score,
            collaborative_score and hybrid_score

        Raises:
            ValueError: If the domain is unknown
        """
        recommender = self.get_recommender(domain)

        seen = [
            item_id[len(HYBRID_ID_PREFIX):] if item_id.startswith(HYBRID_ID_PREFIX) else item_id
            for item_id in (seen_item_ids or [])
        ]

        results = recommender.recommend(user_id, mood=mood, seen_item_ids=seen, top_k=top_k)
        return [result.to_dict(scale=scale) for result in results]

    def record_feedback(self, **feedback):
        """Forward feedback to the learning service (see UserLearningService.record_feedback)."""
        return self.learning.record_feedback(**feedback)

    def personalization_score(self, domain: str, item_id: str, mood: str) -> float:
        """
        Learned 0-100 personalization score of a catalog item.

        Returns:
            Score, 0 when the item is not in the domain catalog
        """
        recommender = self.get_recommender(domain)
        item = recommender.catalog.get_item(item_id)
        if item is None:
            logger.warning(f"Item ID {item_id} not found in {domain} catalog")
            return 0.0

        return self.learning.calculate_recommendation_score(
            item.tags, mood, recommender.policy.content_type
        )

    def get_stats(self) -> Dict:
        """Get statistics about every domain and the learning session."""
        return {
            'domains': {domain: rec.get_stats() for domain, rec in self._recommenders.items()},
            'feedback': {
                'total_feedback': self.learning.feedback.count_feedback(),
                'engagement_score': self.learning.engagement_score,
            },
        }
