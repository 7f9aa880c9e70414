"""Content-based filtering over catalog metadata and text."""
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import logging

import numpy as np

from moodmatch_recommendation_service.ml.content_analyzer import ContentAnalyzer
from moodmatch_recommendation_service.ml.feature_extractor import FeatureExtractor
from moodmatch_recommendation_service.ml.similarity_computer import SimilarityComputer
from moodmatch_recommendation_service.models import CatalogItem, MoodProfile
from moodmatch_recommendation_service.policies import DomainPolicy
from moodmatch_recommendation_service.repos import CatalogRepository

logger = logging.getLogger(__name__)


class ContentSimilarityFilter:
    """
    Rank catalog items by similarity to a user's history or by fit to a mood.

    The item x item similarity matrix is computed once per catalog load and
    queried read-only afterwards.
    """

    def __init__(
        self,
        policy: DomainPolicy,
        analyzer: Optional[ContentAnalyzer] = None,
        feature_extractor: Optional[FeatureExtractor] = None,
        similarity_computer: Optional[SimilarityComputer] = None
    ):
        """
        Initialize the filter.

        Args:
            policy: Domain policy (mood table, similarity components, weights)
            analyzer: TF-IDF analyzer (default: new ContentAnalyzer)
            feature_extractor: Attribute encoder (default: new FeatureExtractor)
            similarity_computer: Matrix builder (default: weights from the policy)
        """
        self.policy = policy
        self.analyzer = analyzer or ContentAnalyzer()
        self.feature_extractor = feature_extractor or FeatureExtractor()
        self.similarity_computer = similarity_computer or SimilarityComputer(
            metadata_weight=policy.metadata_weight,
            text_weight=policy.text_weight
        )
        self.catalog = CatalogRepository()

        self._similarities: Dict[str, np.ndarray] = {}

    def load_catalog(self, items: Iterable[CatalogItem]) -> int:
        """
        Store the catalog and rebuild the corpus and similarity matrices.

        Args:
            items: Catalog items

        Returns:
            Number of items loaded
        """
        count = self.catalog.bulk_store_items(items)
        catalog_items = self.catalog.get_all_items()

        if not catalog_items:
            self.analyzer.build_corpus([])
            self._similarities = {}
            return 0

        logger.info(f"Building {self.policy.name} content model for {count} items...")

        self.analyzer.build_corpus([{'id': item.id, 'text': item.text} for item in catalog_items])
        vectors = [self.analyzer.get_document_vector(item.id) for item in catalog_items]

        features = self.feature_extractor.extract_all_features(catalog_items, self.policy)
        self._similarities = self.similarity_computer.compute_all_similarities(
            features, vectors, self.analyzer
        )

        logger.info(f"✓ Built {self.policy.name} similarity matrix: {self._similarities['content_similarity'].shape}")
        return count

    @property
    def content_similarity(self) -> Optional[np.ndarray]:
        """Item x item content similarity matrix in catalog order."""
        return self._similarities.get('content_similarity')

    def get_similarity_matrices(self) -> Dict[str, np.ndarray]:
        """All matrices from the last catalog load (components, metadata, text, content)."""
        return dict(self._similarities)

    def similarity(self, item_id1: str, item_id2: str) -> float:
        """
        Content similarity of two items.

        Returns:
            Similarity in [0, 1]; 0 when either item is unknown
        """
        matrix = self.content_similarity
        if matrix is None or item_id1 not in self.catalog or item_id2 not in self.catalog:
            return 0.0

        return float(matrix[self.catalog.position(item_id1), self.catalog.position(item_id2)])

    def similar_items(self, item_id: str, top_k: int = 10, min_similarity: float = 0.0) -> List[Dict]:
        """
        Get the items most similar to one item.

        Args:
            item_id: Source item ID
            top_k: Number of results
            min_similarity: Minimum similarity threshold

        Returns:
            List of dicts with item_id, similarity_score and one score per
            similarity component
        """
        similarities = self._similarities
        if not similarities or item_id not in self.catalog:
            logger.warning(f"Item ID {item_id} not found in {self.policy.name} similarity matrix")
            return []

        item_ids = self.catalog.get_item_ids()
        source_idx = self.catalog.position(item_id)
        scores = similarities['content_similarity'][source_idx]

        # Stable sort keeps catalog order among equal scores
        order = np.argsort(-scores, kind='stable')
        component_keys = [
            key for key in similarities
            if key not in ('content_similarity', 'metadata_similarity')
        ]

        results = []
        for idx in order:
            if idx == source_idx:
                continue

            score = float(scores[idx])
            if score < min_similarity:
                break

            result = {'item_id': item_ids[idx], 'similarity_score': score}
            for key in component_keys:
                result[key.replace('_similarity', '_score')] = float(similarities[key][source_idx, idx])
            results.append(result)

            if len(results) >= top_k:
                break

        return results

    def recommend_for_mood(
        self,
        mood: str | MoodProfile,
        top_k: int = 10,
        confidence: Optional[float] = None
    ) -> List[Tuple[str, float]]:
        """
        Rank items whose tags match a mood.

        Items are filtered to those sharing at least one tag with the mood's
        target tags and ranked by match_count * quality rating. Reported
        scores are normalized to [0, 1] by the best achievable value.

        Args:
            mood: Mood key or MoodProfile
            top_k: Number of results
            confidence: Optional 0-100 multiplier (defaults to the profile's)

        Returns:
            (item_id, score) tuples, best first
        """
        if isinstance(mood, MoodProfile):
            if confidence is None:
                confidence = mood.confidence
            mood = mood.primary

        if top_k <= 0:
            return []

        targets = {tag.lower() for tag in self.policy.target_tags(mood)}
        if not targets:
            return []

        matches: List[Tuple[str, float]] = []
        for item in self.catalog.get_all_items():
            item_tags = {tag.lower() for tag in self.policy.mood_tags(item) if tag}
            match_count = len(item_tags & targets)
            if match_count:
                matches.append((item.id, match_count * float(item.rating)))

        matches.sort(key=lambda m: m[1], reverse=True)

        scale = len(targets) * self.policy.rating_max
        factor = 1.0 if confidence is None else min(max(confidence / 100.0, 0.0), 1.0)

        return [
            (item_id, min(max(raw / scale, 0.0), 1.0) * factor)
            for item_id, raw in matches[:top_k]
        ]

    def recommend_for_history(
        self,
        history: Sequence[str],
        top_k: int = 10
    ) -> List[Tuple[str, float]]:
        """
        Rank unseen items by mean similarity to a user's history.

        Args:
            history: Item IDs the user has rated or consumed
            top_k: Number of results

        Returns:
            (item_id, score) tuples, best first; empty when no history item is known
        """
        matrix = self.content_similarity
        known = [item_id for item_id in history if item_id in self.catalog]

        if matrix is None or not known or top_k <= 0:
            return []

        history_set = set(history)
        rows = [self.catalog.position(item_id) for item_id in known]
        mean_similarity = matrix[rows].mean(axis=0)

        scored = [
            (item_id, float(mean_similarity[idx]))
            for idx, item_id in enumerate(self.catalog.get_item_ids())
            if item_id not in history_set
        ]
        scored.sort(key=lambda s: s[1], reverse=True)

        return scored[:top_k]

    def recommend(
        self,
        mood: str | MoodProfile | None = None,
        history: Optional[Sequence[str]] = None,
        top_k: int = 10
    ) -> List[Tuple[str, float]]:
        """
        History-driven ranking when a history is given, mood-driven otherwise.

        Returns:
            (item_id, score) tuples, best first; empty without mood or history
        """
        if history:
            return self.recommend_for_history(history, top_k)
        if mood:
            return self.recommend_for_mood(mood, top_k)
        return []
