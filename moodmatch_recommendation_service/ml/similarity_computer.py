"""Compute item x item similarity matrices for content recommendations."""
import numpy as np
from typing import Any, Dict, List, Mapping, Optional
import logging

from moodmatch_recommendation_service.ml.content_analyzer import ContentAnalyzer
from moodmatch_recommendation_service.policies import CLOSENESS, LABEL, RELATED, TAGS

logger = logging.getLogger(__name__)


class SimilarityComputer:
    """Compute similarity matrices from feature arrays."""

    def __init__(
        self,
        metadata_weight: float = 0.7,
        text_weight: float = 0.3
    ):
        """
        Initialize similarity computer.

        Args:
            metadata_weight: Weight for metadata (tags, labels, numeric) similarity
            text_weight: Weight for TF-IDF text similarity
        """
        self.metadata_weight = metadata_weight
        self.text_weight = text_weight

    def compute_tag_similarity(self, tag_features: np.ndarray) -> np.ndarray:
        """
        Compute Jaccard similarity (intersection / union) of tag sets.

        Args:
            tag_features: Binary tag matrix (n_items x n_tags)

        Returns:
            Tag similarity matrix (n_items x n_items); 0 where both sets are empty
        """
        intersection = tag_features @ tag_features.T
        sizes = tag_features.sum(axis=1)
        union = sizes[:, None] + sizes[None, :] - intersection

        return np.divide(
            intersection,
            union,
            out=np.zeros_like(intersection, dtype=float),
            where=union > 0
        )

    def compute_label_similarity(self, label_features: np.ndarray) -> np.ndarray:
        """
        Exact-match similarity of a one-hot encoded attribute.

        Args:
            label_features: One-hot matrix (n_items x n_labels)

        Returns:
            1 where both items carry the same label, else 0
        """
        return np.clip(label_features @ label_features.T, 0.0, 1.0)

    def compute_related_similarity(
        self,
        label_features: np.ndarray,
        relation: np.ndarray
    ) -> np.ndarray:
        """
        Similarity through a label relation table.

        Args:
            label_features: One-hot matrix (n_items x n_labels)
            relation: Label relation matrix (n_labels x n_labels)

        Returns:
            Entry [i, j] is 1 when item j's label is related to item i's label
        """
        return np.clip(label_features @ relation @ label_features.T, 0.0, 1.0)

    def compute_closeness_similarity(self, values: np.ndarray) -> np.ndarray:
        """
        Similarity of a scaled numeric attribute: 1 - |a - b|.

        Args:
            values: Column vector of values already divided by their range

        Returns:
            Closeness matrix clipped to [0, 1]
        """
        column = values.reshape(-1)
        return np.clip(1.0 - np.abs(column[:, None] - column[None, :]), 0.0, 1.0)

    def compute_metadata_similarity(
        self,
        features: Mapping[str, Mapping[str, Any]]
    ) -> Dict[str, np.ndarray]:
        """
        Compute each component matrix and their weighted sum.

        Args:
            features: Output of FeatureExtractor.extract_all_features

        Returns:
            Dictionary of component name -> matrix, plus 'metadata_similarity'
        """
        logger.info("Computing metadata similarity...")

        similarities: Dict[str, np.ndarray] = {}
        combined: Optional[np.ndarray] = None

        for name, block in features.items():
            kind = block['kind']
            if kind == TAGS:
                matrix = self.compute_tag_similarity(block['features'])
            elif kind == LABEL:
                matrix = self.compute_label_similarity(block['features'])
            elif kind == RELATED:
                matrix = self.compute_related_similarity(block['features'], block['relation'])
            elif kind == CLOSENESS:
                matrix = self.compute_closeness_similarity(block['features'])
            else:
                raise ValueError(f"Unknown similarity component kind: {kind}")

            similarities[f"{name}_similarity"] = matrix
            weighted = block['weight'] * matrix
            combined = weighted if combined is None else combined + weighted

        if combined is None:
            raise ValueError("At least one similarity component is required")

        similarities['metadata_similarity'] = combined
        logger.info(f"✓ Metadata similarity: {combined.shape}, range [{combined.min():.3f}, {combined.max():.3f}]")

        return similarities

    def compute_text_similarity(
        self,
        vectors: List[Mapping[str, float]],
        analyzer: ContentAnalyzer
    ) -> np.ndarray:
        """
        Compute pairwise text similarity of TF-IDF vectors.

        Args:
            vectors: Sparse TF-IDF vectors in matrix order
            analyzer: Analyzer providing the semantic-bonus cosine

        Returns:
            Text similarity matrix (n_items x n_items)
        """
        logger.info("Computing text similarity...")

        n = len(vectors)
        similarity = np.zeros((n, n))

        for i in range(n):
            for j in range(i, n):
                score = analyzer.cosine_similarity(vectors[i], vectors[j])
                similarity[i, j] = score
                similarity[j, i] = score

        if n:
            logger.info(f"✓ Text similarity: {similarity.shape}, range [{similarity.min():.3f}, {similarity.max():.3f}]")
        return similarity

    def compute_hybrid_similarity(
        self,
        metadata_similarity: np.ndarray,
        text_similarity: np.ndarray
    ) -> np.ndarray:
        """
        Compute content similarity as weighted combination.

        Args:
            metadata_similarity: Metadata similarity matrix
            text_similarity: Text similarity matrix

        Returns:
            Content similarity matrix (n_items x n_items)
        """
        logger.info(f"  Weights - Metadata: {self.metadata_weight:.2f}, Text: {self.text_weight:.2f}")

        return np.clip(
            self.metadata_weight * metadata_similarity + self.text_weight * text_similarity,
            0.0,
            1.0
        )

    def compute_all_similarities(
        self,
        features: Mapping[str, Mapping[str, Any]],
        vectors: List[Mapping[str, float]],
        analyzer: ContentAnalyzer
    ) -> Dict[str, np.ndarray]:
        """
        Compute all similarity matrices.

        Args:
            features: Output of FeatureExtractor.extract_all_features
            vectors: TF-IDF vectors in the same item order
            analyzer: Analyzer that produced the vectors

        Returns:
            Dictionary with every component matrix plus 'metadata_similarity',
            'text_similarity' and 'content_similarity'
        """
        logger.info("=" * 60)
        logger.info("COMPUTING ALL SIMILARITIES")
        logger.info("=" * 60)

        similarities = self.compute_metadata_similarity(features)
        similarities['text_similarity'] = self.compute_text_similarity(vectors, analyzer)
        similarities['content_similarity'] = self.compute_hybrid_similarity(
            similarities['metadata_similarity'],
            similarities['text_similarity']
        )

        return similarities

    def get_similarity_statistics(
        self,
        similarity_matrix: np.ndarray
    ) -> Dict[str, float]:
        """
        Compute statistics for a similarity matrix.

        Args:
            similarity_matrix: Similarity matrix

        Returns:
            Dictionary with statistics (all 0 for fewer than two items)
        """
        # Get upper triangle (exclude diagonal and duplicates)
        upper_triangle = similarity_matrix[np.triu_indices_from(similarity_matrix, k=1)]

        if upper_triangle.size == 0:
            return {'mean': 0.0, 'std': 0.0, 'min': 0.0, 'max': 0.0, 'median': 0.0}

        return {
            'mean': float(upper_triangle.mean()),
            'std': float(upper_triangle.std()),
            'min': float(upper_triangle.min()),
            'max': float(upper_triangle.max()),
            'median': float(np.median(upper_triangle))
        }
