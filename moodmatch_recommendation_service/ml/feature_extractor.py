"""Feature extraction for catalog item similarity."""
import numpy as np
import pandas as pd
from typing import Any, Dict, List, Optional, Sequence, Tuple
from sklearn.preprocessing import MultiLabelBinarizer  # type: ignore
import logging

from moodmatch_recommendation_service.policies import (
    CLOSENESS,
    LABEL,
    RELATED,
    TAGS,
    DomainPolicy,
)

logger = logging.getLogger(__name__)


# noinspection PyMethodMayBeStatic
class FeatureExtractor:
    """Encode item attributes named by a domain policy as numeric arrays."""

    def __init__(self):
        # Encoders (fitted during transform)
        self.tag_encoders: Dict[str, MultiLabelBinarizer] = {}
        self.label_classes: Dict[str, List[str]] = {}

    def fit_transform_tag_features(
        self,
        tags_list: Sequence[Sequence[str]]
    ) -> Tuple[np.ndarray, MultiLabelBinarizer]:
        """
        Encode tag lists using multi-hot encoding.

        Args:
            tags_list: List of tag lists for each item

        Returns:
            (tag_features, encoder) tuple
        """
        encoder = MultiLabelBinarizer()
        tag_features = encoder.fit_transform([list(tags or ()) for tags in tags_list])

        return np.asarray(tag_features, dtype=float), encoder

    def fit_transform_label_features(
        self,
        labels: Sequence[Optional[str]]
    ) -> Tuple[np.ndarray, List[str]]:
        """
        Encode a single-valued attribute using one-hot encoding.

        Missing or empty labels encode as an all-zero row.

        Args:
            labels: One label per item

        Returns:
            (label_features, classes) tuple
        """
        cleaned = pd.Series([label if label else None for label in labels], dtype=object)
        label_df = pd.get_dummies(cleaned, dtype=float)

        return label_df.to_numpy(dtype=float), [str(c) for c in label_df.columns]

    def fit_transform_numeric_features(
        self,
        values: Sequence[Any],
        scale: float
    ) -> np.ndarray:
        """
        Scale a numeric attribute; missing values become 0.

        Args:
            values: One value per item
            scale: Width of the attribute's range

        Returns:
            Column vector of scaled values
        """
        series = pd.to_numeric(pd.Series(list(values), dtype=object), errors='coerce').fillna(0.0)
        return (series.to_numpy(dtype=float) / scale).reshape(-1, 1)

    def build_relation_matrix(
        self,
        classes: List[str],
        related: Dict[str, Sequence[str]]
    ) -> np.ndarray:
        """
        Relation between label classes: entry [a, b] is 1 when b is related to a.

        A class missing from the table is related only to itself.
        """
        index = {label: i for i, label in enumerate(classes)}
        relation = np.zeros((len(classes), len(classes)))

        for label, i in index.items():
            for other in related.get(label, (label,)):
                if other in index:
                    relation[i, index[other]] = 1.0

        return relation

    def extract_all_features(
        self,
        items: Sequence[Any],
        policy: DomainPolicy
    ) -> Dict[str, Dict[str, Any]]:
        """
        Extract one feature block per similarity component of the policy.

        Args:
            items: Catalog items in matrix order
            policy: Domain policy naming the components

        Returns:
            Dictionary of component name -> {'kind', 'weight', 'features', ...}
        """
        logger.info(f"Extracting {policy.name} features for {len(items)} items...")

        features: Dict[str, Dict[str, Any]] = {}

        for component in policy.components:
            values = [component.attribute(item) for item in items]
            block: Dict[str, Any] = {'kind': component.kind, 'weight': component.weight}

            if component.kind == TAGS:
                block['features'], encoder = self.fit_transform_tag_features(values)
                self.tag_encoders[component.name] = encoder
                logger.info(f"✓ {component.name} features: {block['features'].shape}")

            elif component.kind in (LABEL, RELATED):
                block['features'], classes = self.fit_transform_label_features(values)
                self.label_classes[component.name] = classes
                if component.kind == RELATED:
                    block['relation'] = self.build_relation_matrix(classes, dict(component.related))
                logger.info(f"✓ {component.name} features: {block['features'].shape}")

            elif component.kind == CLOSENESS:
                block['features'] = self.fit_transform_numeric_features(values, component.scale)
                logger.info(f"✓ {component.name} features: {block['features'].shape}")

            else:
                raise ValueError(f"Unknown similarity component kind: {component.kind}")

            features[component.name] = block

        return features
