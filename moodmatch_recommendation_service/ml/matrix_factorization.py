"""Latent factor model trained with stochastic gradient descent."""
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from moodmatch_recommendation_service.models.rating import Rating

logger = logging.getLogger(__name__)

RandomState = int | np.random.Generator | None


class MatrixFactorization:
    """
    Learn per-user and per-item latent vectors whose dot product
    approximates observed ratings.

    Prediction formula: r_ui = p_u . q_i, clamped to [0, rating_max]
    """

    def __init__(
        self,
        n_factors: int = 20,
        learning_rate: float = 0.01,
        regularization: float = 0.02,
        rating_max: float = 5.0,
        default_rating: float = 2.5,
        lr_decay: float = 0.99
    ):
        """
        Initialize model.

        Args:
            n_factors: Number of latent factors
            learning_rate: Initial SGD step size
            regularization: L2 regularization parameter
            rating_max: Upper bound of the rating scale
            default_rating: Prediction for ids never seen in training
            lr_decay: Multiplier applied to the step size after each epoch
        """
        self.n_factors = n_factors
        self.learning_rate = learning_rate
        self.regularization = regularization
        self.rating_max = rating_max
        self.default_rating = default_rating
        self.lr_decay = lr_decay

        # (user_mapping, item_mapping, user_factors, item_factors), replaced
        # as a whole by train()
        self._state: Tuple[Dict[str, int], Dict[str, int], Optional[np.ndarray], Optional[np.ndarray]] = (
            {}, {}, None, None
        )

    @property
    def user_mapping(self) -> Dict[str, int]:
        return self._state[0]

    @property
    def item_mapping(self) -> Dict[str, int]:
        return self._state[1]

    @property
    def user_factors(self) -> Optional[np.ndarray]:
        """Shape: (n_users, n_factors)"""
        return self._state[2]

    @property
    def item_factors(self) -> Optional[np.ndarray]:
        """Shape: (n_items, n_factors)"""
        return self._state[3]

    @property
    def is_trained(self) -> bool:
        return self._state[2] is not None

    def train(
        self,
        ratings: Sequence[Rating],
        epochs: int = 50,
        factors: Optional[int] = None,
        lr: Optional[float] = None,
        reg: Optional[float] = None,
        random_state: RandomState = None
    ) -> None:
        """
        Train fresh factors on all given ratings.

        New factor tables are built locally and published together at the
        end, so predictions made during training use the previous state.

        Args:
            ratings: Rating records
            epochs: Number of passes over the shuffled ratings
            factors: Latent factor count (default: self.n_factors)
            lr: Initial step size (default: self.learning_rate)
            reg: Regularization (default: self.regularization)
            random_state: Seed or Generator; None trains unseeded
        """
        if not ratings:
            logger.info("No ratings to train on, keeping current factors")
            return

        n_factors = factors or self.n_factors
        learning_rate = self.learning_rate if lr is None else lr
        regularization = self.regularization if reg is None else reg
        rng = np.random.default_rng(random_state)

        user_mapping: Dict[str, int] = {}
        item_mapping: Dict[str, int] = {}
        for r in ratings:
            user_mapping.setdefault(r.user_id, len(user_mapping))
            item_mapping.setdefault(r.item_id, len(item_mapping))

        user_factors = rng.random((len(user_mapping), n_factors)) * 0.1
        item_factors = rng.random((len(item_mapping), n_factors)) * 0.1

        user_idx = np.array([user_mapping[r.user_id] for r in ratings])
        item_idx = np.array([item_mapping[r.item_id] for r in ratings])
        values = np.array([float(r.rating) for r in ratings])

        logger.info(
            f"Training matrix factorization: {len(user_mapping)} users, "
            f"{len(item_mapping)} items, {len(values)} ratings, {epochs} epochs"
        )

        for _ in range(epochs):
            for n in rng.permutation(len(values)):
                u = user_idx[n]
                i = item_idx[n]
                user_vec = user_factors[u].copy()
                item_vec = item_factors[i]

                error = values[n] - user_vec @ item_vec

                user_factors[u] += learning_rate * (error * item_vec - regularization * user_vec)
                item_factors[i] += learning_rate * (error * user_vec - regularization * item_vec)

            learning_rate *= self.lr_decay

        self.n_factors = n_factors
        self._state = (user_mapping, item_mapping, user_factors, item_factors)

        predictions = np.einsum('ij,ij->i', user_factors[user_idx], item_factors[item_idx])
        rmse = float(np.sqrt(np.mean((values - predictions) ** 2)))
        logger.info(f"✓ Training RMSE: {rmse:.4f}")

    def knows_user(self, user_id: str) -> bool:
        return user_id in self.user_mapping

    def knows_item(self, item_id: str) -> bool:
        return item_id in self.item_mapping

    def predict(self, user_id: str, item_id: str) -> float:
        """
        Predict rating for a single user-item pair.

        Args:
            user_id: User identifier
            item_id: Item identifier

        Returns:
            Predicted rating clipped to [0, rating_max], or default_rating
            when either id was not seen in training
        """
        user_mapping, item_mapping, user_factors, item_factors = self._state

        if user_id not in user_mapping or item_id not in item_mapping:
            return self.default_rating

        score = user_factors[user_mapping[user_id]] @ item_factors[item_mapping[item_id]]
        return float(np.clip(score, 0.0, self.rating_max))

    def recommend(
        self,
        user_id: str,
        candidate_item_ids: Iterable[str],
        top_n: int = 10
    ) -> List[Tuple[str, float]]:
        """
        Rank candidate items for a user by predicted rating.

        Args:
            user_id: User identifier
            candidate_item_ids: Items to score
            top_n: Number of results

        Returns:
            (item_id, predicted_rating) tuples, best first; empty for unknown users
        """
        if user_id not in self.user_mapping:
            return []

        predictions = [(item_id, self.predict(user_id, item_id)) for item_id in candidate_item_ids]
        predictions.sort(key=lambda p: p[1], reverse=True)

        return predictions[:max(top_n, 0)]
