"""User-user collaborative filtering with a matrix factorization upgrade path."""
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple
import copy
import logging

import numpy as np
from scipy.sparse import csr_matrix
from sklearn.metrics.pairwise import cosine_similarity  # type: ignore

from moodmatch_recommendation_service.ml.matrix_factorization import MatrixFactorization, RandomState
from moodmatch_recommendation_service.models import CatalogItem, Rating
from moodmatch_recommendation_service.repos import RatingRepository

logger = logging.getLogger(__name__)


class _ModelState(NamedTuple):
    """Everything a query reads, published together by add_ratings."""

    ratings: RatingRepository
    user_index: Dict[str, int]
    item_index: Dict[str, int]
    matrix: csr_matrix
    model: MatrixFactorization
    use_mf: bool


class CollaborativeFilter:
    """
    Recommend items liked by similar users.

    Until more than `mf_min_ratings` ratings have been added, scores come from
    the cosine neighbor path: user-user cosine over raw rating rows (unrated
    items count as 0), then a similarity-weighted sum of neighbor ratings.
    Past the threshold a MatrixFactorization model is trained on all ratings
    and becomes the prediction path.

    add_ratings builds the next ratings, matrix and model off to the side and
    swaps them in with one assignment, so a query running during training
    sees the complete previous state. Writers must be serialized by the
    caller.
    """

    def __init__(
        self,
        matrix_factorization: Optional[MatrixFactorization] = None,
        mf_min_ratings: int = 10,
        neighbor_count: int = 10,
        epochs: int = 50,
        rating_max: float = 5.0,
        random_state: RandomState = None
    ):
        """
        Initialize the filter.

        Args:
            matrix_factorization: Latent factor model (default: 20 factors)
            mf_min_ratings: Rating count that must be exceeded to switch to MF
            neighbor_count: Number of most similar users consulted
            epochs: SGD epochs per training run
            rating_max: Upper bound of the rating scale
            random_state: Seed or Generator for MF training; None is unseeded
        """
        self.mf_min_ratings = mf_min_ratings
        self.neighbor_count = neighbor_count
        self.epochs = epochs
        self.rating_max = rating_max
        self.random_state = random_state

        self._state = _ModelState(
            ratings=RatingRepository(),
            user_index={},
            item_index={},
            matrix=csr_matrix((0, 0)),
            model=matrix_factorization or MatrixFactorization(rating_max=rating_max),
            use_mf=False
        )
        # Catalog item -> quality rating, in catalog order
        self._item_quality: Dict[str, float] = {}

    @property
    def ratings(self) -> RatingRepository:
        return self._state.ratings

    @property
    def rating_matrix(self) -> csr_matrix:
        """User x item rating matrix; missing ratings are 0."""
        return self._state.matrix

    @property
    def matrix_factorization(self) -> MatrixFactorization:
        return self._state.model

    @property
    def use_mf(self) -> bool:
        return self._state.use_mf

    def load_catalog(self, items: Iterable[CatalogItem]) -> int:
        """
        Register catalog items as candidates and their quality ratings as
        cold-start scores for the MF path.

        Returns:
            Number of items registered
        """
        quality: Dict[str, float] = {}
        for item in items:
            quality[str(item.id)] = min(max(float(item.rating), 0.0), self.rating_max)

        self._item_quality = quality
        return len(quality)

    def add_ratings(self, ratings: Iterable[Rating]) -> int:
        """
        Register new ratings and refresh the models.

        The rating matrix is rebuilt every time; MF is retrained on all
        ratings once the cumulative count exceeds the threshold.

        Args:
            ratings: New rating records

        Returns:
            Number of ratings added
        """
        current = self._state

        repository = current.ratings.copy()
        added = repository.store_ratings(ratings)
        user_index, item_index, matrix = self._build_matrix(repository)

        model, use_mf = current.model, current.use_mf
        total = repository.count_ratings()
        if total > self.mf_min_ratings:
            model = copy.copy(current.model)
            model.train(
                repository.get_all_ratings(),
                epochs=self.epochs,
                random_state=self.random_state
            )
            if not use_mf:
                logger.info(f"Switching to matrix factorization ({total} ratings)")
            use_mf = True

        self._state = _ModelState(repository, user_index, item_index, matrix, model, use_mf)
        return added

    # noinspection PyMethodMayBeStatic
    def _build_matrix(
        self,
        repository: RatingRepository
    ) -> Tuple[Dict[str, int], Dict[str, int], csr_matrix]:
        """Build the dense-semantics user x item rating matrix."""
        user_ids = repository.get_user_ids()
        item_ids = repository.get_item_ids()
        user_index = {user_id: i for i, user_id in enumerate(user_ids)}
        item_index = {item_id: j for j, item_id in enumerate(item_ids)}

        rows, cols, data = [], [], []
        for user_id in user_ids:
            for item_id, rating in repository.get_user_ratings(user_id).items():
                rows.append(user_index[user_id])
                cols.append(item_index[item_id])
                data.append(rating)

        matrix = csr_matrix(
            (np.array(data, dtype=float), (rows, cols)),
            shape=(len(user_ids), len(item_ids))
        )

        logger.debug(f"Rating matrix: {matrix.shape}, {matrix.nnz} entries")
        return user_index, item_index, matrix

    def user_similarity(self, user_id1: str, user_id2: str) -> float:
        """
        Cosine similarity of two users' rating rows.

        Returns:
            Similarity, 0 when either user is unknown or has no ratings
        """
        state = self._state
        if user_id1 not in state.user_index or user_id2 not in state.user_index:
            return 0.0

        return float(cosine_similarity(
            state.matrix[state.user_index[user_id1]],
            state.matrix[state.user_index[user_id2]]
        )[0, 0])

    def similar_users(self, user_id: str) -> List[Tuple[str, float]]:
        """
        Most similar other users with positive similarity.

        Returns:
            Up to neighbor_count (user_id, similarity) tuples, best first
        """
        return self._similar_users(self._state, user_id)

    def _similar_users(self, state: _ModelState, user_id: str) -> List[Tuple[str, float]]:
        if user_id not in state.user_index:
            return []

        similarities = cosine_similarity(state.matrix[state.user_index[user_id]], state.matrix).ravel()

        neighbors = [
            (other_id, float(similarities[idx]))
            for other_id, idx in state.user_index.items()
            if other_id != user_id and similarities[idx] > 0
        ]
        neighbors.sort(key=lambda n: n[1], reverse=True)

        return neighbors[:self.neighbor_count]

    def _neighbor_scores(self, state: _ModelState, user_id: str) -> Dict[str, float]:
        """Similarity-weighted rating sums for items the user has not rated."""
        rated = state.ratings.get_user_ratings(user_id)
        scores: Dict[str, float] = {}

        for neighbor_id, similarity in self._similar_users(state, user_id):
            for item_id, rating in state.ratings.get_user_ratings(neighbor_id).items():
                if item_id in rated:
                    continue
                scores[item_id] = scores.get(item_id, 0.0) + rating * similarity

        return scores

    def predict(self, user_id: str, item_id: str) -> float:
        """
        Predict a user's rating of an item.

        MF path: the model's prediction, or the item's quality rating when
        the model never saw the item. Cosine path: similarity-weighted sum of
        neighbor ratings, 0 when no neighbor rated the item.
        """
        state = self._state
        item_quality = self._item_quality

        if state.use_mf:
            mf = state.model
            if mf.knows_user(user_id) and not mf.knows_item(item_id) and item_id in item_quality:
                return item_quality[item_id]
            return mf.predict(user_id, item_id)

        total = 0.0
        for neighbor_id, similarity in self._similar_users(state, user_id):
            neighbor_rating = state.ratings.get_user_ratings(neighbor_id).get(item_id)
            if neighbor_rating is not None:
                total += neighbor_rating * similarity
        return total

    # noinspection PyMethodMayBeStatic
    def _candidate_item_ids(
        self,
        state: _ModelState,
        item_quality: Dict[str, float],
        user_id: str
    ) -> List[str]:
        """Catalog items then rated-only items, minus what the user rated."""
        rated = state.ratings.get_user_ratings(user_id)
        candidates = dict.fromkeys(item_quality)
        candidates.update(dict.fromkeys(state.ratings.get_item_ids()))
        return [item_id for item_id in candidates if item_id not in rated]

    def recommend(self, user_id: str, top_k: int = 10) -> List[Tuple[str, float]]:
        """
        Get collaborative recommendations for a user.

        Args:
            user_id: User identifier
            top_k: Number of results

        Returns:
            (item_id, score) tuples in rating units, best first; empty for
            users without ratings
        """
        state = self._state
        item_quality = self._item_quality

        if user_id not in state.user_index or top_k <= 0:
            return []

        candidates = self._candidate_item_ids(state, item_quality, user_id)

        if state.use_mf:
            mf = state.model
            trained = [item_id for item_id in candidates if mf.knows_item(item_id)]

            scored = dict(mf.recommend(user_id, trained, top_n=len(trained)))
            for item_id in candidates:
                if item_id not in scored and item_id in item_quality:
                    scored[item_id] = item_quality[item_id]

            # Re-rank in candidate order so equal scores stay in catalog order
            ranked = [(item_id, scored[item_id]) for item_id in candidates if item_id in scored]
        else:
            neighbor_scores = self._neighbor_scores(state, user_id)
            ranked = [
                (item_id, neighbor_scores[item_id])
                for item_id in candidates
                if item_id in neighbor_scores
            ]

        ranked.sort(key=lambda r: r[1], reverse=True)
        return ranked[:top_k]

    def get_stats(self) -> Dict:
        """Get statistics about the collaborative model."""
        state = self._state
        return {
            **state.ratings.get_rating_stats(),
            'use_mf': state.use_mf,
            'mf_min_ratings': self.mf_min_ratings,
            'catalog_items': len(self._item_quality),
        }
