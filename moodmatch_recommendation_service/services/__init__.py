"""Service classes"""

from .collaborative_filter_service import CollaborativeFilter
from .content_filter_service import ContentSimilarityFilter
from .data_loader_service import CatalogDataLoader
from .hybrid_recommender_service import HybridRecommender
from .recommendation_service import RecommendationService
from .user_learning_service import UserLearningService

__all__ = [
    "CatalogDataLoader",
    "CollaborativeFilter",
    "ContentSimilarityFilter",
    "HybridRecommender",
    "RecommendationService",
    "UserLearningService",
]
