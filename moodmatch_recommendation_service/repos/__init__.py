"""Repository classes"""

from moodmatch_recommendation_service.repos.catalog_repository import CatalogRepository
from moodmatch_recommendation_service.repos.feedback_repository import FeedbackRepository
from moodmatch_recommendation_service.repos.rating_repository import RatingRepository

__all__ = [
    "CatalogRepository",
    "FeedbackRepository",
    "RatingRepository",
]
