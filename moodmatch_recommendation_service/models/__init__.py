"""Domain models"""

from moodmatch_recommendation_service.models.catalog_item import CatalogItem
from moodmatch_recommendation_service.models.feedback_record import FeedbackRecord
from moodmatch_recommendation_service.models.hybrid_score import HybridScore
from moodmatch_recommendation_service.models.mood_profile import MoodProfile
from moodmatch_recommendation_service.models.movie import Movie
from moodmatch_recommendation_service.models.podcast import Podcast
from moodmatch_recommendation_service.models.rating import Rating
from moodmatch_recommendation_service.models.song import Song

__all__ = [
    "CatalogItem",
    "FeedbackRecord",
    "HybridScore",
    "MoodProfile",
    "Movie",
    "Podcast",
    "Rating",
    "Song",
]
