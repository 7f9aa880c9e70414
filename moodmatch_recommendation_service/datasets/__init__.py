"""Bundled seed catalogs and ratings"""

from moodmatch_recommendation_service.datasets.movie_dataset import MOVIE_DATASET, MOVIE_RATINGS
from moodmatch_recommendation_service.datasets.music_dataset import MUSIC_DATASET, MUSIC_RATINGS
from moodmatch_recommendation_service.datasets.podcast_dataset import PODCAST_DATASET, PODCAST_RATINGS

# domain -> (catalog records, rating records)
SEED_DATA = {
    "movies": (MOVIE_DATASET, MOVIE_RATINGS),
    "music": (MUSIC_DATASET, MUSIC_RATINGS),
    "podcasts": (PODCAST_DATASET, PODCAST_RATINGS),
}

__all__ = [
    "MOVIE_DATASET",
    "MOVIE_RATINGS",
    "MUSIC_DATASET",
    "MUSIC_RATINGS",
    "PODCAST_DATASET",
    "PODCAST_RATINGS",
    "SEED_DATA",
]
