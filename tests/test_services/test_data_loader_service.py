"""Unit tests for moodmatch_recommendation_service.services.data_loader_service."""
import math

import pandas as pd
import pytest

from moodmatch_recommendation_service.datasets import (
    MOVIE_DATASET,
    MOVIE_RATINGS,
    MUSIC_DATASET,
    PODCAST_DATASET
)
from moodmatch_recommendation_service.models import Movie, Podcast, Song
from moodmatch_recommendation_service.services import CatalogDataLoader
from moodmatch_recommendation_service.services.data_loader_service import normalize_rating


class TestNormalizeRating:
    """Tests for normalize_rating function."""

    def test_ten_point_scale_detected(self):
        """Test scores above 5 are halved."""
        # Assert
        assert normalize_rating(9.3) == pytest.approx(4.65)

    def test_five_point_scale_kept(self):
        """Test scores already on 0-5 are unchanged."""
        # Assert
        assert normalize_rating(4.4) == 4.4

    def test_explicit_scale(self):
        """Test an explicit scale rescales to 0-5."""
        # Assert
        assert normalize_rating(80, scale=100) == pytest.approx(4.0)

    def test_missing_or_invalid(self):
        """Test missing and non-numeric values give 0."""
        # Assert
        assert normalize_rating(None) == 0.0
        assert normalize_rating(math.nan) == 0.0
        assert normalize_rating('great') == 0.0

    def test_clamped(self):
        """Test values are clamped to 0-5."""
        # Assert
        assert normalize_rating(-2) == 0.0
        assert normalize_rating(25) == 5.0


class TestLoadMovies:
    """Tests for load_movies method."""

    def test_load_movies_from_dicts(self, sample_records):
        """Test building Movie objects from dict records."""
        # Arrange
        loader = CatalogDataLoader()

        # Act
        movies = loader.load_movies(sample_records)

        # Assert
        assert len(movies) == 2
        assert all(isinstance(m, Movie) for m in movies)
        assert movies[0].genres == ('Drama', 'Crime')
        assert movies[0].rating == pytest.approx(4.65)
        assert movies[1].genres == ('Action', 'Sci-Fi', 'Thriller')
        assert movies[1].director is None
        assert movies[1].cast == ()

    def test_load_movies_from_dataframe(self, sample_records):
        """Test a DataFrame with NaN cells is accepted."""
        # Arrange
        loader = CatalogDataLoader()
        df = pd.DataFrame(sample_records)

        # Act
        movies = loader.load_movies(df)

        # Assert
        assert [m.id for m in movies] == ['tt0111161', 'tt1375666']
        assert movies[1].cast == ()
        assert movies[1].director is None

    def test_load_movies_skips_incomplete(self):
        """Test records without id or title are skipped."""
        # Arrange
        loader = CatalogDataLoader()
        records = [
            {'id': 'a', 'title': 'Kept'},
            {'id': 'b'},
            {'title': 'No id'},
        ]

        # Act
        movies = loader.load_movies(records)

        # Assert
        assert [m.id for m in movies] == ['a']

    def test_load_seed_movies(self):
        """Test the bundled movie dataset loads completely."""
        # Act
        movies = CatalogDataLoader().load_movies(MOVIE_DATASET)

        # Assert
        assert len(movies) == len(MOVIE_DATASET)
        assert all(0.0 <= m.rating <= 5.0 for m in movies)


class TestLoadSongsAndPodcasts:
    """Tests for load_songs and load_podcasts methods."""

    def test_load_songs(self):
        """Test building Song objects."""
        # Act
        songs = CatalogDataLoader().load_songs(MUSIC_DATASET)

        # Assert
        assert len(songs) == len(MUSIC_DATASET)
        assert all(isinstance(s, Song) for s in songs)
        assert songs[0].mood == 'happy'
        assert songs[0].energy == 85.0
        assert songs[0].release_year == 2013

    def test_load_song_defaults(self):
        """Test missing song fields fall back to defaults."""
        # Act
        songs = CatalogDataLoader().load_songs([{'id': 's', 'title': 'T', 'mood': 'Happy'}])

        # Assert
        assert songs[0].mood == 'happy'
        assert songs[0].energy == 50.0
        assert songs[0].artist == ''
        assert songs[0].release_year is None

    def test_load_podcasts(self):
        """Test building Podcast objects."""
        # Act
        podcasts = CatalogDataLoader().load_podcasts(PODCAST_DATASET)

        # Assert
        assert len(podcasts) == len(PODCAST_DATASET)
        assert all(isinstance(p, Podcast) for p in podcasts)
        assert podcasts[0].categories == ('Comedy', 'Entertainment')


class TestLoadItems:
    """Tests for load_items method."""

    def test_load_items_dispatch(self):
        """Test loading by domain name."""
        # Act
        items = CatalogDataLoader().load_items('podcasts', PODCAST_DATASET)

        # Assert
        assert isinstance(items[0], Podcast)

    def test_load_items_unknown_domain(self):
        """Test unknown domains raise ValueError."""
        # Act & Assert
        with pytest.raises(ValueError, match="Unknown domain"):
            CatalogDataLoader().load_items('books', [])


class TestLoadRatings:
    """Tests for load_ratings method."""

    def test_load_ratings_key_variants(self):
        """Test camelCase and per-domain id keys."""
        # Arrange
        records = [
            {'userId': 'u1', 'movieId': 'm1', 'rating': 5},
            {'user_id': 'u2', 'songId': 's1', 'rating': '4.5'},
            {'userId': 'u3', 'podcastId': 'p1', 'rating': 3, 'timestamp': 10},
            {'user_id': 'u4', 'item_id': 'x1', 'rating': 2},
        ]

        # Act
        ratings = CatalogDataLoader().load_ratings(records)

        # Assert
        assert [(r.user_id, r.item_id, r.rating) for r in ratings] == [
            ('u1', 'm1', 5.0),
            ('u2', 's1', 4.5),
            ('u3', 'p1', 3.0),
            ('u4', 'x1', 2.0),
        ]
        assert ratings[2].timestamp == 10.0

    def test_load_ratings_skips_incomplete(self):
        """Test records without user, item or numeric rating are skipped."""
        # Arrange
        records = [
            {'userId': 'u1', 'movieId': 'm1'},
            {'movieId': 'm1', 'rating': 4},
            {'userId': 'u1', 'rating': 4},
            {'userId': 'u1', 'movieId': 'm1', 'rating': 'bad'},
            {'userId': 'u1', 'movieId': 'm2', 'rating': 4},
        ]

        # Act
        ratings = CatalogDataLoader().load_ratings(records)

        # Assert
        assert [r.item_id for r in ratings] == ['m2']

    def test_load_seed_ratings_from_dataframe(self):
        """Test the seed ratings load from a DataFrame."""
        # Act
        ratings = CatalogDataLoader().load_ratings(pd.DataFrame(MOVIE_RATINGS))

        # Assert
        assert len(ratings) == 9
        assert ratings[0].user_id == 'user1'
        assert ratings[0].item_id == 'tt0111161'
