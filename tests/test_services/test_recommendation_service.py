"""Unit tests for moodmatch_recommendation_service.services.recommendation_service."""
import threading
from unittest.mock import patch

import pytest

from moodmatch_recommendation_service.ml.matrix_factorization import MatrixFactorization
from moodmatch_recommendation_service.models import MoodProfile, Rating
from moodmatch_recommendation_service.services import HybridRecommender, RecommendationService


@pytest.fixture(scope="module")
def seeded_service():
    """Service with the bundled seed data, trained quickly and deterministically."""
    return RecommendationService.from_seed_data(mf_epochs=10, mf_factors=5, random_state=11)


class TestRecommendationServiceInit:
    """Tests for RecommendationService initialization."""

    def test_init_builds_every_domain(self):
        """Test one recommender per domain."""
        # Act
        service = RecommendationService(random_state=1)

        # Assert
        for domain in ('movies', 'music', 'podcasts'):
            assert isinstance(service.get_recommender(domain), HybridRecommender)

    def test_init_reads_configuration(self, monkeypatch):
        """Test unset arguments come from configuration."""
        # Arrange
        monkeypatch.setenv('CONTENT_WEIGHT', '0.6')
        monkeypatch.setenv('COLLABORATIVE_WEIGHT', '0.4')
        monkeypatch.setenv('MF_MIN_RATINGS', '20')
        monkeypatch.setenv('MF_FACTORS', '8')

        # Act
        service = RecommendationService()

        # Assert
        recommender = service.get_recommender('music')
        assert recommender.content_weight == 0.6
        assert recommender.collaborative_weight == 0.4
        assert recommender.collaborative_filter.mf_min_ratings == 20
        assert recommender.collaborative_filter.matrix_factorization.n_factors == 8

    def test_init_arguments_override_configuration(self, monkeypatch):
        """Test explicit arguments win over configuration."""
        # Arrange
        monkeypatch.setenv('CONTENT_WEIGHT', '0.6')

        # Act
        service = RecommendationService(content_weight=0.9)

        # Assert
        assert service.get_recommender('movies').content_weight == 0.9

    def test_unknown_domain(self):
        """Test unknown domains raise ValueError."""
        # Arrange
        service = RecommendationService()

        # Act & Assert
        with pytest.raises(ValueError, match="Unknown domain"):
            service.get_recommender('books')


class TestFromSeedData:
    """Tests for from_seed_data factory."""

    def test_seed_catalogs_loaded(self, seeded_service):
        """Test every domain has its catalog and ratings."""
        # Act
        stats = seeded_service.get_stats()

        # Assert
        assert stats['domains']['movies']['catalog_items'] == 10
        assert stats['domains']['music']['catalog_items'] == 12
        assert stats['domains']['podcasts']['catalog_items'] == 12
        assert stats['domains']['movies']['collaborative']['use_mf'] is False
        assert stats['domains']['music']['collaborative']['use_mf'] is True
        assert stats['domains']['podcasts']['collaborative']['use_mf'] is True


class TestRecommend:
    """Tests for recommend method."""

    def test_recommend_returns_dicts(self, seeded_service):
        """Test results are plain dicts in [0, 1]."""
        # Act
        results = seeded_service.recommend('movies', 'user1', mood='happy', top_k=3)

        # Assert
        assert 0 < len(results) <= 3
        assert set(results[0]) == {
            'item_id', 'title', 'content_score', 'collaborative_score', 'hybrid_score'
        }
        assert all(0.0 <= r['hybrid_score'] <= 1.0 for r in results)

    def test_recommend_scaled(self, seeded_service):
        """Test scale=100 gives integer scores."""
        # Act
        results = seeded_service.recommend('music', 'user2', mood='sad', scale=100)

        # Assert
        assert results
        assert all(isinstance(r['hybrid_score'], int) for r in results)
        assert all(0 <= r['hybrid_score'] <= 100 for r in results)

    def test_recommend_strips_hybrid_prefix(self, seeded_service):
        """Test hybrid_-prefixed seen ids are excluded like plain ids."""
        # Act
        results = seeded_service.recommend(
            'movies', 'user2', mood='neutral', seen_item_ids=['hybrid_tt0109830', 'tt0338013'], top_k=10
        )

        # Assert
        ids = [r['item_id'] for r in results]
        assert 'tt0109830' not in ids
        assert 'tt0338013' not in ids

    def test_recommend_mood_profile(self, seeded_service):
        """Test a MoodProfile is accepted."""
        # Act
        results = seeded_service.recommend('podcasts', 'user3', mood=MoodProfile('focused', confidence=80))

        # Assert
        assert results
        assert all(r['item_id'].startswith('pod_') for r in results)

    def test_recommend_unknown_domain(self, seeded_service):
        """Test unknown domains raise ValueError."""
        # Act & Assert
        with pytest.raises(ValueError):
            seeded_service.recommend('books', 'user1')


class TestLoading:
    """Tests for load_catalog and load_ratings methods."""

    def test_concurrent_rating_loads(self, movie_catalog):
        """Test parallel writers to one domain lose no ratings."""
        # Arrange
        service = RecommendationService(mf_epochs=1, random_state=0)
        service.load_catalog('movies', movie_catalog)

        def writer(user_id):
            service.load_ratings('movies', [Rating(user_id, f'm{i}', 4.0) for i in range(1, 6)])

        threads = [threading.Thread(target=writer, args=(f'u{n}',)) for n in range(4)]

        # Act
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        # Assert
        stats = service.get_recommender('movies').collaborative_filter.get_stats()
        assert stats['total_ratings'] == 20
        assert stats['unique_users'] == 4

    def test_recommend_during_rating_load(self, movie_catalog, eleven_ratings):
        """Test a query made while ratings retrain MF returns the pre-load results."""
        # Arrange
        service = RecommendationService(mf_epochs=5, random_state=3)
        service.load_catalog('movies', movie_catalog)
        service.load_ratings('movies', eleven_ratings)
        before = service.recommend('movies', 'user1', mood='neutral')
        original_train = MatrixFactorization.train
        during = []

        def train_and_query(model, *args, **kwargs):
            during.append(service.recommend('movies', 'user1', mood='neutral'))
            original_train(model, *args, **kwargs)

        # Act
        with patch.object(MatrixFactorization, 'train', autospec=True, side_effect=train_and_query):
            service.load_ratings('movies', [Rating('newbie', 'm5', 5.0)])

        # Assert
        assert during == [before]


class TestFeedback:
    """Tests for record_feedback and personalization_score methods."""

    def test_record_feedback_and_score(self, movie_catalog):
        """Test feedback raises the personalization score of matching items."""
        # Arrange
        service = RecommendationService(random_state=0)
        service.load_catalog('movies', movie_catalog)
        before = service.personalization_score('movies', 'm4', 'happy')

        # Act
        service.record_feedback(
            item_id='m1',
            item_title='The Shawshank Redemption',
            feedback_type='like',
            content_type='movie',
            mood='happy',
            tags=('Drama', 'Crime')
        )
        after = service.personalization_score('movies', 'm4', 'happy')

        # Assert
        assert before == 50.0
        assert after == pytest.approx(50 + 20 + 2 + 5)
        assert service.get_stats()['feedback']['total_feedback'] == 1

    def test_personalization_unknown_item(self):
        """Test unknown items score 0."""
        # Arrange
        service = RecommendationService()

        # Act
        score = service.personalization_score('movies', 'missing', 'happy')

        # Assert
        assert score == 0.0
