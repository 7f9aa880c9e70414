"""Unit tests for moodmatch_recommendation_service.repos.catalog_repository."""
from moodmatch_recommendation_service.models import Movie
from moodmatch_recommendation_service.repos import CatalogRepository


class TestBulkStoreItems:
    """Tests for bulk_store_items method."""

    def test_bulk_store_items(self, movie_catalog):
        """Test storing a catalog."""
        # Arrange
        repo = CatalogRepository()

        # Act
        count = repo.bulk_store_items(movie_catalog)

        # Assert
        assert count == 5
        assert repo.count_items() == 5
        assert repo.get_item_ids() == ['m1', 'm2', 'm3', 'm4', 'm5']

    def test_bulk_store_replaces_catalog(self, movie_catalog):
        """Test a second load replaces the first."""
        # Arrange
        repo = CatalogRepository()
        repo.bulk_store_items(movie_catalog)

        # Act
        repo.bulk_store_items([Movie(id='x1', title='Other')])

        # Assert
        assert repo.get_item_ids() == ['x1']
        assert 'm1' not in repo

    def test_bulk_store_duplicate_ids(self):
        """Test a repeated id keeps its first position and last record."""
        # Arrange
        repo = CatalogRepository()

        # Act
        count = repo.bulk_store_items([
            Movie(id='a', title='First'),
            Movie(id='b', title='Second'),
            Movie(id='a', title='Updated'),
        ])

        # Assert
        assert count == 2
        assert repo.get_item_ids() == ['a', 'b']
        assert repo.get_item('a').title == 'Updated'


class TestLookups:
    """Tests for item lookups."""

    def test_get_item(self, movie_catalog):
        """Test getting an item by id."""
        # Arrange
        repo = CatalogRepository()
        repo.bulk_store_items(movie_catalog)

        # Act
        item = repo.get_item('m3')

        # Assert
        assert item.title == 'Inception'
        assert repo.get_item('missing') is None

    def test_position(self, movie_catalog):
        """Test catalog positions; unknown ids sort last."""
        # Arrange
        repo = CatalogRepository()
        repo.bulk_store_items(movie_catalog)

        # Assert
        assert repo.position('m1') == 0
        assert repo.position('m5') == 4
        assert repo.position('missing') == 5

    def test_contains(self, movie_catalog):
        """Test membership checks."""
        # Arrange
        repo = CatalogRepository()
        repo.bulk_store_items(movie_catalog)

        # Assert
        assert 'm2' in repo
        assert 'zz' not in repo
