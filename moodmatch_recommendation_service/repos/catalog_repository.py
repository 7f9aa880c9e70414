"""In-memory repository for one domain's catalog."""

import logging
from typing import Dict, Iterable, List, Optional

from moodmatch_recommendation_service.models import CatalogItem

logger = logging.getLogger(__name__)


class CatalogRepository:
    """
    Holds the immutable catalog of one content domain.

    Iteration order is load order; it is the tie-break order for rankings.
    """

    def __init__(self):
        self._items: Dict[str, CatalogItem] = {}
        self._positions: Dict[str, int] = {}

    def bulk_store_items(self, items: Iterable[CatalogItem]) -> int:
        """
        Replace the catalog.

        Args:
            items: Catalog items; a repeated id keeps its first position
                and its last record

        Returns:
            Number of distinct items stored
        """
        stored: Dict[str, CatalogItem] = {}
        for item in items:
            stored[str(item.id)] = item

        self._items = stored
        self._positions = {item_id: idx for idx, item_id in enumerate(stored)}

        logger.info(f"✓ Stored {len(stored)} catalog items")
        return len(stored)

    def get_item(self, item_id: str) -> Optional[CatalogItem]:
        """Get item by ID."""
        return self._items.get(str(item_id))

    def get_all_items(self) -> List[CatalogItem]:
        """Get all items in catalog order."""
        return list(self._items.values())

    def get_item_ids(self) -> List[str]:
        """Get list of all item IDs in catalog order."""
        return list(self._items)

    def position(self, item_id: str) -> int:
        """Catalog position of an item; unknown ids sort last."""
        return self._positions.get(str(item_id), len(self._positions))

    def count_items(self) -> int:
        """Count catalog items."""
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return str(item_id) in self._items
