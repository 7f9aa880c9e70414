"""Capability interface shared by every catalog item type"""
from typing import Protocol, Tuple, runtime_checkable


@runtime_checkable
class CatalogItem(Protocol):
    """What the recommendation engine needs from an item.

    Movies, songs and podcasts all satisfy this; the engine never looks at
    domain-specific fields except through a DomainPolicy.
    """

    id: str
    title: str
    rating: float

    @property
    def tags(self) -> Tuple[str, ...]:
        """Categorical tags (genres or categories)."""
        ...

    @property
    def text(self) -> str:
        """Text blob fed to the TF-IDF corpus."""
        ...
