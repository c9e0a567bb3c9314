"""Product catalog — item model and read-only providers."""

from shopassist.catalog.models import Item
from shopassist.catalog.store import (
    DEFAULT_CATALOG,
    FILTER_CATEGORIES,
    CatalogProvider,
    StaticCatalog,
)

__all__ = [
    "DEFAULT_CATALOG",
    "FILTER_CATEGORIES",
    "CatalogProvider",
    "Item",
    "StaticCatalog",
]
