"""Catalog providers and the built-in demo catalog."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from shopassist.catalog.models import Item

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger = logging.getLogger(__name__)

# Choices offered by the filter panel. Not every category has items.
FILTER_CATEGORIES: tuple[str, ...] = ("Electronics", "Accessories", "Clothing", "Home & Garden")

DEFAULT_CATALOG: tuple[Item, ...] = (
    Item(
        id="1",
        name="Wireless Bluetooth Headphones",
        description="High-quality wireless headphones with noise cancellation",
        category="Electronics",
        price=79.99,
        rating=4.5,
        in_stock=True,
    ),
    Item(
        id="2",
        name="Smart Watch",
        description="Feature-rich smartwatch with health monitoring",
        category="Electronics",
        price=199.99,
        rating=4.8,
        in_stock=True,
    ),
    Item(
        id="3",
        name="USB-C Cable",
        description="Durable USB-C charging cable",
        category="Accessories",
        price=12.99,
        rating=4.2,
        in_stock=False,
    ),
    Item(
        id="4",
        name="Laptop Stand",
        description="Adjustable aluminum laptop stand",
        category="Accessories",
        price=45.99,
        rating=4.6,
        in_stock=True,
    ),
)


@runtime_checkable
class CatalogProvider(Protocol):
    """Anything that can hand the assistant its list of items."""

    def provide_catalog(self) -> Sequence[Item]: ...


class StaticCatalog:
    """Read-only provider over a fixed set of items.

    Args:
        items: Items in display order. Ids must be unique.
    """

    def __init__(self, items: Iterable[Item] = DEFAULT_CATALOG) -> None:
        self._items = tuple(items)
        seen: set[str] = set()
        for item in self._items:
            if item.id in seen:
                msg = f"Duplicate catalog item id '{item.id}'"
                raise ValueError(msg)
            seen.add(item.id)
        logger.debug("Loaded static catalog with %d item(s)", len(self._items))

    def provide_catalog(self) -> tuple[Item, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)
