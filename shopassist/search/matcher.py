"""Substring search over the catalog under the active filters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from shopassist.search.filters import ALL_CATEGORIES, parse_price_bound

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shopassist.catalog.models import Item
    from shopassist.search.filters import FilterCriteria

logger = logging.getLogger(__name__)


def matches_query(item: Item, query: str) -> bool:
    """True if the query appears in the item's name, description or category.

    Case-insensitive. An empty query matches everything.
    """
    needle = query.lower()
    return (
        needle in item.name.lower()
        or needle in item.description.lower()
        or needle in item.category.lower()
    )


def passes_filters(item: Item, filters: FilterCriteria) -> bool:
    """True if the item satisfies the category, price and stock constraints."""
    if filters.category != ALL_CATEGORIES and item.category != filters.category:
        return False

    min_price = parse_price_bound(filters.min_price)
    if min_price is not None and item.price < min_price:
        return False

    max_price = parse_price_bound(filters.max_price)
    if max_price is not None and item.price > max_price:
        return False

    return not (filters.in_stock_only and not item.in_stock)


def match(query: str, filters: FilterCriteria, catalog: Iterable[Item]) -> list[Item]:
    """Return the catalog items matching ``query`` and ``filters``, in catalog order."""
    results = [
        item for item in catalog if matches_query(item, query) and passes_filters(item, filters)
    ]
    logger.debug("Query %r matched %d item(s) with %s", query, len(results), filters)
    return results
