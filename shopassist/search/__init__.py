"""Catalog search — filter criteria and the substring matcher."""

from shopassist.search.filters import (
    ALL_CATEGORIES,
    DEFAULT_FILTERS,
    FilterCriteria,
    FilterState,
    parse_price_bound,
)
from shopassist.search.matcher import match, matches_query, passes_filters

__all__ = [
    "ALL_CATEGORIES",
    "DEFAULT_FILTERS",
    "FilterCriteria",
    "FilterState",
    "match",
    "matches_query",
    "parse_price_bound",
    "passes_filters",
]
