"""Filter criteria applied to every catalog search."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"

# Raw price bound as typed by the user: "", "25", 25.0, None, ...
PriceBound = str | float | int | None

# Plain decimal notation as a number input accepts it: ASCII digits, optional sign and exponent
_PRICE_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class FilterCriteria:
    """Constraints narrowing which items a search may return.

    Attributes:
        category: Exact category label, or ``"all"`` for no restriction.
        min_price: Raw lower price bound. Interpreted by ``parse_price_bound``.
        max_price: Raw upper price bound. Interpreted by ``parse_price_bound``.
        in_stock_only: Drop items that are out of stock.
    """

    category: str = ALL_CATEGORIES
    min_price: PriceBound = None
    max_price: PriceBound = None
    in_stock_only: bool = False


DEFAULT_FILTERS = FilterCriteria()


def parse_price_bound(raw: PriceBound) -> float | None:
    """Interpret a raw price bound. Anything that is not a finite number is unset."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not _PRICE_RE.fullmatch(raw):
            return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value


class FilterState:
    """Mutable holder for the active filter criteria.

    Setters store what they are given without validation. A misordered or
    malformed price range is left for the matcher to interpret.
    """

    def __init__(self, criteria: FilterCriteria = DEFAULT_FILTERS) -> None:
        self._criteria = criteria

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    def snapshot(self) -> FilterCriteria:
        """Return the criteria as they are right now."""
        # FilterCriteria is frozen, so the current instance is already a snapshot
        return self._criteria

    def set_category(self, category: str) -> None:
        self._criteria = replace(self._criteria, category=category)

    def set_min_price(self, value: PriceBound) -> None:
        self._criteria = replace(self._criteria, min_price=value)

    def set_max_price(self, value: PriceBound) -> None:
        self._criteria = replace(self._criteria, max_price=value)

    def set_in_stock_only(self, enabled: bool) -> None:
        self._criteria = replace(self._criteria, in_stock_only=enabled)

    def clear(self) -> None:
        """Reset to wildcard category, no price bounds, stock filter off."""
        self._criteria = DEFAULT_FILTERS
        logger.info("Filters cleared")
