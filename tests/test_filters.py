"""Tests for FilterState and price bound parsing."""

import dataclasses

import pytest

from shopassist.search.filters import (
    ALL_CATEGORIES,
    DEFAULT_FILTERS,
    FilterCriteria,
    FilterState,
    parse_price_bound,
)


class TestParsePriceBound:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("25", 25.0),
            ("12.5", 12.5),
            (" 40 ", 40.0),
            ("0", 0.0),
            (10, 10.0),
            (9.99, 9.99),
            ("-5", -5.0),
            (".5", 0.5),
            ("1e2", 100.0),
        ],
    )
    def test_numbers(self, raw, expected):
        assert parse_price_bound(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "  ", "abc", "12abc", "nan", "inf", True, False])
    def test_unset(self, raw):
        assert parse_price_bound(raw) is None

    @pytest.mark.parametrize("raw", ["1_0", "\u0663", "\uff15", "1e999", "0x10", "1,5"])
    def test_non_decimal_spellings_are_unset(self, raw):
        assert parse_price_bound(raw) is None


class TestFilterState:
    def test_starts_at_defaults(self):
        state = FilterState()
        assert state.criteria == FilterCriteria(
            category=ALL_CATEGORIES, min_price=None, max_price=None, in_stock_only=False
        )

    def test_setters(self):
        state = FilterState()
        state.set_category("Electronics")
        state.set_min_price("10")
        state.set_max_price("oops")
        state.set_in_stock_only(True)
        assert state.criteria == FilterCriteria(
            category="Electronics", min_price="10", max_price="oops", in_stock_only=True
        )

    def test_setters_are_idempotent(self):
        state = FilterState()
        state.set_category("Accessories")
        first = state.criteria
        state.set_category("Accessories")
        assert state.criteria == first

    def test_clear_resets_everything(self):
        state = FilterState()
        state.set_category("Clothing")
        state.set_max_price(5)
        state.set_in_stock_only(True)
        state.clear()
        assert state.criteria == DEFAULT_FILTERS

    def test_snapshot_is_not_affected_by_later_changes(self):
        state = FilterState()
        state.set_category("Electronics")
        snap = state.snapshot()
        state.set_category("Accessories")
        assert snap.category == "Electronics"
        assert state.criteria.category == "Accessories"

    def test_criteria_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_FILTERS.category = "Electronics"
