"""Shared test fixtures."""

import pytest

from shopassist.bot.session import ShoppingSession
from shopassist.catalog import DEFAULT_CATALOG, StaticCatalog
from shopassist.search.filters import FilterCriteria


@pytest.fixture
def catalog() -> tuple:
    """The four demo items in catalog order."""
    return DEFAULT_CATALOG


@pytest.fixture
def filters() -> FilterCriteria:
    return FilterCriteria()


@pytest.fixture
def session() -> ShoppingSession:
    """A session over the demo catalog that replies without delay."""
    return ShoppingSession(StaticCatalog(), reply_delay=0, filter_read="live", busy_policy="reject")


@pytest.fixture(autouse=False)
def _no_reply_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sessions built from settings reply immediately."""
    monkeypatch.setattr("shopassist.config.settings.reply_delay_seconds", 0)
