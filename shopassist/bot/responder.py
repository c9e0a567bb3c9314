"""Rule-based replies: greeting, help, or a catalog search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shopassist.search.matcher import match

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shopassist.catalog.models import Item
    from shopassist.search.filters import FilterCriteria

logger = logging.getLogger(__name__)

GREETING = "greeting"
HELP = "help"
SEARCH = "search"

WELCOME_TEXT = (
    "Hello! I'm your personal shopping assistant. "
    "How can I help you find the perfect product today?"
)

GREETING_TEXT = (
    "Hello! I'm here to help you find amazing products. What are you looking for today?"
)

HELP_TEXT = (
    "I can help you:\n"
    "• Search for products\n"
    "• Filter by category, price, or availability\n"
    "• Get product recommendations\n"
    "• Answer questions about our products\n"
    "\n"
    "Just tell me what you're looking for!"
)

NO_MATCH_TEXT = (
    "I couldn't find any products matching your search. "
    "Try different keywords or check our categories: Electronics, Accessories. "
    "Would you like me to show you our popular items instead?"
)

# Checked in order, first hit wins. Plain substrings, so "this" is a greeting.
_INTENT_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (GREETING, ("hello", "hi")),
    (HELP, ("help",)),
)


@dataclass(frozen=True)
class Response:
    """What the assistant says back, plus any products to show."""

    text: str
    items: tuple[Item, ...] = ()


def detect_intent(utterance: str) -> str:
    """Classify an utterance as ``"greeting"``, ``"help"`` or ``"search"``."""
    lowered = utterance.lower()
    for intent, keywords in _INTENT_KEYWORDS:
        if any(k in lowered for k in keywords):
            return intent
    return SEARCH


def found_text(count: int) -> str:
    return f"I found {count} product{'s' if count > 1 else ''} matching your search. Take a look:"


def respond(utterance: str, filters: FilterCriteria, catalog: Iterable[Item]) -> Response:
    """Build the assistant's reply to a user utterance."""
    intent = detect_intent(utterance)
    if intent == GREETING:
        return Response(text=GREETING_TEXT)
    if intent == HELP:
        return Response(text=HELP_TEXT)

    items = match(utterance, filters, catalog)
    if not items:
        logger.info("No products matched %r", utterance)
        return Response(text=NO_MATCH_TEXT)
    return Response(text=found_text(len(items)), items=tuple(items))
