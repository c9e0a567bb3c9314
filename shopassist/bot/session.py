"""Shopping session — the entry points a front end drives.

A session owns one conversation and one set of filters. User utterances are
appended immediately; the assistant's answer arrives after the reply delay.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from shopassist.bot.conversation import Conversation
from shopassist.bot.replies import ReplyScheduler
from shopassist.bot.responder import respond
from shopassist.catalog.store import StaticCatalog
from shopassist.config import settings
from shopassist.search.filters import FilterState

if TYPE_CHECKING:
    from shopassist.bot.conversation import Message
    from shopassist.catalog.store import CatalogProvider
    from shopassist.search.filters import FilterCriteria, PriceBound

logger = logging.getLogger(__name__)

FILTER_READ_MODES = ("live", "snapshot")
BUSY_POLICIES = ("reject", "queue")


class ShoppingSession:
    """Conversation, filters and reply scheduling for one shopper.

    Args:
        catalog: Provider of the items to search. Read on every reply.
        reply_delay: Seconds the assistant "types" before answering.
        filter_read: ``"live"`` to read filters when the reply is composed,
            ``"snapshot"`` to capture them when the user submits.
        busy_policy: ``"reject"`` to ignore submissions while a reply is
            pending, ``"queue"`` to answer them in order afterwards.
        cancel_replies_on_reset: Drop pending and queued replies when the
            conversation is reset. When off, an in-flight reply still lands
            after the reset.
    """

    def __init__(
        self,
        catalog: CatalogProvider | None = None,
        *,
        reply_delay: float | None = None,
        filter_read: str | None = None,
        busy_policy: str | None = None,
        cancel_replies_on_reset: bool | None = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else StaticCatalog()
        self._filter_read = filter_read or settings.filter_read
        self._busy_policy = busy_policy or settings.busy_policy
        if self._filter_read not in FILTER_READ_MODES:
            msg = f"Unknown filter_read '{self._filter_read}', expected one of {FILTER_READ_MODES}"
            raise ValueError(msg)
        if self._busy_policy not in BUSY_POLICIES:
            msg = f"Unknown busy_policy '{self._busy_policy}', expected one of {BUSY_POLICIES}"
            raise ValueError(msg)
        if cancel_replies_on_reset is None:
            cancel_replies_on_reset = settings.cancel_replies_on_reset
        self._cancel_on_reset = cancel_replies_on_reset

        delay = settings.reply_delay_seconds if reply_delay is None else reply_delay
        self._replies = ReplyScheduler(delay=delay)
        self._conversation = Conversation()
        self._filters = FilterState()
        # Utterances waiting for their reply under the "queue" policy
        self._queue: deque[tuple[str, FilterCriteria | None]] = deque()

    # -- Read access -----------------------------------------------------------

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._conversation.messages

    @property
    def is_pending(self) -> bool:
        """True while the assistant is composing a reply."""
        return self._replies.pending or bool(self._queue)

    @property
    def filters(self) -> FilterCriteria:
        return self._filters.criteria

    # -- Conversation ----------------------------------------------------------

    def submit_utterance(self, text: str) -> bool:
        """Post a user message and schedule the assistant's answer.

        Returns False when the text is blank, or when a reply is pending
        and the busy policy is ``"reject"``. Must be called from inside a
        running event loop; outside one it raises ``RuntimeError`` and
        leaves the conversation untouched.
        """
        if not text.strip():
            logger.debug("Ignoring blank utterance")
            return False

        busy = self.is_pending
        if busy and self._busy_policy == "reject":
            logger.debug("Reply pending, ignoring utterance %r", text)
            return False

        captured = self._filters.snapshot() if self._filter_read == "snapshot" else None
        if busy:
            self._queue.append((text, captured))
            logger.debug("Queued utterance %r (%d waiting)", text, len(self._queue))
        else:
            # Must precede add_user: without a running loop the log stays unchanged
            self._schedule(text, captured)
        # The reply task runs no earlier than the next loop iteration
        self._conversation.add_user(text)
        return True

    def reset_conversation(self) -> int:
        """Start over with only the welcome message. Returns the count discarded."""
        if self._cancel_on_reset:
            self._queue.clear()
            self._replies.cancel_all()
        return self._conversation.reset()

    async def wait_for_reply(self) -> None:
        """Wait until every pending and queued reply has been delivered or cancelled."""
        await self._replies.wait()

    def _schedule(self, text: str, captured: FilterCriteria | None) -> None:
        self._replies.schedule(lambda: self._deliver(text, captured))

    def _deliver(self, text: str, captured: FilterCriteria | None) -> None:
        try:
            filters = captured if captured is not None else self._filters.criteria
            response = respond(text, filters, self._catalog.provide_catalog())
            self._conversation.add_assistant(response.text, response.items)
        finally:
            if self._queue:
                self._schedule(*self._queue.popleft())

    # -- Filters ---------------------------------------------------------------

    def set_category(self, category: str) -> None:
        self._filters.set_category(category)

    def set_min_price(self, value: PriceBound) -> None:
        self._filters.set_min_price(value)

    def set_max_price(self, value: PriceBound) -> None:
        self._filters.set_max_price(value)

    def set_in_stock_only(self, enabled: bool) -> None:
        self._filters.set_in_stock_only(enabled)

    def clear_filters(self) -> None:
        self._filters.clear()


# Global session store keyed by session ID
_sessions: dict[str, ShoppingSession] = {}


def get_session(session_id: str) -> ShoppingSession:
    """Get or create the session for a shopper."""
    if session_id not in _sessions:
        _sessions[session_id] = ShoppingSession()
        logger.info("Created shopping session %s", session_id)
    return _sessions[session_id]
