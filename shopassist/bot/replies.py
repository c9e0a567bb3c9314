"""Delayed assistant replies.

The assistant "types" for a fixed delay before its reply lands in the
conversation. Each scheduled reply is an asyncio task wrapped in a
``PendingReply`` handle so callers can cancel it or wait for it.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Default delay before a reply is delivered (seconds)
DEFAULT_DELAY = 1.5


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass
class PendingReply:
    """A reply that has been scheduled but may not have been delivered yet."""

    id: str
    task: asyncio.Task[None]

    @property
    def done(self) -> bool:
        return self.task.done()

    @property
    def cancelled(self) -> bool:
        return self.task.cancelled()

    def cancel(self) -> bool:
        """Stop the reply from being delivered. False if it already ran."""
        return self.task.cancel()


def generate_reply_id() -> str:
    """Return an 8-character hex string identifying a pending reply."""
    return uuid.uuid4().hex[:8]


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------


class ReplyScheduler:
    """Runs reply callbacks after a fixed delay on the running event loop.

    Args:
        delay: Seconds to wait before invoking each callback.
    """

    def __init__(self, delay: float = DEFAULT_DELAY) -> None:
        self.delay = delay
        self._pending: dict[str, PendingReply] = {}

    @property
    def pending(self) -> bool:
        """True while any scheduled reply has not finished."""
        return any(not p.done for p in self._pending.values())

    def schedule(self, callback: Callable[[], None]) -> PendingReply:
        """Invoke ``callback`` once the delay has elapsed.

        Must be called from inside a running event loop.
        """
        reply_id = generate_reply_id()
        task = asyncio.get_running_loop().create_task(self._run(reply_id, callback))
        # Cleanup in a done-callback so replies cancelled before they start are dropped too
        task.add_done_callback(lambda _t: self._pending.pop(reply_id, None))
        reply = PendingReply(id=reply_id, task=task)
        self._pending[reply_id] = reply
        logger.debug("Scheduled reply %s in %.2fs", reply_id, self.delay)
        return reply

    def cancel_all(self) -> int:
        """Cancel every outstanding reply. Returns how many were cancelled."""
        cancelled = 0
        for reply in list(self._pending.values()):
            if reply.cancel():
                cancelled += 1
        if cancelled:
            logger.info("Cancelled %d pending reply(ies)", cancelled)
        return cancelled

    async def wait(self) -> None:
        """Wait until no reply is outstanding, including ones scheduled meanwhile."""
        while self.pending:
            tasks = [p.task for p in self._pending.values()]
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self, reply_id: str, callback: Callable[[], None]) -> None:
        await asyncio.sleep(self.delay)
        try:
            callback()
        except Exception:
            logger.exception("Reply %s failed", reply_id)
