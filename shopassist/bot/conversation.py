"""In-memory conversation log, append-only except for reset."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

from shopassist.bot.responder import WELCOME_TEXT

if TYPE_CHECKING:
    from collections.abc import Iterable

    from shopassist.catalog.models import Item

logger = logging.getLogger(__name__)


class Author(StrEnum):
    """Who wrote a message."""

    USER = "user"
    ASSISTANT = "assistant"


# Shared across conversations so ids never repeat within a process
_message_ids = itertools.count(1)


def next_message_id() -> str:
    """Return a new message id, numerically greater than every earlier one."""
    return str(next(_message_ids))


@dataclass(frozen=True)
class Message:
    """A single conversation turn.

    ``attached_items`` is a snapshot of the products shown with the message.
    """

    body: str
    author: Author
    id: str = field(default_factory=next_message_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    attached_items: tuple[Item, ...] = ()

    def __post_init__(self) -> None:
        # Raises ValueError for anything other than "user" or "assistant"
        object.__setattr__(self, "author", Author(self.author))

    @property
    def is_user(self) -> bool:
        return self.author == Author.USER


class Conversation:
    """Ordered message history for a single shopping session.

    Starts with the welcome message. Messages are only ever appended;
    ``reset`` is the one way to discard them.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = [self._welcome()]

    @staticmethod
    def _welcome() -> Message:
        return Message(body=WELCOME_TEXT, author=Author.ASSISTANT)

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, message: Message) -> Message:
        self._messages.append(message)
        return message

    def add_user(self, body: str) -> Message:
        return self.append(Message(body=body, author=Author.USER))

    def add_assistant(self, body: str, items: Iterable[Item] = ()) -> Message:
        message = Message(body=body, author=Author.ASSISTANT, attached_items=tuple(items))
        return self.append(message)

    def reset(self) -> int:
        """Replace the history with a fresh welcome message. Returns the count discarded."""
        count = len(self._messages)
        self._messages = [self._welcome()]
        logger.info("Conversation reset, discarded %d message(s)", count)
        return count
