"""Terminal front end: slash commands for filters, everything else is chat."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from shopassist.catalog.store import FILTER_CATEGORIES
from shopassist.search.filters import ALL_CATEGORIES, parse_price_bound

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from shopassist.bot.conversation import Message
    from shopassist.bot.session import ShoppingSession
    from shopassist.catalog.models import Item
    from shopassist.search.filters import PriceBound

logger = logging.getLogger(__name__)

PROMPT = "> "
TYPING_INDICATOR = "Assistant is typing..."

_ON_VALUES = {"on", "yes", "true", "1"}
_OFF_VALUES = {"off", "no", "false", "0"}


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_time(message: Message) -> str:
    """Local wall-clock time of a message as ``HH:MM``."""
    return message.created_at.astimezone().strftime("%H:%M")


def format_item(item: Item) -> str:
    stock = "In stock" if item.in_stock else "Out of stock"
    return f"  • {item.name} (${item.price:.2f}, {item.rating:.1f}/5, {stock})"


def format_message(message: Message) -> str:
    speaker = "You" if message.is_user else "Assistant"
    lines = [f"[{format_time(message)}] {speaker}: {message.body}"]
    lines.extend(format_item(item) for item in message.attached_items)
    return "\n".join(lines)


def _fmt_bound(raw: PriceBound) -> str:
    # Shows the bound the matcher applies, "-" when it is unset
    value = parse_price_bound(raw)
    return "-" if value is None else f"{value:g}"


def format_filters(session: ShoppingSession) -> str:
    f = session.filters
    category = "All categories" if f.category == ALL_CATEGORIES else f.category
    return "\n".join([
        "Filters",
        f"Category: {category}",
        f"Min price: {_fmt_bound(f.min_price)}",
        f"Max price: {_fmt_bound(f.max_price)}",
        f"In stock only: {'on' if f.in_stock_only else 'off'}",
    ])


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


class Console:
    """Drives a ``ShoppingSession`` from lines of user input.

    Args:
        session: The session to drive.
        write: Output sink, ``print`` by default.
    """

    def __init__(self, session: ShoppingSession, write: Callable[[str], None] = print) -> None:
        self.session = session
        self._write = write
        self._shown: set[str] = set()
        self._commands: dict[str, Callable[[list[str]], Awaitable[bool]]] = {
            "/reset": self._cmd_reset,
            "/filters": self._cmd_filters,
            "/category": self._cmd_category,
            "/min": self._cmd_min,
            "/max": self._cmd_max,
            "/instock": self._cmd_instock,
            "/clear": self._cmd_clear,
            "/categories": self._cmd_categories,
            "/commands": self._cmd_commands,
            "/quit": self._cmd_quit,
        }

    def render_new(self) -> None:
        """Print every message that has not been shown yet."""
        for message in self.session.messages:
            if message.id in self._shown:
                continue
            self._shown.add(message.id)
            self._write(format_message(message))

    async def handle_line(self, line: str) -> bool:
        """Process one line of input. Returns False when the user wants to quit."""
        text = line.strip()
        if not text:
            return True
        if text.startswith("/"):
            name, *args = text.split()
            handler = self._commands.get(name.lower())
            if handler is None:
                self._write(f"Unknown command '{name}'. Try /commands.")
                return True
            return await handler(args)

        if not self.session.submit_utterance(line):
            self._write("Still working on your last message.")
            return True
        self.render_new()
        self._write(TYPING_INDICATOR)
        await self.session.wait_for_reply()
        self.render_new()
        return True

    # -- Commands --------------------------------------------------------------

    async def _cmd_reset(self, args: list[str]) -> bool:
        count = self.session.reset_conversation()
        self._write(f"Cleared {count} messages. Starting fresh.")
        self.render_new()
        return True

    async def _cmd_filters(self, args: list[str]) -> bool:
        self._write(format_filters(self.session))
        return True

    async def _cmd_category(self, args: list[str]) -> bool:
        if not args:
            self._write("Usage: /category <name|all>")
            return True
        name = " ".join(args)
        # Categories match exactly, so map the typed name onto the panel's spelling
        for known in (ALL_CATEGORIES, *FILTER_CATEGORIES):
            if name.lower() == known.lower():
                name = known
                break
        self.session.set_category(name)
        self._write(f"Category → {name}")
        return True

    async def _cmd_min(self, args: list[str]) -> bool:
        value = args[0] if args else ""
        self.session.set_min_price(value)
        self._write(f"Min price → {_fmt_bound(value)}")
        return True

    async def _cmd_max(self, args: list[str]) -> bool:
        value = args[0] if args else ""
        self.session.set_max_price(value)
        self._write(f"Max price → {_fmt_bound(value)}")
        return True

    async def _cmd_instock(self, args: list[str]) -> bool:
        choice = args[0].lower() if args else ""
        if choice in _ON_VALUES:
            self.session.set_in_stock_only(True)
        elif choice in _OFF_VALUES:
            self.session.set_in_stock_only(False)
        else:
            self._write("Usage: /instock on|off")
            return True
        self._write(f"In stock only → {'on' if self.session.filters.in_stock_only else 'off'}")
        return True

    async def _cmd_clear(self, args: list[str]) -> bool:
        self.session.clear_filters()
        self._write("All filters cleared.")
        return True

    async def _cmd_categories(self, args: list[str]) -> bool:
        self._write("Categories: " + ", ".join(FILTER_CATEGORIES))
        return True

    async def _cmd_commands(self, args: list[str]) -> bool:
        self._write(", ".join(self._commands))
        return True

    async def _cmd_quit(self, args: list[str]) -> bool:
        return False


async def run_console(session: ShoppingSession) -> None:
    """Read lines from stdin until /quit or end of input."""
    console = Console(session)
    console.render_new()
    while True:
        try:
            line = await asyncio.to_thread(input, PROMPT)
        except EOFError:
            break
        if not await console.handle_line(line):
            break
    logger.info("Console closed")
