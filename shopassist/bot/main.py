"""Shopping assistant entry point."""

import asyncio
import contextlib
import logging

from shopassist.bot.console import run_console
from shopassist.bot.session import get_session
from shopassist.config import settings

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level),
)
logger = logging.getLogger(__name__)


async def _run() -> None:
    session = get_session("console")
    await run_console(session)


def main() -> None:
    """Start the assistant in the terminal."""
    logger.info(
        "Starting shopping assistant (reply delay %.1fs, filters read %s, busy policy %s)",
        settings.reply_delay_seconds,
        settings.filter_read,
        settings.busy_policy,
    )
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_run())


if __name__ == "__main__":
    main()
