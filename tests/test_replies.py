"""Tests for the delayed reply scheduler."""

import asyncio
import logging

import pytest

from shopassist.bot.replies import DEFAULT_DELAY, ReplyScheduler, generate_reply_id

# -- generate_reply_id ---------------------------------------------------------


def test_id_length() -> None:
    assert len(generate_reply_id()) == 8


def test_id_is_hex() -> None:
    int(generate_reply_id(), 16)


def test_ids_are_unique() -> None:
    ids = {generate_reply_id() for _ in range(100)}
    assert len(ids) == 100


# -- ReplyScheduler ------------------------------------------------------------


def test_default_delay() -> None:
    assert ReplyScheduler().delay == DEFAULT_DELAY


async def test_runs_callback_after_delay() -> None:
    calls: list[str] = []
    scheduler = ReplyScheduler(delay=0.01)
    reply = scheduler.schedule(lambda: calls.append("done"))

    assert scheduler.pending
    assert calls == []

    await scheduler.wait()
    assert calls == ["done"]
    assert reply.done
    assert not reply.cancelled
    assert not scheduler.pending


async def test_not_run_before_delay() -> None:
    calls: list[str] = []
    scheduler = ReplyScheduler(delay=10)
    reply = scheduler.schedule(lambda: calls.append("done"))
    await asyncio.sleep(0.01)
    assert calls == []
    assert reply.cancel()
    await scheduler.wait()


async def test_cancel_prevents_callback() -> None:
    calls: list[str] = []
    scheduler = ReplyScheduler(delay=0.01)
    reply = scheduler.schedule(lambda: calls.append("done"))

    assert reply.cancel()
    await scheduler.wait()
    assert calls == []
    assert reply.cancelled
    assert not scheduler.pending


async def test_cancel_after_run_returns_false() -> None:
    scheduler = ReplyScheduler(delay=0)
    reply = scheduler.schedule(lambda: None)
    await scheduler.wait()
    assert reply.cancel() is False


async def test_cancel_all() -> None:
    calls: list[int] = []
    scheduler = ReplyScheduler(delay=0.01)
    scheduler.schedule(lambda: calls.append(1))
    scheduler.schedule(lambda: calls.append(2))

    assert scheduler.cancel_all() == 2
    await scheduler.wait()
    assert calls == []


async def test_wait_covers_replies_scheduled_by_callbacks() -> None:
    calls: list[str] = []
    scheduler = ReplyScheduler(delay=0)

    def first() -> None:
        calls.append("first")
        scheduler.schedule(lambda: calls.append("second"))

    scheduler.schedule(first)
    await scheduler.wait()
    assert calls == ["first", "second"]


async def test_callback_error_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    def boom() -> None:
        raise RuntimeError("kaboom")

    scheduler = ReplyScheduler(delay=0)
    with caplog.at_level(logging.ERROR, logger="shopassist.bot.replies"):
        reply = scheduler.schedule(boom)
        await scheduler.wait()

    assert reply.done
    assert not reply.cancelled
    assert "failed" in caplog.text


def test_schedule_requires_running_loop() -> None:
    with pytest.raises(RuntimeError):
        ReplyScheduler().schedule(lambda: None)
