"""
Deferred square - functional core.

compute_square_deferred checks its input when called and hands back an
awaitable. schedule_square hands back an asyncio future so callers can watch
it settle; a negative input produces a future that is already rejected when
the call returns.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

from src.adapters.sleeper import AsyncioSleeper

from .models import DEFAULT_DELAY_SECONDS, InvalidInputError, Settlement
from .ports import SleepPort

logger = logging.getLogger(__name__)

_default_sleeper = AsyncioSleeper()


def check_square_input(n: int, delay_seconds: float = DEFAULT_DELAY_SECONDS) -> None:
    """
    Validate a deferred square request before anything is scheduled.

    Raises:
        TypeError: If n is not an int (bool is rejected too).
        ValueError: If delay_seconds is negative.
        InvalidInputError: If n is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected an int, got {type(n).__name__}")
    if delay_seconds < 0:
        raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
    if n < 0:
        logger.debug("Rejecting deferred square of %s", n)
        raise InvalidInputError(n)


async def _square_after_delay(n: int, delay_seconds: float, sleeper: SleepPort) -> int:
    logger.debug("Squaring %s after %.3fs", n, delay_seconds)
    await sleeper.sleep(delay_seconds)
    return n * n


def compute_square_deferred(
    n: int,
    *,
    delay_seconds: float = DEFAULT_DELAY_SECONDS,
    sleeper: SleepPort | None = None,
) -> Awaitable[int]:
    """
    Square n after a fixed delay.

    The input is checked when the function is called, not when the result
    is awaited: a negative n raises InvalidInputError straight away and
    nothing is scheduled.
    """
    check_square_input(n, delay_seconds)
    return _square_after_delay(n, delay_seconds, sleeper or _default_sleeper)


def schedule_square(
    n: int,
    *,
    delay_seconds: float = DEFAULT_DELAY_SECONDS,
    sleeper: SleepPort | None = None,
) -> asyncio.Future[int]:
    """
    Start a deferred square on the running loop and return its future.

    Must be called from inside a running event loop.
    """
    loop = asyncio.get_running_loop()
    try:
        check_square_input(n, delay_seconds)
    except InvalidInputError as e:
        rejected: asyncio.Future[int] = loop.create_future()
        rejected.set_exception(e)
        return rejected

    return loop.create_task(
        _square_after_delay(n, delay_seconds, sleeper or _default_sleeper)
    )


def settlement(future: asyncio.Future[int]) -> Settlement:
    """
    Report where a scheduled square sits in its state machine.

    A cancelled future counts as "rejected": it settled without a value.
    """
    if not future.done():
        return "pending"
    if future.cancelled() or future.exception() is not None:
        return "rejected"
    return "fulfilled"
