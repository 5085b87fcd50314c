"""
Deferred component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class SleepPort(Protocol):
    """Suspends the calling coroutine for a number of seconds."""

    async def sleep(self, seconds: float) -> None:
        """Sleep without blocking the event loop."""
        ...


class RulesPort(Protocol):
    """Port for deferred computation rules configuration."""

    def get_delay_seconds(self) -> float:
        """Get the delay before a successful result is delivered."""
        ...
