import asyncio
from pathlib import Path

import pytest

from src.components.days import Day

PROJECT_ROOT = Path(__file__).parent.parent


class RecordingSleeper:
    """Sleep port that returns at once and remembers every requested delay."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.calls.append(seconds)


class GatedSleeper:
    """Sleep port that holds every sleeper until release() is called."""

    def __init__(self) -> None:
        self.calls: list[float] = []
        self._gate = asyncio.Event()

    async def sleep(self, seconds: float) -> None:
        self.calls.append(seconds)
        await self._gate.wait()

    def release(self) -> None:
        self._gate.set()


class StubRules:
    """Rules port stub with fixed answers for every component."""

    def __init__(
        self,
        *,
        delay_seconds: float = 1.0,
        default_to_upper: bool = True,
        min_rating: float = 4,
        weekend_days: frozenset[Day] = frozenset(),
    ) -> None:
        self._delay_seconds = delay_seconds
        self._default_to_upper = default_to_upper
        self._min_rating = min_rating
        self._weekend_days = weekend_days

    def get_delay_seconds(self) -> float:
        return self._delay_seconds

    def get_default_to_upper(self) -> bool:
        return self._default_to_upper

    def get_min_rating(self) -> float:
        return self._min_rating

    def get_weekend_days(self) -> frozenset[Day]:
        return self._weekend_days


@pytest.fixture
def sleeper() -> RecordingSleeper:
    return RecordingSleeper()


@pytest.fixture
def gated_sleeper() -> GatedSleeper:
    return GatedSleeper()


@pytest.fixture
def rules_path() -> Path:
    """Path to the shipped rules.yaml."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def make_rules() -> type[StubRules]:
    """Factory for rules port stubs; call with the overrides a test needs."""
    return StubRules
