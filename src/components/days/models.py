"""
Days component models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

DayType = Literal["Weekday", "Weekend"]


class Day(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def parse(cls, name: str) -> Day:
        """Look up a day by name, ignoring case and surrounding spaces."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown day name: {name!r}") from None


# --- Input Models ---


@dataclass(frozen=True)
class DayTypeInput:
    """Input for classifying a day."""

    day: Day


# --- Output Models ---


@dataclass(frozen=True)
class DayTypeOutput:
    """Output for classify operation."""

    day: Day
    day_type: DayType
