"""
Days component - Weekday/weekend classification.

Out of the box only Sunday is a weekend day; Saturday is a weekday.
"""

from __future__ import annotations

from collections.abc import Collection

from .models import Day, DayType, DayTypeInput, DayTypeOutput
from .ports import RulesPort

DEFAULT_WEEKEND_DAYS: frozenset[Day] = frozenset({Day.SUNDAY})


def get_day_type(day: Day, weekend_days: Collection[Day] | None = None) -> DayType:
    """Classify a day as "Weekend" or "Weekday"."""
    if weekend_days is None:
        weekend_days = DEFAULT_WEEKEND_DAYS
    if day in weekend_days:
        return "Weekend"
    return "Weekday"


# --- Component Entry Points ---


def run_day_type(
    inp: DayTypeInput,
    *,
    rules: RulesPort | None = None,
) -> DayTypeOutput:
    """
    Classify a day.

    Args:
        inp: Input containing the day.
        rules: Optional rules port supplying the weekend days.

    Returns:
        DayTypeOutput with the classification.
    """
    weekend_days = rules.get_weekend_days() if rules is not None else None
    return DayTypeOutput(day=inp.day, day_type=get_day_type(inp.day, weekend_days))


def run(inp: DayTypeInput, *, rules: RulesPort | None = None) -> DayTypeOutput:
    """Main entry point for the days component."""
    if isinstance(inp, DayTypeInput):
        return run_day_type(inp, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
