"""
Rules adapter.

Exposes a validated Rules model through the RulesPort each component declares.
"""

from __future__ import annotations

from src.components.days import Day
from src.rules.loader import default_rules
from src.rules.models import Rules


class RulesAdapter:
    """Serves component defaults from a Rules model."""

    def __init__(self, rules: Rules | None = None) -> None:
        self._rules = rules if rules is not None else default_rules()

    @property
    def rules(self) -> Rules:
        return self._rules

    def get_default_to_upper(self) -> bool:
        return self._rules.formatting.default_to_upper

    def get_min_rating(self) -> float:
        return self._rules.ratings.min_rating

    def get_weekend_days(self) -> frozenset[Day]:
        return frozenset(Day.parse(name) for name in self._rules.calendar.weekend_days)

    def get_delay_seconds(self) -> float:
        return self._rules.deferred.delay_seconds
