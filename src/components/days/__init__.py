"""
Days component - Weekday/weekend classification.
"""

from .component import DEFAULT_WEEKEND_DAYS, get_day_type, run, run_day_type
from .models import Day, DayType, DayTypeInput, DayTypeOutput
from .ports import RulesPort

__all__ = [
    "run",
    "run_day_type",
    "DEFAULT_WEEKEND_DAYS",
    "get_day_type",
    "Day",
    "DayType",
    "DayTypeInput",
    "DayTypeOutput",
    "RulesPort",
]
