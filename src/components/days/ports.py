"""
Days component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from .models import Day


class RulesPort(Protocol):
    """Port for calendar rules configuration."""

    def get_weekend_days(self) -> frozenset[Day]:
        """Get the days that count as weekend."""
        ...
