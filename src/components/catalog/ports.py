"""
Catalog component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for catalog rules configuration."""

    def get_min_rating(self) -> float:
        """Get the lowest rating an item may have and still be kept."""
        ...
