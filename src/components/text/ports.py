"""
Text component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for text formatting rules configuration."""

    def get_default_to_upper(self) -> bool:
        """Get whether format_string upper-cases when not told otherwise."""
        ...
