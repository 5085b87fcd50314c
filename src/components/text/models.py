"""
Text component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatStringInput:
    """Input for changing the case of a string.

    to_upper=None means "use the configured default".
    """

    value: str
    to_upper: bool | None = None


@dataclass(frozen=True)
class FormatStringOutput:
    """Output for format operation."""

    text: str
    to_upper: bool
