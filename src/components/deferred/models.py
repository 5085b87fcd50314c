"""
Deferred component input/output models.

Deferred square: Pending -> Fulfilled(n*n) after the delay, or
Pending -> Rejected(reason) at invocation time for negative input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

NEGATIVE_NUMBER_REASON = "Negative number not allowed"

# Seconds to wait before a non-negative input resolves
DEFAULT_DELAY_SECONDS = 1.0


# --- Errors ---


class InvalidInputError(ValueError):
    """Raised when the deferred square is asked for a negative number."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.reason = NEGATIVE_NUMBER_REASON
        super().__init__(NEGATIVE_NUMBER_REASON)


@dataclass(frozen=True)
class SquareValidationError:
    """Deferred square validation error."""

    code: str
    message: str
    value: int | None = None


# --- Settlement State ---


Settlement = Literal["pending", "fulfilled", "rejected"]


# --- Input Models ---


@dataclass(frozen=True)
class SquareInput:
    """Input for a deferred square computation."""

    n: int


# --- Output Models ---


@dataclass(frozen=True)
class SquareOutput:
    """Output for a deferred square computation."""

    value: int | None
    errors: list[SquareValidationError] = field(default_factory=list)
    success: bool = True
