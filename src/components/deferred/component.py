"""
Deferred component - Delayed square of an integer.

Invariants:
- I1: n >= 0 fulfills with exactly n * n, never before the delay elapses
- I2: n < 0 rejects with "Negative number not allowed" before any delay
- I3: Each call settles exactly once and shares no state with other calls
"""

from __future__ import annotations

from ._impl import compute_square_deferred
from .models import (
    DEFAULT_DELAY_SECONDS,
    InvalidInputError,
    SquareInput,
    SquareOutput,
    SquareValidationError,
)
from .ports import RulesPort, SleepPort


def _delay_from_rules(rules: RulesPort | None) -> float:
    """Read the delay from the rules port, falling back to the default."""
    if rules is None:
        return DEFAULT_DELAY_SECONDS
    return rules.get_delay_seconds()


# --- Component Entry Points ---


async def run_square(
    inp: SquareInput,
    *,
    sleeper: SleepPort | None = None,
    rules: RulesPort | None = None,
) -> SquareOutput:
    """
    Compute a deferred square.

    Args:
        inp: Input containing the integer to square.
        sleeper: Optional sleep port (tests pass a fake).
        rules: Optional rules port for the delay.

    Returns:
        SquareOutput with the value, or errors when the input is rejected.
    """
    try:
        value = await compute_square_deferred(
            inp.n,
            delay_seconds=_delay_from_rules(rules),
            sleeper=sleeper,
        )
    except InvalidInputError as e:
        return SquareOutput(
            value=None,
            errors=[
                SquareValidationError(
                    code="negative_input",
                    message=e.reason,
                    value=e.value,
                )
            ],
            success=False,
        )

    return SquareOutput(value=value)


async def run(
    inp: SquareInput,
    *,
    sleeper: SleepPort | None = None,
    rules: RulesPort | None = None,
) -> SquareOutput:
    """
    Main entry point for the deferred component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, SquareInput):
        return await run_square(inp, sleeper=sleeper, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
