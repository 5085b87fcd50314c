"""
Deferred component - Delayed, possibly failing square of an integer.
"""

from ._impl import (
    check_square_input,
    compute_square_deferred,
    schedule_square,
    settlement,
)
from .component import run, run_square
from .models import (
    DEFAULT_DELAY_SECONDS,
    NEGATIVE_NUMBER_REASON,
    InvalidInputError,
    Settlement,
    SquareInput,
    SquareOutput,
    SquareValidationError,
)
from .ports import RulesPort, SleepPort

__all__ = [
    # Entry points
    "run",
    "run_square",
    # Functional core
    "check_square_input",
    "compute_square_deferred",
    "schedule_square",
    "settlement",
    # Models
    "DEFAULT_DELAY_SECONDS",
    "NEGATIVE_NUMBER_REASON",
    "InvalidInputError",
    "Settlement",
    "SquareInput",
    "SquareOutput",
    "SquareValidationError",
    # Ports
    "RulesPort",
    "SleepPort",
]
