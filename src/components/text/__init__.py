"""
Text component - String case conversion.
"""

from .component import format_string, run, run_format
from .models import FormatStringInput, FormatStringOutput
from .ports import RulesPort

__all__ = [
    "format_string",
    "run",
    "run_format",
    "FormatStringInput",
    "FormatStringOutput",
    "RulesPort",
]
