"""
Text component - String case conversion.
"""

from __future__ import annotations

from .models import FormatStringInput, FormatStringOutput
from .ports import RulesPort


def format_string(value: str, to_upper: bool = True) -> str:
    """Upper-case value, or lower-case it when to_upper is False."""
    if to_upper:
        return value.upper()
    return value.lower()


# --- Component Entry Points ---


def run_format(
    inp: FormatStringInput,
    *,
    rules: RulesPort | None = None,
) -> FormatStringOutput:
    """
    Change the case of a string.

    Args:
        inp: Input containing the string and optional direction.
        rules: Optional rules port supplying the default direction.

    Returns:
        FormatStringOutput with the converted text.
    """
    to_upper = inp.to_upper
    if to_upper is None:
        to_upper = rules.get_default_to_upper() if rules is not None else True

    return FormatStringOutput(text=format_string(inp.value, to_upper), to_upper=to_upper)


def run(
    inp: FormatStringInput,
    *,
    rules: RulesPort | None = None,
) -> FormatStringOutput:
    """Main entry point for the text component."""
    if isinstance(inp, FormatStringInput):
        return run_format(inp, rules=rules)
    raise ValueError(f"Unknown input type: {type(inp)}")
