"""
Values component - Type-discriminated value processing.

A value is either text or a number:
- text   -> its length
- number -> twice the number
"""

from __future__ import annotations

Value = str | int | float


def process_value(value: Value) -> int | float:
    """
    Process a string-or-number value.

    Raises:
        TypeError: For anything that is neither str nor a real number.
            bool is refused even though it subclasses int.
    """
    if isinstance(value, str):
        return len(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value * 2
    raise TypeError(f"Expected str, int or float, got {type(value).__name__}")
