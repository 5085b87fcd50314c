"""
Sequences component - Joining sequences end to end.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def concatenate_arrays(*arrays: Iterable[T]) -> list[T]:
    """
    Concatenate any number of sequences, in order, into a new list.

    The inputs are left untouched. No arguments gives an empty list.
    """
    result: list[T] = []
    for array in arrays:
        result.extend(array)
    return result
