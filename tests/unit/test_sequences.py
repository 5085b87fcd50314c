"""
Tests for the sequences component.
"""

from __future__ import annotations

from src.components.sequences import concatenate_arrays


class TestConcatenateArrays:
    def test_joins_in_order(self) -> None:
        assert concatenate_arrays(["a", "b"], ["c"]) == ["a", "b", "c"]

    def test_many_arrays(self) -> None:
        assert concatenate_arrays([1, 2], [3, 4], [5]) == [1, 2, 3, 4, 5]

    def test_no_arguments(self) -> None:
        assert concatenate_arrays() == []

    def test_empty_arrays_are_skipped(self) -> None:
        assert concatenate_arrays([], [1], []) == [1]

    def test_accepts_tuples_and_generators(self) -> None:
        assert concatenate_arrays((1, 2), (x for x in [3])) == [1, 2, 3]

    def test_inputs_untouched_and_result_is_new(self) -> None:
        first = [1, 2]
        second = [3]
        result = concatenate_arrays(first, second)
        result.append(99)

        assert first == [1, 2]
        assert second == [3]
        assert concatenate_arrays(first) is not first
