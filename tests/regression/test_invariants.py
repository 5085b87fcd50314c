import asyncio

import pytest

from src.components.catalog import Product, get_most_expensive_product
from src.components.days import Day, get_day_type
from src.components.deferred import (
    InvalidInputError,
    compute_square_deferred,
    schedule_square,
    settlement,
)
from src.components.sequences import concatenate_arrays


class InstantSleeper:
    async def sleep(self, seconds: float) -> None:
        return None


# --- D1: Non-negative input always fulfills with n * n ---
@pytest.mark.asyncio
async def test_D1_square_for_all_non_negative():
    """D1: Every n >= 0 fulfills with exactly n * n."""
    sleeper = InstantSleeper()
    for n in range(0, 200):
        assert await compute_square_deferred(n, sleeper=sleeper) == n * n


# --- D2: Negative input always rejects with the fixed reason ---
@pytest.mark.asyncio
async def test_D2_rejection_for_all_negative():
    """D2: Every n < 0 rejects with the verbatim reason, already settled."""
    sleeper = InstantSleeper()
    for n in range(-200, 0):
        future = schedule_square(n, sleeper=sleeper)
        assert settlement(future) == "rejected"
        with pytest.raises(InvalidInputError) as exc_info:
            await future
        assert str(exc_info.value) == "Negative number not allowed"


# --- D3: Concurrent calls do not interfere ---
@pytest.mark.asyncio
async def test_D3_concurrent_calls_independent():
    """D3: Outcomes of concurrent calls match their sequential outcomes."""
    sleeper = InstantSleeper()
    inputs = list(range(-10, 11))
    futures = [schedule_square(n, sleeper=sleeper) for n in inputs]
    results = await asyncio.gather(*futures, return_exceptions=True)

    for n, result in zip(inputs, results, strict=True):
        if n < 0:
            assert isinstance(result, InvalidInputError)
        else:
            assert result == n * n


# --- U1: Only Sunday is weekend out of the box ---
def test_U1_only_sunday_is_weekend():
    weekend = [day for day in Day if get_day_type(day) == "Weekend"]
    assert weekend == [Day.SUNDAY]


# --- U2: Concatenation length is the sum of lengths ---
def test_U2_concatenation_preserves_every_element():
    arrays = [list(range(i)) for i in range(6)]
    result = concatenate_arrays(*arrays)
    assert len(result) == sum(len(a) for a in arrays)
    assert result == [x for a in arrays for x in a]


# --- U3: Most expensive product is never cheaper than any other ---
def test_U3_most_expensive_dominates():
    products = [Product(f"p{i}", price) for i, price in enumerate([3, 9, 1, 9, 4])]
    best = get_most_expensive_product(products)
    assert best is not None
    assert all(best.price >= p.price for p in products)
    assert best.name == "p1"
