"""
Catalog component - Rating filter and price scan over in-memory items.

Invariants:
- I1: Filtering preserves input order
- I2: Price ties resolve to the earliest product
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import (
    FilterByRatingInput,
    FilterByRatingOutput,
    MostExpensiveInput,
    MostExpensiveOutput,
    Product,
    RatedItem,
)
from .ports import RulesPort

DEFAULT_MIN_RATING = 4


def filter_by_rating(
    items: Iterable[RatedItem],
    min_rating: float = DEFAULT_MIN_RATING,
) -> list[RatedItem]:
    """Keep the items rated min_rating or higher."""
    return [item for item in items if item.rating >= min_rating]


def get_most_expensive_product(products: Sequence[Product]) -> Product | None:
    """Return the highest-priced product, or None when there are none."""
    if not products:
        return None

    best = products[0]
    for product in products[1:]:
        if best.price < product.price:
            best = product
    return best


# --- Component Entry Points ---


def run_filter_by_rating(
    inp: FilterByRatingInput,
    *,
    rules: RulesPort | None = None,
) -> FilterByRatingOutput:
    """
    Filter items by rating.

    Args:
        inp: Input containing the items and optional threshold.
        rules: Optional rules port supplying the default threshold.

    Returns:
        FilterByRatingOutput with the kept items and the threshold used.
    """
    min_rating = inp.min_rating
    if min_rating is None:
        min_rating = rules.get_min_rating() if rules is not None else DEFAULT_MIN_RATING

    kept = filter_by_rating(inp.items, min_rating)
    return FilterByRatingOutput(items=tuple(kept), min_rating=min_rating)


def run_most_expensive(inp: MostExpensiveInput) -> MostExpensiveOutput:
    """Find the most expensive product in the input."""
    return MostExpensiveOutput(product=get_most_expensive_product(inp.products))


def run(
    inp: FilterByRatingInput | MostExpensiveInput,
    *,
    rules: RulesPort | None = None,
) -> FilterByRatingOutput | MostExpensiveOutput:
    """
    Main entry point for the catalog component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, FilterByRatingInput):
        return run_filter_by_rating(inp, rules=rules)
    elif isinstance(inp, MostExpensiveInput):
        return run_most_expensive(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
