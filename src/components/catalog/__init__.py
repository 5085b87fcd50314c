"""
Catalog component - Rating filter and price scan over in-memory items.
"""

from .component import (
    DEFAULT_MIN_RATING,
    filter_by_rating,
    get_most_expensive_product,
    run,
    run_filter_by_rating,
    run_most_expensive,
)
from .models import (
    FilterByRatingInput,
    FilterByRatingOutput,
    MostExpensiveInput,
    MostExpensiveOutput,
    Product,
    RatedItem,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_filter_by_rating",
    "run_most_expensive",
    # Functional core
    "DEFAULT_MIN_RATING",
    "filter_by_rating",
    "get_most_expensive_product",
    # Models
    "FilterByRatingInput",
    "FilterByRatingOutput",
    "MostExpensiveInput",
    "MostExpensiveOutput",
    "Product",
    "RatedItem",
    # Ports
    "RulesPort",
]
