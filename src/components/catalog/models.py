"""
Catalog component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RatedItem:
    """A titled item with a numeric rating."""

    title: str
    rating: float


@dataclass(frozen=True)
class Product:
    """A named product with a price."""

    name: str
    price: float


# --- Input Models ---


@dataclass(frozen=True)
class FilterByRatingInput:
    """Input for keeping well-rated items.

    min_rating=None means "use the configured threshold".
    """

    items: tuple[RatedItem, ...]
    min_rating: float | None = None


@dataclass(frozen=True)
class MostExpensiveInput:
    """Input for finding the priciest product."""

    products: tuple[Product, ...]


# --- Output Models ---


@dataclass(frozen=True)
class FilterByRatingOutput:
    """Output for filter operation."""

    items: tuple[RatedItem, ...]
    min_rating: float


@dataclass(frozen=True)
class MostExpensiveOutput:
    """Output for most expensive operation. product is None for an empty catalog."""

    product: Product | None
