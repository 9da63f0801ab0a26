"""
Sort stage: deterministic ordering of products by a named field.

Sortable fields form a closed registry mapping the wire name to a typed key
function. String keys compare case-insensitively; numbers and booleans use
their native ordering. Python's sort is stable for both directions, so ties
keep their input order and repeated identical requests paginate identically.

An unknown field name is not an error: every product gets the same key and
the result is the input order unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from catalog.domain.models import Product

SortKey = Callable[[Product], Any]

ASCENDING = "asc"
DESCENDING = "desc"


def _field_keys() -> Dict[str, SortKey]:
    """Registry of sortable fields, keyed by their wire name."""
    return {
        "id": lambda p: p.id.lower(),
        "name": lambda p: p.name.lower(),
        "description": lambda p: p.description.lower(),
        "category": lambda p: p.category.lower(),
        "price": lambda p: p.price,
        "inStock": lambda p: p.in_stock,
    }


def sortable_fields() -> List[str]:
    """List the field names `sort_products` orders by."""
    return sorted(_field_keys().keys())


def resolve_sort_key(field: str) -> SortKey:
    return _field_keys().get(field, lambda _product: 0)


def normalize_direction(direction: str | None) -> str:
    """Exactly `desc` sorts descending; anything else is ascending."""
    if direction == DESCENDING:
        return DESCENDING
    return ASCENDING


def sort_products(products: Sequence[Product], field: str, direction: str | None = ASCENDING) -> List[Product]:
    key = resolve_sort_key(field)
    return sorted(products, key=key, reverse=normalize_direction(direction) == DESCENDING)


__all__ = [
    "ASCENDING",
    "DESCENDING",
    "SortKey",
    "normalize_direction",
    "resolve_sort_key",
    "sort_products",
    "sortable_fields",
]
