"""
Query stages for the product catalog.

Each stage is a pure function over a sequence of products:
filter -> sort -> paginate for listings, and a separate aggregation pass for
statistics. The orchestrator composes them; nothing here touches the store.
"""

from catalog.query.aggregation import aggregate, category_breakdown
from catalog.query.filters import FilterSpec, apply_filters
from catalog.query.pagination import Page, coerce_positive_int, paginate
from catalog.query.sorting import normalize_direction, sort_products, sortable_fields

__all__ = [
    # Filter
    "FilterSpec",
    "apply_filters",
    # Sort
    "normalize_direction",
    "sort_products",
    "sortable_fields",
    # Pagination
    "Page",
    "coerce_positive_int",
    "paginate",
    # Aggregation
    "aggregate",
    "category_breakdown",
]
