"""
Filter stage: select the products matching a category and/or a text query.

Active filters combine by conjunction; an absent filter passes everything
through. Input order is preserved and the input sequence is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from catalog.domain.models import Product
from catalog.errors import InvalidQueryError

Predicate = Callable[[Product], bool]


@dataclass(frozen=True)
class FilterSpec:
    category: Optional[str] = None
    text: Optional[str] = None


def category_predicate(category: str) -> Predicate:
    wanted = category.lower()
    return lambda product: product.category.lower() == wanted


def text_predicate(text: str) -> Predicate:
    """
    Case-insensitive substring match over name or description.

    A blank query is a caller error, never a wildcard.
    """
    if not text or not text.strip():
        raise InvalidQueryError("Search query (q) is required")
    needle = text.lower()
    return lambda product: needle in product.name.lower() or needle in product.description.lower()


def build_predicates(spec: FilterSpec) -> List[Predicate]:
    predicates: List[Predicate] = []
    if spec.category:
        predicates.append(category_predicate(spec.category))
    if spec.text is not None:
        predicates.append(text_predicate(spec.text))
    return predicates


def apply_filters(products: Sequence[Product], spec: FilterSpec) -> List[Product]:
    predicates = build_predicates(spec)
    if not predicates:
        return list(products)
    return [product for product in products if all(match(product) for match in predicates)]


__all__ = [
    "FilterSpec",
    "Predicate",
    "apply_filters",
    "build_predicates",
    "category_predicate",
    "text_predicate",
]
