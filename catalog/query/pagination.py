"""
Pagination stage: slice a result sequence and describe where the slice sits.

Page `n` of size `limit` is the half-open range `[(n - 1) * limit, n * limit)`.
`page` and `limit` arrive from the query string as text, so this module also
owns their coercion. Non-integer or non-positive values are rejected with
`InvalidQueryError` rather than clamped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, List, Sequence, TypeVar

from catalog.domain.models import PaginationMeta
from catalog.errors import InvalidQueryError

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T]
    meta: PaginationMeta


def coerce_positive_int(value: object, name: str, default: int) -> int:
    """
    Turn a query-string value into a positive int.

    Missing or empty values fall back to `default`.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise InvalidQueryError(f"{name} must be a positive integer")
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            raise InvalidQueryError(f"{name} must be a positive integer") from None
    if number < 1:
        raise InvalidQueryError(f"{name} must be a positive integer")
    return number


def total_pages(total_items: int, limit: int) -> int:
    return math.ceil(total_items / limit)


def paginate(items: Sequence[T], page: int, limit: int) -> Page[T]:
    if page < 1 or limit < 1:
        raise InvalidQueryError("page and limit must be positive integers")

    start = (page - 1) * limit
    end = page * limit
    total = len(items)

    meta = PaginationMeta(
        current_page=page,
        total_pages=total_pages(total, limit),
        total_items=total,
        items_per_page=limit,
        has_next_page=end < total,
        has_prev_page=page > 1,
    )
    return Page(items=list(items[start:end]), meta=meta)


__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "Page",
    "coerce_positive_int",
    "paginate",
    "total_pages",
]
