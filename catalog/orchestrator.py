"""
Query orchestrator for the product catalog.

Composes the query stages against a `ProductStore` and shapes the results the
HTTP layer returns:

- listing:    category filter -> sort -> paginate
- search:     text filter -> paginate (store order, no sort)
- statistics: aggregation over the full store
- lookup and mutations act on the store directly

Usage:
    from catalog.infrastructure import build_store
    from catalog.orchestrator import list_products

    store = build_store()
    result = list_products(store, {"sortBy": "price", "sortOrder": "desc"})
    print(result["pagination"]["totalItems"])

Every failure is raised as a `catalog.errors.CatalogError` subclass; nothing
here catches them.
"""

from __future__ import annotations

import uuid
from typing import Any, Dict, List, Mapping, Optional, TypedDict

from catalog.domain.models import CatalogStats, Product, ProductCreate, ProductPatch, QuerySpec
from catalog.errors import InvalidQueryError, NotFoundError
from catalog.infrastructure.store import ProductStore
from catalog.query.aggregation import aggregate
from catalog.query.filters import FilterSpec, apply_filters
from catalog.query.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, coerce_positive_int, paginate
from catalog.query.sorting import sort_products
from catalog.utils.logging import get_logger

log = get_logger(__name__)

DEFAULT_SORT_BY = "name"
DEFAULT_SORT_ORDER = "asc"


class ListingResult(TypedDict):
    data: List[Dict[str, Any]]
    pagination: Dict[str, Any]
    filters: Dict[str, Any]


class SearchResult(TypedDict):
    data: List[Dict[str, Any]]
    pagination: Dict[str, Any]
    searchQuery: str
    message: str


class MutationResult(TypedDict):
    data: Dict[str, Any]
    message: str


def _dump(product: Product) -> Dict[str, Any]:
    return product.model_dump(by_alias=True)


def _param(params: Mapping[str, Any], name: str) -> Optional[str]:
    value = params.get(name)
    if value is None:
        return None
    return str(value)


def build_query_spec(params: Mapping[str, Any], default_limit: int = DEFAULT_LIMIT) -> QuerySpec:
    """
    Coerce raw query parameters (`category`, `q`, `page`, `limit`, `sortBy`,
    `sortOrder`) into a QuerySpec, applying defaults for the missing ones.
    """
    return QuerySpec(
        category=_param(params, "category") or None,
        text=_param(params, "q"),
        sort_by=_param(params, "sortBy") or DEFAULT_SORT_BY,
        sort_order=_param(params, "sortOrder") or DEFAULT_SORT_ORDER,
        page=coerce_positive_int(params.get("page"), "page", DEFAULT_PAGE),
        limit=coerce_positive_int(params.get("limit"), "limit", default_limit),
    )


def list_products(
    store: ProductStore,
    params: Mapping[str, Any],
    default_limit: int = DEFAULT_LIMIT,
) -> ListingResult:
    spec = build_query_spec(params, default_limit)
    filtered = apply_filters(store.list(), FilterSpec(category=spec.category))
    ordered = sort_products(filtered, spec.sort_by, spec.sort_order)
    page = paginate(ordered, spec.page, spec.limit)

    filters: Dict[str, Any] = {}
    if spec.category:
        filters["category"] = spec.category
    filters["sortBy"] = spec.sort_by
    filters["sortOrder"] = spec.sort_order

    log.info(
        "Products listed",
        extra={
            "operation": "list",
            "category": spec.category,
            "sort_by": spec.sort_by,
            "sort_order": spec.sort_order,
            "page": spec.page,
            "limit": spec.limit,
            "total_items": page.meta.total_items,
        },
    )
    return ListingResult(
        data=[_dump(p) for p in page.items],
        pagination=page.meta.model_dump(by_alias=True),
        filters=filters,
    )


def search_products(
    store: ProductStore,
    params: Mapping[str, Any],
    default_limit: int = DEFAULT_LIMIT,
) -> SearchResult:
    query = _param(params, "q")
    if query is None or not query.strip():
        raise InvalidQueryError("Search query (q) is required")

    spec = build_query_spec(params, default_limit)
    matches = apply_filters(store.list(), FilterSpec(text=query))
    page = paginate(matches, spec.page, spec.limit)

    log.info(
        "Products searched",
        extra={"operation": "search", "query": query, "matches": len(matches)},
    )
    return SearchResult(
        data=[_dump(p) for p in page.items],
        pagination=page.meta.model_dump(by_alias=True),
        searchQuery=query,
        message=f'Found {len(matches)} product(s) matching "{query}"',
    )


def product_stats(store: ProductStore) -> CatalogStats:
    stats = aggregate(store.list())
    log.info(
        "Catalog statistics computed",
        extra={"operation": "stats", "total_products": stats.overview.total_products},
    )
    return stats


def get_product(store: ProductStore, product_id: str) -> Product:
    product = store.get(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def create_product(store: ProductStore, payload: ProductCreate) -> MutationResult:
    product = Product(id=str(uuid.uuid4()), **payload.model_dump())
    store.insert(product)
    log.info("Product created", extra={"operation": "create", "product_id": product.id})
    return MutationResult(data=_dump(product), message="Product created successfully")


def update_product(store: ProductStore, product_id: str, patch: ProductPatch) -> MutationResult:
    updated = store.update(product_id, patch)
    if updated is None:
        raise NotFoundError("Product not found")
    log.info(
        "Product updated",
        extra={
            "operation": "update",
            "product_id": product_id,
            "fields": sorted(patch.changes()),
        },
    )
    return MutationResult(data=_dump(updated), message="Product updated successfully")


def delete_product(store: ProductStore, product_id: str) -> MutationResult:
    removed = store.delete(product_id)
    if removed is None:
        raise NotFoundError("Product not found")
    log.info("Product deleted", extra={"operation": "delete", "product_id": product_id})
    return MutationResult(data=_dump(removed), message="Product deleted successfully")


__all__ = [
    "ListingResult",
    "SearchResult",
    "MutationResult",
    "build_query_spec",
    "list_products",
    "search_products",
    "product_stats",
    "get_product",
    "create_product",
    "update_product",
    "delete_product",
]
