from __future__ import annotations

import uuid

import pytest

from catalog.domain.models import ProductCreate, ProductPatch
from catalog.errors import InvalidQueryError, NotFoundError
from catalog.orchestrator import (
    build_query_spec,
    create_product,
    delete_product,
    get_product,
    list_products,
    product_stats,
    search_products,
    update_product,
)

DEFAULT_LIMIT = 10


def test_build_query_spec_defaults():
    spec = build_query_spec({})
    assert spec.category is None
    assert spec.sort_by == "name"
    assert spec.sort_order == "asc"
    assert spec.page == 1
    assert spec.limit == DEFAULT_LIMIT


def test_build_query_spec_uses_configured_default_limit():
    assert build_query_spec({}, default_limit=25).limit == 25


def test_listing_sorted_by_price_desc(store):
    result = list_products(store, {"sortBy": "price", "sortOrder": "desc"})
    assert [p["name"] for p in result["data"]] == ["Laptop", "Smartphone", "Coffee Maker"]
    assert result["filters"] == {"sortBy": "price", "sortOrder": "desc"}


def test_listing_by_category_echoes_filter(store):
    result = list_products(store, {"category": "electronics"})
    assert [p["name"] for p in result["data"]] == ["Laptop", "Smartphone"]
    assert result["filters"]["category"] == "electronics"
    assert result["pagination"]["totalItems"] == 2


def test_listing_does_not_reorder_the_store(store):
    list_products(store, {"sortBy": "price", "sortOrder": "asc"})
    assert [p.id for p in store.list()] == ["1", "2", "3"]


def test_listing_second_page(store):
    result = list_products(store, {"page": "2", "limit": "2"})
    assert len(result["data"]) == 1
    assert result["pagination"]["hasNextPage"] is False
    assert result["pagination"]["hasPrevPage"] is True
    assert result["pagination"]["totalPages"] == 2


def test_listing_rejects_bad_page(store):
    with pytest.raises(InvalidQueryError):
        list_products(store, {"page": "0"})


@pytest.mark.parametrize("query", [None, "", "   "])
def test_search_requires_query(store, query):
    params = {} if query is None else {"q": query}
    with pytest.raises(InvalidQueryError, match="Search query"):
        search_products(store, params)


def test_search_reports_match_count(store):
    result = search_products(store, {"q": "Coffee"})
    assert [p["name"] for p in result["data"]] == ["Coffee Maker"]
    assert result["searchQuery"] == "Coffee"
    assert result["message"] == 'Found 1 product(s) matching "Coffee"'


def test_search_ignores_sort_parameters(store):
    result = search_products(store, {"q": "e", "sortBy": "price", "sortOrder": "asc"})
    assert [p["id"] for p in result["data"]] == ["1", "2", "3"]


def test_stats_read_full_store(store):
    stats = product_stats(store)
    assert stats.overview.total_products == 3
    assert stats.price_analysis.cheapest.name == "Coffee Maker"


def test_get_unknown_product_raises(store):
    with pytest.raises(NotFoundError):
        get_product(store, "999")


def test_create_assigns_fresh_uuid(store):
    payload = ProductCreate(
        name="Kettle", description="Electric kettle, 1.7 litres", price=35.0, category="kitchen"
    )
    first = create_product(store, payload)
    second = create_product(store, payload)

    assert first["message"] == "Product created successfully"
    assert first["data"]["inStock"] is True
    assert first["data"]["id"] != second["data"]["id"]
    uuid.UUID(first["data"]["id"])
    assert [p.id for p in store.list()][-2:] == [first["data"]["id"], second["data"]["id"]]


def test_partial_update_leaves_other_fields_identical(store):
    before = get_product(store, "3").model_dump()
    result = update_product(store, "3", ProductPatch(in_stock=True))
    after = get_product(store, "3").model_dump()

    assert result["data"]["inStock"] is True
    assert {k: v for k, v in after.items() if k != "in_stock"} == {
        k: v for k, v in before.items() if k != "in_stock"
    }


def test_update_unknown_product_raises(store):
    with pytest.raises(NotFoundError):
        update_product(store, "999", ProductPatch(name="Ghost"))


def test_delete_returns_prior_state(store):
    result = delete_product(store, "2")
    assert result["data"]["name"] == "Smartphone"
    assert result["message"] == "Product deleted successfully"
    with pytest.raises(NotFoundError):
        delete_product(store, "2")
