from __future__ import annotations

from catalog.query.aggregation import aggregate, category_breakdown

EXPECTED_TOTAL = 3
EXPECTED_IN_STOCK = 2


def test_sample_catalog_statistics(products):
    stats = aggregate(products)

    assert stats.overview.total_products == EXPECTED_TOTAL
    assert stats.overview.total_categories == 2
    assert stats.overview.total_value == 2050
    assert stats.overview.average_price == 683.33
    assert stats.stock_status.in_stock == EXPECTED_IN_STOCK
    assert stats.stock_status.out_of_stock == 1
    assert stats.stock_status.stock_percentage == 66.67
    assert stats.price_analysis.min_price == 50
    assert stats.price_analysis.max_price == 1200
    assert stats.price_analysis.price_range == 1150
    assert stats.price_analysis.average_price == 683.33
    assert stats.price_analysis.cheapest.name == "Coffee Maker"
    assert stats.price_analysis.most_expensive.name == "Laptop"
    assert stats.categories == ["electronics", "kitchen"]


def test_totals_are_consistent(products, make_product):
    items = products + [
        make_product("4", "Lamp", 30.0, category="home", in_stock=False),
        make_product("5", "Rug", 80.0, category="home"),
    ]
    stats = aggregate(items)
    assert sum(stats.category_breakdown.values()) == stats.overview.total_products
    assert (
        stats.stock_status.in_stock + stats.stock_status.out_of_stock
        == stats.overview.total_products
    )


def test_empty_catalog_reports_no_data():
    stats = aggregate([])

    assert stats.overview.total_products == 0
    assert stats.overview.total_value == 0
    assert stats.overview.average_price is None
    assert stats.stock_status.stock_percentage is None
    assert stats.price_analysis.min_price is None
    assert stats.price_analysis.max_price is None
    assert stats.price_analysis.price_range is None
    assert stats.price_analysis.cheapest is None
    assert stats.price_analysis.most_expensive is None
    assert stats.categories == []
    assert stats.category_breakdown == {}


def test_price_ties_resolve_to_first_in_store_order(make_product):
    items = [
        make_product("1", "Early cheap", 5.0),
        make_product("2", "Early pricey", 99.0),
        make_product("3", "Late cheap", 5.0),
        make_product("4", "Late pricey", 99.0),
    ]
    stats = aggregate(items)
    assert stats.price_analysis.cheapest.name == "Early cheap"
    assert stats.price_analysis.most_expensive.name == "Early pricey"


def test_average_is_rounded_once_from_unrounded_sum(make_product):
    items = [make_product(str(i), f"Item {i}", 0.335) for i in range(1, 4)]
    stats = aggregate(items)
    unrounded = sum(p.price for p in items)
    assert stats.overview.total_value == round(unrounded, 2)
    assert stats.overview.average_price == round(unrounded / 3, 2)


def test_breakdown_keeps_first_seen_order_while_categories_are_sorted(make_product):
    items = [
        make_product("1", "Zed", 1.0, category="zebra"),
        make_product("2", "Ant", 1.0, category="ant"),
        make_product("3", "Zed 2", 1.0, category="zebra"),
    ]
    stats = aggregate(items)
    assert list(stats.category_breakdown) == ["zebra", "ant"]
    assert stats.category_breakdown == {"zebra": 2, "ant": 1}
    assert stats.categories == ["ant", "zebra"]


def test_category_breakdown_is_case_sensitive(make_product):
    items = [
        make_product("1", "Atlas", 1.0, category="Books"),
        make_product("2", "Bible", 1.0, category="books"),
    ]
    assert category_breakdown(items) == {"Books": 1, "books": 1}


def test_stats_serialize_with_wire_names(products):
    payload = aggregate(products).model_dump(by_alias=True)
    assert set(payload) == {
        "overview",
        "categoryBreakdown",
        "stockStatus",
        "priceAnalysis",
        "categories",
    }
    assert payload["overview"]["totalProducts"] == EXPECTED_TOTAL
    assert payload["stockStatus"]["inStock"] == EXPECTED_IN_STOCK
    assert payload["priceAnalysis"]["cheapest"] == {"name": "Coffee Maker", "price": 50}
