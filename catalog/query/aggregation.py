"""
Aggregation stage: summary statistics over the whole catalog.

Works on the full store snapshot, independent of any filter, sort or page.
Sums and averages are accumulated unrounded and rounded to 2 decimals only
when the result is built. Ratios and averages over an empty catalog are
`None` ("no data"), never NaN or a division error.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from catalog.domain.models import (
    CatalogStats,
    Overview,
    PriceAnalysis,
    PriceHighlight,
    Product,
    StockStatus,
)


def _round_float(value: float, decimals: int = 2) -> float:
    """Round a float to specified decimal places for human-readable output."""
    return round(value, decimals)


def _ratio(numerator: float, denominator: int) -> Optional[float]:
    if denominator == 0:
        return None
    return numerator / denominator


def category_breakdown(products: Sequence[Product]) -> Dict[str, int]:
    """Count per category, keyed in order of first appearance."""
    counts: Dict[str, int] = {}
    for product in products:
        counts[product.category] = counts.get(product.category, 0) + 1
    return counts


def _highlight(product: Optional[Product]) -> Optional[PriceHighlight]:
    if product is None:
        return None
    return PriceHighlight(name=product.name, price=product.price)


def aggregate(products: Sequence[Product]) -> CatalogStats:
    """
    Compute catalog statistics in a single pass.

    `cheapest` and `most_expensive` are the first products in store order to
    reach the minimum and maximum price.
    """
    total = len(products)
    breakdown = category_breakdown(products)

    in_stock = 0
    total_value = 0.0
    cheapest: Optional[Product] = None
    most_expensive: Optional[Product] = None
    for product in products:
        if product.in_stock:
            in_stock += 1
        total_value += product.price
        if cheapest is None or product.price < cheapest.price:
            cheapest = product
        if most_expensive is None or product.price > most_expensive.price:
            most_expensive = product

    average = _ratio(total_value, total)
    average_price = _round_float(average) if average is not None else None
    stock_ratio = _ratio(in_stock, total)

    min_price = cheapest.price if cheapest is not None else None
    max_price = most_expensive.price if most_expensive is not None else None
    price_range = (
        max_price - min_price if min_price is not None and max_price is not None else None
    )

    return CatalogStats(
        overview=Overview(
            total_products=total,
            total_categories=len(breakdown),
            total_value=_round_float(total_value),
            average_price=average_price,
        ),
        category_breakdown=breakdown,
        stock_status=StockStatus(
            in_stock=in_stock,
            out_of_stock=total - in_stock,
            stock_percentage=_round_float(stock_ratio * 100) if stock_ratio is not None else None,
        ),
        price_analysis=PriceAnalysis(
            min_price=min_price,
            max_price=max_price,
            average_price=average_price,
            price_range=price_range,
            most_expensive=_highlight(most_expensive),
            cheapest=_highlight(cheapest),
        ),
        categories=sorted(breakdown),
    )


__all__ = ["aggregate", "category_breakdown"]
