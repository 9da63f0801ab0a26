"""
Domain package for the product catalog.

Exports the models shared by the store, the query stages and the API layer.
Keep this package focused on data definitions.
"""

from catalog.domain.models import (
    CatalogStats,
    Overview,
    PaginationMeta,
    PriceAnalysis,
    PriceHighlight,
    Product,
    ProductCreate,
    ProductPatch,
    QuerySpec,
    StockStatus,
    merge_product,
)

__all__ = [
    "CatalogStats",
    "Overview",
    "PaginationMeta",
    "PriceAnalysis",
    "PriceHighlight",
    "Product",
    "ProductCreate",
    "ProductPatch",
    "QuerySpec",
    "StockStatus",
    "merge_product",
]
