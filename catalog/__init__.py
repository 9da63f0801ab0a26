"""
Product Catalog API - in-memory product catalog served over JSON/HTTP.

The package is organised around a small query engine:

- Filtering by category or free text
- Type-aware, stable sorting over a closed set of fields
- Page/limit pagination with navigation metadata
- Aggregate statistics over the whole catalog

The HTTP layer (`catalog.api`) is a thin FastAPI wrapper around
`catalog.orchestrator`, which composes the stages against the record store.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from catalog.config import Settings, get_settings
from catalog.domain.models import CatalogStats, Product, ProductCreate, ProductPatch
from catalog.errors import (
    CatalogError,
    InvalidQueryError,
    NotFoundError,
    ValidationFailedError,
)
from catalog.infrastructure.store import InMemoryProductStore, ProductStore, build_store
from catalog.orchestrator import (
    create_product,
    delete_product,
    get_product,
    list_products,
    product_stats,
    search_products,
    update_product,
)
from catalog.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "CatalogStats",
    "Product",
    "ProductCreate",
    "ProductPatch",
    # Errors
    "CatalogError",
    "InvalidQueryError",
    "NotFoundError",
    "ValidationFailedError",
    # Store
    "InMemoryProductStore",
    "ProductStore",
    "build_store",
    # Orchestration
    "list_products",
    "search_products",
    "product_stats",
    "get_product",
    "create_product",
    "update_product",
    "delete_product",
    # Logging
    "configure_logging",
    "get_logger",
]
