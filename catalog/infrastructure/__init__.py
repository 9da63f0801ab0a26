"""
Infrastructure package for the product catalog.

Centralizes state ownership (the record store and its bootstrap helpers).
Keep this layer focused on storage and concurrency, decoupled from the query
stages and the HTTP layer.
"""

from catalog.infrastructure.store import (
    InMemoryProductStore,
    ProductStore,
    build_store,
    load_products,
    sample_products,
)

__all__ = [
    "InMemoryProductStore",
    "ProductStore",
    "build_store",
    "load_products",
    "sample_products",
]
