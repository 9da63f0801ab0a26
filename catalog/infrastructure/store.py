"""
Record store for the product catalog.

The store is the single owner of catalog state. Writes are serialized behind
one lock and publish a fresh immutable snapshot; readers never take the lock
and always see a consistent tuple of products in insertion order.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Tuple, runtime_checkable

from pydantic import TypeAdapter

from catalog.domain.models import Product, ProductPatch, merge_product
from catalog.errors import ConflictError
from catalog.utils.logging import get_logger

log = get_logger(__name__)

_PRODUCT_LIST = TypeAdapter(List[Product])

SAMPLE_PRODUCTS: List[dict] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


@runtime_checkable
class ProductStore(Protocol):
    """
    Interface the orchestrator uses for all catalog reads and writes.

    `update` and `delete` return None when the id is unknown; turning that into
    a failure is the caller's decision.
    """

    def get(self, product_id: str) -> Optional[Product]: ...

    def list(self) -> Tuple[Product, ...]: ...

    def insert(self, product: Product) -> Product: ...

    def update(self, product_id: str, patch: ProductPatch) -> Optional[Product]: ...

    def delete(self, product_id: str) -> Optional[Product]: ...

    def __len__(self) -> int: ...


class InMemoryProductStore:
    """
    Insertion-ordered, process-local product store.

    Backed by a dict keyed on id: replacing a value keeps its position, so
    updates never reorder the catalog and only deletion removes an entry.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._lock = threading.Lock()
        self._items: Dict[str, Product] = {}
        for product in products:
            if product.id in self._items:
                raise ConflictError(f"Duplicate product id '{product.id}'")
            self._items[product.id] = product
        self._snapshot: Tuple[Product, ...] = tuple(self._items.values())

    @classmethod
    def from_products(cls, products: Iterable[Product]) -> "InMemoryProductStore":
        return cls(products)

    def _publish(self, items: Dict[str, Product]) -> None:
        # Called with the lock held.
        self._items = items
        self._snapshot = tuple(items.values())

    def get(self, product_id: str) -> Optional[Product]:
        return self._items.get(product_id)

    def list(self) -> Tuple[Product, ...]:
        return self._snapshot

    def insert(self, product: Product) -> Product:
        with self._lock:
            if product.id in self._items:
                raise ConflictError(f"Product with id '{product.id}' already exists")
            items = dict(self._items)
            items[product.id] = product
            self._publish(items)
        log.debug("Product inserted", extra={"product_id": product.id, "size": len(items)})
        return product

    def update(self, product_id: str, patch: ProductPatch) -> Optional[Product]:
        with self._lock:
            existing = self._items.get(product_id)
            if existing is None:
                return None
            updated = merge_product(existing, patch)
            items = dict(self._items)
            items[product_id] = updated
            self._publish(items)
        log.debug("Product updated", extra={"product_id": product_id})
        return updated

    def delete(self, product_id: str) -> Optional[Product]:
        with self._lock:
            if product_id not in self._items:
                return None
            items = dict(self._items)
            removed = items.pop(product_id)
            self._publish(items)
        log.debug("Product deleted", extra={"product_id": product_id, "size": len(items)})
        return removed

    def __len__(self) -> int:
        return len(self._snapshot)


def sample_products() -> List[Product]:
    """The three-item demo catalog the service starts with by default."""
    return _PRODUCT_LIST.validate_python(SAMPLE_PRODUCTS)


def load_products(path: Path | str) -> List[Product]:
    """
    Read a JSON array of product objects (camelCase or snake_case keys).

    Records are held to the same field rules as API payloads; a bad record
    raises `pydantic.ValidationError` and nothing is loaded.
    """
    source = Path(path)
    with source.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    products = _PRODUCT_LIST.validate_python(raw)
    log.info("Catalog loaded from file", extra={"path": str(source), "products": len(products)})
    return products


def build_store(seed_path: Optional[Path | str] = None) -> InMemoryProductStore:
    """
    Create a store seeded from `seed_path` when given, else from the sample catalog.
    """
    products = load_products(seed_path) if seed_path else sample_products()
    return InMemoryProductStore.from_products(products)


__all__ = [
    "ProductStore",
    "InMemoryProductStore",
    "SAMPLE_PRODUCTS",
    "sample_products",
    "load_products",
    "build_store",
]
