"""
Pytest configuration for the product catalog.

Provides fixtures for:
- Isolated settings (no .env / environment leakage into assertions)
- A fresh store seeded with the sample catalog per test
- An HTTP test client bound to that store
"""

from __future__ import annotations

from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from catalog.api.server import create_app
from catalog.config import Settings
from catalog.domain.models import Product
from catalog.infrastructure.store import InMemoryProductStore, sample_products

TEST_API_KEY = "test-api-key"


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        app_env="test",
        log_level="DEBUG",
        api_key=TEST_API_KEY,
        default_page_size=10,
        catalog_seed_path=None,
    )


@pytest.fixture
def products() -> List[Product]:
    """The sample catalog: Laptop, Smartphone, Coffee Maker (ids "1".."3")."""
    return sample_products()


@pytest.fixture
def store(products: List[Product]) -> InMemoryProductStore:
    return InMemoryProductStore.from_products(products)


@pytest.fixture
def empty_store() -> InMemoryProductStore:
    return InMemoryProductStore()


@pytest.fixture
def client(test_settings: Settings, store: InMemoryProductStore) -> TestClient:
    app = create_app(settings=test_settings, store=store)
    return TestClient(app)


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def make_product():
    """Factory for products with sensible defaults for the fields a test ignores."""

    def _make(
        product_id: str,
        name: str,
        price: float,
        category: str = "misc",
        in_stock: bool = True,
        description: str = "A product used in tests",
    ) -> Product:
        return Product(
            id=product_id,
            name=name,
            description=description,
            price=price,
            category=category,
            in_stock=in_stock,
        )

    return _make
