"""
FastAPI application for the product catalog.

Usage:
    catalog serve
    # or
    uvicorn catalog.api.server:create_app --factory --reload --port 3000

Routes:
    GET    /                       plain-text greeting
    GET    /health                 liveness probe
    GET    /api/products           list (category filter, sort, pagination)
    GET    /api/products/search    free-text search over name/description
    GET    /api/products/stats     catalog statistics
    GET    /api/products/{id}      single product
    POST   /api/products           create (API key required)
    PUT    /api/products/{id}      partial update (API key required)
    DELETE /api/products/{id}      delete (API key required)
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from catalog import __version__
from catalog import orchestrator
from catalog.api.dependencies import get_app_settings, get_store, json_body, require_api_key
from catalog.api.errors import register_error_handlers
from catalog.api.middleware import RequestLoggingMiddleware
from catalog.api.validation import (
    validate_create_payload,
    validate_product_id,
    validate_update_payload,
)
from catalog.config import Settings, get_settings
from catalog.infrastructure.store import ProductStore, build_store
from catalog.utils.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
def list_products(
    request: Request,
    store: ProductStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    result = orchestrator.list_products(
        store, request.query_params, default_limit=settings.default_page_size
    )
    return {"success": True, **result}


@router.get("/search")
def search_products(
    request: Request,
    store: ProductStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    result = orchestrator.search_products(
        store, request.query_params, default_limit=settings.default_page_size
    )
    return {"success": True, **result}


@router.get("/stats")
def product_stats(store: ProductStore = Depends(get_store)) -> Dict[str, Any]:
    stats = orchestrator.product_stats(store)
    return {"success": True, "data": stats.model_dump(by_alias=True)}


@router.get("/{product_id}")
def get_product(product_id: str, store: ProductStore = Depends(get_store)) -> Dict[str, Any]:
    product = orchestrator.get_product(store, validate_product_id(product_id))
    return {"success": True, "data": product.model_dump(by_alias=True)}


@router.post("", status_code=201, dependencies=[Depends(require_api_key)])
def create_product(
    body: Any = Depends(json_body),
    store: ProductStore = Depends(get_store),
) -> Dict[str, Any]:
    payload = validate_create_payload(body)
    return {"success": True, **orchestrator.create_product(store, payload)}


@router.put("/{product_id}", dependencies=[Depends(require_api_key)])
def update_product(
    product_id: str,
    body: Any = Depends(json_body),
    store: ProductStore = Depends(get_store),
) -> Dict[str, Any]:
    validate_product_id(product_id)
    patch = validate_update_payload(body)
    return {"success": True, **orchestrator.update_product(store, product_id, patch)}


@router.delete("/{product_id}", dependencies=[Depends(require_api_key)])
def delete_product(product_id: str, store: ProductStore = Depends(get_store)) -> Dict[str, Any]:
    validate_product_id(product_id)
    return {"success": True, **orchestrator.delete_product(store, product_id)}


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ProductStore] = None,
) -> FastAPI:
    """
    Build the application. Defaults come from the environment; tests pass an
    isolated store and settings.
    """
    settings = settings or get_settings()
    if store is None:
        store = build_store(settings.catalog_seed_path)

    app = FastAPI(
        title="Product Catalog API",
        description="In-memory product catalog with filtering, sorting, pagination, search and statistics",
        version=__version__,
    )
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Hello World!"

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {
            "status": "ok",
            "version": __version__,
            "environment": settings.app_env,
            "products": len(store),
        }

    app.include_router(router)

    log.info(
        "Application created",
        extra={"environment": settings.app_env, "products": len(store)},
    )
    return app


__all__ = ["create_app", "router"]
