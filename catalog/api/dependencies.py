"""
FastAPI dependencies: shared state lookup, API-key authentication and JSON
body decoding.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from fastapi import Depends, Request

from catalog.config import Settings
from catalog.errors import AuthenticationError, BadRequestError
from catalog.infrastructure.store import ProductStore

BEARER_PREFIX = "Bearer "


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def _extract_api_key(request: Request) -> Optional[str]:
    raw = request.headers.get("x-api-key") or request.headers.get("authorization")
    if not raw:
        return None
    return raw.replace(BEARER_PREFIX, "", 1)


def require_api_key(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> str:
    """
    Accept the key from `x-api-key` or `Authorization` (optionally `Bearer `-prefixed).
    """
    api_key = _extract_api_key(request)
    if api_key is None:
        raise AuthenticationError(
            "API key is required. Please provide x-api-key header or Authorization header"
        )
    if api_key != settings.api_key:
        raise AuthenticationError("Invalid API key")
    return api_key


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


async def json_body(request: Request) -> Any:
    """Decode the request body as strict JSON (no NaN or Infinity literals)."""
    raw = await request.body()
    if not raw:
        raise BadRequestError("Request body is required")
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        raise BadRequestError("Malformed JSON in request body") from None


__all__ = ["get_app_settings", "get_store", "require_api_key", "json_body"]
