"""
Map catalog failures to HTTP responses.

Every error body has the shape `{"success": false, "error": {"message", "errors"?}}`.
In development the envelope also carries the request path, method and a
timestamp, plus the traceback for unexpected exceptions.
"""

from __future__ import annotations

import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.errors import CatalogError
from catalog.utils.logging import get_logger

log = get_logger(__name__)


def _is_development(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.is_development)


def error_response(
    request: Request,
    status_code: int,
    error: Dict[str, Any],
    stack: Optional[str] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": dict(error)}
    if _is_development(request):
        if stack:
            content["error"]["stack"] = stack
        content["timestamp"] = datetime.now(timezone.utc).isoformat()
        content["path"] = request.url.path
        content["method"] = request.method
    return JSONResponse(status_code=status_code, content=content)


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    log.warning(
        "Request failed",
        extra={
            "error_type": type(exc).__name__,
            "error_message": exc.message,
            "path": request.url.path,
            "method": request.method,
            "status": exc.status_code,
        },
    )
    return error_response(request, exc.status_code, exc.to_payload())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404:
        message = f"Route {request.url.path} not found"
    else:
        message = str(exc.detail)
    return error_response(request, exc.status_code, {"message": message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [str(err.get("msg", err)) for err in exc.errors()]
    return error_response(request, 400, {"message": "Validation failed", "errors": errors})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error(
        "Unhandled exception",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return error_response(request, 500, {"message": "Internal Server Error"}, stack=stack)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["error_response", "register_error_handlers"]
