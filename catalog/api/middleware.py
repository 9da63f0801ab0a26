"""
Request logging middleware.

Logs every request on arrival and again on completion with its status code
and elapsed milliseconds.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from catalog.utils.logging import get_logger

log = get_logger("catalog.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        timestamp = datetime.now(timezone.utc).isoformat()
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        log.info("[%s] %s %s", timestamp, request.method, target)
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 1)
        log.info(
            "[%s] %s %s - %d (%.1fms)",
            timestamp,
            request.method,
            target,
            response.status_code,
            duration_ms,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        return response


__all__ = ["RequestLoggingMiddleware"]
