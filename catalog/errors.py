"""
Typed failure outcomes raised by the catalog core.

Each kind carries the HTTP status the API layer maps it to, but the core never
builds responses itself: it raises, and the boundary renders.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """Base class for every failure the catalog signals to its caller."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        return {"message": self.message}


class NotFoundError(CatalogError):
    status_code = 404
    default_message = "Resource not found"


class InvalidQueryError(CatalogError):
    """Query parameters that cannot produce a result (blank search, bad page)."""

    status_code = 400
    default_message = "Invalid query"


class ValidationFailedError(CatalogError):
    """Payload rejected by validation; `errors` lists one message per problem."""

    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors: List[str] = list(errors or [])

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        if self.errors:
            payload["errors"] = self.errors
        return payload


class BadRequestError(CatalogError):
    status_code = 400
    default_message = "Bad request"


class AuthenticationError(CatalogError):
    status_code = 401
    default_message = "Authentication failed"


class ConflictError(CatalogError):
    status_code = 409
    default_message = "Resource conflict"


__all__ = [
    "CatalogError",
    "NotFoundError",
    "InvalidQueryError",
    "ValidationFailedError",
    "BadRequestError",
    "AuthenticationError",
    "ConflictError",
]
