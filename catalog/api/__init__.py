"""
HTTP layer for the product catalog: FastAPI app factory, request validation,
authentication and error mapping.
"""

from catalog.api.server import create_app

__all__ = ["create_app"]
