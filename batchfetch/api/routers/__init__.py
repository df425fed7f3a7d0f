"""API routers."""

from .collections import router as collections_router
from .health import router as health_router

__all__ = [
    "collections_router",
    "health_router",
]
