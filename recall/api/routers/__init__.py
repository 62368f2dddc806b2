"""API routers."""

from .health import router as health_router
from .items import router as items_router
from .query import router as query_router

__all__ = [
    "health_router",
    "items_router",
    "query_router",
]
