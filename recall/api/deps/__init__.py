"""API-specific dependencies."""

from .dependencies import (
    get_generation_client,
    get_item_service,
    get_query_service,
    get_service_cache,
)

__all__ = [
    "get_generation_client",
    "get_item_service",
    "get_query_service",
    "get_service_cache",
]
