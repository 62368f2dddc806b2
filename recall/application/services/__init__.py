"""Service orchestrators."""

from .item_service import ItemService
from .query_service import QueryService

__all__ = [
    "ItemService",
    "QueryService",
]
