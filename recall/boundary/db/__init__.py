"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIdMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(), create_tables()
  - ItemModel, ChunkModel, ItemType
  - item_crud, chunk_crud: CRUD operation singletons

Dependencies: sqlalchemy, recall.configs
System role: Persistent storage for items and their chunks
"""

from recall.boundary.db.base import Base, IntegerIdMixin, TimestampMixin
from recall.boundary.db.connection import (
    create_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from recall.boundary.db.models import ChunkModel, ItemModel, ItemType
from recall.boundary.db.CRUD import (
    BaseCRUD,
    ChunkCRUD,
    ItemCRUD,
    chunk_crud,
    item_crud,
)

__all__ = [
    "Base",
    "IntegerIdMixin",
    "TimestampMixin",
    "create_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "ChunkModel",
    "ItemModel",
    "ItemType",
    "BaseCRUD",
    "ChunkCRUD",
    "ItemCRUD",
    "chunk_crud",
    "item_crud",
]
