"""
CRUD operations for database models.

Usage:
    from recall.boundary.db.CRUD import item_crud, chunk_crud

    item = await item_crud.get_by_id(db, item_id)
"""

from recall.boundary.db.CRUD.base_crud import BaseCRUD
from recall.boundary.db.CRUD.chunk_crud import ChunkCRUD, chunk_crud
from recall.boundary.db.CRUD.item_crud import ItemCRUD, item_crud

__all__ = [
    "BaseCRUD",
    "ChunkCRUD",
    "chunk_crud",
    "ItemCRUD",
    "item_crud",
]
