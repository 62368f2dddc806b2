"""ORM models."""

from recall.boundary.db.models.chunk_model import ChunkModel
from recall.boundary.db.models.item_model import ItemModel, ItemType

__all__ = ["ChunkModel", "ItemModel", "ItemType"]
