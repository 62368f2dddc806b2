"""
Chunk ORM model.

Represents one overlapping window of an item's text with its optional
embedding vector and the model that produced it.

Dependencies: sqlalchemy, recall.boundary.db.base
System role: Chunk and vector persistence
"""

from sqlalchemy import JSON, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recall.boundary.db.base import Base, IntegerIdMixin


class ChunkModel(Base, IntegerIdMixin):
    """
    Chunk ORM model.

    A NULL embedding means the provider was unavailable when the chunk was
    written; such chunks are still searchable by keyword.

    Attributes:
        id: Integer primary key
        item_id: Owning item (ON DELETE CASCADE)
        position: 0-based order within the item
        content: Chunk text
        embedding: Vector as a JSON list of floats, or NULL
        embedding_model: Model that produced the vector, or NULL
    """

    __tablename__ = "chunks"

    item_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("items.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    embedding: Mapped[list[float] | None] = mapped_column(JSON, nullable=True)
    embedding_model: Mapped[str | None] = mapped_column(String(255), nullable=True)

    item = relationship("ItemModel", back_populates="chunks")
