"""
Item ORM model.

Represents a saved note or web page whose text is chunked for retrieval.

Dependencies: sqlalchemy, recall.boundary.db.base
System role: Item persistence
"""

import enum

from sqlalchemy import Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from recall.boundary.db.base import Base, IntegerIdMixin, TimestampMixin


class ItemType(str, enum.Enum):
    """Kind of saved item."""

    NOTE = "note"
    URL = "url"


class ItemModel(Base, IntegerIdMixin, TimestampMixin):
    """
    Item ORM model.

    Attributes:
        id: Integer primary key
        type: NOTE or URL
        content: Full text
        source: Original URL, or 'Manual Input' for notes
        title: Display title used in citations
        created_at: Save timestamp (UTC)
        updated_at: Last edit timestamp (UTC)

    Relationships:
        chunks: ChunkModels in text order (cascade delete)
    """

    __tablename__ = "items"

    type: Mapped[ItemType] = mapped_column(
        Enum(ItemType, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
    source: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    title: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    chunks = relationship(
        "ChunkModel",
        back_populates="item",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ChunkModel.position",
    )
