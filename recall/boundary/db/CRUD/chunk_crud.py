"""
Chunk CRUD operations.

Provides the read model used by retrieval and the bulk writes used by
ingestion and chunk regeneration.

Dependencies: sqlalchemy, recall.boundary.db.models, recall.models.retrieval
System role: Chunk persistence operations
"""

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from recall.boundary.db.CRUD.base_crud import BaseCRUD
from recall.boundary.db.models.chunk_model import ChunkModel
from recall.boundary.db.models.item_model import ItemModel
from recall.models.retrieval import StoredChunk


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """
    CRUD operations for ChunkModel.

    Extends BaseCRUD with per-item bulk operations and a joined read of
    every chunk with its item's citation fields.
    """

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    async def get_all_stored(self, session: AsyncSession) -> list[StoredChunk]:
        """
        Retrieve every chunk with its item title and source in one query.

        Args:
            session: Async database session

        Returns:
            list[StoredChunk]: Chunks ordered by item, then position
        """
        stmt = (
            select(ChunkModel, ItemModel.title, ItemModel.source)
            .join(ItemModel, ChunkModel.item_id == ItemModel.id)
            .order_by(ChunkModel.item_id, ChunkModel.position)
        )
        result = await session.execute(stmt)
        return [
            StoredChunk(
                id=chunk.id,
                item_id=chunk.item_id,
                content=chunk.content,
                embedding=chunk.embedding,
                embedding_model=chunk.embedding_model,
                item_title=title,
                item_source=source,
            )
            for chunk, title, source in result.all()
        ]

    async def get_by_item_id(self, session: AsyncSession, item_id: int) -> Sequence[ChunkModel]:
        """
        Retrieve an item's chunks in text order.

        Args:
            session: Async database session
            item_id: Owning item ID

        Returns:
            Sequence of ChunkModels
        """
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.item_id == item_id)
            .order_by(ChunkModel.position)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def create_many(
        self,
        session: AsyncSession,
        item_id: int,
        contents: Sequence[str],
        embeddings: Sequence[list[float] | None],
        embedding_model: str,
    ) -> int:
        """
        Insert an item's chunks in order.

        Args:
            session: Async database session
            item_id: Owning item ID
            contents: Chunk texts in text order
            embeddings: Vector per chunk, None where unavailable
            embedding_model: Model tag recorded with each non-null vector

        Returns:
            int: Number of chunks inserted
        """
        session.add_all([
            ChunkModel(
                item_id=item_id,
                position=position,
                content=content,
                embedding=embedding,
                embedding_model=embedding_model if embedding is not None else None,
            )
            for position, (content, embedding) in enumerate(zip(contents, embeddings))
        ])
        await session.flush()
        return len(contents)

    async def delete_by_item_id(self, session: AsyncSession, item_id: int) -> int:
        """
        Delete all chunks of an item.

        Args:
            session: Async database session
            item_id: Owning item ID

        Returns:
            int: Number of chunks deleted
        """
        stmt = delete(ChunkModel).where(ChunkModel.item_id == item_id)
        result = await session.execute(stmt)
        return result.rowcount


chunk_crud = ChunkCRUD()
