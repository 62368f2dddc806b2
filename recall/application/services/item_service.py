"""
Item service orchestrator.

Coordinates ingestion, listing, editing, deletion and chunk rebuilds of
saved items.

Chunk regeneration runs in two steps: text is chunked and embedded first
(slow provider calls, no transaction open), then the item update, the
deletion of its old chunks and the insertion of the new ones are committed
together. Readers therefore never observe an item without chunks.

Dependencies: recall.boundary.db, recall.boundary.provider, recall.core.chunking
System role: Item management use cases
"""

import logging
from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from recall.boundary.db.CRUD.chunk_crud import chunk_crud
from recall.boundary.db.CRUD.item_crud import item_crud
from recall.boundary.db.models.item_model import ItemModel, ItemType
from recall.boundary.provider.embedding_client import EmbeddingClient
from recall.configs.retrieval import ChunkingSettings
from recall.core.chunking import chunk_text
from recall.core.exceptions import EmptyChunkSetError, ItemNotFoundError, ValidationError
from recall.models.item import IngestResponse, ItemResponse, RebuildSummary

logger = logging.getLogger(__name__)

NOTE_TITLE = "Text Note"
NOTE_SOURCE = "Manual Input"


class PreparedChunks:
    """Chunk texts with their embeddings, computed before any write."""

    def __init__(self, contents: list[str], embeddings: list[list[float] | None]) -> None:
        self.contents = contents
        self.embeddings = embeddings

    def __len__(self) -> int:
        return len(self.contents)


class ItemService:
    """Item management orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        embedding_client: EmbeddingClient,
        chunking: ChunkingSettings | None = None,
    ) -> None:
        """
        Initialize item service.

        Args:
            db: AsyncSession for item and chunk persistence
            embedding_client: Client used to embed new chunks
            chunking: Chunk size and overlap (defaults if None)
        """
        self.db = db
        self._embedding_client = embedding_client
        self._chunking = chunking or ChunkingSettings()

    async def prepare_chunks(
        self,
        content: str,
        size: int | None = None,
        overlap: int | None = None,
    ) -> PreparedChunks:
        """
        Chunk and embed text without touching the database.

        Args:
            content: Full item text
            size: Chunk size override
            overlap: Chunk overlap override

        Returns:
            PreparedChunks: Chunks in text order with vectors (None where unavailable)

        Raises:
            EmptyChunkSetError: When the text yields no meaningful chunks
        """
        contents = list(chunk_text(
            content,
            size=self._chunking.size if size is None else size,
            overlap=self._chunking.overlap if overlap is None else overlap,
        ))
        if not contents or not content.strip():
            raise EmptyChunkSetError(details={"content_length": len(content)})

        embeddings = await self._embedding_client.embed_many(contents)
        missing = sum(1 for e in embeddings if e is None)
        if missing:
            logger.info(f"{__name__}:prepare_chunks - {missing}/{len(contents)} chunks stored without embedding")
        return PreparedChunks(contents, embeddings)

    async def ingest(
        self,
        kind: ItemType | str | None,
        content: str | None,
        title: str | None = None,
        source: str | None = None,
    ) -> IngestResponse:
        """
        Save a note or an extracted web page.

        Args:
            kind: NOTE or URL (enum or its string value)
            content: Note text or extracted page text
            title: Page title for url items (notes use a fixed title unless given)
            source: Page URL for url items

        Returns:
            IngestResponse: New item ID and chunk count

        Raises:
            ValidationError: Missing or unknown kind, missing content, or url item without a source
            EmptyChunkSetError: Content yields no chunks
        """
        if not kind or not content:
            raise ValidationError("Type (note|url) and content are required.")
        try:
            kind = ItemType(kind)
        except ValueError:
            raise ValidationError("Type (note|url) and content are required.", field="type") from None

        if kind is ItemType.NOTE:
            title = title or NOTE_TITLE
            source = NOTE_SOURCE
        else:
            if not source:
                raise ValidationError("A source URL is required for url items.", field="source")
            title = title or source

        prepared = await self.prepare_chunks(content)

        try:
            item = await item_crud.create(
                self.db,
                type=kind,
                content=content,
                title=title,
                source=source,
            )
            await chunk_crud.create_many(
                self.db,
                item.id,
                prepared.contents,
                prepared.embeddings,
                self._embedding_client.model_name,
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"{__name__}:ingest - Saved item {item.id} with {len(prepared)} chunks")
        return IngestResponse(
            message="Content ingested successfully",
            item_id=item.id,
            chunks_created=len(prepared),
        )

    async def list_items(self) -> list[ItemResponse]:
        """
        List all items, newest first.

        Returns:
            list[ItemResponse]: Saved items
        """
        items = await item_crud.get_all_newest_first(self.db)
        return [ItemResponse.model_validate(item) for item in items]

    async def update_item(
        self,
        item_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> None:
        """
        Update an item's title and/or content.

        New content replaces all of the item's chunks.

        Args:
            item_id: Item ID
            title: New title (unchanged if None)
            content: New content (unchanged if None)

        Raises:
            ItemNotFoundError: Item does not exist
            EmptyChunkSetError: New content yields no chunks
        """
        item = await self._get_item(item_id)

        prepared = None
        if content is not None:
            # End the read transaction before the slow embedding calls
            await self.db.commit()
            prepared = await self.prepare_chunks(content)

        try:
            if title is not None:
                item.title = title
            if prepared is not None:
                item.content = content
                await self._replace_chunks(item.id, prepared)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def delete_item(self, item_id: int) -> None:
        """
        Delete an item and its chunks.

        Args:
            item_id: Item ID

        Raises:
            ItemNotFoundError: Item does not exist
        """
        try:
            await chunk_crud.delete_by_item_id(self.db, item_id)
            deleted = await item_crud.delete_by_id(self.db, item_id)
            if not deleted:
                raise ItemNotFoundError(item_id)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def rebuild_all_chunks(
        self,
        size: int | None = None,
        overlap: int | None = None,
    ) -> RebuildSummary:
        """
        Re-chunk and re-embed every item.

        Used after changing chunk parameters or the embedding model. A failure
        on one item is logged and the rebuild continues with the next.

        Args:
            size: Chunk size override
            overlap: Chunk overlap override

        Returns:
            RebuildSummary: Counts of processed items and created chunks
        """
        items: Sequence[ItemModel] = await item_crud.get_all(self.db)
        # Plain values: a rollback expires every loaded instance
        snapshot = [(item.id, item.title, item.content) for item in items]
        await self.db.commit()
        summary = RebuildSummary(items_total=len(snapshot))
        logger.info(f"{__name__}:rebuild_all_chunks - Found {len(snapshot)} items to process")

        for item_id, title, content in snapshot:
            try:
                prepared = await self.prepare_chunks(content, size=size, overlap=overlap)
                deleted = await self._replace_chunks(item_id, prepared)
                await self.db.commit()
            except Exception as e:
                await self.db.rollback()
                logger.error(
                    f"{__name__}:rebuild_all_chunks - Error processing item {item_id}: "
                    f"{type(e).__name__}: {e}"
                )
                summary.failed_item_ids.append(item_id)
                continue

            logger.info(
                f"{__name__}:rebuild_all_chunks - Item {item_id} ({title or 'Untitled'}): "
                f"deleted {deleted} old chunks, created {len(prepared)}"
            )
            summary.items_processed += 1
            summary.chunks_created += len(prepared)

        return summary

    async def _get_item(self, item_id: int) -> ItemModel:
        item = await item_crud.get_by_id(self.db, item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return item

    async def _replace_chunks(self, item_id: int, prepared: PreparedChunks) -> int:
        """Swap an item's chunks inside the caller's transaction; returns the old chunk count."""
        deleted = await chunk_crud.delete_by_item_id(self.db, item_id)
        await chunk_crud.create_many(
            self.db,
            item_id,
            prepared.contents,
            prepared.embeddings,
            self._embedding_client.model_name,
        )
        return deleted
