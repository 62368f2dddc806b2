"""
Rebuild chunks for every saved item.

Re-chunks and re-embeds all items, e.g. after changing chunk parameters or
the embedding model. Each item's old chunks are swapped for the new ones in
one transaction; an item that fails is logged and skipped.

Usage:
    python -m recall.scripts.rebuild_chunks [--size 800] [--overlap 150]

Dependencies: recall.application.services, recall.boundary
System role: Chunk maintenance CLI
"""

import argparse
import asyncio
import logging
import sys

from recall.application.services import ItemService
from recall.boundary.db import create_tables, get_async_engine, get_async_session_factory
from recall.boundary.provider import EmbeddingClient, resolve_provider_config
from recall.configs import get_settings
from recall.models.item import RebuildSummary
from recall.observability import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Re-chunk and re-embed every saved item")
    parser.add_argument(
        "--size",
        type=int,
        default=settings.chunking.size,
        help="Chunk size in characters",
    )
    parser.add_argument(
        "--overlap",
        type=int,
        default=settings.chunking.overlap,
        help="Overlap between consecutive chunks in characters",
    )
    return parser.parse_args(argv)


async def rebuild(size: int, overlap: int) -> RebuildSummary:
    """
    Rebuild chunks for all items.

    Args:
        size: Chunk size in characters
        overlap: Chunk overlap in characters

    Returns:
        RebuildSummary: Processing counts
    """
    settings = get_settings()
    await create_tables()
    config = await resolve_provider_config(settings.provider)
    embedding_client = EmbeddingClient(config)

    SessionFactory = get_async_session_factory()
    try:
        async with SessionFactory() as session:
            service = ItemService(session, embedding_client, settings.chunking)
            return await service.rebuild_all_chunks(size=size, overlap=overlap)
    finally:
        await get_async_engine().dispose()


def main(argv: list[str] | None = None) -> int:
    """Entry point; returns the process exit code."""
    args = parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.overlap >= args.size:
        logger.error(f"{__name__}:main - overlap ({args.overlap}) must be smaller than size ({args.size})")
        return 2

    logger.info(f"{__name__}:main - Rebuilding chunks with size={args.size}, overlap={args.overlap}")
    summary = asyncio.run(rebuild(args.size, args.overlap))

    print("Rebuild complete!")
    print(f"   Items processed: {summary.items_processed}/{summary.items_total}")
    print(f"   Total chunks created: {summary.chunks_created}")
    if summary.failed_item_ids:
        print(f"   Failed items: {', '.join(str(i) for i in summary.failed_item_ids)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
