"""Text chunking."""

from recall.core.chunking.chunker import ChunkWindows, chunk_text

__all__ = ["ChunkWindows", "chunk_text"]
