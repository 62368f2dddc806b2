"""
Fixed-size character window chunker.

Splits text into overlapping windows of ``size`` characters, each starting
``size - overlap`` characters after the previous one. This is not a
tokenizer; windows may cut words in half and the overlap repeats text
across neighbours.

Dependencies: None
System role: First stage of ingestion and chunk rebuilds
"""

from collections.abc import Iterator

DEFAULT_CHUNK_SIZE = 800
DEFAULT_CHUNK_OVERLAP = 150


class ChunkWindows:
    """
    Lazy, restartable view of the chunks of a text.

    Every call to ``iter()`` scans the text again from the start, so the
    same instance can be iterated any number of times with identical output.
    """

    def __init__(
        self,
        text: str,
        size: int = DEFAULT_CHUNK_SIZE,
        overlap: int = DEFAULT_CHUNK_OVERLAP,
    ) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        if overlap < 0 or overlap >= size:
            raise ValueError(f"overlap must be in [0, size), got {overlap} for size {size}")
        self.text = text
        self.size = size
        self.overlap = overlap

    @property
    def step(self) -> int:
        return self.size - self.overlap

    def __iter__(self) -> Iterator[str]:
        text = self.text
        cursor = 0
        while cursor < len(text):
            yield text[cursor : cursor + self.size]
            cursor += self.step
            # The remainder already sits inside the previous window's overlap
            if len(text) - cursor <= self.overlap:
                break

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"ChunkWindows(len(text)={len(self.text)}, size={self.size}, overlap={self.overlap})"


def chunk_text(
    text: str,
    size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> ChunkWindows:
    """
    Chunk text into overlapping character windows.

    Args:
        text: Text to split
        size: Window length in characters
        overlap: Characters shared by consecutive windows

    Returns:
        ChunkWindows: Iterable of chunk strings (empty for empty text)

    Raises:
        ValueError: When size is not positive or overlap is outside [0, size)
    """
    return ChunkWindows(text, size=size, overlap=overlap)
