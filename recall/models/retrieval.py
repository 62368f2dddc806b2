"""
Retrieval domain models.

Read model of persisted chunks handed to the core, plus the ephemeral
results produced by retrieval and answer synthesis.

Dependencies: pydantic
System role: Retrieval and answer data structures
"""

import enum

from pydantic import BaseModel, Field

from recall.core.exceptions import ProviderFailure

UNTITLED_SOURCE = "Note"


class RetrievalTier(str, enum.Enum):
    """Cascade step that produced a result."""

    SEMANTIC = "semantic"
    KEYWORD = "keyword"
    RELAXED = "relaxed"


class StoredChunk(BaseModel):
    """Persisted chunk joined with the citation fields of its item."""

    id: int = Field(description="Chunk identifier")
    item_id: int = Field(description="Owning item identifier")
    content: str = Field(description="Chunk text")
    embedding: list[float] | None = Field(default=None, description="Embedding vector, if one was produced")
    embedding_model: str | None = Field(default=None, description="Model that produced the vector")
    item_title: str | None = Field(default=None, description="Owning item title")
    item_source: str | None = Field(default=None, description="Owning item source URL or label")

    @property
    def display_source(self) -> str:
        """Item title, else item source, else a fixed placeholder."""
        return self.item_title or self.item_source or UNTITLED_SOURCE


class RetrievalResult(BaseModel):
    """Chunk selected for a question, with its score."""

    chunk_id: int
    item_id: int
    content: str
    source: str = Field(description="Display label used in prompts and citations")
    score: float
    tier: RetrievalTier

    @classmethod
    def from_chunk(cls, chunk: StoredChunk, score: float, tier: RetrievalTier) -> "RetrievalResult":
        return cls(
            chunk_id=chunk.id,
            item_id=chunk.item_id,
            content=chunk.content,
            source=chunk.display_source,
            score=score,
            tier=tier,
        )


class RetrievalOutcome(BaseModel):
    """Results of one pass through the retrieval cascade."""

    results: list[RetrievalResult] = Field(default_factory=list)
    tier: RetrievalTier | None = Field(default=None, description="Tier that produced the results")

    @property
    def is_empty(self) -> bool:
        return not self.results


class SourceCitation(BaseModel):
    """Excerpt backing an answer."""

    content: str
    source: str
    item_id: int


class AnswerResult(BaseModel):
    """Answer to a question with its citations."""

    answer: str
    citations: list[SourceCitation] = Field(default_factory=list)
    is_mock: bool = Field(default=False, description="Answer was produced without the language model")
    failure: ProviderFailure | None = Field(default=None, description="Why the language model was bypassed")
    low_confidence: bool = Field(default=False, description="Grounded only on relaxed-threshold matches")
