"""
Hybrid retrieval orchestration.

Cascades over retrieval strategies for a single question, stopping at the
first tier that returns anything:

1. Semantic: cosine similarity of the question vector against stored chunk
   vectors, keeping scores above the strict threshold.
2. Keyword: whole-word lexical matching, used directly whenever the question
   cannot be embedded or no chunk has a comparable vector.
3. Relaxed: the semantic scores again with a lower threshold.

Dependencies: recall.boundary.provider, recall.core.retrieval, recall.configs
System role: RAG retrieval business logic
"""

import logging
from collections.abc import Sequence

from recall.boundary.provider.embedding_client import EmbeddingClient
from recall.configs.retrieval import RetrievalSettings
from recall.core.retrieval.keyword_scorer import KeywordScorer
from recall.core.retrieval.similarity import cosine_similarity
from recall.models.retrieval import (
    RetrievalOutcome,
    RetrievalResult,
    RetrievalTier,
    StoredChunk,
)

logger = logging.getLogger(__name__)


def _dedupe_and_cap(results: list[RetrievalResult], top_k: int) -> list[RetrievalResult]:
    seen: set[int] = set()
    unique = []
    for result in results:
        if result.chunk_id in seen:
            continue
        seen.add(result.chunk_id)
        unique.append(result)
    return unique[:top_k]


class HybridRetriever:
    """
    Semantic-first retriever with keyword and relaxed-threshold fallbacks.

    Scoring is a pure map over the supplied chunks followed by a sort, so the
    retriever holds no per-query state.
    """

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        settings: RetrievalSettings | None = None,
        keyword_scorer: KeywordScorer | None = None,
    ) -> None:
        """
        Initialize retriever.

        Args:
            embedding_client: Client used to embed the question
            settings: Thresholds and result caps (defaults if None)
            keyword_scorer: Lexical scorer (created if None)
        """
        self._embedding_client = embedding_client
        self._settings = settings or RetrievalSettings()
        self._keyword_scorer = keyword_scorer or KeywordScorer()

    @property
    def keyword_scorer(self) -> KeywordScorer:
        return self._keyword_scorer

    async def retrieve(
        self,
        question: str,
        chunks: Sequence[StoredChunk],
        top_k: int | None = None,
    ) -> RetrievalOutcome:
        """
        Find the chunks most relevant to a question.

        Args:
            question: User question
            chunks: Every persisted chunk with its item metadata
            top_k: Result cap (settings.top_k if None)

        Returns:
            RetrievalOutcome: Ranked, deduplicated results and the tier that produced them
        """
        top_k = top_k or self._settings.top_k

        query_embedding = await self._embedding_client.embed(question)
        if query_embedding is None:
            logger.info(f"{__name__}:retrieve - No query embedding, using keyword search")
            return self._keyword_tier(question, chunks, top_k)

        candidates = self._comparable_chunks(chunks)
        if not candidates:
            logger.info(f"{__name__}:retrieve - No embedded chunks, using keyword search")
            return self._keyword_tier(question, chunks, top_k)

        scored = [
            (chunk, cosine_similarity(query_embedding, chunk.embedding))
            for chunk in candidates
        ]

        semantic = self._above_threshold(
            scored, self._settings.semantic_threshold, top_k, RetrievalTier.SEMANTIC
        )
        logger.info(
            f"{__name__}:retrieve - Semantic search: {len(semantic)} results with "
            f"score > {self._settings.semantic_threshold}"
        )
        if semantic:
            logger.debug(f"{__name__}:retrieve - Top score: {semantic[0].score:.3f}")
            return RetrievalOutcome(results=semantic, tier=RetrievalTier.SEMANTIC)

        keyword = self._keyword_tier(question, chunks, top_k)
        if not keyword.is_empty:
            logger.info(f"{__name__}:retrieve - Keyword search found {len(keyword.results)} results")
            return keyword

        relaxed = self._above_threshold(
            scored, self._settings.relaxed_threshold, top_k, RetrievalTier.RELAXED
        )
        logger.info(
            f"{__name__}:retrieve - Relaxed threshold ({self._settings.relaxed_threshold}): "
            f"{len(relaxed)} results"
        )
        return RetrievalOutcome(
            results=relaxed,
            tier=RetrievalTier.RELAXED if relaxed else None,
        )

    def _keyword_tier(
        self,
        question: str,
        chunks: Sequence[StoredChunk],
        top_k: int,
    ) -> RetrievalOutcome:
        results = _dedupe_and_cap(self._keyword_scorer.search(question, chunks, top_k=top_k), top_k)
        return RetrievalOutcome(
            results=results,
            tier=RetrievalTier.KEYWORD if results else None,
        )

    def _comparable_chunks(self, chunks: Sequence[StoredChunk]) -> list[StoredChunk]:
        """Chunks with a vector from the current embedding model (untagged vectors are kept)."""
        model_name = self._embedding_client.model_name
        comparable = []
        mismatched = 0
        for chunk in chunks:
            if not chunk.embedding:
                continue
            if chunk.embedding_model and chunk.embedding_model != model_name:
                mismatched += 1
                continue
            comparable.append(chunk)
        if mismatched:
            logger.warning(
                f"{__name__}:_comparable_chunks - Skipped {mismatched} chunks embedded "
                f"with a model other than {model_name}; rebuild chunks to re-embed them"
            )
        return comparable

    @staticmethod
    def _above_threshold(
        scored: list[tuple[StoredChunk, float]],
        threshold: float,
        top_k: int,
        tier: RetrievalTier,
    ) -> list[RetrievalResult]:
        results = [
            RetrievalResult.from_chunk(chunk, score, tier)
            for chunk, score in scored
            if score > threshold
        ]
        results.sort(key=lambda r: r.score, reverse=True)
        return _dedupe_and_cap(results, top_k)
