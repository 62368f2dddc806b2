"""
Answer synthesis with keyword fallback.

Asks the language model to answer from retrieved chunks under a timeout.
When the model cannot answer (mock mode, timeout, quota, safety filter or
any other provider error) the question is answered deterministically from a
fresh keyword-only search instead, and the answer is flagged as degraded.

Dependencies: recall.boundary.provider, recall.core.retrieval, recall.core.answering.prompt
System role: Answer generation orchestration
"""

import asyncio
import logging
from collections.abc import Sequence

from recall.boundary.provider.generation_client import GenerationClient
from recall.core.answering.prompt import build_answer_messages
from recall.core.exceptions import ProviderError, ProviderTimeoutError
from recall.core.retrieval.keyword_scorer import KeywordScorer
from recall.models.retrieval import (
    AnswerResult,
    RetrievalResult,
    RetrievalTier,
    SourceCitation,
    StoredChunk,
)

logger = logging.getLogger(__name__)

NO_RELEVANT_CONTENT_ANSWER = (
    "I couldn't find any relevant information in your saved notes. "
    "Try adding some content first!"
)

FALLBACK_ANSWER_TEMPLATE = (
    "I found these specific matches for your question in your notes. "
    "(Note: {reason}, so I am using precise keyword search)."
)

FALLBACK_TOP_K = 3


def _citations(results: Sequence[RetrievalResult]) -> list[SourceCitation]:
    return [
        SourceCitation(content=r.content, source=r.source, item_id=r.item_id)
        for r in results
    ]


class AnswerSynthesizer:
    """Grounded answer generation with degraded keyword mode."""

    def __init__(
        self,
        generation_client: GenerationClient,
        timeout: float = 30.0,
        keyword_scorer: KeywordScorer | None = None,
        fallback_top_k: int = FALLBACK_TOP_K,
    ) -> None:
        """
        Initialize synthesizer.

        Args:
            generation_client: Client for the language model
            timeout: Seconds to wait for the model before falling back
            keyword_scorer: Scorer for the degraded path (created if None)
            fallback_top_k: Citations returned on the degraded path
        """
        self._generation_client = generation_client
        self._timeout = timeout
        self._keyword_scorer = keyword_scorer or KeywordScorer()
        self._fallback_top_k = fallback_top_k

    async def synthesize(
        self,
        question: str,
        results: Sequence[RetrievalResult],
        chunks: Sequence[StoredChunk],
    ) -> AnswerResult:
        """
        Answer a question from retrieved chunks.

        Args:
            question: User question
            results: Non-empty retrieval results, in citation order
            chunks: All persisted chunks, searched by keyword if the model fails

        Returns:
            AnswerResult: Generated answer, or a degraded keyword answer
        """
        messages = build_answer_messages(question, results)

        try:
            answer = await asyncio.wait_for(
                self._generation_client.generate(messages),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError:
            return self._fallback(question, chunks, ProviderTimeoutError())
        except ProviderError as e:
            return self._fallback(question, chunks, e)

        logger.info(f"{__name__}:synthesize - Gemini API query successful")
        return AnswerResult(
            answer=answer,
            citations=_citations(results),
            low_confidence=any(r.tier is RetrievalTier.RELAXED for r in results),
        )

    def _fallback(
        self,
        question: str,
        chunks: Sequence[StoredChunk],
        error: ProviderError,
    ) -> AnswerResult:
        """Answer from a keyword-only search after a provider failure."""
        logger.error(
            f"{__name__}:_fallback - Gemini API error during query: "
            f"failure={error.failure.value}, error={error}"
        )
        matches = self._keyword_scorer.search(question, chunks, top_k=self._fallback_top_k)
        return AnswerResult(
            answer=FALLBACK_ANSWER_TEMPLATE.format(reason=error.failure.user_message),
            citations=_citations(matches),
            is_mock=True,
            failure=error.failure,
        )
