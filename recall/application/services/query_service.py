"""
Query service orchestrator.

Answers a question from the saved corpus: loads every chunk, runs the
hybrid retrieval cascade, then answer synthesis.

Dependencies: recall.boundary.db, recall.core.retrieval, recall.core.answering
System role: Question answering use case
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from recall.boundary.db.CRUD.chunk_crud import chunk_crud
from recall.core.answering.synthesizer import NO_RELEVANT_CONTENT_ANSWER, AnswerSynthesizer
from recall.core.exceptions import ValidationError
from recall.core.retrieval.hybrid_retriever import HybridRetriever
from recall.models.retrieval import AnswerResult

logger = logging.getLogger(__name__)


class QueryService:
    """Question answering orchestrator."""

    def __init__(
        self,
        db: AsyncSession,
        retriever: HybridRetriever,
        synthesizer: AnswerSynthesizer,
    ) -> None:
        """
        Initialize query service.

        Args:
            db: AsyncSession for reading chunks
            retriever: Hybrid retrieval cascade
            synthesizer: Answer generator with keyword fallback
        """
        self.db = db
        self.retriever = retriever
        self.synthesizer = synthesizer

    async def ask(self, question: str) -> AnswerResult:
        """
        Answer a question with citations.

        Args:
            question: User question

        Returns:
            AnswerResult: Answer, or the fixed no-results answer when nothing matched

        Raises:
            ValidationError: Blank question
        """
        if not question or not question.strip():
            raise ValidationError("Question is required.", field="question")

        chunks = await chunk_crud.get_all_stored(self.db)
        outcome = await self.retriever.retrieve(question, chunks)

        if outcome.is_empty:
            logger.info(f"{__name__}:ask - No relevant content for question_len={len(question)}")
            return AnswerResult(answer=NO_RELEVANT_CONTENT_ANSWER)

        logger.info(f"{__name__}:ask - {len(outcome.results)} results from {outcome.tier.value} tier")
        return await self.synthesizer.synthesize(question, outcome.results, chunks)
