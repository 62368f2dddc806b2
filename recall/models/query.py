"""
Query domain models and schemas.

Request/response schemas for question answering.

Dependencies: pydantic
System role: Query API contracts
"""

from pydantic import BaseModel, Field

from recall.models.retrieval import AnswerResult


class QueryRequest(BaseModel):
    """Request schema for a question."""

    question: str = Field(default="", description="Natural-language question")


class SourceResponse(BaseModel):
    """Citation entry in a query response."""

    content: str
    source: str
    item_id: int


class QueryResponse(BaseModel):
    """
    Response schema for a question.

    ``isMock`` and ``lowConfidence`` are only emitted when true.
    """

    answer: str
    sources: list[SourceResponse]
    isMock: bool | None = None
    lowConfidence: bool | None = None

    @classmethod
    def from_answer(cls, result: AnswerResult) -> "QueryResponse":
        return cls(
            answer=result.answer,
            sources=[SourceResponse(**c.model_dump()) for c in result.citations],
            isMock=True if result.is_mock else None,
            lowConfidence=True if result.low_confidence else None,
        )
