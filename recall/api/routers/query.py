"""
Query API endpoint.

Routes:
- POST /query - Answer a question from saved items with citations

Dependencies: recall.application.services.query_service, recall.models.query
System role: Question answering HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from recall.api.deps import get_query_service
from recall.api.errors import response_for_exception
from recall.application.services.query_service import QueryService
from recall.models.query import QueryRequest, QueryResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["query"])


@router.post("/query", response_model=QueryResponse, response_model_exclude_none=True)
async def query(
    request: QueryRequest,
    query_service: QueryService = Depends(get_query_service),
):
    """
    Answer a question from the saved notes.

    Provider failures never surface here: they come back as degraded answers
    flagged with isMock.

    Args:
        request: QueryRequest with the question
        query_service: Injected QueryService

    Returns:
        QueryResponse: answer, sources, and isMock/lowConfidence when set

    Raises:
        400: Blank question
        500: Unexpected failure outside answer synthesis
    """
    try:
        result = await query_service.ask(request.question)
    except Exception as e:
        return response_for_exception(e, "Failed to process query")
    return QueryResponse.from_answer(result)
