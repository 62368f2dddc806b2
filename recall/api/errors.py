"""
API error responses.

Errors are returned as ``{"error": "..."}`` bodies.

Dependencies: fastapi
System role: Mapping of application exceptions to HTTP responses
"""

import logging

from fastapi.responses import JSONResponse

from recall.core.exceptions import ItemNotFoundError, RecallException, ValidationError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error body with the given status."""
    return JSONResponse(status_code=status_code, content={"error": message})


def response_for_exception(exc: Exception, fallback_message: str) -> JSONResponse:
    """
    Map an exception raised by a service to an error response.

    Args:
        exc: Exception raised while handling the request
        fallback_message: Message used for unexpected errors (HTTP 500)

    Returns:
        JSONResponse: 400 for invalid input, 404 for missing items, 500 otherwise
    """
    if isinstance(exc, ValidationError):
        return error_response(400, exc.message)
    if isinstance(exc, ItemNotFoundError):
        return error_response(404, "Item not found")
    if isinstance(exc, RecallException):
        logger.error(f"{__name__}:response_for_exception - {exc}")
    else:
        logger.exception(f"{__name__}:response_for_exception - {type(exc).__name__}: {exc}")
    return error_response(500, fallback_message)
