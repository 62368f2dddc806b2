"""
Health check API endpoints.

Routes: GET /health, GET /health/gemini

Dependencies: recall.boundary.provider
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends

from recall.api.deps import get_generation_client
from recall.boundary.provider import GenerationClient
from recall.models.health import HealthResponse, ProviderConnectionStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/gemini", response_model=ProviderConnectionStatus)
async def health_check_gemini(
    generation_client: GenerationClient = Depends(get_generation_client),
) -> ProviderConnectionStatus:
    """Live probe of the configured Gemini chat model."""
    return await generation_client.check_connection()
