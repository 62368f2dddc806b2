"""
Health check schemas.

Dependencies: pydantic
System role: Health API contracts
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class ProviderConnectionStatus(BaseModel):
    """Result of a live connectivity probe against the language model."""

    connected: bool
    status: str = Field(description="'healthy', 'mock_mode' or 'error'")
    message: str
    model: str | None = None
    test_response: str | None = None
    error: str | None = Field(default=None, description="Failure kind when the probe failed")
