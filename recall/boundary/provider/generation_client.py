"""
Gemini generation client.

Wraps the LangChain chat model and converts every provider failure into one
of the typed ``ProviderError`` variants, so callers never inspect error text.

Dependencies: langchain_core, langchain_google_genai, recall.core.exceptions
System role: Answer generation adapter
"""

import asyncio
import logging

from langchain_core.messages import BaseMessage, HumanMessage

from recall.boundary.provider import factories
from recall.boundary.provider.config import ProviderConfig
from recall.core.exceptions import (
    ProviderError,
    ProviderGenericError,
    ProviderMockModeError,
    ProviderQuotaExceededError,
    ProviderSafetyBlockedError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from recall.models.health import ProviderConnectionStatus

logger = logging.getLogger(__name__)

CONNECTION_TEST_PROMPT = "Say 'OK' if you can read this"

_QUOTA_MARKERS = ("quota", "resource_exhausted", "rate limit", "too many requests")
_SAFETY_MARKERS = ("safety", "blocked", "prohibited_content")
_UNAVAILABLE_MARKERS = ("unavailable", "connection", "failed to connect", "name resolution")


def _status_code(exc: Exception) -> int | None:
    for attr in ("code", "status_code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def classify_provider_exception(exc: Exception) -> ProviderError:
    """
    Map an SDK exception to a typed provider error.

    Args:
        exc: Exception raised by the LangChain Gemini client

    Returns:
        ProviderError: Typed variant carrying the original status and message
    """
    if isinstance(exc, ProviderError):
        return exc
    if isinstance(exc, asyncio.TimeoutError):
        return ProviderTimeoutError()

    code = _status_code(exc)
    text = str(exc).lower()
    details = {"error_type": type(exc).__name__, "status": code, "error": str(exc)[:500]}

    if code == 429 or any(marker in text for marker in _QUOTA_MARKERS):
        return ProviderQuotaExceededError(details=details)
    if any(marker in text for marker in _SAFETY_MARKERS):
        return ProviderSafetyBlockedError(details=details)
    if code in (502, 503, 504) or isinstance(exc, ConnectionError) or any(
        marker in text for marker in _UNAVAILABLE_MARKERS
    ):
        return ProviderUnavailableError(details=details)
    return ProviderGenericError(details=details)


def _response_text(content) -> str:
    """Flatten string or content-part list responses to text."""
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict):
            parts.append(part.get("text", ""))
    return "".join(parts)


class GenerationClient:
    """Gemini chat client raising only typed provider errors."""

    def __init__(self, config: ProviderConfig, chat_model=None) -> None:
        """
        Initialize generation client.

        Args:
            config: Resolved provider configuration
            chat_model: Optional LangChain chat model (built from config if None)
        """
        self._config = config
        self._chat = None
        if not config.is_mock:
            self._chat = chat_model or factories.build_chat_model(
                config.chat_model, config.api_key, config.temperature
            )

    @property
    def is_available(self) -> bool:
        """False in mock mode."""
        return self._chat is not None

    @property
    def model_name(self) -> str:
        return self._config.chat_model

    async def generate(self, messages: list[BaseMessage]) -> str:
        """
        Generate an answer.

        Args:
            messages: Prompt messages (role + text parts)

        Returns:
            str: Generated text

        Raises:
            ProviderMockModeError: No credentials configured
            ProviderSafetyBlockedError: Response withheld by safety filters
            ProviderError: Any other classified provider failure
        """
        if self._chat is None:
            raise ProviderMockModeError()

        try:
            response = await self._chat.ainvoke(messages)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise classify_provider_exception(e) from e

        finish_reason = str(response.response_metadata.get("finish_reason", "")).upper()
        text = _response_text(response.content)
        if "SAFETY" in finish_reason or (not text and "BLOCK" in finish_reason):
            raise ProviderSafetyBlockedError(details={"finish_reason": finish_reason})
        if not text:
            raise ProviderGenericError(
                "Gemini API returned an empty answer",
                details={"finish_reason": finish_reason},
            )
        return text

    async def check_connection(self) -> ProviderConnectionStatus:
        """
        Probe the configured chat model.

        Returns:
            ProviderConnectionStatus: Connectivity report for the health endpoint
        """
        if self._chat is None:
            return ProviderConnectionStatus(
                connected=False,
                status="mock_mode",
                message="Running in MOCK MODE (No valid API key)",
            )

        try:
            text = await asyncio.wait_for(
                self.generate([HumanMessage(content=CONNECTION_TEST_PROMPT)]),
                timeout=self._config.probe_timeout,
            )
        except asyncio.TimeoutError:
            error = ProviderTimeoutError("Connection test timeout")
            return ProviderConnectionStatus(
                connected=False, status="error", message=error.message, error=error.failure.value
            )
        except ProviderError as e:
            return ProviderConnectionStatus(
                connected=False, status="error", message=e.message, error=e.failure.value
            )

        return ProviderConnectionStatus(
            connected=True,
            status="healthy",
            message="Gemini API is working correctly",
            model=self.model_name,
            test_response=text,
        )
