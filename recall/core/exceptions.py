"""
Exception hierarchy for the Recall application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.
Provider failures form a closed set of typed variants so callers
dispatch on the exception class instead of inspecting messages.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

import enum
from typing import Any


class RecallException(Exception):
    """Base exception for all Recall application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(RecallException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class EmptyChunkSetError(ValidationError):
    """Raised when text to be saved produces no chunks."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            "No meaningful text could be extracted to save.",
            field="content",
            details=details,
        )


class ItemNotFoundError(RecallException):
    """Raised when an item cannot be found."""

    def __init__(self, item_id: int, details: dict[str, Any] | None = None) -> None:
        """
        Initialize item not found error.

        Args:
            item_id: ID of the missing item
            details: Additional context
        """
        details = details or {}
        details["item_id"] = item_id
        super().__init__(f"Item not found: {item_id}", details)


class ProviderFailure(str, enum.Enum):
    """
    Why a generative provider call did not produce an answer.

    The value is stable and safe to expose; ``user_message`` is the phrase
    embedded in degraded answers.
    """

    MOCK_MODE = "mock_mode"
    UNAVAILABLE = "unavailable"
    TIMEOUT = "timeout"
    QUOTA = "quota"
    BLOCKED = "blocked"
    GENERIC = "generic"

    @property
    def user_message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    ProviderFailure.MOCK_MODE: "Mock mode is active because no Gemini API key is configured",
    ProviderFailure.UNAVAILABLE: "Gemini API is currently unavailable",
    ProviderFailure.TIMEOUT: "Gemini API request timed out",
    ProviderFailure.QUOTA: "Gemini API quota exceeded",
    ProviderFailure.BLOCKED: "Content was blocked by Gemini safety filters",
    ProviderFailure.GENERIC: "Gemini API returned an error",
}


class ProviderError(RecallException):
    """Base exception for generative provider failures."""

    failure: ProviderFailure = ProviderFailure.GENERIC

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Error message (defaults to the failure's user message)
            details: Additional context such as model name or status code
        """
        super().__init__(message or self.failure.user_message, details)


class ProviderUnavailableError(ProviderError):
    """Raised in mock mode or when the provider cannot be reached."""

    failure = ProviderFailure.UNAVAILABLE


class ProviderMockModeError(ProviderUnavailableError):
    """Raised instead of calling the provider when no credentials are configured."""

    failure = ProviderFailure.MOCK_MODE


class ProviderTimeoutError(ProviderError):
    """Raised when generation exceeds its time budget."""

    failure = ProviderFailure.TIMEOUT


class ProviderQuotaExceededError(ProviderError):
    """Raised when the provider signals rate limiting or quota exhaustion."""

    failure = ProviderFailure.QUOTA


class ProviderSafetyBlockedError(ProviderError):
    """Raised when the provider's safety filters withhold the answer."""

    failure = ProviderFailure.BLOCKED


class ProviderGenericError(ProviderError):
    """Raised for any other provider error."""

    failure = ProviderFailure.GENERIC
