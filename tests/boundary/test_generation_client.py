"""
Test suite for GenerationClient and provider error classification.

System role: Verification of typed provider failures
"""

import asyncio
from unittest.mock import AsyncMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from recall.boundary.provider.generation_client import GenerationClient, classify_provider_exception
from recall.core.exceptions import (
    ProviderFailure,
    ProviderGenericError,
    ProviderMockModeError,
    ProviderQuotaExceededError,
    ProviderSafetyBlockedError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)


class _StatusError(Exception):
    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


class TestClassifyProviderException:
    """SDK exception to typed error mapping."""

    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (_StatusError("Too many requests", 429), ProviderQuotaExceededError),
            (RuntimeError("429 RESOURCE_EXHAUSTED: quota exceeded"), ProviderQuotaExceededError),
            (RuntimeError("Response blocked by safety settings"), ProviderSafetyBlockedError),
            (_StatusError("Service Unavailable", 503), ProviderUnavailableError),
            (ConnectionError("reset by peer"), ProviderUnavailableError),
            (asyncio.TimeoutError(), ProviderTimeoutError),
            (ValueError("invalid argument"), ProviderGenericError),
        ],
    )
    def test_maps_exception_to_variant(self, exc: Exception, expected: type) -> None:
        assert type(classify_provider_exception(exc)) is expected

    def test_typed_errors_pass_through(self) -> None:
        error = ProviderSafetyBlockedError()

        assert classify_provider_exception(error) is error

    def test_details_keep_status_code(self) -> None:
        error = classify_provider_exception(_StatusError("slow down", 429))

        assert error.details["status"] == 429
        assert error.failure is ProviderFailure.QUOTA


class TestGenerationClientGenerate:
    """Answer generation."""

    @pytest.mark.asyncio
    async def test_mock_mode_raises_mock_mode_error(self, mock_config) -> None:
        client = GenerationClient(mock_config)

        with pytest.raises(ProviderMockModeError):
            await client.generate([HumanMessage(content="hi")])

    @pytest.mark.asyncio
    async def test_mock_mode_error_is_an_unavailable_error(self, mock_config) -> None:
        with pytest.raises(ProviderUnavailableError):
            await GenerationClient(mock_config).generate([HumanMessage(content="hi")])

    @pytest.mark.asyncio
    async def test_returns_response_text(self, live_config, fake_chat_model) -> None:
        client = GenerationClient(live_config, chat_model=fake_chat_model)

        text = await client.generate([HumanMessage(content="question")])

        assert text == "Paris is the capital of France (Source 1)."

    @pytest.mark.asyncio
    async def test_joins_content_part_lists(self, live_config, fake_chat_model) -> None:
        fake_chat_model.ainvoke.return_value = AIMessage(
            content=[{"type": "text", "text": "Hello "}, "world"],
            response_metadata={"finish_reason": "STOP"},
        )
        client = GenerationClient(live_config, chat_model=fake_chat_model)

        assert await client.generate([HumanMessage(content="q")]) == "Hello world"

    @pytest.mark.asyncio
    async def test_safety_finish_reason_raises_blocked(self, live_config, fake_chat_model) -> None:
        fake_chat_model.ainvoke.return_value = AIMessage(
            content="", response_metadata={"finish_reason": "SAFETY"}
        )
        client = GenerationClient(live_config, chat_model=fake_chat_model)

        with pytest.raises(ProviderSafetyBlockedError):
            await client.generate([HumanMessage(content="q")])

    @pytest.mark.asyncio
    async def test_empty_answer_raises_generic(self, live_config, fake_chat_model) -> None:
        fake_chat_model.ainvoke.return_value = AIMessage(
            content="", response_metadata={"finish_reason": "STOP"}
        )
        client = GenerationClient(live_config, chat_model=fake_chat_model)

        with pytest.raises(ProviderGenericError):
            await client.generate([HumanMessage(content="q")])

    @pytest.mark.asyncio
    async def test_sdk_exception_is_classified(self, live_config, fake_chat_model) -> None:
        fake_chat_model.ainvoke.side_effect = _StatusError("quota", 429)
        client = GenerationClient(live_config, chat_model=fake_chat_model)

        with pytest.raises(ProviderQuotaExceededError) as exc_info:
            await client.generate([HumanMessage(content="q")])

        assert isinstance(exc_info.value.__cause__, _StatusError)


class TestGenerationClientCheckConnection:
    """Connectivity report for the health endpoint."""

    @pytest.mark.asyncio
    async def test_mock_mode_reports_mock_status(self, mock_config) -> None:
        status = await GenerationClient(mock_config).check_connection()

        assert status.connected is False
        assert status.status == "mock_mode"

    @pytest.mark.asyncio
    async def test_healthy_reports_model_and_response(self, live_config, fake_chat_model) -> None:
        fake_chat_model.ainvoke.return_value = AIMessage(
            content="OK", response_metadata={"finish_reason": "STOP"}
        )
        status = await GenerationClient(live_config, chat_model=fake_chat_model).check_connection()

        assert status.connected is True
        assert status.status == "healthy"
        assert status.model == live_config.chat_model
        assert status.test_response == "OK"

    @pytest.mark.asyncio
    async def test_provider_error_reports_error_status(self, live_config, fake_chat_model) -> None:
        fake_chat_model.ainvoke.side_effect = ConnectionError("refused")
        status = await GenerationClient(live_config, chat_model=fake_chat_model).check_connection()

        assert status.connected is False
        assert status.status == "error"
        assert status.error == ProviderFailure.UNAVAILABLE.value

    @pytest.mark.asyncio
    async def test_slow_connection_check_reports_timeout(self, live_config, fake_chat_model) -> None:
        async def slow(*args, **kwargs):
            await asyncio.sleep(5)

        fake_chat_model.ainvoke = AsyncMock(side_effect=slow)
        status = await GenerationClient(live_config, chat_model=fake_chat_model).check_connection()

        assert status.status == "error"
        assert status.error == ProviderFailure.TIMEOUT.value
