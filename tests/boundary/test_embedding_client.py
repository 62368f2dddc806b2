"""
Test suite for EmbeddingClient.

System role: Verification of embedding adapter and mock mode
"""

from unittest.mock import patch

import pytest

from recall.boundary.provider.embedding_client import EmbeddingClient


class TestEmbeddingClient:
    """Embedding generation and unavailability handling."""

    @pytest.mark.asyncio
    async def test_mock_mode_returns_none_without_calling_provider(self, mock_config) -> None:
        with patch("recall.boundary.provider.factories.build_embeddings") as build:
            client = EmbeddingClient(mock_config)

            assert await client.embed("hello") is None
            assert client.is_available is False
            build.assert_not_called()

    @pytest.mark.asyncio
    async def test_live_mode_returns_vector(self, live_config, fake_embeddings) -> None:
        client = EmbeddingClient(live_config, embeddings=fake_embeddings)

        vector = await client.embed("hello")

        assert vector == [1.0, 0.0, 0.0]
        fake_embeddings.aembed_query.assert_awaited_once_with("hello")

    @pytest.mark.asyncio
    async def test_provider_error_returns_none(self, live_config, fake_embeddings) -> None:
        fake_embeddings.aembed_query.side_effect = ConnectionError("network down")
        client = EmbeddingClient(live_config, embeddings=fake_embeddings)

        assert await client.embed("hello") is None

    @pytest.mark.asyncio
    async def test_embed_many_reports_failures_per_text(self, live_config, fake_embeddings) -> None:
        fake_embeddings.aembed_query.side_effect = [[0.1, 0.2], RuntimeError("quota"), [0.3, 0.4]]
        client = EmbeddingClient(live_config, embeddings=fake_embeddings)

        vectors = await client.embed_many(["a", "b", "c"])

        assert vectors == [[0.1, 0.2], None, [0.3, 0.4]]

    def test_model_name_comes_from_config(self, live_config, fake_embeddings) -> None:
        client = EmbeddingClient(live_config, embeddings=fake_embeddings)

        assert client.model_name == live_config.embedding_model
