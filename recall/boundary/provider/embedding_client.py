"""
Gemini embedding client.

Maps text to an embedding vector, or to ``None`` when no vector can be
produced. Provider unavailability is an ordinary return value here: in mock
mode no call is made, and in live mode a failed call is logged and reported
as ``None`` for that text only.

Dependencies: langchain_google_genai, recall.boundary.provider
System role: Embedding generation adapter
"""

import logging

from recall.boundary.provider import factories
from recall.boundary.provider.config import ProviderConfig

logger = logging.getLogger(__name__)


class EmbeddingClient:
    """Gemini embedding generator with mock mode."""

    def __init__(self, config: ProviderConfig, embeddings=None) -> None:
        """
        Initialize embeddings client.

        Args:
            config: Resolved provider configuration
            embeddings: Optional LangChain embeddings object (built from config if None)
        """
        self._config = config
        self._embeddings = None
        if not config.is_mock:
            self._embeddings = embeddings or factories.build_embeddings(
                config.embedding_model, config.api_key
            )

    @property
    def is_available(self) -> bool:
        """False in mock mode."""
        return self._embeddings is not None

    @property
    def model_name(self) -> str:
        """Embedding model identifier, stored alongside every vector."""
        return self._config.embedding_model

    async def embed(self, text: str) -> list[float] | None:
        """
        Generate an embedding for one text.

        Args:
            text: Chunk or query text

        Returns:
            list[float] | None: Vector, or None when unavailable
        """
        if self._embeddings is None:
            return None

        try:
            return list(await self._embeddings.aembed_query(text))
        except Exception as e:
            logger.error(f"{__name__}:embed - Gemini embedding error: {type(e).__name__}: {e}")
            return None

    async def embed_many(self, texts: list[str]) -> list[list[float] | None]:
        """
        Embed texts one call at a time.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float] | None]: One entry per input, None where embedding failed
        """
        return [await self.embed(text) for text in texts]
