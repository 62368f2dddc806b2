"""
Dependency injection container.

Factory functions for FastAPI dependencies. Provider clients and the
retrieval/answering core are built once from the resolved provider
configuration and reused across requests.

Dependencies: recall.configs, recall.application, recall.boundary, recall.core
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from recall.application.services import ItemService, QueryService
from recall.boundary.db import get_async_db
from recall.boundary.provider import (
    EmbeddingClient,
    GenerationClient,
    ProviderConfig,
    resolve_provider_config,
)
from recall.configs import Settings, get_settings
from recall.core.answering import AnswerSynthesizer
from recall.core.retrieval import HybridRetriever, KeywordScorer


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._provider_config: ProviderConfig | None = None
        self._embedding_client: EmbeddingClient | None = None
        self._generation_client: GenerationClient | None = None
        self._retriever: HybridRetriever | None = None
        self._synthesizer: AnswerSynthesizer | None = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    async def resolve_provider(self) -> ProviderConfig:
        """Probe the provider once and freeze the result for the process."""
        if self._provider_config is None:
            self._provider_config = await resolve_provider_config(self.settings.provider)
        return self._provider_config

    @property
    def provider_config(self) -> ProviderConfig:
        """Resolved config, or the unprobed config from settings before startup ran."""
        if self._provider_config is None:
            self._provider_config = ProviderConfig.from_settings(self.settings.provider)
        return self._provider_config

    @property
    def embedding_client(self) -> EmbeddingClient:
        """Get cached embedding client."""
        if self._embedding_client is None:
            self._embedding_client = EmbeddingClient(self.provider_config)
        return self._embedding_client

    @property
    def generation_client(self) -> GenerationClient:
        """Get cached generation client."""
        if self._generation_client is None:
            self._generation_client = GenerationClient(self.provider_config)
        return self._generation_client

    @property
    def retriever(self) -> HybridRetriever:
        """Get cached hybrid retriever."""
        if self._retriever is None:
            self._retriever = HybridRetriever(
                embedding_client=self.embedding_client,
                settings=self.settings.retrieval,
                keyword_scorer=KeywordScorer(),
            )
        return self._retriever

    @property
    def synthesizer(self) -> AnswerSynthesizer:
        """Get cached answer synthesizer."""
        if self._synthesizer is None:
            self._synthesizer = AnswerSynthesizer(
                generation_client=self.generation_client,
                timeout=self.provider_config.generation_timeout,
                keyword_scorer=self.retriever.keyword_scorer,
                fallback_top_k=self.settings.retrieval.top_k,
            )
        return self._synthesizer

    def clear(self) -> None:
        """Clear all cached instances."""
        self._provider_config = None
        self._embedding_client = None
        self._generation_client = None
        self._retriever = None
        self._synthesizer = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_item_service(db: AsyncSession = Depends(get_async_db)) -> ItemService:
    """
    Get item service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ItemService: Item service bound to the request session
    """
    cache = get_service_cache()
    return ItemService(
        db=db,
        embedding_client=cache.embedding_client,
        chunking=cache.settings.chunking,
    )


def get_query_service(db: AsyncSession = Depends(get_async_db)) -> QueryService:
    """
    Get query service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        QueryService: Query service with the cached retriever and synthesizer
    """
    cache = get_service_cache()
    return QueryService(db=db, retriever=cache.retriever, synthesizer=cache.synthesizer)


def get_generation_client() -> GenerationClient:
    """Get cached generation client for health probes."""
    return get_service_cache().generation_client
