"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database session, provider configs, fake provider SDK
objects, and a StoredChunk factory.
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from recall.boundary.provider.config import ProviderConfig, ProviderMode
from recall.models.retrieval import StoredChunk

EMBEDDING_MODEL = "models/test-embedding"


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with foreign keys enforced
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from recall.boundary.db.base import Base
    from recall.boundary.db.connection import enable_sqlite_foreign_keys

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def live_config() -> ProviderConfig:
    """Provider config in live mode."""
    return ProviderConfig(
        mode=ProviderMode.LIVE,
        chat_model="gemini-test-flash",
        embedding_model=EMBEDDING_MODEL,
        api_key="test-key",
        generation_timeout=1.0,
        probe_timeout=1.0,
    )


@pytest.fixture
def mock_config() -> ProviderConfig:
    """Provider config in mock mode (no credentials)."""
    return ProviderConfig(
        mode=ProviderMode.MOCK,
        chat_model="gemini-test-flash",
        embedding_model=EMBEDDING_MODEL,
    )


@pytest.fixture
def fake_embeddings() -> MagicMock:
    """
    LangChain embeddings stand-in.

    Returns:
        MagicMock: aembed_query returns a fixed 3-dim vector unless reconfigured
    """
    embeddings = MagicMock()
    embeddings.aembed_query = AsyncMock(return_value=[1.0, 0.0, 0.0])
    return embeddings


@pytest.fixture
def fake_chat_model() -> MagicMock:
    """
    LangChain chat model stand-in.

    Returns:
        MagicMock: ainvoke returns a normal answer unless reconfigured
    """
    chat = MagicMock()
    chat.ainvoke = AsyncMock(return_value=AIMessage(
        content="Paris is the capital of France (Source 1).",
        response_metadata={"finish_reason": "STOP"},
    ))
    return chat


@pytest.fixture
def make_chunk():
    """
    Factory for StoredChunk instances.

    Returns:
        Callable: make_chunk(id, content, embedding=None, title=..., ...)
    """

    def _make(
        id: int,
        content: str,
        embedding: list[float] | None = None,
        item_id: int | None = None,
        title: str | None = "Text Note",
        source: str | None = "Manual Input",
        embedding_model: str | None = EMBEDDING_MODEL,
    ) -> StoredChunk:
        return StoredChunk(
            id=id,
            item_id=item_id if item_id is not None else id,
            content=content,
            embedding=embedding,
            embedding_model=embedding_model if embedding is not None else None,
            item_title=title,
            item_source=source,
        )

    return _make
