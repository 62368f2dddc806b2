"""
Test suite for item API endpoints.

Covers POST /api/ingest, GET /api/items, PATCH and DELETE /api/items/{id}.
Mocked-service tests use TestClient; end-to-end tests drive the app over
httpx against the in-memory database.

System role: Verification of item management HTTP API
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from recall.api.deps import get_item_service, get_query_service
from recall.api.main import create_app
from recall.application.services import ItemService, QueryService
from recall.boundary.db.models.item_model import ItemType
from recall.boundary.provider.embedding_client import EmbeddingClient
from recall.boundary.provider.generation_client import GenerationClient
from recall.core.answering import AnswerSynthesizer
from recall.core.exceptions import EmptyChunkSetError, ItemNotFoundError
from recall.core.retrieval import HybridRetriever
from recall.models.item import IngestResponse, ItemResponse


@pytest.fixture
def mock_item_service() -> MagicMock:
    """Provide mock ItemService."""
    service = MagicMock()
    service.ingest = AsyncMock()
    service.list_items = AsyncMock()
    service.update_item = AsyncMock()
    service.delete_item = AsyncMock()
    return service


@pytest.fixture
def client(mock_item_service: MagicMock) -> TestClient:
    """Provide TestClient with the item service overridden."""
    app = create_app()
    app.dependency_overrides[get_item_service] = lambda: mock_item_service
    return TestClient(app)


class TestIngestEndpoint:
    """POST /api/ingest."""

    def test_ingest_should_return_201_with_camel_case_body(self, client, mock_item_service) -> None:
        """Response uses itemId and chunksCreated."""
        # Arrange
        mock_item_service.ingest.return_value = IngestResponse(
            message="Content ingested successfully", item_id=7, chunks_created=3
        )

        # Act
        response = client.post("/api/ingest", json={"type": "note", "content": "hello"})

        # Assert
        assert response.status_code == 201
        assert response.json() == {
            "message": "Content ingested successfully",
            "itemId": 7,
            "chunksCreated": 3,
        }
        mock_item_service.ingest.assert_awaited_once_with(
            kind=ItemType.NOTE, content="hello", title=None, source=None
        )

    def test_ingest_should_return_400_when_no_text(self, client, mock_item_service) -> None:
        """Empty chunk sets are rejected."""
        mock_item_service.ingest.side_effect = EmptyChunkSetError()

        response = client.post("/api/ingest", json={"type": "note", "content": "   "})

        assert response.status_code == 400
        assert response.json() == {"error": "No meaningful text could be extracted to save."}

    def test_ingest_should_return_500_with_error_text(self, client, mock_item_service) -> None:
        """Unexpected failures include the error text."""
        mock_item_service.ingest.side_effect = RuntimeError("database is locked")

        response = client.post("/api/ingest", json={"type": "note", "content": "hello"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to ingest content: database is locked"}


class TestItemManagementEndpoints:
    """GET, PATCH and DELETE on /api/items."""

    def test_list_items_should_return_items(self, client, mock_item_service) -> None:
        """Items are serialized with their ids and types."""
        mock_item_service.list_items.return_value = [
            ItemResponse(
                id=1,
                type=ItemType.URL,
                title="Docs",
                source="https://example.com",
                content="body",
                created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            )
        ]

        response = client.get("/api/items")

        assert response.status_code == 200
        assert response.json()[0]["id"] == 1
        assert response.json()[0]["type"] == "url"

    def test_update_item_should_return_message(self, client, mock_item_service) -> None:
        """PATCH forwards title and content."""
        response = client.patch("/api/items/3", json={"title": "New"})

        assert response.status_code == 200
        assert response.json() == {"message": "Item updated successfully"}
        mock_item_service.update_item.assert_awaited_once_with(3, title="New", content=None)

    def test_update_item_should_return_404_for_missing_item(self, client, mock_item_service) -> None:
        """Missing items map to 404."""
        mock_item_service.update_item.side_effect = ItemNotFoundError(3)

        response = client.patch("/api/items/3", json={"title": "New"})

        assert response.status_code == 404
        assert response.json() == {"error": "Item not found"}

    def test_delete_item_should_return_message(self, client, mock_item_service) -> None:
        """DELETE acknowledges removal."""
        response = client.delete("/api/items/3")

        assert response.status_code == 200
        assert response.json() == {"message": "Item deleted successfully"}

    def test_delete_item_should_return_500_on_failure(self, client, mock_item_service) -> None:
        """Unexpected failures map to 500."""
        mock_item_service.delete_item.side_effect = RuntimeError("boom")

        response = client.delete("/api/items/3")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to delete item"}


@pytest.fixture
async def live_client(test_async_db, mock_config):
    """httpx client over the app with real services bound to the test database."""
    embedding_client = EmbeddingClient(mock_config)
    retriever = HybridRetriever(embedding_client)
    synthesizer = AnswerSynthesizer(GenerationClient(mock_config), keyword_scorer=retriever.keyword_scorer)

    app = create_app()
    app.dependency_overrides[get_item_service] = lambda: ItemService(test_async_db, embedding_client)
    app.dependency_overrides[get_query_service] = lambda: QueryService(test_async_db, retriever, synthesizer)

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


class TestItemLifecycle:
    """Save, query, edit and delete through the HTTP surface."""

    @pytest.mark.asyncio
    async def test_saved_note_is_answerable_until_deleted(self, live_client) -> None:
        # Arrange
        saved = await live_client.post(
            "/api/ingest", json={"type": "note", "content": "The capital of France is Paris."}
        )
        item_id = saved.json()["itemId"]

        # Act
        answered = await live_client.post("/api/query", json={"question": "What is the capital of France?"})
        deleted = await live_client.delete(f"/api/items/{item_id}")
        after = await live_client.post("/api/query", json={"question": "What is the capital of France?"})

        # Assert
        assert saved.status_code == 201
        assert answered.json()["isMock"] is True
        assert answered.json()["sources"][0]["item_id"] == item_id
        assert deleted.status_code == 200
        assert after.json()["sources"] == []

    @pytest.mark.asyncio
    async def test_edited_content_replaces_searchable_text(self, live_client) -> None:
        saved = await live_client.post("/api/ingest", json={"type": "note", "content": "kubernetes operators"})
        item_id = saved.json()["itemId"]

        patched = await live_client.patch(f"/api/items/{item_id}", json={"content": "terraform modules"})
        old = await live_client.post("/api/query", json={"question": "kubernetes"})
        new = await live_client.post("/api/query", json={"question": "terraform"})

        assert patched.status_code == 200
        assert old.json()["sources"] == []
        assert new.json()["sources"][0]["content"] == "terraform modules"

    @pytest.mark.asyncio
    async def test_missing_type_is_rejected(self, live_client) -> None:
        response = await live_client.post("/api/ingest", json={"content": "orphan"})

        assert response.status_code == 400
        assert response.json() == {"error": "Type (note|url) and content are required."}

    @pytest.mark.asyncio
    async def test_unknown_type_is_rejected_with_error_body(self, live_client) -> None:
        response = await live_client.post("/api/ingest", json={"type": "pdf", "content": "report"})

        assert response.status_code == 400
        assert response.json() == {"error": "Type (note|url) and content are required."}

    @pytest.mark.asyncio
    async def test_deleting_unknown_item_returns_404(self, live_client) -> None:
        response = await live_client.delete("/api/items/12345")

        assert response.status_code == 404
