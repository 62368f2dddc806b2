"""
Item API endpoints.

Routes:
- POST /ingest - Save a note or extracted web page
- GET /items - List saved items
- PATCH /items/{item_id} - Update title and/or content
- DELETE /items/{item_id} - Remove an item and its chunks

Dependencies: recall.application.services.item_service, recall.models
System role: Item management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from recall.api.deps import get_item_service
from recall.api.errors import response_for_exception
from recall.application.services.item_service import ItemService
from recall.models.item import (
    IngestRequest,
    IngestResponse,
    ItemResponse,
    MessageResponse,
    UpdateItemRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["items"])


@router.post("/ingest", status_code=status.HTTP_201_CREATED)
async def ingest(
    request: IngestRequest,
    item_service: ItemService = Depends(get_item_service),
):
    """
    Save a note, or the extracted text of a web page.

    Args:
        request: IngestRequest with type, content and optional title/source
        item_service: Injected ItemService

    Returns:
        201 with message, itemId and chunksCreated

    Raises:
        400: Missing type/content or no meaningful text
        500: Ingestion failed
    """
    try:
        result: IngestResponse = await item_service.ingest(
            kind=request.type,
            content=request.content,
            title=request.title,
            source=request.source,
        )
    except Exception as e:
        return response_for_exception(e, f"Failed to ingest content: {e}")

    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=result.model_dump(by_alias=True),
    )


@router.get("/items", response_model=list[ItemResponse])
async def list_items(item_service: ItemService = Depends(get_item_service)):
    """List saved items, newest first."""
    try:
        return await item_service.list_items()
    except Exception as e:
        return response_for_exception(e, "Failed to fetch items")


@router.patch("/items/{item_id}", response_model=MessageResponse)
async def update_item(
    item_id: int,
    request: UpdateItemRequest,
    item_service: ItemService = Depends(get_item_service),
):
    """
    Update an item's title and/or content.

    New content regenerates all of the item's chunks.
    """
    try:
        await item_service.update_item(item_id, title=request.title, content=request.content)
    except Exception as e:
        return response_for_exception(e, "Failed to update item")
    return MessageResponse(message="Item updated successfully")


@router.delete("/items/{item_id}", response_model=MessageResponse)
async def delete_item(
    item_id: int,
    item_service: ItemService = Depends(get_item_service),
):
    """Delete an item; its chunks are removed with it."""
    try:
        await item_service.delete_item(item_id)
    except Exception as e:
        return response_for_exception(e, "Failed to delete item")
    return MessageResponse(message="Item deleted successfully")
