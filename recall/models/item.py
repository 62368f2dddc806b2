"""
Item domain models and schemas.

Request/response schemas for ingestion and item management.

Dependencies: pydantic, recall.boundary.db.models
System role: Item API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from recall.boundary.db.models.item_model import ItemType


class IngestRequest(BaseModel):
    """Request schema for saving a note or an extracted web page."""

    type: str | None = Field(default=None, description="Item kind: 'note' or 'url'; checked by the service")
    content: str | None = Field(default=None, description="Note text, or extracted page text for url items")
    title: str | None = Field(default=None, description="Display title (page title for url items)")
    source: str | None = Field(default=None, description="Original URL for url items")


class IngestResponse(BaseModel):
    """Response schema for a completed ingestion."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    item_id: int = Field(serialization_alias="itemId")
    chunks_created: int = Field(serialization_alias="chunksCreated")


class UpdateItemRequest(BaseModel):
    """Request schema for patching an item."""

    title: str | None = None
    content: str | None = None


class ItemResponse(BaseModel):
    """Response schema for a saved item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    type: ItemType
    title: str | None
    source: str | None
    content: str
    created_at: datetime


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class RebuildSummary(BaseModel):
    """Outcome of re-chunking every item."""

    items_total: int = 0
    items_processed: int = 0
    chunks_created: int = 0
    failed_item_ids: list[int] = Field(default_factory=list)
