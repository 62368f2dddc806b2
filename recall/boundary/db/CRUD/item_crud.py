"""
Item CRUD operations.

Dependencies: sqlalchemy, recall.boundary.db.models
System role: Item persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recall.boundary.db.CRUD.base_crud import BaseCRUD
from recall.boundary.db.models.item_model import ItemModel


class ItemCRUD(BaseCRUD[ItemModel]):
    """CRUD operations for ItemModel."""

    def __init__(self) -> None:
        """Initialize ItemCRUD with ItemModel."""
        super().__init__(ItemModel)

    async def get_all_newest_first(self, session: AsyncSession) -> Sequence[ItemModel]:
        """
        Retrieve every item, most recently created first.

        Args:
            session: Async database session

        Returns:
            Sequence of ItemModels
        """
        stmt = select(ItemModel).order_by(ItemModel.created_at.desc(), ItemModel.id.desc())
        result = await session.execute(stmt)
        return result.scalars().all()


item_crud = ItemCRUD()
