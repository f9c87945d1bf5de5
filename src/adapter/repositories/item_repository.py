"""SQLAlchemy Item Repository Implementation

Implements catalog item persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.item_repository import ItemRepository
from src.domain.item import Item
from src.domain.work_line import WorkLine


class SqlAlchemyItemRepository(ItemRepository):
    """SQLAlchemy implementation of ItemRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, item: Item) -> Item:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def get_by_id(self, item_id: int) -> Optional[Item]:
        statement = select(Item).where(Item.id == item_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, item_ids: List[int]) -> List[Item]:
        if not item_ids:
            return []
        statement = select(Item).where(Item.id.in_(item_ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_all(self) -> List[Item]:
        statement = select(Item).order_by(Item.created_at.desc(), Item.id.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, item: Item) -> Item:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def delete(self, item: Item) -> None:
        await self.session.delete(item)
        await self.session.flush()

    async def is_referenced(self, item_id: int) -> bool:
        statement = (
            select(func.count())
            .select_from(WorkLine)
            .where(WorkLine.item_id == item_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0
