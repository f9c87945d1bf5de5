"""Item Repository Interface

Defines the contract for catalog item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.item import Item


class ItemRepository(ABC):
    """Repository interface for Item persistence"""

    @abstractmethod
    async def create(self, item: Item) -> Item:
        pass

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[Item]:
        pass

    @abstractmethod
    async def get_by_ids(self, item_ids: List[int]) -> List[Item]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Item]:
        """Return all items, newest first"""
        pass

    @abstractmethod
    async def update(self, item: Item) -> Item:
        pass

    @abstractmethod
    async def delete(self, item: Item) -> None:
        pass

    @abstractmethod
    async def is_referenced(self, item_id: int) -> bool:
        """Check whether any work line references the item"""
        pass
