"""Item Use Cases

Create, update, delete and list catalog items.
"""

import logging
from typing import List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.item_repository import ItemRepository
from src.domain.item import Item
from .customers import clean_text, blank_name_error
from .dtos import CreateItemCommandDTO, UpdateItemCommandDTO, ItemResponseDTO

logger = logging.getLogger(__name__)


def item_not_found(item_id: int) -> Error:
    return Error(
        code="ITEM_NOT_FOUND",
        message=f"Item with ID {item_id} not found",
        reason="Item does not exist",
    )


def to_item_dto(item: Item) -> ItemResponseDTO:
    return ItemResponseDTO(
        item_id=item.id,
        name=item.name,
        price=item.price,
        sku=item.sku,
        created_at=item.created_at,
    )


class CreateItem:
    """
    Use Case: Create a catalog item

    Business Rules:
    1. Name is required (blank after trimming is rejected before any write)
    2. Price defaults to 0 and must be >= 0
    """

    def __init__(self, uow: UnitOfWork, item_repo: ItemRepository):
        self.uow = uow
        self.item_repo = item_repo

    async def execute(self, command: CreateItemCommandDTO) -> Result[ItemResponseDTO]:
        name = clean_text(command.name)
        if not name:
            return Return.err(blank_name_error("Item"))

        try:
            item = Item(name=name, price=command.price, sku=clean_text(command.sku))
            created = await self.item_repo.create(item)
            await self.uow.commit()
            return Return.ok(to_item_dto(created))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_ITEM_FAILED",
                    message="Failed to create item",
                    reason=str(e),
                )
            )


class UpdateItem:
    """
    Use Case: Update a catalog item

    Existing work lines keep the price they were created with.
    """

    def __init__(self, uow: UnitOfWork, item_repo: ItemRepository):
        self.uow = uow
        self.item_repo = item_repo

    async def execute(self, command: UpdateItemCommandDTO) -> Result[ItemResponseDTO]:
        changes = command.model_dump(exclude_unset=True, exclude={"item_id"})

        if "name" in changes:
            changes["name"] = clean_text(changes["name"])
            if not changes["name"]:
                return Return.err(blank_name_error("Item"))
        if "sku" in changes:
            changes["sku"] = clean_text(changes["sku"])
        if "price" in changes and changes["price"] is None:
            del changes["price"]

        try:
            item = await self.item_repo.get_by_id(command.item_id)
            if not item:
                return Return.err(item_not_found(command.item_id))

            for field, value in changes.items():
                setattr(item, field, value)

            updated = await self.item_repo.update(item)
            await self.uow.commit()
            return Return.ok(to_item_dto(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_ITEM_FAILED",
                    message="Failed to update item",
                    reason=str(e),
                )
            )


class DeleteItem:
    """
    Use Case: Delete a catalog item

    Blocked while any work line references the item (ITEM_IN_USE).
    """

    def __init__(self, uow: UnitOfWork, item_repo: ItemRepository):
        self.uow = uow
        self.item_repo = item_repo

    async def execute(self, item_id: int) -> Result[int]:
        try:
            item = await self.item_repo.get_by_id(item_id)
            if not item:
                return Return.err(item_not_found(item_id))

            if await self.item_repo.is_referenced(item_id):
                return Return.err(
                    Error(
                        code="ITEM_IN_USE",
                        message=f"Item {item_id} is used by work lines",
                        reason="Delete those work lines first",
                    )
                )

            await self.item_repo.delete(item)
            await self.uow.commit()
            logger.info(f"Deleted item {item_id}")
            return Return.ok(item_id)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_ITEM_FAILED",
                    message="Failed to delete item",
                    reason=str(e),
                )
            )


class GetItem:
    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def execute(self, item_id: int) -> Result[ItemResponseDTO]:
        try:
            item = await self.item_repo.get_by_id(item_id)
            if not item:
                return Return.err(item_not_found(item_id))
            return Return.ok(to_item_dto(item))
        except Exception as e:
            return Return.err(
                Error(code="GET_ITEM_FAILED", message="Failed to load item", reason=str(e))
            )


class ListItems:
    """Use Case: List catalog items, newest first"""

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def execute(self) -> Result[List[ItemResponseDTO]]:
        try:
            items = await self.item_repo.list_all()
            return Return.ok([to_item_dto(item) for item in items])
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_ITEMS_FAILED",
                    message="Failed to list items",
                    reason=str(e),
                )
            )
