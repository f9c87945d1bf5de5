"""Unit tests for customer and item use cases"""

import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.catalog import (
    CreateCustomer,
    UpdateCustomer,
    DeleteCustomer,
    CreateItem,
    UpdateItem,
    DeleteItem,
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CreateItemCommandDTO,
    UpdateItemCommandDTO,
)
from src.domain.customer import Customer
from src.domain.item import Item


async def persist(entity):
    if entity.id is None:
        entity.id = 1
    if entity.created_at is None:
        entity.created_at = datetime(2025, 1, 1)
    return entity


@pytest.fixture
def mock_customer_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=persist)
    repo.update = AsyncMock(side_effect=persist)
    repo.delete = AsyncMock()
    repo.get_by_id = AsyncMock(
        return_value=Customer(id=1, name="Ana", city="Logroño", created_at=datetime(2025, 1, 1))
    )
    repo.is_referenced = AsyncMock(return_value=False)
    return repo


@pytest.fixture
def mock_item_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=persist)
    repo.update = AsyncMock(side_effect=persist)
    repo.delete = AsyncMock()
    repo.get_by_id = AsyncMock(
        return_value=Item(id=1, name="Cadena", price=Decimal("10.00"), created_at=datetime(2025, 1, 1))
    )
    repo.is_referenced = AsyncMock(return_value=False)
    return repo


@pytest.mark.asyncio
class TestCustomers:
    async def test_create_trims_and_nulls_blanks(self, mock_uow, mock_customer_repo):
        result = await CreateCustomer(mock_uow, mock_customer_repo).execute(
            CreateCustomerCommandDTO(name="  Ana  ", tax_id=" ", city="Logroño")
        )

        assert result.is_ok()
        assert result.value.name == "Ana"
        assert result.value.tax_id is None
        assert result.value.city == "Logroño"
        mock_uow.commit.assert_called_once()

    async def test_blank_name_rejected_before_write(self, mock_uow, mock_customer_repo):
        result = await CreateCustomer(mock_uow, mock_customer_repo).execute(
            CreateCustomerCommandDTO(name="   ")
        )

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_customer_repo.create.assert_not_called()

    async def test_update_keeps_unset_fields(self, mock_uow, mock_customer_repo):
        result = await UpdateCustomer(mock_uow, mock_customer_repo).execute(
            UpdateCustomerCommandDTO(customer_id=1, phone="941000000")
        )

        assert result.is_ok()
        assert result.value.phone == "941000000"
        assert result.value.city == "Logroño"
        assert result.value.name == "Ana"

    async def test_delete_blocked_while_referenced(self, mock_uow, mock_customer_repo):
        mock_customer_repo.is_referenced = AsyncMock(return_value=True)

        result = await DeleteCustomer(mock_uow, mock_customer_repo).execute(1)

        assert result.is_err()
        assert result.error.code == "CUSTOMER_IN_USE"
        mock_customer_repo.delete.assert_not_called()

    async def test_delete(self, mock_uow, mock_customer_repo):
        result = await DeleteCustomer(mock_uow, mock_customer_repo).execute(1)

        assert result.is_ok()
        mock_customer_repo.delete.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_delete_not_found(self, mock_uow, mock_customer_repo):
        mock_customer_repo.get_by_id = AsyncMock(return_value=None)

        result = await DeleteCustomer(mock_uow, mock_customer_repo).execute(9)

        assert result.error.code == "CUSTOMER_NOT_FOUND"


@pytest.mark.asyncio
class TestItems:
    async def test_create_with_default_price(self, mock_uow, mock_item_repo):
        result = await CreateItem(mock_uow, mock_item_repo).execute(
            CreateItemCommandDTO(name="Engrase")
        )

        assert result.is_ok()
        assert result.value.price == Decimal("0")
        assert result.value.sku is None

    async def test_update_price(self, mock_uow, mock_item_repo):
        result = await UpdateItem(mock_uow, mock_item_repo).execute(
            UpdateItemCommandDTO(item_id=1, price=Decimal("12.50"))
        )

        assert result.is_ok()
        assert result.value.price == Decimal("12.50")
        assert result.value.name == "Cadena"

    async def test_update_blank_name_rejected(self, mock_uow, mock_item_repo):
        result = await UpdateItem(mock_uow, mock_item_repo).execute(
            UpdateItemCommandDTO(item_id=1, name=" ")
        )

        assert result.error.code == "VALIDATION_ERROR"
        mock_item_repo.update.assert_not_called()

    async def test_delete_blocked_while_used(self, mock_uow, mock_item_repo):
        mock_item_repo.is_referenced = AsyncMock(return_value=True)

        result = await DeleteItem(mock_uow, mock_item_repo).execute(1)

        assert result.error.code == "ITEM_IN_USE"
        mock_item_repo.delete.assert_not_called()
