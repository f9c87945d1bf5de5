"""Unit tests for work line use cases"""

import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.work_lines import (
    CreateWorkLine,
    UpdateWorkLine,
    DeleteWorkLine,
    ListWorkLines,
    CreateWorkLineCommandDTO,
    UpdateWorkLineCommandDTO,
)
from src.domain.customer import Customer
from src.domain.item import Item
from src.domain.work_line import WorkLine


def make_line(**overrides):
    values = dict(
        id=5, customer_id=1, item_id=2, qty=Decimal("1"), price=Decimal("12.00"),
        work_date=date(2025, 3, 1), invoiced=False, invoice_id=None,
        created_at=datetime(2025, 3, 1, 9),
    )
    values.update(overrides)
    return WorkLine(**values)


async def persist(line):
    if line.id is None:
        line.id = 5
    if line.created_at is None:
        line.created_at = datetime(2025, 3, 1, 9)
    return line


@pytest.fixture
def mock_work_line_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=persist)
    repo.update = AsyncMock(side_effect=persist)
    repo.delete = AsyncMock()
    repo.get_by_id = AsyncMock(return_value=make_line())
    return repo


@pytest.fixture
def mock_customer_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Customer(id=1, name="Ana"))
    return repo


@pytest.fixture
def mock_item_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Item(id=2, name="Cadena", price=Decimal("12.00")))
    return repo


@pytest.mark.asyncio
class TestCreateWorkLine:
    async def test_price_defaults_to_item_price(
        self, mock_uow, mock_work_line_repo, mock_customer_repo, mock_item_repo
    ):
        use_case = CreateWorkLine(mock_uow, mock_work_line_repo, mock_customer_repo, mock_item_repo)

        result = await use_case.execute(
            CreateWorkLineCommandDTO(customer_id=1, item_id=2, qty=Decimal("3"), work_date=date(2025, 3, 4))
        )

        assert result.is_ok()
        assert result.value.price == Decimal("12.00")
        assert result.value.amount == Decimal("36.00")
        assert result.value.invoiced is False
        assert result.value.invoice_id is None
        mock_uow.commit.assert_called_once()

    async def test_explicit_price_and_today(
        self, mock_uow, mock_work_line_repo, mock_customer_repo, mock_item_repo
    ):
        use_case = CreateWorkLine(mock_uow, mock_work_line_repo, mock_customer_repo, mock_item_repo)

        result = await use_case.execute(
            CreateWorkLineCommandDTO(customer_id=1, item_id=2, price=Decimal("9.99"), notes="  ")
        )

        assert result.is_ok()
        assert result.value.price == Decimal("9.99")
        assert result.value.qty == Decimal("1")
        assert result.value.work_date == date.today()
        assert result.value.notes is None

    async def test_unknown_item(
        self, mock_uow, mock_work_line_repo, mock_customer_repo, mock_item_repo
    ):
        mock_item_repo.get_by_id = AsyncMock(return_value=None)
        use_case = CreateWorkLine(mock_uow, mock_work_line_repo, mock_customer_repo, mock_item_repo)

        result = await use_case.execute(CreateWorkLineCommandDTO(customer_id=1, item_id=99))

        assert result.is_err()
        assert result.error.code == "ITEM_NOT_FOUND"
        mock_work_line_repo.create.assert_not_called()

    async def test_unknown_customer(
        self, mock_uow, mock_work_line_repo, mock_customer_repo, mock_item_repo
    ):
        mock_customer_repo.get_by_id = AsyncMock(return_value=None)
        use_case = CreateWorkLine(mock_uow, mock_work_line_repo, mock_customer_repo, mock_item_repo)

        result = await use_case.execute(CreateWorkLineCommandDTO(customer_id=99, item_id=2))

        assert result.is_err()
        assert result.error.code == "CUSTOMER_NOT_FOUND"
        mock_work_line_repo.create.assert_not_called()


@pytest.mark.asyncio
class TestUpdateWorkLine:
    async def test_updates_only_given_fields(self, mock_uow, mock_work_line_repo):
        use_case = UpdateWorkLine(mock_uow, mock_work_line_repo)

        result = await use_case.execute(UpdateWorkLineCommandDTO(line_id=5, qty=Decimal("4")))

        assert result.is_ok()
        assert result.value.qty == Decimal("4")
        assert result.value.price == Decimal("12.00")
        mock_uow.commit.assert_called_once()

    async def test_explicit_null_resets(self, mock_uow, mock_work_line_repo):
        use_case = UpdateWorkLine(mock_uow, mock_work_line_repo)

        result = await use_case.execute(
            UpdateWorkLineCommandDTO(line_id=5, qty=None, price=None, work_date=None)
        )

        assert result.is_ok()
        assert result.value.qty == Decimal("1")
        assert result.value.price == Decimal("0")
        assert result.value.work_date == date.today()

    async def test_invoiced_line_is_read_only(self, mock_uow, mock_work_line_repo):
        mock_work_line_repo.get_by_id = AsyncMock(return_value=make_line(invoiced=True, invoice_id=10))
        use_case = UpdateWorkLine(mock_uow, mock_work_line_repo)

        result = await use_case.execute(UpdateWorkLineCommandDTO(line_id=5, qty=Decimal("4")))

        assert result.is_err()
        assert result.error.code == "WORK_LINE_INVOICED"
        mock_work_line_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_not_found(self, mock_uow, mock_work_line_repo):
        mock_work_line_repo.get_by_id = AsyncMock(return_value=None)

        result = await UpdateWorkLine(mock_uow, mock_work_line_repo).execute(
            UpdateWorkLineCommandDTO(line_id=404, qty=Decimal("2"))
        )

        assert result.error.code == "WORK_LINE_NOT_FOUND"


@pytest.mark.asyncio
class TestDeleteAndListWorkLines:
    async def test_delete_invoiced_line_is_allowed(self, mock_uow, mock_work_line_repo):
        mock_work_line_repo.get_by_id = AsyncMock(return_value=make_line(invoiced=True, invoice_id=10))

        result = await DeleteWorkLine(mock_uow, mock_work_line_repo).execute(5)

        assert result.is_ok()
        assert result.value == 5
        mock_work_line_repo.delete.assert_called_once()
        mock_uow.commit.assert_called_once()

    async def test_delete_not_found(self, mock_uow, mock_work_line_repo):
        mock_work_line_repo.get_by_id = AsyncMock(return_value=None)

        result = await DeleteWorkLine(mock_uow, mock_work_line_repo).execute(404)

        assert result.error.code == "WORK_LINE_NOT_FOUND"
        mock_work_line_repo.delete.assert_not_called()

    async def test_list_reports_pending_total(self, mock_work_line_repo):
        mock_work_line_repo.list_lines = AsyncMock(
            return_value=[
                make_line(id=1, qty=Decimal("2"), price=Decimal("10.00")),
                make_line(id=2, qty=Decimal("1"), price=Decimal("5.50"), invoiced=True, invoice_id=3),
            ]
        )

        result = await ListWorkLines(mock_work_line_repo).execute(customer_id=1)

        assert result.is_ok()
        assert [line.line_id for line in result.value.lines] == [1, 2]
        assert result.value.pending_total == Decimal("20.00")
        mock_work_line_repo.list_lines.assert_called_once_with(customer_id=1, invoiced=None)
