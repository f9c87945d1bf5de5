"""Work Line Use Cases

Record, edit, delete and list work lines. Invoiced lines cannot be edited;
their billing state changes only through invoice issuance and reversal.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.item_repository import ItemRepository
from src.app.repositories.work_line_repository import WorkLineRepository
from src.app.use_cases.catalog.customers import clean_text, customer_not_found
from src.app.use_cases.catalog.items import item_not_found
from src.domain.aggregation import pending_total
from src.domain.work_line import WorkLine
from .dtos import (
    CreateWorkLineCommandDTO,
    UpdateWorkLineCommandDTO,
    WorkLineResponseDTO,
    WorkLineListResponseDTO,
)

logger = logging.getLogger(__name__)


def work_line_not_found(line_id: int) -> Error:
    return Error(
        code="WORK_LINE_NOT_FOUND",
        message=f"Work line with ID {line_id} not found",
        reason="Work line does not exist",
    )


def to_work_line_dto(line: WorkLine) -> WorkLineResponseDTO:
    return WorkLineResponseDTO(
        line_id=line.id,
        customer_id=line.customer_id,
        item_id=line.item_id,
        qty=line.qty,
        price=line.price,
        amount=line.amount,
        notes=line.notes,
        work_date=line.work_date,
        invoiced=line.invoiced,
        invoice_id=line.invoice_id,
        created_at=line.created_at,
    )


class CreateWorkLine:
    """
    Use Case: Record a work line for a customer

    Business Rules:
    1. Customer and item must exist (rejected before any write)
    2. price defaults to the item's price at this moment
    3. Lines are created unbilled
    """

    def __init__(
        self,
        uow: UnitOfWork,
        work_line_repo: WorkLineRepository,
        customer_repo: CustomerRepository,
        item_repo: ItemRepository,
    ):
        self.uow = uow
        self.work_line_repo = work_line_repo
        self.customer_repo = customer_repo
        self.item_repo = item_repo

    async def execute(self, command: CreateWorkLineCommandDTO) -> Result[WorkLineResponseDTO]:
        try:
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if not customer:
                return Return.err(customer_not_found(command.customer_id))

            item = await self.item_repo.get_by_id(command.item_id)
            if not item:
                return Return.err(item_not_found(command.item_id))

            line = WorkLine(
                customer_id=customer.id,
                item_id=item.id,
                qty=command.qty,
                price=command.price if command.price is not None else item.price,
                notes=clean_text(command.notes),
                work_date=command.work_date or date.today(),
                invoiced=False,
                invoice_id=None,
            )
            created = await self.work_line_repo.create(line)
            await self.uow.commit()
            return Return.ok(to_work_line_dto(created))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_WORK_LINE_FAILED",
                    message="Failed to create work line",
                    reason=str(e),
                )
            )


class UpdateWorkLine:
    """
    Use Case: Edit an unbilled work line

    Business Rules:
    1. Invoiced lines are read-only (WORK_LINE_INVOICED)
    2. Only qty, price, work_date and notes can change
    """

    def __init__(self, uow: UnitOfWork, work_line_repo: WorkLineRepository):
        self.uow = uow
        self.work_line_repo = work_line_repo

    async def execute(self, command: UpdateWorkLineCommandDTO) -> Result[WorkLineResponseDTO]:
        changes = command.model_dump(exclude_unset=True, exclude={"line_id"})

        try:
            line = await self.work_line_repo.get_by_id(command.line_id)
            if not line:
                return Return.err(work_line_not_found(command.line_id))

            if line.invoiced:
                return Return.err(
                    Error(
                        code="WORK_LINE_INVOICED",
                        message=f"Work line {line.id} belongs to invoice {line.invoice_id}",
                        reason="Invoiced lines cannot be edited; delete the invoice first",
                    )
                )

            if "qty" in changes:
                line.qty = changes["qty"] if changes["qty"] is not None else Decimal("1")
            if "price" in changes:
                line.price = changes["price"] if changes["price"] is not None else Decimal("0")
            if "work_date" in changes:
                line.work_date = changes["work_date"] or date.today()
            if "notes" in changes:
                line.notes = clean_text(changes["notes"])

            updated = await self.work_line_repo.update(line)
            await self.uow.commit()
            return Return.ok(to_work_line_dto(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_WORK_LINE_FAILED",
                    message="Failed to update work line",
                    reason=str(e),
                )
            )


class DeleteWorkLine:
    """
    Use Case: Delete a work line regardless of billing state

    An invoiced line can be deleted; its invoice keeps the total captured at
    issuance.
    """

    def __init__(self, uow: UnitOfWork, work_line_repo: WorkLineRepository):
        self.uow = uow
        self.work_line_repo = work_line_repo

    async def execute(self, line_id: int) -> Result[int]:
        try:
            line = await self.work_line_repo.get_by_id(line_id)
            if not line:
                return Return.err(work_line_not_found(line_id))

            if line.invoiced:
                logger.warning(
                    f"Deleting work line {line_id} claimed by invoice {line.invoice_id}; "
                    f"the invoice total is not recomputed"
                )

            await self.work_line_repo.delete(line)
            await self.uow.commit()
            return Return.ok(line_id)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_WORK_LINE_FAILED",
                    message="Failed to delete work line",
                    reason=str(e),
                )
            )


class ListWorkLines:
    """
    Use Case: List work lines in canonical order

    Also reports the pending (unbilled) amount among the listed lines.
    """

    def __init__(self, work_line_repo: WorkLineRepository):
        self.work_line_repo = work_line_repo

    async def execute(
        self,
        customer_id: Optional[int] = None,
        invoiced: Optional[bool] = None,
    ) -> Result[WorkLineListResponseDTO]:
        try:
            lines = await self.work_line_repo.list_lines(customer_id=customer_id, invoiced=invoiced)
            return Return.ok(
                WorkLineListResponseDTO(
                    lines=[to_work_line_dto(line) for line in lines],
                    pending_total=pending_total(lines),
                )
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_WORK_LINES_FAILED",
                    message="Failed to list work lines",
                    reason=str(e),
                )
            )
