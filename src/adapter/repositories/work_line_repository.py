"""SQLAlchemy Work Line Repository Implementation

Implements work line persistence, including the bulk claim and release
statements used by invoice issuance and reversal.
"""

from typing import Optional, List
from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.work_line_repository import WorkLineRepository
from src.domain.work_line import WorkLine

CANONICAL_ORDER = (
    WorkLine.work_date.asc(),
    WorkLine.created_at.asc(),
    WorkLine.id.asc(),
)


class SqlAlchemyWorkLineRepository(WorkLineRepository):
    """
    SQLAlchemy implementation of WorkLineRepository

    Features:
    - Canonical ordering on every listing
    - Pessimistic locking of a customer's unbilled lines via SELECT FOR UPDATE
    - Single-statement bulk claim/release
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, line: WorkLine) -> WorkLine:
        self.session.add(line)
        await self.session.flush()
        await self.session.refresh(line)
        return line

    async def get_by_id(self, line_id: int) -> Optional[WorkLine]:
        statement = select(WorkLine).where(WorkLine.id == line_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_lines(
        self,
        customer_id: Optional[int] = None,
        invoiced: Optional[bool] = None,
    ) -> List[WorkLine]:
        statement = select(WorkLine)

        if customer_id is not None:
            statement = statement.where(WorkLine.customer_id == customer_id)
        if invoiced is not None:
            statement = statement.where(WorkLine.invoiced == invoiced)

        statement = statement.order_by(*CANONICAL_ORDER)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_unbilled_for_customer(
        self, customer_id: int, for_update: bool = False
    ) -> List[WorkLine]:
        """
        List a customer's unbilled lines with optional row-level locking

        Args:
            customer_id: Customer identifier
            for_update: If True, locks the rows with SELECT FOR UPDATE

        Returns:
            Unbilled work lines in canonical order
        """
        statement = (
            select(WorkLine)
            .where(WorkLine.customer_id == customer_id)
            .where(WorkLine.invoiced == False)  # noqa: E712
            .order_by(*CANONICAL_ORDER)
        )

        if for_update:
            statement = statement.with_for_update()

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_by_invoice_id(self, invoice_id: int) -> List[WorkLine]:
        statement = (
            select(WorkLine)
            .where(WorkLine.invoice_id == invoice_id)
            .order_by(*CANONICAL_ORDER)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, line: WorkLine) -> WorkLine:
        self.session.add(line)
        await self.session.flush()
        await self.session.refresh(line)
        return line

    async def delete(self, line: WorkLine) -> None:
        await self.session.delete(line)
        await self.session.flush()

    async def mark_invoiced(self, line_ids: List[int], invoice_id: int) -> int:
        """
        Claim unbilled lines for an invoice

        Lines claimed meanwhile by another invoice are skipped, so the
        returned count tells the caller whether the claim was complete.

        Args:
            line_ids: Lines to claim
            invoice_id: Invoice claiming them

        Returns:
            Number of lines claimed
        """
        if not line_ids:
            return 0
        statement = (
            update(WorkLine)
            .where(WorkLine.id.in_(line_ids))
            .where(WorkLine.invoiced == False)  # noqa: E712
            .values(invoiced=True, invoice_id=invoice_id)
        )
        result = await self.session.execute(statement)
        return result.rowcount

    async def release_invoice(self, invoice_id: int) -> List[int]:
        """
        Reset every line of an invoice to unbilled

        Args:
            invoice_id: Invoice whose lines are released

        Returns:
            IDs of the released lines
        """
        statement = select(WorkLine.id).where(WorkLine.invoice_id == invoice_id)
        result = await self.session.execute(statement)
        line_ids = list(result.scalars().all())

        if line_ids:
            await self.session.execute(
                update(WorkLine)
                .where(WorkLine.invoice_id == invoice_id)
                .values(invoiced=False, invoice_id=None)
            )
        return line_ids
