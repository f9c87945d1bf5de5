"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from datetime import datetime
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_invoices(self, customer_id: Optional[int] = None) -> List[Invoice]:
        """
        List invoices, most recently issued first

        Args:
            customer_id: Optional filter by customer

        Returns:
            List of invoices
        """
        statement = select(Invoice)

        if customer_id is not None:
            statement = statement.where(Invoice.customer_id == customer_id)

        statement = statement.order_by(Invoice.issued_at.desc(), Invoice.id.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_for_year(self, year: int) -> List[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.issued_at >= datetime(year, 1, 1))
            .where(Invoice.issued_at < datetime(year + 1, 1, 1))
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()
