"""SQLAlchemy Unit of Work

Wraps one AsyncSession; every repository handed out shares it, so a use
case's writes commit or roll back together.
"""

from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.repositories.item_repository import SqlAlchemyItemRepository
from src.adapter.repositories.work_line_repository import SqlAlchemyWorkLineRepository
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.repositories.invoice_sequence_repository import (
    SqlAlchemyInvoiceSequenceRepository,
)


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session
        self.customers = SqlAlchemyCustomerRepository(session)
        self.items = SqlAlchemyItemRepository(session)
        self.work_lines = SqlAlchemyWorkLineRepository(session)
        self.invoices = SqlAlchemyInvoiceRepository(session)
        self.sequences = SqlAlchemyInvoiceSequenceRepository(session, self.invoices)

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
