"""SQLAlchemy Customer Repository Implementation

Implements customer persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.work_line import WorkLine


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    SQLAlchemy implementation of CustomerRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        statement = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, customer_ids: List[int]) -> List[Customer]:
        if not customer_ids:
            return []
        statement = select(Customer).where(Customer.id.in_(customer_ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_all(self) -> List[Customer]:
        statement = select(Customer).order_by(Customer.created_at.desc(), Customer.id.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def delete(self, customer: Customer) -> None:
        await self.session.delete(customer)
        await self.session.flush()

    async def is_referenced(self, customer_id: int) -> bool:
        """
        Check whether any work line or invoice references the customer

        Args:
            customer_id: Customer identifier

        Returns:
            True if the customer has work lines or invoices
        """
        for model in (WorkLine, Invoice):
            statement = (
                select(func.count())
                .select_from(model)
                .where(model.customer_id == customer_id)
            )
            result = await self.session.execute(statement)
            if result.scalar_one() > 0:
                return True
        return False
