"""SQLAlchemy Invoice Sequence Repository Implementation

Allocates invoice numbers from a per-year counter row locked with
SELECT FOR UPDATE, so concurrent issuers never read the same value.
"""

from datetime import datetime
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_sequence_repository import InvoiceSequenceRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice_sequence import InvoiceSequence
from src.domain.numbering import (
    format_invoice_number,
    next_invoice_number,
    parse_invoice_number,
)


class SqlAlchemyInvoiceSequenceRepository(InvoiceSequenceRepository):
    """
    SQLAlchemy implementation of InvoiceSequenceRepository

    The first allocation of a year seeds the counter from the invoices
    already issued that year. Two transactions seeding the same year at once
    collide on the primary key; the loser gets an IntegrityError and rolls
    back.
    """

    def __init__(self, session: AsyncSession, invoice_repo: InvoiceRepository):
        self.session = session
        self.invoice_repo = invoice_repo

    async def allocate(self, year: int) -> str:
        statement = (
            select(InvoiceSequence)
            .where(InvoiceSequence.year == year)
            .with_for_update()
        )
        result = await self.session.execute(statement)
        sequence = result.scalar_one_or_none()

        if sequence is None:
            existing = await self.invoice_repo.list_for_year(year)
            number = next_invoice_number(existing, year)
            _, value = parse_invoice_number(number)
            sequence = InvoiceSequence(year=year, last_value=value)
            self.session.add(sequence)
        else:
            sequence.last_value += 1
            sequence.updated_at = datetime.utcnow()
            number = format_invoice_number(year, sequence.last_value)

        await self.session.flush()
        return number
