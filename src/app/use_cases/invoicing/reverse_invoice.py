"""ReverseInvoice Use Case

Deletes an invoice and returns its work lines to unbilled state.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.work_line_repository import WorkLineRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import ReversedInvoiceResponseDTO

logger = logging.getLogger(__name__)


def invoice_not_found(invoice_id: int) -> Error:
    return Error(
        code="INVOICE_NOT_FOUND",
        message=f"Invoice with ID {invoice_id} not found",
        reason="Invoice does not exist",
    )


class ReverseInvoice:
    """
    Use Case: Delete an invoice and release its lines

    Business Rules:
    1. Lines are released before the invoice is deleted
    2. Both steps share one transaction; any failure rolls back both
    3. The invoice number is not handed out again

    Flow:
    1. Retrieve invoice
    2. Release claimed lines (bulk update)
    3. Delete invoice
    4. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        work_line_repo: WorkLineRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.work_line_repo = work_line_repo
        self.invoice_repo = invoice_repo

    async def execute(self, invoice_id: int) -> Result[ReversedInvoiceResponseDTO]:
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(invoice_id))
            number = invoice.number

            # Step 2: Release lines
            released = await self.work_line_repo.release_invoice(invoice_id)

            # Step 3: Delete invoice
            await self.invoice_repo.delete(invoice)

            # Step 4: Commit
            await self.uow.commit()
            logger.info(f"Reversed invoice {number}: released {len(released)} lines")

            return Return.ok(
                ReversedInvoiceResponseDTO(
                    invoice_id=invoice_id,
                    number=number,
                    released_line_ids=released,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="REVERSE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
