"""IssueInvoice Use Case

Invoices every unbilled work line of a customer: allocates the next
sequential number, snapshots the total and claims the lines, all in one
transaction.
"""

import base64
import logging
from datetime import datetime
from typing import Callable, Optional
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.work_line_repository import WorkLineRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_sequence_repository import InvoiceSequenceRepository
from src.app.use_cases.catalog.customers import customer_not_found
from src.app.use_cases.work_lines.work_lines import to_work_line_dto
from src.domain.aggregation import compute_total
from src.domain.invoice import Invoice
from .dtos import IssueInvoiceCommandDTO, IssuedInvoiceResponseDTO
from .printing import InvoicePrinter

logger = logging.getLogger(__name__)

# Unique/primary-key violations that mean another issuer took the number
# (SQLite reports table.column, PostgreSQL the constraint name)
NUMBER_CONFLICT_MARKERS = (
    "invoices.number",
    "invoices_number_key",
    "invoice_sequences.year",
    "invoice_sequences_pkey",
)


def is_number_conflict(error: IntegrityError) -> bool:
    detail = str(error.orig)
    return any(marker in detail for marker in NUMBER_CONFLICT_MARKERS)


class IssueInvoice:
    """
    Use Case: Issue an invoice for a customer's unbilled lines

    Business Rules:
    1. No unbilled lines -> no-op (Ok(None), no writes)
    2. Invoice number is YYYY-NNNN from the per-year counter
    3. total = sum(qty * price) of the qualifying lines at this instant
    4. Invoice insert and line claim share one transaction
    5. The claimed set must equal the qualifying set, else CONSISTENCY_ERROR
    6. Number conflicts (unique violation on invoices.number or
       invoice_sequences.year) are retried a bounded number of times; other
       integrity errors fail at once

    Flow:
    1. Verify customer exists
    2. Load unbilled lines with lock (SELECT FOR UPDATE)
    3. Allocate invoice number
    4. Compute total
    5. Create invoice
    6. Claim lines (bulk update) and verify the claimed count
    7. Commit transaction
    8. Optionally render the PDF from the captured snapshot
    """

    def __init__(
        self,
        uow: UnitOfWork,
        customer_repo: CustomerRepository,
        work_line_repo: WorkLineRepository,
        invoice_repo: InvoiceRepository,
        sequence_repo: InvoiceSequenceRepository,
        printer: Optional[InvoicePrinter] = None,
        max_retries: int = 3,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.uow = uow
        self.customer_repo = customer_repo
        self.work_line_repo = work_line_repo
        self.invoice_repo = invoice_repo
        self.sequence_repo = sequence_repo
        self.printer = printer
        self.max_retries = max_retries
        self.clock = clock

    async def execute(
        self, command: IssueInvoiceCommandDTO
    ) -> Result[Optional[IssuedInvoiceResponseDTO]]:
        """
        Execute invoice issuance

        Args:
            command: IssueInvoiceCommandDTO with customer_id

        Returns:
            Result with the issued invoice and its line snapshot, Ok(None)
            when the customer has nothing to invoice, or an error
        """
        attempts = self.max_retries + 1
        for attempt in range(1, attempts + 1):
            try:
                return await self._issue(command)

            except IntegrityError as e:
                await self.uow.rollback()
                if not is_number_conflict(e):
                    logger.error(
                        f"Integrity error issuing invoice for customer "
                        f"{command.customer_id}: {e.orig}"
                    )
                    return Return.err(
                        Error(
                            code="ISSUE_INVOICE_FAILED",
                            message="Failed to issue invoice",
                            reason=str(e.orig),
                        )
                    )
                logger.warning(
                    f"Invoice number conflict for customer {command.customer_id} "
                    f"(attempt {attempt}/{attempts}): {e.orig}"
                )

            except Exception as e:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="ISSUE_INVOICE_FAILED",
                        message="Failed to issue invoice",
                        reason=str(e),
                    )
                )

        return Return.err(
            Error(
                code="INVOICE_NUMBER_CONFLICT",
                message=f"Could not allocate a unique invoice number after {attempts} attempts",
                reason="Concurrent issuance",
            )
        )

    async def _issue(
        self, command: IssueInvoiceCommandDTO
    ) -> Result[Optional[IssuedInvoiceResponseDTO]]:
        # Step 1: Verify customer
        customer = await self.customer_repo.get_by_id(command.customer_id)
        if not customer:
            return Return.err(customer_not_found(command.customer_id))

        # Step 2: Lock the qualifying lines
        lines = await self.work_line_repo.list_unbilled_for_customer(
            command.customer_id, for_update=True
        )
        if not lines:
            logger.info(f"Nothing to invoice for customer {command.customer_id}")
            return Return.ok(None)

        # Step 3: Allocate number
        issued_at = self.clock()
        number = await self.sequence_repo.allocate(issued_at.year)

        # Step 4: Snapshot total
        total = compute_total(lines)

        # Step 5: Create invoice
        invoice = await self.invoice_repo.create(
            Invoice(
                number=number,
                customer_id=command.customer_id,
                total=total,
                issued_at=issued_at,
            )
        )

        # Step 6: Claim lines
        line_ids = [line.id for line in lines]
        claimed = await self.work_line_repo.mark_invoiced(line_ids, invoice.id)
        if claimed != len(line_ids):
            await self.uow.rollback()
            logger.error(
                f"Invoice {number} for customer {command.customer_id} claimed "
                f"{claimed} of {len(line_ids)} lines; rolled back"
            )
            return Return.err(
                Error(
                    code="CONSISTENCY_ERROR",
                    message=f"Only {claimed} of {len(line_ids)} work lines could be claimed",
                    reason="Work lines changed during issuance",
                )
            )

        # Step 7: Commit
        await self.uow.commit()
        logger.info(
            f"Issued invoice {number} for customer {command.customer_id}: "
            f"{len(line_ids)} lines, total {total}"
        )

        # Step 8: Build response from the captured snapshot
        response = IssuedInvoiceResponseDTO(
            invoice_id=invoice.id,
            number=invoice.number,
            customer_id=invoice.customer_id,
            total=total,
            issued_at=invoice.issued_at,
            lines=[
                to_work_line_dto(line).model_copy(
                    update={"invoiced": True, "invoice_id": invoice.id}
                )
                for line in lines
            ],
        )

        if command.render_pdf and self.printer is not None:
            try:
                pdf_bytes = await self.printer.print(invoice, lines)
                response.pdf_base64 = base64.b64encode(pdf_bytes).decode("utf-8")
            except Exception as e:
                logger.error(f"Invoice {number} issued but rendering failed: {e}")

        return Return.ok(response)
