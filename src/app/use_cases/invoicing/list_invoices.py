"""ListInvoices / GetInvoice Use Cases"""

from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.work_line_repository import WorkLineRepository
from src.app.use_cases.work_lines.work_lines import to_work_line_dto
from src.domain.invoice import Invoice
from .dtos import InvoiceResponseDTO, InvoiceDetailResponseDTO
from .reverse_invoice import invoice_not_found


def to_invoice_dto(invoice: Invoice) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        invoice_id=invoice.id,
        number=invoice.number,
        customer_id=invoice.customer_id,
        total=invoice.total,
        issued_at=invoice.issued_at,
    )


class ListInvoices:
    """Use Case: List invoices, most recently issued first"""

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, customer_id: Optional[int] = None) -> Result[List[InvoiceResponseDTO]]:
        try:
            invoices = await self.invoice_repo.list_invoices(customer_id=customer_id)
            return Return.ok([to_invoice_dto(invoice) for invoice in invoices])
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_INVOICES_FAILED",
                    message="Failed to list invoices",
                    reason=str(e),
                )
            )


class GetInvoice:
    """Use Case: Retrieve an invoice with the lines it claimed"""

    def __init__(self, invoice_repo: InvoiceRepository, work_line_repo: WorkLineRepository):
        self.invoice_repo = invoice_repo
        self.work_line_repo = work_line_repo

    async def execute(self, invoice_id: int) -> Result[InvoiceDetailResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(invoice_id))

            lines = await self.work_line_repo.list_by_invoice_id(invoice_id)
            return Return.ok(
                InvoiceDetailResponseDTO(
                    **to_invoice_dto(invoice).model_dump(),
                    lines=[to_work_line_dto(line) for line in lines],
                )
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to load invoice",
                    reason=str(e),
                )
            )
