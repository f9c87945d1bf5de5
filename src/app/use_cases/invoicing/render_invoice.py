"""RenderInvoice Use Case

Renders an issued invoice and its claimed lines to a printable document.
"""

import base64
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.work_line_repository import WorkLineRepository
from .dtos import RenderedInvoiceDTO
from .printing import InvoicePrinter
from .reverse_invoice import invoice_not_found


class RenderInvoice:
    """
    Use Case: Render an invoice for printing

    Business Rules:
    1. Invoice must exist
    2. Rows are the lines currently claimed by the invoice, canonical order
    3. The printed total is the one captured at issuance

    Flow:
    1. Retrieve invoice by ID
    2. Retrieve claimed lines
    3. Render through the printer
    4. Return document as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        work_line_repo: WorkLineRepository,
        printer: InvoicePrinter,
    ):
        self.invoice_repo = invoice_repo
        self.work_line_repo = work_line_repo
        self.printer = printer

    async def execute(self, invoice_id: int) -> Result[RenderedInvoiceDTO]:
        """
        Execute invoice rendering

        Args:
            invoice_id: Invoice ID to render

        Returns:
            Result[RenderedInvoiceDTO]: Success with document or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(invoice_not_found(invoice_id))

            # Step 2: Retrieve claimed lines
            lines = await self.work_line_repo.list_by_invoice_id(invoice_id)

            # Step 3: Render
            content = await self.printer.print(invoice, lines)

            # Step 4: Build response
            return Return.ok(
                RenderedInvoiceDTO(
                    invoice_id=invoice.id,
                    number=invoice.number,
                    media_type=self.printer.media_type,
                    filename=f"invoice_{invoice.number}.pdf",
                    pdf_base64=base64.b64encode(content).decode("utf-8"),
                    generated_at=datetime.utcnow(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="RENDER_INVOICE_FAILED",
                    message="Failed to render invoice",
                    reason=str(e),
                )
            )
