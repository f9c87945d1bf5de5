"""Invoicing API Routes

FastAPI routes for pending lines, invoice issuance, reversal and printing.
"""

import base64
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from config import ApplicationConfig
from src.api.schemas.invoicing_request import IssueInvoiceRequestSchema
from src.app.services.invoice_renderer import InvoiceRenderer, SellerBlock
from src.app.use_cases.invoicing import (
    IssueInvoice,
    ReverseInvoice,
    GetPendingSummary,
    ListInvoices,
    GetInvoice,
    RenderInvoice,
    InvoicePrinter,
    IssueInvoiceCommandDTO,
    InvoiceResponseDTO,
    InvoiceDetailResponseDTO,
    IssuedInvoiceResponseDTO,
    ReversedInvoiceResponseDTO,
    PendingSummaryResponseDTO,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_unit_of_work, get_renderer, get_seller
from src.api.error import ClientError

router = APIRouter(prefix="/invoicing", tags=["Invoicing"])


def build_printer(
    uow: SqlAlchemyUnitOfWork, renderer: InvoiceRenderer, seller: SellerBlock
) -> InvoicePrinter:
    return InvoicePrinter(
        customer_repo=uow.customers,
        item_repo=uow.items,
        renderer=renderer,
        seller=seller,
        currency_symbol=ApplicationConfig.CURRENCY_SYMBOL,
    )


@router.get("/pending", response_model=PendingSummaryResponseDTO)
async def get_pending(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """
    Unbilled work lines grouped by customer.

    Use this to choose which customer to invoice next.
    """
    result = await GetPendingSummary(uow.work_lines, uow.customers).execute()
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/invoices", response_model=List[InvoiceResponseDTO])
async def list_invoices(
    customer_id: Optional[int] = Query(default=None, description="Filter by customer"),
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
):
    """List invoices, most recently issued first."""
    result = await ListInvoices(uow.invoices).execute(customer_id=customer_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.post(
    "/invoices",
    response_model=IssuedInvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        204: {"description": "Customer has no unbilled work lines; nothing issued"},
        404: {
            "description": "Customer not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "CUSTOMER_NOT_FOUND",
                            "message": "Customer with ID 123 not found"
                        }
                    }
                }
            }
        },
        409: {
            "description": "Work lines changed during issuance or number conflict",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "CONSISTENCY_ERROR",
                            "message": "Only 1 of 2 work lines could be claimed"
                        }
                    }
                }
            }
        }
    }
)
async def issue_invoice(
    request: IssueInvoiceRequestSchema,
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
    renderer: InvoiceRenderer = Depends(get_renderer),
    seller: SellerBlock = Depends(get_seller),
):
    """
    Invoice every unbilled work line of a customer.

    **Request body:**
    - `customer_id` (required): Customer to invoice
    - `render_pdf` (optional): Attach the PDF as `pdf_base64`

    **Example response:**
    ```json
    {
      "invoice_id": 1,
      "number": "2025-0001",
      "customer_id": 1,
      "total": "25.500000",
      "issued_at": "2025-03-31T12:00:00",
      "lines": [...],
      "pdf_base64": null
    }
    ```

    **Returns:**
    - 201: Invoice issued, lines claimed
    - 204: Nothing to invoice
    - 404: Customer not found
    - 409: Consistency or numbering conflict (nothing was written)
    """
    use_case = IssueInvoice(
        uow=uow,
        customer_repo=uow.customers,
        work_line_repo=uow.work_lines,
        invoice_repo=uow.invoices,
        sequence_repo=uow.sequences,
        printer=build_printer(uow, renderer, seller),
        max_retries=ApplicationConfig.INVOICE_NUMBER_MAX_RETRIES,
    )
    result = await use_case.execute(
        IssueInvoiceCommandDTO(customer_id=request.customer_id, render_pdf=request.render_pdf)
    )

    if result.is_err():
        raise ClientError.from_error(result.error)
    if result.value is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return result.value


@router.get("/invoices/{invoice_id}", response_model=InvoiceDetailResponseDTO)
async def get_invoice(invoice_id: int, uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """Invoice with the work lines it claimed."""
    result = await GetInvoice(uow.invoices, uow.work_lines).execute(invoice_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.delete("/invoices/{invoice_id}", response_model=ReversedInvoiceResponseDTO)
async def delete_invoice(invoice_id: int, uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """
    Delete an invoice and release its work lines back to unbilled.

    **Returns:**
    - 200: Invoice deleted; `released_line_ids` lists the freed lines
    - 404: Invoice not found
    """
    result = await ReverseInvoice(uow, uow.work_lines, uow.invoices).execute(invoice_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get(
    "/invoices/{invoice_id}/pdf",
    responses={
        200: {
            "content": {"application/pdf": {}},
            "description": "PDF document"
        },
        404: {"description": "Invoice not found"},
    }
)
async def download_invoice_pdf(
    invoice_id: int,
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
    renderer: InvoiceRenderer = Depends(get_renderer),
    seller: SellerBlock = Depends(get_seller),
):
    """Download the printable invoice."""
    use_case = RenderInvoice(uow.invoices, uow.work_lines, build_printer(uow, renderer, seller))
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise ClientError.from_error(result.error)

    return Response(
        content=base64.b64decode(result.value.pdf_base64),
        media_type=result.value.media_type,
        headers={
            "Content-Disposition": f"attachment; filename={result.value.filename}"
        }
    )
