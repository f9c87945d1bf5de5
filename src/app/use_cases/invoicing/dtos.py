"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for issuance, reversal, listing and rendering.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.app.use_cases.work_lines.dtos import WorkLineResponseDTO


class IssueInvoiceCommandDTO(BaseModel):
    """
    Command DTO for issuing an invoice

    Used as input to IssueInvoice use case.
    """

    customer_id: int = Field(
        ...,
        description="Customer whose unbilled lines are invoiced"
    )

    render_pdf: bool = Field(
        default=False,
        description="Render the issued invoice to PDF and attach it (base64)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "render_pdf": True
            }
        }


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for an invoice

    total keeps full stored precision; round only for display.
    """

    invoice_id: int = Field(..., description="Invoice ID")
    number: str = Field(..., description="Invoice number (YYYY-NNNN)")
    customer_id: int = Field(..., description="Customer identifier")
    total: Decimal = Field(..., description="Total captured at issuance")
    issued_at: datetime = Field(..., description="Issuance timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 1,
                "number": "2025-0001",
                "customer_id": 1,
                "total": "25.500000",
                "issued_at": "2025-03-31T12:00:00Z"
            }
        }


class InvoiceDetailResponseDTO(InvoiceResponseDTO):
    """Invoice with the work lines it claimed"""

    lines: List[WorkLineResponseDTO] = Field(
        default_factory=list,
        description="Claimed work lines in canonical order"
    )


class IssuedInvoiceResponseDTO(InvoiceDetailResponseDTO):
    """
    Response DTO for a successful issuance

    lines is the snapshot of the lines claimed by this invoice.
    """

    pdf_base64: Optional[str] = Field(
        default=None,
        description="Base64-encoded PDF, when rendering was requested and succeeded"
    )


class ReversedInvoiceResponseDTO(BaseModel):
    """Response DTO for invoice reversal"""

    invoice_id: int = Field(..., description="Deleted invoice ID")
    number: str = Field(..., description="Deleted invoice number (not reused)")
    released_line_ids: List[int] = Field(
        default_factory=list,
        description="Work lines returned to unbilled state"
    )


class PendingCustomerDTO(BaseModel):
    """Unbilled lines of one customer"""

    customer_id: int
    customer_name: str = ""
    line_count: int
    pending_total: Decimal
    lines: List[WorkLineResponseDTO]


class PendingSummaryResponseDTO(BaseModel):
    """Customers with unbilled lines, in order of their earliest pending line"""

    customers: List[PendingCustomerDTO]
    pending_total: Decimal


class RenderedInvoiceDTO(BaseModel):
    """Rendered invoice document"""

    invoice_id: int
    number: str
    media_type: str
    filename: str
    pdf_base64: str
    generated_at: datetime
