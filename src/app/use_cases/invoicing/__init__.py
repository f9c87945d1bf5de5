"""Invoicing use cases"""
from .issue_invoice import IssueInvoice
from .reverse_invoice import ReverseInvoice
from .pending_summary import GetPendingSummary
from .list_invoices import ListInvoices, GetInvoice
from .render_invoice import RenderInvoice
from .printing import InvoicePrinter
from .dtos import (
    IssueInvoiceCommandDTO,
    InvoiceResponseDTO,
    InvoiceDetailResponseDTO,
    IssuedInvoiceResponseDTO,
    ReversedInvoiceResponseDTO,
    PendingCustomerDTO,
    PendingSummaryResponseDTO,
    RenderedInvoiceDTO,
)

__all__ = [
    "IssueInvoice",
    "ReverseInvoice",
    "GetPendingSummary",
    "ListInvoices",
    "GetInvoice",
    "RenderInvoice",
    "InvoicePrinter",
    "IssueInvoiceCommandDTO",
    "InvoiceResponseDTO",
    "InvoiceDetailResponseDTO",
    "IssuedInvoiceResponseDTO",
    "ReversedInvoiceResponseDTO",
    "PendingCustomerDTO",
    "PendingSummaryResponseDTO",
    "RenderedInvoiceDTO",
]
