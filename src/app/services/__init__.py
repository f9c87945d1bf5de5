from .unit_of_work import UnitOfWork
from .invoice_renderer import (
    InvoiceRenderer,
    InvoiceDocument,
    SellerBlock,
    build_invoice_document,
)

__all__ = [
    "UnitOfWork",
    "InvoiceRenderer",
    "InvoiceDocument",
    "SellerBlock",
    "build_invoice_document",
]
