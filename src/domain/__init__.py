from .base import BaseModel, IdType
from .customer import Customer
from .item import Item
from .invoice import Invoice
from .work_line import WorkLine
from .invoice_sequence import InvoiceSequence

__all__ = [
    "BaseModel",
    "IdType",
    "Customer",
    "Item",
    "Invoice",
    "WorkLine",
    "InvoiceSequence",
]
