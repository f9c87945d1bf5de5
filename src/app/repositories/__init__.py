from .customer_repository import CustomerRepository
from .item_repository import ItemRepository
from .work_line_repository import WorkLineRepository
from .invoice_repository import InvoiceRepository
from .invoice_sequence_repository import InvoiceSequenceRepository

__all__ = [
    "CustomerRepository",
    "ItemRepository",
    "WorkLineRepository",
    "InvoiceRepository",
    "InvoiceSequenceRepository",
]
