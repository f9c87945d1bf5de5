from .customer_repository import SqlAlchemyCustomerRepository
from .item_repository import SqlAlchemyItemRepository
from .work_line_repository import SqlAlchemyWorkLineRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_sequence_repository import SqlAlchemyInvoiceSequenceRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyItemRepository",
    "SqlAlchemyWorkLineRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceSequenceRepository",
]
