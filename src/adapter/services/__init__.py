from .unit_of_work import SqlAlchemyUnitOfWork
from .pdf_service import ReportLabInvoiceRenderer

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ReportLabInvoiceRenderer",
]
