"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for issuance and reversal.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_invoices(self, customer_id: Optional[int] = None) -> List[Invoice]:
        """
        List invoices, most recently issued first

        Args:
            customer_id: Optional filter by customer

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def list_for_year(self, year: int) -> List[Invoice]:
        """Invoices issued during ``year``"""
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        pass
