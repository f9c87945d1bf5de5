"""Work Line Repository Interface

Defines the contract for work line persistence, including the bulk
claim/release operations used by invoicing.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.work_line import WorkLine


class WorkLineRepository(ABC):
    """
    Repository interface for WorkLine persistence

    Every listing returns lines in canonical order:
    work_date asc, created_at asc, id asc.
    """

    @abstractmethod
    async def create(self, line: WorkLine) -> WorkLine:
        pass

    @abstractmethod
    async def get_by_id(self, line_id: int) -> Optional[WorkLine]:
        pass

    @abstractmethod
    async def list_lines(
        self,
        customer_id: Optional[int] = None,
        invoiced: Optional[bool] = None,
    ) -> List[WorkLine]:
        """
        List work lines in canonical order

        Args:
            customer_id: Optional filter by customer
            invoiced: Optional filter by billing state

        Returns:
            List of work lines
        """
        pass

    @abstractmethod
    async def list_unbilled_for_customer(
        self, customer_id: int, for_update: bool = False
    ) -> List[WorkLine]:
        """
        List a customer's unbilled lines in canonical order

        Args:
            customer_id: Customer identifier
            for_update: If True, locks the rows with SELECT FOR UPDATE

        Returns:
            Unbilled work lines of the customer
        """
        pass

    @abstractmethod
    async def list_by_invoice_id(self, invoice_id: int) -> List[WorkLine]:
        pass

    @abstractmethod
    async def update(self, line: WorkLine) -> WorkLine:
        pass

    @abstractmethod
    async def delete(self, line: WorkLine) -> None:
        pass

    @abstractmethod
    async def mark_invoiced(self, line_ids: List[int], invoice_id: int) -> int:
        """
        Claim unbilled lines for an invoice in one statement

        Only lines that are still unbilled are touched.

        Args:
            line_ids: Lines to claim
            invoice_id: Invoice claiming them

        Returns:
            Number of lines actually claimed
        """
        pass

    @abstractmethod
    async def release_invoice(self, invoice_id: int) -> List[int]:
        """
        Release every line claimed by an invoice

        Args:
            invoice_id: Invoice whose lines are released

        Returns:
            IDs of the released lines
        """
        pass
