"""Invoice Sequence Repository Interface

Defines the contract for atomic invoice number allocation.
"""

from abc import ABC, abstractmethod


class InvoiceSequenceRepository(ABC):
    """Repository interface for the per-year invoice counter"""

    @abstractmethod
    async def allocate(self, year: int) -> str:
        """
        Allocate the next invoice number for ``year``

        Must run inside the issuing transaction so the counter row stays
        locked until the invoice is committed or rolled back.

        Args:
            year: Issuance year

        Returns:
            Invoice number, e.g. "2025-0001"
        """
        pass
