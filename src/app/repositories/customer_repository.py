"""Customer Repository Interface

Defines the contract for customer persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """Repository interface for Customer persistence"""

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """
        Create a new customer

        Args:
            customer: Customer entity to persist

        Returns:
            Created Customer with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    async def get_by_ids(self, customer_ids: List[int]) -> List[Customer]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Customer]:
        """Return all customers, newest first"""
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        pass

    @abstractmethod
    async def is_referenced(self, customer_id: int) -> bool:
        """
        Check whether any work line or invoice references the customer

        Used to block deletion instead of leaving orphaned references.
        """
        pass
