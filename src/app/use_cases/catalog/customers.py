"""Customer Use Cases

Create, update, delete and list customers.
"""

import logging
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from .dtos import CreateCustomerCommandDTO, UpdateCustomerCommandDTO, CustomerResponseDTO

logger = logging.getLogger(__name__)

OPTIONAL_FIELDS = ("tax_id", "address", "city", "postal_code", "province", "phone")


def clean_text(value: Optional[str]) -> Optional[str]:
    """Strip a text field; blank becomes None"""
    if value is None:
        return None
    value = value.strip()
    return value or None


def blank_name_error(entity: str) -> Error:
    return Error(
        code="VALIDATION_ERROR",
        message=f"{entity} name is required",
        reason="Name is empty or blank",
    )


def customer_not_found(customer_id: int) -> Error:
    return Error(
        code="CUSTOMER_NOT_FOUND",
        message=f"Customer with ID {customer_id} not found",
        reason="Customer does not exist",
    )


def to_customer_dto(customer: Customer) -> CustomerResponseDTO:
    return CustomerResponseDTO(
        customer_id=customer.id,
        name=customer.name,
        tax_id=customer.tax_id,
        address=customer.address,
        city=customer.city,
        postal_code=customer.postal_code,
        province=customer.province,
        phone=customer.phone,
        created_at=customer.created_at,
    )


class CreateCustomer:
    """
    Use Case: Create a customer

    Business Rules:
    1. Name is required (blank after trimming is rejected before any write)
    2. Blank optional fields are stored as NULL
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: CreateCustomerCommandDTO) -> Result[CustomerResponseDTO]:
        name = clean_text(command.name)
        if not name:
            return Return.err(blank_name_error("Customer"))

        try:
            customer = Customer(
                name=name,
                **{field: clean_text(getattr(command, field)) for field in OPTIONAL_FIELDS},
            )
            created = await self.customer_repo.create(customer)
            await self.uow.commit()
            return Return.ok(to_customer_dto(created))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_CUSTOMER_FAILED",
                    message="Failed to create customer",
                    reason=str(e),
                )
            )


class UpdateCustomer:
    """
    Use Case: Update a customer's attributes

    Only fields present in the command are changed; identity never changes.
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: UpdateCustomerCommandDTO) -> Result[CustomerResponseDTO]:
        changes = command.model_dump(exclude_unset=True, exclude={"customer_id"})

        if "name" in changes:
            changes["name"] = clean_text(changes["name"])
            if not changes["name"]:
                return Return.err(blank_name_error("Customer"))

        try:
            customer = await self.customer_repo.get_by_id(command.customer_id)
            if not customer:
                return Return.err(customer_not_found(command.customer_id))

            for field, value in changes.items():
                setattr(customer, field, clean_text(value))

            updated = await self.customer_repo.update(customer)
            await self.uow.commit()
            return Return.ok(to_customer_dto(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_CUSTOMER_FAILED",
                    message="Failed to update customer",
                    reason=str(e),
                )
            )


class DeleteCustomer:
    """
    Use Case: Delete a customer

    Business Rules:
    1. Deletion is blocked while work lines or invoices reference the
       customer (CUSTOMER_IN_USE); nothing is cascaded
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int) -> Result[int]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id)
            if not customer:
                return Return.err(customer_not_found(customer_id))

            if await self.customer_repo.is_referenced(customer_id):
                return Return.err(
                    Error(
                        code="CUSTOMER_IN_USE",
                        message=f"Customer {customer_id} still has work lines or invoices",
                        reason="Delete or reverse them first",
                    )
                )

            await self.customer_repo.delete(customer)
            await self.uow.commit()
            logger.info(f"Deleted customer {customer_id}")
            return Return.ok(customer_id)

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_CUSTOMER_FAILED",
                    message="Failed to delete customer",
                    reason=str(e),
                )
            )


class GetCustomer:
    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, customer_id: int) -> Result[CustomerResponseDTO]:
        try:
            customer = await self.customer_repo.get_by_id(customer_id)
            if not customer:
                return Return.err(customer_not_found(customer_id))
            return Return.ok(to_customer_dto(customer))
        except Exception as e:
            return Return.err(
                Error(code="GET_CUSTOMER_FAILED", message="Failed to load customer", reason=str(e))
            )


class ListCustomers:
    """Use Case: List customers, newest first"""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self) -> Result[List[CustomerResponseDTO]]:
        try:
            customers = await self.customer_repo.list_all()
            return Return.ok([to_customer_dto(customer) for customer in customers])
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_CUSTOMERS_FAILED",
                    message="Failed to list customers",
                    reason=str(e),
                )
            )
