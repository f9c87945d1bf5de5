"""Catalog API Routes

FastAPI routes for customers and items.
"""

from typing import List
from fastapi import APIRouter, Depends, Response, status

from src.api.schemas.catalog_request import (
    CustomerRequestSchema,
    CustomerPatchSchema,
    ItemRequestSchema,
    ItemPatchSchema,
)
from src.app.use_cases.catalog import (
    CreateCustomer,
    UpdateCustomer,
    DeleteCustomer,
    GetCustomer,
    ListCustomers,
    CreateItem,
    UpdateItem,
    DeleteItem,
    GetItem,
    ListItems,
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerResponseDTO,
    CreateItemCommandDTO,
    UpdateItemCommandDTO,
    ItemResponseDTO,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_unit_of_work
from src.api.error import ClientError

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("/customers", response_model=List[CustomerResponseDTO])
async def list_customers(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """List customers, newest first."""
    result = await ListCustomers(uow.customers).execute()
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.post(
    "/customers",
    response_model=CustomerResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    request: CustomerRequestSchema,
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a customer.

    **Request body:**
    - `name` (required): Customer name
    - `tax_id`, `address`, `city`, `postal_code`, `province`, `phone` (optional)

    **Returns:**
    - 201: Customer created
    - 400: Name is blank
    - 422: Invalid request parameters
    """
    command = CreateCustomerCommandDTO(**request.model_dump())
    result = await CreateCustomer(uow, uow.customers).execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/customers/{customer_id}", response_model=CustomerResponseDTO)
async def get_customer(customer_id: int, uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    result = await GetCustomer(uow.customers).execute(customer_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.patch("/customers/{customer_id}", response_model=CustomerResponseDTO)
async def update_customer(
    customer_id: int,
    request: CustomerPatchSchema,
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
):
    """Update a customer. Omitted fields are left unchanged."""
    command = UpdateCustomerCommandDTO(
        customer_id=customer_id, **request.model_dump(exclude_unset=True)
    )
    result = await UpdateCustomer(uow, uow.customers).execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.delete("/customers/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: int, uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """
    Delete a customer.

    **Returns:**
    - 204: Customer deleted
    - 404: Customer not found
    - 409: Customer still has work lines or invoices
    """
    result = await DeleteCustomer(uow, uow.customers).execute(customer_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/items", response_model=List[ItemResponseDTO])
async def list_items(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """List catalog items, newest first."""
    result = await ListItems(uow.items).execute()
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.post("/items", response_model=ItemResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_item(
    request: ItemRequestSchema,
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a catalog item.

    **Request body:**
    - `name` (required): Item name
    - `price` (optional, >= 0, default 0): Default unit price for new lines
    - `sku` (optional)
    """
    command = CreateItemCommandDTO(**request.model_dump())
    result = await CreateItem(uow, uow.items).execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.get("/items/{item_id}", response_model=ItemResponseDTO)
async def get_item(item_id: int, uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    result = await GetItem(uow.items).execute(item_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.patch("/items/{item_id}", response_model=ItemResponseDTO)
async def update_item(
    item_id: int,
    request: ItemPatchSchema,
    uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work),
):
    command = UpdateItemCommandDTO(item_id=item_id, **request.model_dump(exclude_unset=True))
    result = await UpdateItem(uow, uow.items).execute(command)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return result.value


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(item_id: int, uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """Delete an item. 409 while work lines still use it."""
    result = await DeleteItem(uow, uow.items).execute(item_id)
    if result.is_err():
        raise ClientError.from_error(result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
