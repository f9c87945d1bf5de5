"""Catalog use cases (customers and items)"""
from .customers import (
    CreateCustomer,
    UpdateCustomer,
    DeleteCustomer,
    GetCustomer,
    ListCustomers,
)
from .items import CreateItem, UpdateItem, DeleteItem, GetItem, ListItems
from .dtos import (
    CreateCustomerCommandDTO,
    UpdateCustomerCommandDTO,
    CustomerResponseDTO,
    CreateItemCommandDTO,
    UpdateItemCommandDTO,
    ItemResponseDTO,
)

__all__ = [
    "CreateCustomer",
    "UpdateCustomer",
    "DeleteCustomer",
    "GetCustomer",
    "ListCustomers",
    "CreateItem",
    "UpdateItem",
    "DeleteItem",
    "GetItem",
    "ListItems",
    "CreateCustomerCommandDTO",
    "UpdateCustomerCommandDTO",
    "CustomerResponseDTO",
    "CreateItemCommandDTO",
    "UpdateItemCommandDTO",
    "ItemResponseDTO",
]
