"""Request schemas for Catalog API

Pydantic models for validating incoming customer and item requests.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class CustomerRequestSchema(BaseModel):
    """
    Request schema for creating a customer

    Used for POST /catalog/customers endpoint.
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Customer name (required, non-empty)"
    )
    tax_id: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    province: Optional[str] = None
    phone: Optional[str] = None


class CustomerPatchSchema(BaseModel):
    """Request schema for PATCH /catalog/customers/{id}; omitted fields are kept"""

    name: Optional[str] = Field(default=None, min_length=1)
    tax_id: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    province: Optional[str] = None
    phone: Optional[str] = None


class ItemRequestSchema(BaseModel):
    """
    Request schema for creating an item

    Used for POST /catalog/items endpoint.
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Item name (required, non-empty)"
    )
    price: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Default unit price (>= 0)"
    )
    sku: Optional[str] = None


class ItemPatchSchema(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Decimal] = Field(default=None, ge=0)
    sku: Optional[str] = None
