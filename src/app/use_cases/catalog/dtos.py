"""Data Transfer Objects for Catalog Use Cases

Pydantic models for customer and item commands and responses.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class CreateCustomerCommandDTO(BaseModel):
    """
    Command DTO for creating a customer

    Blank optional fields are stored as NULL.
    """

    name: str = Field(..., description="Customer name (required, non-blank)")
    tax_id: Optional[str] = Field(default=None, description="Tax identification number")
    address: Optional[str] = Field(default=None, description="Street address")
    city: Optional[str] = Field(default=None, description="City")
    postal_code: Optional[str] = Field(default=None, description="Postal code")
    province: Optional[str] = Field(default=None, description="Province or region")
    phone: Optional[str] = Field(default=None, description="Contact phone")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Talleres Ribera S.L.",
                "tax_id": "B12345678",
                "address": "Calle Mayor 4",
                "city": "Logroño",
                "postal_code": "26001",
                "province": "La Rioja",
                "phone": "941000000"
            }
        }


class UpdateCustomerCommandDTO(BaseModel):
    """
    Command DTO for updating a customer

    Only fields explicitly set are applied.
    """

    customer_id: int = Field(..., description="Customer to update")
    name: Optional[str] = Field(default=None, description="New name (non-blank if given)")
    tax_id: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    province: Optional[str] = None
    phone: Optional[str] = None


class CustomerResponseDTO(BaseModel):
    customer_id: int
    name: str
    tax_id: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    postal_code: Optional[str] = None
    province: Optional[str] = None
    phone: Optional[str] = None
    created_at: datetime


class CreateItemCommandDTO(BaseModel):
    """
    Command DTO for creating a catalog item

    A missing price is stored as 0.
    """

    name: str = Field(..., description="Item name (required, non-blank)")
    price: Decimal = Field(default=Decimal("0"), ge=0, description="Default unit price (>= 0)")
    sku: Optional[str] = Field(default=None, description="Stock keeping unit")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Hora de mano de obra",
                "price": "35.00",
                "sku": "MO-01"
            }
        }


class UpdateItemCommandDTO(BaseModel):
    """Command DTO for updating an item (only explicitly set fields apply)"""

    item_id: int = Field(..., description="Item to update")
    name: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    sku: Optional[str] = None


class ItemResponseDTO(BaseModel):
    item_id: int
    name: str
    price: Decimal
    sku: Optional[str] = None
    created_at: datetime
