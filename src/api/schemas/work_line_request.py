"""Request schemas for Work Line API"""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class WorkLineRequestSchema(BaseModel):
    """
    Request schema for recording a work line

    Used for POST /work-lines endpoint.
    """

    customer_id: int = Field(..., description="Customer (required)")
    item_id: int = Field(..., description="Item (required)")
    qty: Decimal = Field(default=Decimal("1"), description="Quantity")
    price: Optional[Decimal] = Field(
        default=None,
        description="Unit price; omitted = item price"
    )
    notes: Optional[str] = None
    work_date: Optional[date] = None

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "item_id": 1,
                "qty": "2",
                "price": "10.00",
                "notes": "Cambio de cadena",
                "work_date": "2025-03-14"
            }
        }


class WorkLinePatchSchema(BaseModel):
    """Request schema for PATCH /work-lines/{id}; only unbilled lines"""

    qty: Optional[Decimal] = None
    price: Optional[Decimal] = None
    notes: Optional[str] = None
    work_date: Optional[date] = None
