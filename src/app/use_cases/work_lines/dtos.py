"""Data Transfer Objects for Work Line Use Cases"""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class CreateWorkLineCommandDTO(BaseModel):
    """
    Command DTO for recording a work line

    price defaults to the item's current price, qty to 1 and work_date to
    today.
    """

    customer_id: int = Field(..., description="Customer the work was done for")
    item_id: int = Field(..., description="Catalog item delivered")
    qty: Decimal = Field(default=Decimal("1"), description="Quantity")
    price: Optional[Decimal] = Field(
        default=None,
        description="Unit price (None = item price at creation time)"
    )
    notes: Optional[str] = Field(default=None, description="Free-text notes")
    work_date: Optional[date] = Field(default=None, description="Work date (None = today)")

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


class UpdateWorkLineCommandDTO(BaseModel):
    """
    Command DTO for editing an unbilled work line

    Only fields explicitly set are applied. An explicit null resets qty to
    1, price to 0 and work_date to today.
    """

    line_id: int
    qty: Optional[Decimal] = None
    price: Optional[Decimal] = None
    notes: Optional[str] = None
    work_date: Optional[date] = None


class WorkLineResponseDTO(BaseModel):
    line_id: int
    customer_id: int
    item_id: int
    qty: Decimal
    price: Decimal
    amount: Decimal = Field(..., description="qty * price at full precision")
    notes: Optional[str] = None
    work_date: date
    invoiced: bool
    invoice_id: Optional[int] = None
    created_at: datetime


class WorkLineListResponseDTO(BaseModel):
    """Work lines in canonical order plus the pending amount among them"""

    lines: List[WorkLineResponseDTO]
    pending_total: Decimal = Field(..., description="Sum of the listed unbilled lines")
