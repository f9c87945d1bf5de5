"""Work Line Domain Entity

A delivered unit of work or goods for a customer, billable exactly once.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Boolean, CheckConstraint, Date, ForeignKey, Numeric, Text
from src.domain.base import BaseModel, IdType


class WorkLine(BaseModel, table=True):
    """
    Work Line - Unbilled or invoiced delivery line

    Domain Rules:
    - invoiced is True if and only if invoice_id is set
    - amount = qty * price, computed on demand, never stored
    - qty/price/work_date/notes are editable only while unbilled
    - Canonical order: work_date asc, created_at asc, id asc
    """

    __tablename__ = "work_lines"
    __table_args__ = (
        CheckConstraint(
            '(invoiced AND invoice_id IS NOT NULL) OR (NOT invoiced AND invoice_id IS NULL)',
            name='work_line_invoiced_has_invoice',
        ),
        Index('ix_work_lines_customer_invoiced', 'customer_id', 'invoiced'),
        Index('ix_work_lines_invoice_id', 'invoice_id'),
        Index('ix_work_lines_ordering', 'work_date', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique work line identifier (auto-increment)"
    )

    customer_id: int = Field(
        sa_column=Column(IdType, ForeignKey("customers.id"), nullable=False),
        description="Foreign key to Customer"
    )

    item_id: int = Field(
        sa_column=Column(IdType, ForeignKey("items.id"), nullable=False),
        description="Foreign key to Item"
    )

    qty: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Quantity delivered (precision: 18,6)"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Unit price, seeded from the item at creation"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
        description="Free-text notes"
    )

    work_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Date the work was done (no time component)"
    )

    invoiced: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
        description="Whether an invoice has claimed this line"
    )

    invoice_id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, ForeignKey("invoices.id"), nullable=True),
        description="Invoice that claimed this line (None while unbilled)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Line creation timestamp"
    )

    @property
    def amount(self) -> Decimal:
        """Line amount (qty * price) at full precision"""
        return Decimal(self.qty) * Decimal(self.price)

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "customer_id": 1,
                "item_id": 1,
                "qty": "2.000000",
                "price": "10.000000",
                "notes": "Cambio de cadena",
                "work_date": "2025-03-14",
                "invoiced": False,
                "invoice_id": None,
                "created_at": "2025-03-14T09:30:00Z"
            }
        }
