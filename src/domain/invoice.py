"""Invoice Domain Entity

An issued invoice. The total is a snapshot of the claimed lines at issuance.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String
from src.domain.base import BaseModel, IdType


class Invoice(BaseModel, table=True):
    """
    Invoice - Issued invoice for a customer's work lines

    Domain Rules:
    - number is unique, format YYYY-NNNN
    - total is computed once at issuance and never recomputed
    - Deleting an invoice releases every line it claimed
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_issued_at', 'issued_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    number: str = Field(
        sa_column=Column(String(20), nullable=False, unique=True),
        description="Sequential invoice number (e.g., 2025-0001)"
    )

    customer_id: int = Field(
        sa_column=Column(IdType, ForeignKey("customers.id"), nullable=False),
        description="Foreign key to Customer"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(30, 12), nullable=False),
        description="Sum of claimed line amounts at issuance (precision: 30,12)"
    )

    issued_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Issuance timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "number": "2025-0001",
                "customer_id": 1,
                "total": "25.500000000000",
                "issued_at": "2025-03-31T12:00:00Z"
            }
        }
