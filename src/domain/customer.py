"""Customer Domain Entity

A billable party. Work lines and invoices reference customers by id.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String
from src.domain.base import BaseModel, IdType


class Customer(BaseModel, table=True):
    """
    Customer - Billable party

    Domain Rules:
    - name is required and stored trimmed
    - Optional contact fields are stored as NULL when blank
    - Cannot be deleted while work lines or invoices reference it
    """

    __tablename__ = "customers"
    __table_args__ = (
        Index('ix_customers_created_at', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique customer identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer name (required)"
    )

    tax_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Tax identification number"
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Street address"
    )

    city: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
        description="City"
    )

    postal_code: Optional[str] = Field(
        default=None,
        sa_column=Column(String(20), nullable=True),
        description="Postal code"
    )

    province: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
        description="Province or region"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
        description="Contact phone"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Customer creation timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Talleres Ribera S.L.",
                "tax_id": "B12345678",
                "address": "Calle Mayor 4",
                "city": "Logroño",
                "postal_code": "26001",
                "province": "La Rioja",
                "phone": "941000000",
                "created_at": "2025-01-01T00:00:00Z"
            }
        }
