"""Item Domain Entity

Catalog entry whose price seeds new work lines.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Numeric, String
from src.domain.base import BaseModel, IdType


class Item(BaseModel, table=True):
    """
    Item - Catalog article or service

    Domain Rules:
    - name is required
    - price is non-negative
    - Changing the price does not affect existing work lines
    """

    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint('price >= 0', name='item_price_non_negative'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique item identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Item name (required)"
    )

    price: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Default unit price (must be >= 0, precision: 18,6)"
    )

    sku: Optional[str] = Field(
        default=None,
        sa_column=Column(String(100), nullable=True),
        description="Stock keeping unit"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Item creation timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "name": "Hora de mano de obra",
                "price": "35.000000",
                "sku": "MO-01",
                "created_at": "2025-01-01T00:00:00Z"
            }
        }
