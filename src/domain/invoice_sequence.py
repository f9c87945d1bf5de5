"""Invoice Sequence Domain Entity

Per-year counter backing invoice number allocation.
"""

from datetime import datetime
from sqlmodel import Field, Column
from sqlalchemy import Integer
from src.domain.base import BaseModel


class InvoiceSequence(BaseModel, table=True):
    """
    Invoice Sequence - Last sequence number handed out for a year

    Domain Rules:
    - One row per calendar year
    - last_value only grows; deleted invoices do not give numbers back
    - Read with SELECT FOR UPDATE inside the issuing transaction
    """

    __tablename__ = "invoice_sequences"

    year: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=False),
        description="Calendar year"
    )

    last_value: int = Field(
        default=0,
        sa_column=Column(Integer, nullable=False, default=0),
        description="Last allocated sequence number for the year"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last allocation timestamp"
    )
