"""Invoice Rendering

Read-only projection of an invoice into a printable document, and the
renderer interface that turns that document into bytes.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from src.domain.aggregation import round_for_display, sort_work_lines
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.item import Item
from src.domain.work_line import WorkLine


class SellerBlock(BaseModel):
    name: str
    address: str = ""
    tax_id: str = ""


class CustomerBlock(BaseModel):
    name: str = ""
    tax_id: Optional[str] = None
    address: Optional[str] = None
    locality: Optional[str] = Field(
        default=None,
        description="'postal_code city (province)', None when all parts are blank"
    )
    phone: Optional[str] = None


class DocumentRow(BaseModel):
    description: str
    notes: Optional[str] = None
    work_date: Optional[date] = None
    qty: Decimal
    price: Decimal
    amount: Decimal


class InvoiceDocument(BaseModel):
    """Everything needed to print an invoice, money already rounded to cents"""

    number: str
    issued_at: datetime
    currency_symbol: str
    seller: SellerBlock
    customer: CustomerBlock
    rows: List[DocumentRow]
    total: Decimal


def format_locality(customer: Customer) -> Optional[str]:
    head = " ".join(part for part in (customer.postal_code, customer.city) if part)
    if customer.province:
        head = f"{head} ({customer.province})" if head else f"({customer.province})"
    return head or None


def build_invoice_document(
    invoice: Invoice,
    lines: List[WorkLine],
    customers_by_id: Dict[int, Customer],
    items_by_id: Dict[int, Item],
    seller: SellerBlock,
    currency_symbol: str = "€",
) -> InvoiceDocument:
    """
    Project an invoice and its claimed lines into an InvoiceDocument

    Pure function: lookups that miss render as empty text.

    Args:
        invoice: Issued invoice
        lines: Lines claimed by the invoice; printed in canonical order
        customers_by_id: Customer lookup
        items_by_id: Item lookup
        seller: Issuing company block
        currency_symbol: Symbol printed before amounts

    Returns:
        InvoiceDocument ready for a renderer
    """
    customer = customers_by_id.get(invoice.customer_id)
    if customer is not None:
        customer_block = CustomerBlock(
            name=customer.name or "",
            tax_id=customer.tax_id,
            address=customer.address,
            locality=format_locality(customer),
            phone=customer.phone,
        )
    else:
        customer_block = CustomerBlock()

    rows = []
    for line in sort_work_lines(lines):
        item = items_by_id.get(line.item_id)
        rows.append(
            DocumentRow(
                description=item.name if item is not None else "",
                notes=line.notes or None,
                work_date=line.work_date,
                qty=round_for_display(line.qty),
                price=round_for_display(line.price),
                amount=round_for_display(line.amount),
            )
        )

    return InvoiceDocument(
        number=invoice.number,
        issued_at=invoice.issued_at,
        currency_symbol=currency_symbol,
        seller=seller,
        customer=customer_block,
        rows=rows,
        total=round_for_display(invoice.total or Decimal("0")),
    )


class InvoiceRenderer(ABC):
    """
    Service interface for invoice rendering

    Implementations turn an InvoiceDocument into a printable file.
    """

    media_type: str = "application/octet-stream"

    @abstractmethod
    def render(self, document: InvoiceDocument) -> bytes:
        """
        Render the document

        Args:
            document: Invoice projection to render

        Returns:
            Rendered file as bytes
        """
        pass
