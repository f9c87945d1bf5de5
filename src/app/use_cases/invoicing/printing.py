"""Invoice printing helper

Resolves customer and item lookups for an invoice's lines and hands the
projected document to the configured renderer.
"""

from typing import List
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.item_repository import ItemRepository
from src.app.services.invoice_renderer import (
    InvoiceRenderer,
    SellerBlock,
    build_invoice_document,
)
from src.domain.invoice import Invoice
from src.domain.work_line import WorkLine


class InvoicePrinter:
    def __init__(
        self,
        customer_repo: CustomerRepository,
        item_repo: ItemRepository,
        renderer: InvoiceRenderer,
        seller: SellerBlock,
        currency_symbol: str = "€",
    ):
        self.customer_repo = customer_repo
        self.item_repo = item_repo
        self.renderer = renderer
        self.seller = seller
        self.currency_symbol = currency_symbol

    @property
    def media_type(self) -> str:
        return self.renderer.media_type

    async def print(self, invoice: Invoice, lines: List[WorkLine]) -> bytes:
        customers = await self.customer_repo.get_by_ids([invoice.customer_id])
        items = await self.item_repo.get_by_ids(sorted({line.item_id for line in lines}))

        document = build_invoice_document(
            invoice=invoice,
            lines=lines,
            customers_by_id={customer.id: customer for customer in customers},
            items_by_id={item.id: item for item in items},
            seller=self.seller,
            currency_symbol=self.currency_symbol,
        )
        return self.renderer.render(document)
