"""Unit tests for the printable invoice projection"""

from datetime import date, datetime
from decimal import Decimal

from src.app.services.invoice_renderer import (
    SellerBlock,
    build_invoice_document,
    format_locality,
)
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.item import Item
from src.domain.work_line import WorkLine


SELLER = SellerBlock(name="Taller Ejemplo", address="Calle Uno 1", tax_id="B00000000")


def sample_invoice():
    return Invoice(
        id=7,
        number="2025-0001",
        customer_id=1,
        total=Decimal("25.500000"),
        issued_at=datetime(2025, 3, 31, 12, 0),
    )


def sample_lines():
    return [
        WorkLine(
            id=1, customer_id=1, item_id=10, qty=Decimal("2"), price=Decimal("10.00"),
            notes="Cambio de cadena", work_date=date(2025, 3, 1),
            invoiced=True, invoice_id=7,
        ),
        WorkLine(
            id=2, customer_id=1, item_id=11, qty=Decimal("1"), price=Decimal("5.505"),
            notes=None, work_date=date(2025, 3, 2),
            invoiced=True, invoice_id=7,
        ),
    ]


class TestBuildInvoiceDocument:
    def test_rows_and_total(self):
        customer = Customer(id=1, name="Ana", city="Logroño", postal_code="26001", province="La Rioja")
        items = {10: Item(id=10, name="Cadena", price=Decimal("10")), 11: Item(id=11, name="Engrase", price=Decimal("5"))}

        document = build_invoice_document(
            sample_invoice(), sample_lines(), {1: customer}, items, SELLER
        )

        assert document.number == "2025-0001"
        assert document.customer.name == "Ana"
        assert document.customer.locality == "26001 Logroño (La Rioja)"
        assert [row.description for row in document.rows] == ["Cadena", "Engrase"]
        assert document.rows[0].notes == "Cambio de cadena"
        assert document.rows[0].amount == Decimal("20.00")
        assert document.rows[1].price == Decimal("5.51")
        assert document.total == Decimal("25.50")
        assert document.currency_symbol == "€"

    def test_total_is_the_issued_snapshot(self):
        """Rows may change after issuance; the printed total does not"""
        document = build_invoice_document(
            sample_invoice(), sample_lines()[:1], {}, {}, SELLER
        )

        assert document.total == Decimal("25.50")

    def test_missing_lookups_render_empty(self):
        document = build_invoice_document(sample_invoice(), sample_lines(), {}, {}, SELLER)

        assert document.customer.name == ""
        assert document.customer.locality is None
        assert all(row.description == "" for row in document.rows)


class TestFormatLocality:
    def test_all_parts(self):
        customer = Customer(name="x", postal_code="26001", city="Logroño", province="La Rioja")
        assert format_locality(customer) == "26001 Logroño (La Rioja)"

    def test_province_only(self):
        assert format_locality(Customer(name="x", province="La Rioja")) == "(La Rioja)"

    def test_nothing(self):
        assert format_locality(Customer(name="x")) is None


class TestRowOrder:
    def test_rows_follow_canonical_order(self):
        """Rows are printed by work date, then creation, whatever order they arrive in"""
        later, earlier = sample_lines()[1], sample_lines()[0]
        same_day_first = WorkLine(
            id=3, customer_id=1, item_id=10, qty=Decimal("1"), price=Decimal("1"),
            work_date=date(2025, 3, 2), invoiced=True, invoice_id=7,
            created_at=datetime(2025, 3, 2, 8, 0),
        )
        later.created_at = datetime(2025, 3, 2, 9, 0)
        items = {10: Item(id=10, name="Cadena", price=Decimal("10")), 11: Item(id=11, name="Engrase", price=Decimal("5"))}

        document = build_invoice_document(
            sample_invoice(), [later, same_day_first, earlier], {}, items, SELLER
        )

        assert [row.work_date for row in document.rows] == [
            date(2025, 3, 1), date(2025, 3, 2), date(2025, 3, 2)
        ]
        assert [row.amount for row in document.rows] == [
            Decimal("20.00"), Decimal("1.00"), Decimal("5.51")
        ]
