"""Unit tests for invoice numbering"""

from datetime import datetime
from decimal import Decimal

from src.domain.invoice import Invoice
from src.domain.numbering import (
    format_invoice_number,
    next_invoice_number,
    parse_invoice_number,
)


def make_invoice(number, issued_at):
    return Invoice(number=number, customer_id=1, total=Decimal("0"), issued_at=issued_at)


class TestFormatAndParse:
    def test_zero_padded(self):
        assert format_invoice_number(2025, 1) == "2025-0001"
        assert format_invoice_number(2025, 42) == "2025-0042"

    def test_wider_than_four_digits(self):
        assert format_invoice_number(2025, 12345) == "2025-12345"
        assert parse_invoice_number("2025-12345") == (2025, 12345)

    def test_parse(self):
        assert parse_invoice_number("2026-0007") == (2026, 7)

    def test_parse_rejects_other_formats(self):
        assert parse_invoice_number("INV-2025-000001") is None
        assert parse_invoice_number("") is None
        assert parse_invoice_number(None) is None


class TestNextInvoiceNumber:
    def test_first_of_year(self):
        assert next_invoice_number([], 2025) == "2025-0001"

    def test_count_plus_one(self):
        invoices = [
            make_invoice("2025-0001", datetime(2025, 1, 10)),
            make_invoice("2025-0002", datetime(2025, 2, 10)),
        ]

        assert next_invoice_number(invoices, 2025) == "2025-0003"

    def test_other_years_ignored(self):
        invoices = [
            make_invoice("2025-0001", datetime(2025, 1, 10)),
            make_invoice("2025-0002", datetime(2025, 12, 31, 23, 59)),
        ]

        assert next_invoice_number(invoices, 2026) == "2026-0001"

    def test_skips_past_highest_after_deletion(self):
        """2025-0001 was deleted; 2025-0002 is still in use"""
        invoices = [make_invoice("2025-0002", datetime(2025, 2, 10))]

        assert next_invoice_number(invoices, 2025) == "2025-0003"
