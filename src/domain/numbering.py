"""Invoice numbering

Invoice numbers have the form ``YYYY-NNNN``: the issuance year and a
sequence that restarts at 0001 every year.
"""

import re
from typing import Iterable, Optional, Tuple
from src.domain.invoice import Invoice

NUMBER_PATTERN = re.compile(r"^(\d{4})-(\d{4,})$")


def format_invoice_number(year: int, sequence: int) -> str:
    return f"{year}-{sequence:04d}"


def parse_invoice_number(number: str) -> Optional[Tuple[int, int]]:
    """Return (year, sequence), or None if the number is not YYYY-NNNN"""
    match = NUMBER_PATTERN.match(number or "")
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def highest_sequence(invoices: Iterable[Invoice], year: int) -> int:
    """Count of the year's invoices or its highest used sequence, whichever is larger"""
    count = 0
    highest = 0
    for invoice in invoices:
        if invoice.issued_at is None or invoice.issued_at.year != year:
            continue
        count += 1
        parsed = parse_invoice_number(invoice.number)
        if parsed and parsed[0] == year:
            highest = max(highest, parsed[1])
    return max(count, highest)


def next_invoice_number(existing_invoices: Iterable[Invoice], current_year: int) -> str:
    """
    Next sequential invoice number for ``current_year``

    Equals "count of this year's invoices + 1" while no invoice has been
    deleted; after deletions it skips past the highest number still in use.

    Args:
        existing_invoices: Invoices already issued
        current_year: Year of the invoice being issued

    Returns:
        Invoice number, e.g. "2025-0003"
    """
    return format_invoice_number(current_year, highest_sequence(existing_invoices, current_year) + 1)
