"""Work line aggregation

Pure functions over work lines: pending-by-customer grouping, exact totals
and the canonical ordering. Nothing here touches persistence.
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Sequence
from src.domain.work_line import WorkLine

ZERO = Decimal("0.00")
CENT = Decimal("0.01")


def work_line_sort_key(line: WorkLine):
    """work_date asc, then creation order"""
    return (line.work_date, line.created_at or datetime.min, line.id or 0)


def sort_work_lines(lines: Iterable[WorkLine]) -> List[WorkLine]:
    return sorted(lines, key=work_line_sort_key)


def compute_pending_by_customer(lines: Iterable[WorkLine]) -> Dict[int, List[WorkLine]]:
    """
    Group unbilled lines by customer

    Keys appear in order of each customer's first unbilled line and every
    group keeps the relative order of the input.

    Args:
        lines: Work lines, normally in canonical order

    Returns:
        Mapping customer_id -> unbilled lines
    """
    pending: Dict[int, List[WorkLine]] = {}
    for line in lines:
        if line.invoiced:
            continue
        pending.setdefault(line.customer_id, []).append(line)
    return pending


def compute_total(lines: Iterable[WorkLine]) -> Decimal:
    """Sum of qty * price with exact decimal arithmetic (0.00 when empty)"""
    return sum((line.amount for line in lines), ZERO)


def round_for_display(amount: Decimal) -> Decimal:
    """Round a stored amount to cents for display and print only"""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def pending_total(lines: Sequence[WorkLine]) -> Decimal:
    """Total of the unbilled lines in ``lines``"""
    return compute_total(line for line in lines if not line.invoiced)
