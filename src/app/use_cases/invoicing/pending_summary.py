"""GetPendingSummary Use Case

Groups unbilled work lines by customer to drive invoice issuance.
"""

from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.work_line_repository import WorkLineRepository
from src.app.use_cases.work_lines.work_lines import to_work_line_dto
from src.domain.aggregation import compute_pending_by_customer, compute_total, ZERO
from .dtos import PendingCustomerDTO, PendingSummaryResponseDTO


class GetPendingSummary:
    """
    Use Case: Summarise unbilled lines per customer

    Read-only. Customers appear in the order of their earliest pending line;
    each customer's lines keep the canonical order.
    """

    def __init__(
        self,
        work_line_repo: WorkLineRepository,
        customer_repo: CustomerRepository,
    ):
        self.work_line_repo = work_line_repo
        self.customer_repo = customer_repo

    async def execute(self) -> Result[PendingSummaryResponseDTO]:
        try:
            lines = await self.work_line_repo.list_lines(invoiced=False)
            pending = compute_pending_by_customer(lines)

            customers = await self.customer_repo.get_by_ids(list(pending.keys()))
            names = {customer.id: customer.name for customer in customers}

            entries = []
            overall = ZERO
            for customer_id, customer_lines in pending.items():
                total = compute_total(customer_lines)
                overall += total
                entries.append(
                    PendingCustomerDTO(
                        customer_id=customer_id,
                        customer_name=names.get(customer_id, ""),
                        line_count=len(customer_lines),
                        pending_total=total,
                        lines=[to_work_line_dto(line) for line in customer_lines],
                    )
                )

            return Return.ok(PendingSummaryResponseDTO(customers=entries, pending_total=overall))

        except Exception as e:
            return Return.err(
                Error(
                    code="PENDING_SUMMARY_FAILED",
                    message="Failed to compute pending work lines",
                    reason=str(e),
                )
            )
