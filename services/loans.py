"""
Loan read models and the manual-approval transition.
Lookups that miss return None; the HTTP layer decides how to render that.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from errors import InternalError
from models import Branch, Customer, Loan
from models.loan import (
    STATUS_APPROVED,
    STATUS_MANUALLY_APPROVED,
    STATUS_PENDING,
    STATUS_REJECTED,
)
from schemas import ApprovalRequest, LoanSummarySchema
from utils.timezone import as_utc, utc_now

if TYPE_CHECKING:
    from services.record_store import RecordStore

logger = logging.getLogger(__name__)

SANCTIONS_TABS = ("initiated", "approved", "rejected", "other")

_STATUS_TO_TAB = {
    STATUS_PENDING: "initiated",
    STATUS_APPROVED: "approved",
    STATUS_MANUALLY_APPROVED: "approved",
    STATUS_REJECTED: "rejected",
}


@dataclass(frozen=True)
class LoanDetails:
    loan: Loan
    customer: Customer
    branch: Branch


async def get_loan_details(store: RecordStore, rupeek_loan_id: str) -> Optional[LoanDetails]:
    """
    Compose loan, customer and branch for one external loan reference.
    A loan whose customer is missing is treated the same as an unknown loan.
    """
    loan = await store.get_loan_by_rupeek_id(rupeek_loan_id)
    if loan is None:
        return None
    customer = await store.get_customer(loan.customer_id)
    if customer is None:
        logger.warning("Loan %s references missing customer %s", rupeek_loan_id, loan.customer_id)
        return None
    # Loans are not linked to a branch yet; the first branch stands in
    branch = await store.get_first_branch()
    if branch is None:
        logger.warning("No branch available for loan %s", rupeek_loan_id)
        return None
    return LoanDetails(loan=loan, customer=customer, branch=branch)


async def manually_approve(
    store: RecordStore, request: ApprovalRequest, now: Optional[datetime] = None
) -> Optional[Loan]:
    """
    Override the loan's current status with manually_approved, recording comment,
    approver and time in a single store update. Any prior status is overwritten.
    Returns None if the loan reference is unknown.
    """
    loan = await store.get_loan_by_rupeek_id(request.loan_id)
    if loan is None:
        return None
    updated = await store.update_loan_status(
        loan.id,
        STATUS_MANUALLY_APPROVED,
        {
            "approval_comment": request.comment,
            "approved_by": request.approved_by,
            "approved_at": now or utc_now(),
            "rejection_reasons": None,
        },
    )
    if updated is None:
        raise InternalError("Failed to update loan status")
    logger.info("Loan %s manually approved by %s", request.loan_id, request.approved_by)
    return updated


def sanctions_tab(status: str) -> str:
    return _STATUS_TO_TAB.get(status, "other")


async def group_loans_for_sanctions(store: RecordStore) -> dict[str, list[LoanSummarySchema]]:
    """Bucket every loan into the Sanctions tabs, oldest first within each tab."""
    groups: dict[str, list[LoanSummarySchema]] = {tab: [] for tab in SANCTIONS_TABS}
    branch = await store.get_first_branch()
    customers: dict[str, Optional[Customer]] = {}
    for loan in await store.list_loans():
        if loan.customer_id not in customers:
            customers[loan.customer_id] = await store.get_customer(loan.customer_id)
        customer = customers[loan.customer_id]
        groups[sanctions_tab(loan.status)].append(
            LoanSummarySchema(
                rupeek_loan_id=loan.rupeek_loan_id,
                customer_name=customer.name if customer else None,
                amount=loan.total_amount,
                date=loan.loan_date,
                branch=branch.name if branch else None,
                status=loan.status,
                approved_by=loan.approved_by,
                approved_at=as_utc(loan.approved_at),
                rejection_reasons=loan.rejection_reasons or [],
            )
        )
    return groups
