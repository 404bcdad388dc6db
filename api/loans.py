from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Body, Depends

from api.deps import get_store
from errors import ApprovalValidationError, DeskError, InternalError, NotFoundError
from models import Branch, Customer, Loan
from services.approval import validate_approval_request
from services.loans import LoanDetails, get_loan_details, manually_approve
from services.record_store import RecordStore
from utils.case import dict_keys_to_camel
from utils.timezone import as_utc

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/loans", tags=["loans"])

MSG_LOAN_APPROVED = "Loan approved successfully"


def _json_value(v: Any) -> Any:
    if isinstance(v, Decimal):
        return str(v)
    if isinstance(v, datetime):
        return as_utc(v).isoformat()
    return v


def _row_to_response(row: Any) -> dict[str, Any]:
    """Serialize an ORM row to a camelCase dict; decimals as strings, datetimes as ISO-8601."""
    return dict_keys_to_camel({c.name: _json_value(getattr(row, c.name)) for c in row.__table__.columns})


def _loan_to_response(loan: Loan) -> dict[str, Any]:
    out = _row_to_response(loan)
    out["jewelryItems"] = list(loan.jewelry_items or [])
    return out


def _customer_to_response(customer: Customer) -> dict[str, Any]:
    return _row_to_response(customer)


def _branch_to_response(branch: Branch) -> dict[str, Any]:
    return {
        "id": branch.id,
        "solId": branch.sol_id,
        "name": branch.name,
        "address": branch.address,
    }


def _details_to_response(details: LoanDetails) -> dict[str, Any]:
    return {
        "loan": _loan_to_response(details.loan),
        "customer": _customer_to_response(details.customer),
        "branch": _branch_to_response(details.branch),
    }


@router.get("/{rupeek_loan_id}", response_model=dict)
async def get_loan(rupeek_loan_id: str, store: RecordStore = Depends(get_store)):
    try:
        details = await get_loan_details(store, rupeek_loan_id)
        if details is None:
            logger.warning("Loan %s not found", rupeek_loan_id)
            raise NotFoundError()
        return _details_to_response(details)
    except DeskError:
        raise
    except Exception as e:
        logger.exception("Error fetching loan details for %s", rupeek_loan_id)
        raise InternalError() from e


@router.post("/{rupeek_loan_id}/approve", response_model=dict)
async def approve_loan(
    rupeek_loan_id: str,
    payload: Any = Body(None),
    store: RecordStore = Depends(get_store),
):
    """Manual override: mark the loan manually_approved with the operator's comment."""
    try:
        request = validate_approval_request(payload, rupeek_loan_id)
        loan = await manually_approve(store, request)
        if loan is None:
            logger.warning("Approval requested for unknown loan %s", rupeek_loan_id)
            raise NotFoundError()
        return {"message": MSG_LOAN_APPROVED, "loan": _loan_to_response(loan)}
    except ApprovalValidationError as e:
        logger.warning("Rejected approval for loan %s: %s", rupeek_loan_id, [err["field"] for err in e.errors])
        raise
    except DeskError:
        raise
    except Exception as e:
        logger.exception("Error approving loan %s", rupeek_loan_id)
        raise InternalError() from e
