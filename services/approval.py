from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from errors import ApprovalValidationError, describe_errors
from schemas.approval import ApprovalRequest


def validate_approval_request(payload: Any, rupeek_loan_id: str) -> ApprovalRequest:
    """
    Validate an approval body merged with the loan reference from the URL path.
    The path reference wins over any loan id in the body. Every failing field is
    reported in one ApprovalValidationError.
    """
    body = dict(payload) if isinstance(payload, dict) else {}
    body.pop("loan_id", None)
    body["loanId"] = rupeek_loan_id
    try:
        return ApprovalRequest.model_validate(body)
    except ValidationError as e:
        raise ApprovalValidationError(describe_errors(e.errors())) from e
