"""
Error taxonomy shared by the store, the loan service and the HTTP layer.
Each error knows the status code and message it is rendered with at the API boundary.
"""
from __future__ import annotations

from typing import Any, Iterable

MSG_LOAN_NOT_FOUND = "Loan not found"
MSG_VALIDATION_FAILED = "Validation failed"
MSG_INTERNAL_ERROR = "Internal server error"


class DeskError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message}


class ApprovalValidationError(DeskError):
    status_code = 400

    def __init__(self, errors: list[dict[str, Any]], message: str = MSG_VALIDATION_FAILED) -> None:
        super().__init__(message)
        self.errors = errors

    def to_response(self) -> dict[str, Any]:
        return {"message": self.message, "errors": self.errors}


class NotFoundError(DeskError):
    status_code = 404

    def __init__(self, message: str = MSG_LOAN_NOT_FOUND) -> None:
        super().__init__(message)


class DuplicateReferenceError(DeskError):
    status_code = 409


class InternalError(DeskError):
    status_code = 500

    def __init__(self, message: str = MSG_INTERNAL_ERROR) -> None:
        super().__init__(message)


def describe_errors(raw: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """Flatten pydantic error dicts to {field, message, code} for API responses."""
    out = []
    for err in raw:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        out.append({
            "field": ".".join(loc),
            "message": err.get("msg", ""),
            "code": err.get("type", "value_error"),
        })
    return out
