from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

COMMENT_MIN_LENGTH = 20


class ApprovalRequest(BaseModel):
    """Operator override of a loan decision. Never stored; copied onto the loan."""
    loan_id: str = Field(..., alias="loanId")
    comment: str
    approved_by: str = Field(..., alias="approvedBy")

    model_config = {"populate_by_name": True}

    @field_validator("loan_id")
    @classmethod
    def loan_id_required(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("loan_id_required", "Loan ID is required")
        return v

    @field_validator("comment")
    @classmethod
    def comment_long_enough(cls, v: str) -> str:
        if len(v) < COMMENT_MIN_LENGTH:
            raise PydanticCustomError(
                "comment_too_short",
                "Comment must be at least {min_length} characters",
                {"min_length": COMMENT_MIN_LENGTH},
            )
        return v

    @field_validator("approved_by")
    @classmethod
    def approver_required(cls, v: str) -> str:
        if not v:
            raise PydanticCustomError("approver_required", "Approver ID is required")
        return v
