from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from models.loan import STATUS_MANUALLY_APPROVED, STATUS_PENDING, STATUS_REJECTED


class LoanCreate(BaseModel):
    rupeek_loan_id: str = Field(..., min_length=1)
    customer_id: str
    loan_date: str
    scheme_name: str
    total_amount: int = Field(..., ge=0)
    interest_rate: Decimal
    per_gram_rate: Decimal
    penal_interest_rate: Decimal
    rupeek_gold_rate: Decimal
    tenure_months: int = Field(..., gt=0)
    disbursal_amount: int = Field(..., ge=0)
    ltv: Decimal
    processing_fee: int = 0
    disbursal_charges: int = 0
    total_gross_weight: Decimal
    total_net_weight: Decimal
    total_adjustment: Decimal
    jewelry_items: list[str] = Field(default_factory=list)
    status: str = STATUS_PENDING
    rejection_reasons: Optional[list[str]] = None
    approval_comment: Optional[str] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None

    model_config = {"populate_by_name": True, "alias_generator": to_camel}

    @model_validator(mode="after")
    def check_status_fields(self) -> "LoanCreate":
        """
        Rejection reasons belong to rejected loans only; approval metadata is
        present exactly when the loan was manually approved.
        """
        if self.rejection_reasons and self.status != STATUS_REJECTED:
            raise ValueError("rejection_reasons are only allowed on rejected loans")
        approval = (self.approval_comment, self.approved_by, self.approved_at)
        if self.status == STATUS_MANUALLY_APPROVED:
            if any(v is None for v in approval):
                raise ValueError("manually approved loans require approval_comment, approved_by and approved_at")
        elif any(v is not None for v in approval):
            raise ValueError("approval metadata is only allowed on manually approved loans")
        return self


class LoanSummarySchema(BaseModel):
    """One row of the Sanctions tables."""
    rupeek_loan_id: str
    customer_name: Optional[str] = None
    amount: int
    date: str
    branch: Optional[str] = None
    status: str
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    rejection_reasons: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True, "alias_generator": to_camel}
