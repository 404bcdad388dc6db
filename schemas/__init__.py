from schemas.approval import COMMENT_MIN_LENGTH, ApprovalRequest
from schemas.branch import BranchCreate
from schemas.customer import CustomerCreate
from schemas.loan import LoanCreate, LoanSummarySchema
from schemas.user import UserCreate

__all__ = [
    "COMMENT_MIN_LENGTH",
    "ApprovalRequest",
    "BranchCreate",
    "CustomerCreate",
    "LoanCreate",
    "LoanSummarySchema",
    "UserCreate",
]
