from models.branch import Branch
from models.customer import Customer
from models.loan import Loan
from models.user import User

__all__ = [
    "Branch",
    "Customer",
    "Loan",
    "User",
]
