"""
In-process record store for users, customers, branches and loans.
Owns its engine and session factory; callers construct it, call init() before use and close() when done.
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Optional

from sqlalchemy import select

from database import create_engine, create_sessionmaker, init_db
from errors import DuplicateReferenceError, NotFoundError
from models import Branch, Customer, Loan, User
from schemas import BranchCreate, CustomerCreate, LoanCreate, UserCreate
from utils.timezone import utc_now

logger = logging.getLogger(__name__)

# Columns a status update may patch; the identifier never changes
_LOAN_PATCHABLE = frozenset(c.name for c in Loan.__table__.columns) - {"id"}


def _new_id(kind: str) -> str:
    return f"{kind}-{uuid.uuid4().hex[:12]}"


class RecordStore:
    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._engine = create_engine(database_url, echo=echo)
        self._sessionmaker = create_sessionmaker(self._engine)
        # The in-memory database is a single shared connection: one operation at a time
        self._lock = asyncio.Lock()

    async def init(self) -> None:
        await init_db(self._engine)
        logger.info("Record store initialised")

    async def close(self) -> None:
        await self._engine.dispose()
        logger.info("Record store closed")

    async def _get(self, model: type, record_id: str) -> Any:
        async with self._lock, self._sessionmaker() as session:
            return await session.get(model, record_id)

    async def _first(self, stmt) -> Any:
        async with self._lock, self._sessionmaker() as session:
            result = await session.execute(stmt)
            return result.scalars().first()

    # Users

    async def create_user(self, body: UserCreate) -> User:
        async with self._lock, self._sessionmaker() as session:
            existing = await session.execute(select(User).where(User.username == body.username))
            if existing.scalars().first() is not None:
                raise DuplicateReferenceError(f"Username {body.username} already exists")
            user = User(id=_new_id("user"), **body.model_dump())
            session.add(user)
            await session.commit()
        return user

    async def get_user(self, user_id: str) -> Optional[User]:
        return await self._get(User, user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return await self._first(select(User).where(User.username == username))

    # Customers

    async def create_customer(self, body: CustomerCreate) -> Customer:
        customer = Customer(id=_new_id("cust"), **body.model_dump())
        async with self._lock, self._sessionmaker() as session:
            session.add(customer)
            await session.commit()
        return customer

    async def get_customer(self, customer_id: str) -> Optional[Customer]:
        return await self._get(Customer, customer_id)

    # Branches

    async def create_branch(self, body: BranchCreate) -> Branch:
        branch = Branch(id=_new_id("branch"), created_at=utc_now(), **body.model_dump())
        async with self._lock, self._sessionmaker() as session:
            session.add(branch)
            await session.commit()
        return branch

    async def get_branch(self, branch_id: str) -> Optional[Branch]:
        return await self._get(Branch, branch_id)

    async def get_first_branch(self) -> Optional[Branch]:
        """Earliest created branch, or None when no branch exists."""
        return await self._first(select(Branch).order_by(Branch.created_at, Branch.id).limit(1))

    # Loans

    async def create_loan(self, body: LoanCreate) -> Loan:
        async with self._lock, self._sessionmaker() as session:
            if await session.get(Customer, body.customer_id) is None:
                raise NotFoundError(f"Customer {body.customer_id} not found")
            existing = await session.execute(select(Loan).where(Loan.rupeek_loan_id == body.rupeek_loan_id))
            if existing.scalars().first() is not None:
                raise DuplicateReferenceError(f"Loan {body.rupeek_loan_id} already exists")
            loan = Loan(id=_new_id("loan"), created_at=utc_now(), **body.model_dump())
            session.add(loan)
            await session.commit()
        return loan

    async def get_loan(self, loan_id: str) -> Optional[Loan]:
        return await self._get(Loan, loan_id)

    async def get_loan_by_rupeek_id(self, rupeek_loan_id: str) -> Optional[Loan]:
        return await self._first(select(Loan).where(Loan.rupeek_loan_id == rupeek_loan_id))

    async def list_loans(self) -> list[Loan]:
        async with self._lock, self._sessionmaker() as session:
            result = await session.execute(select(Loan).order_by(Loan.created_at, Loan.id))
            return list(result.scalars().all())

    async def update_loan_status(
        self, loan_id: str, status: str, patch: Optional[dict[str, Any]] = None
    ) -> Optional[Loan]:
        """
        Apply patch to the loan, then set its status, in one commit.
        Returns the updated loan, or None if loan_id is unknown.
        """
        patch = dict(patch or {})
        unknown = set(patch) - _LOAN_PATCHABLE
        if unknown:
            raise ValueError(f"Cannot patch loan fields: {', '.join(sorted(unknown))}")
        async with self._lock, self._sessionmaker() as session:
            loan = await session.get(Loan, loan_id)
            if loan is None:
                return None
            for field, value in patch.items():
                setattr(loan, field, value)
            loan.status = status
            await session.commit()
        return loan
