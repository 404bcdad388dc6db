from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Numeric, String, Text

from database import Base

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"
STATUS_MANUALLY_APPROVED = "manually_approved"


class Loan(Base):
    __tablename__ = "loans"

    id = Column(String(64), primary_key=True, index=True)
    rupeek_loan_id = Column(String(64), unique=True, nullable=False, index=True)
    customer_id = Column(String(64), ForeignKey("customers.id"), nullable=False, index=True)
    loan_date = Column(String(32), nullable=False)
    scheme_name = Column(String(256), nullable=False)
    total_amount = Column(Integer, nullable=False)
    interest_rate = Column(Numeric(5, 2), nullable=False)
    per_gram_rate = Column(Numeric(10, 2), nullable=False)
    penal_interest_rate = Column(Numeric(5, 2), nullable=False)
    rupeek_gold_rate = Column(Numeric(10, 2), nullable=False)
    tenure_months = Column(Integer, nullable=False)
    disbursal_amount = Column(Integer, nullable=False)
    ltv = Column(Numeric(5, 2), nullable=False)
    processing_fee = Column(Integer, nullable=False)
    disbursal_charges = Column(Integer, nullable=False)
    total_gross_weight = Column(Numeric(10, 2), nullable=False)
    total_net_weight = Column(Numeric(10, 2), nullable=False)
    total_adjustment = Column(Numeric(10, 2), nullable=False)
    # Item descriptions as shown on the pledge receipt, e.g. ["Necklace", "Bangle"]
    jewelry_items = Column(JSON, nullable=False)
    # Free text is tolerated beyond the STATUS_* values
    status = Column(String(32), nullable=False, default=STATUS_PENDING, index=True)
    rejection_reasons = Column(JSON, nullable=True)
    approval_comment = Column(Text, nullable=True)
    approved_by = Column(String(128), nullable=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
