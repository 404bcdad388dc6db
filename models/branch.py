from sqlalchemy import Column, DateTime, String, Text

from database import Base


class Branch(Base):
    __tablename__ = "branches"

    id = Column(String(64), primary_key=True, index=True)
    # External branch code; "NA" or missing for most branches
    sol_id = Column(String(32), nullable=True)
    name = Column(String(256), nullable=False)
    address = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
