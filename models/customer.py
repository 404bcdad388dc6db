from sqlalchemy import Column, Integer, String, Text

from database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(256), nullable=False)
    father_husband_name = Column(String(256), nullable=False)
    dob = Column(String(32), nullable=False)
    gender = Column(String(32), nullable=False)
    pan_number = Column(String(16), nullable=False)
    phone = Column(String(32), nullable=False)
    address = Column(Text, nullable=False)
    pin_code = Column(String(16), nullable=False)
    marital_status = Column(String(32), nullable=False)
    annual_income = Column(Integer, nullable=False)
    profession = Column(String(128), nullable=False)
    bank_name = Column(String(256), nullable=False)
    religion = Column(String(64), nullable=False)
    ifsc_code = Column(String(16), nullable=False)
    qualification = Column(String(128), nullable=False)
    account_number = Column(String(64), nullable=False)
