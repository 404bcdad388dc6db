from sqlalchemy import Column, String, Text

from database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True, index=True)
    username = Column(String(128), unique=True, nullable=False, index=True)
    password = Column(Text, nullable=False)
