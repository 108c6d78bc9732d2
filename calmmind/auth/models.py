from sqlalchemy import Column, DateTime, Integer, String, func
from calmmind.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # passlib hash
    name = Column(String, nullable=True)
    language = Column(String, default="en")
    created_at = Column(DateTime, server_default=func.now())
