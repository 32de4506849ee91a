from sqlalchemy import Column, String
from postboard.db.base import BaseModel

class User(BaseModel):
    """Display identity of an account owned by the auth service."""
    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
