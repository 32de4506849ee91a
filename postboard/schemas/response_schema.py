from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class Envelope(BaseModel, Generic[T]):
    """Wrapper used by every write endpoint"""
    success: bool
    message: str
    data: Optional[T] = None
    error: Optional[str] = None
