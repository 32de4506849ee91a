from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from postboard.schemas.user_schema import UserIdentity

class CommentCreate(BaseModel):
    text: Optional[str] = None

class CommentUpdate(BaseModel):
    text: Optional[str] = None

class CommentOut(BaseModel):
    id: str
    post_id: str
    author: Optional[UserIdentity] = None
    text: str
    likes: List[UserIdentity] = []
    created_at: datetime
    updated_at: datetime
