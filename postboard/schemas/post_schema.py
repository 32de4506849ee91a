from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

from postboard.schemas.user_schema import UserIdentity
from postboard.schemas.comment_schema import CommentOut

class PostOut(BaseModel):
    id: str
    author: Optional[UserIdentity] = None
    text: str
    image: Optional[str] = None
    likes: List[UserIdentity] = []
    comment_count: int = 0
    created_at: datetime
    updated_at: datetime

class PostWithComments(PostOut):
    comments: List[CommentOut] = []
