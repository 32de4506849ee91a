"""
Models package for Postboard
"""
from postboard.db.base import Base, BaseModel
from postboard.models.user import User
from postboard.models.post import Post
from postboard.models.comment import Comment

__all__ = [
    'Base',
    'BaseModel',
    'User',
    'Post',
    'Comment',
]
