from sqlalchemy import Column, String, Text, JSON, Index
from postboard.db.base import BaseModel

class Comment(BaseModel):
    __tablename__ = "comments"

    # Not cascaded: posts are never deleted here
    post_id = Column(String(36), nullable=False)
    author_id = Column(String(36), nullable=False)
    text = Column(Text, nullable=False)

    likes = Column(JSON, default=list, nullable=False)

    __table_args__ = (
        Index('ix_comments_post_id', 'post_id'),
        Index('ix_comments_author_id', 'author_id'),
        Index('ix_comments_created_at', 'created_at'),
    )
