from sqlalchemy import Column, String, Text, Integer, JSON, Index
from postboard.db.base import BaseModel

class Post(BaseModel):
    __tablename__ = "posts"

    # Weak reference: users live with the auth service
    author_id = Column(String(36), nullable=False)
    text = Column(Text, nullable=False)
    image = Column(String(255))

    # Ordered user ids, no duplicates
    likes = Column(JSON, default=list, nullable=False)

    # Denormalized, best-effort
    comment_count = Column(Integer, default=0, nullable=False)

    __table_args__ = (
        Index('ix_posts_author_id', 'author_id'),
        Index('ix_posts_created_at', 'created_at'),
    )
