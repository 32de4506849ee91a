from typing import Dict, List, Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc

from postboard.models.comment import Comment

class CommentStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, post_id: str, author_id: str, text: str) -> Comment:
        comment = Comment(
            post_id=post_id,
            author_id=author_id,
            text=text,
            likes=[]
        )

        self.db.add(comment)
        await self.db.commit()
        await self.db.refresh(comment)
        return comment

    async def find_by_id(self, comment_id: str) -> Optional[Comment]:
        stmt = select(Comment).where(Comment.id == comment_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_post(self, post_id: str) -> List[Comment]:
        """Comments of one post, newest first"""
        stmt = select(Comment).where(
            Comment.post_id == post_id
        ).order_by(
            desc(Comment.created_at)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_by_posts(self, post_ids: Sequence[str]) -> Dict[str, List[Comment]]:
        """
        Batch fetch comments for several posts.
        Returns a dict mapping every requested post id to its comments, newest first.
        """
        comments_by_post: Dict[str, List[Comment]] = {post_id: [] for post_id in post_ids}
        if not comments_by_post:
            return comments_by_post

        stmt = select(Comment).where(
            Comment.post_id.in_(list(comments_by_post))
        ).order_by(
            desc(Comment.created_at)
        )
        result = await self.db.execute(stmt)

        for comment in result.scalars().all():
            comments_by_post[comment.post_id].append(comment)

        return comments_by_post

    async def save(self, comment: Comment) -> Comment:
        self.db.add(comment)
        await self.db.commit()
        await self.db.refresh(comment)
        return comment

    async def delete(self, comment: Comment) -> None:
        await self.db.delete(comment)
        await self.db.commit()
