from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc

from postboard.models.post import Post

class PostStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, author_id: str, text: str, image: Optional[str] = None) -> Post:
        post = Post(
            author_id=author_id,
            text=text,
            image=image,
            likes=[],
            comment_count=0
        )

        self.db.add(post)
        await self.db.commit()
        await self.db.refresh(post)
        return post

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        stmt = select(Post).where(Post.id == post_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Post]:
        """All posts, newest first"""
        stmt = select(Post).order_by(desc(Post.created_at))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def save(self, post: Post) -> Post:
        self.db.add(post)
        await self.db.commit()
        await self.db.refresh(post)
        return post
