from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from postboard.exceptions import Unauthorized, NotFound, ValidationError
from postboard.schemas.post_schema import PostOut, PostWithComments
from postboard.services.identity_service import IdentityService
from postboard.services.like_service import toggle_like
from postboard.stores.post_store import PostStore
from postboard.stores.comment_store import CommentStore

logger = logging.getLogger(__name__)

class PostService:
    def __init__(self, db: AsyncSession):
        self.posts = PostStore(db)
        self.comments = CommentStore(db)
        self.identities = IdentityService(db)

    async def create_post(
        self,
        user_id: Optional[str],
        text: Optional[str],
        image: Optional[str] = None
    ) -> PostOut:
        """Create a new post"""
        if not user_id:
            raise Unauthorized()

        if not text or not text.strip():
            raise ValidationError("Post text is required")

        post = await self.posts.create(author_id=user_id, text=text, image=image)

        logger.info(f"Created post {post.id} by user {user_id}")

        return await self.identities.project_post(post)

    async def list_posts_with_comments(self) -> List[PostWithComments]:
        """All posts newest first, each with its comments newest first"""
        posts = await self.posts.list_all()
        comments_by_post = await self.comments.find_by_posts([post.id for post in posts])
        return await self.identities.project_posts_with_comments(posts, comments_by_post)

    async def toggle_like(self, post_id: str, user_id: Optional[str]) -> Tuple[PostOut, bool]:
        """Like the post, or unlike it if the user already did"""
        if not user_id:
            raise Unauthorized()

        post = await self.posts.find_by_id(post_id)
        if not post:
            raise NotFound("Post not found")

        post, liked = await toggle_like(post, user_id, self.posts)

        return await self.identities.project_post(post), liked
