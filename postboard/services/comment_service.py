from typing import List, Optional, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from postboard.exceptions import Unauthorized, NotFound, Forbidden, ValidationError, InternalError
from postboard.models.comment import Comment
from postboard.schemas.comment_schema import CommentOut
from postboard.services.identity_service import IdentityService
from postboard.services.like_service import toggle_like
from postboard.stores.post_store import PostStore
from postboard.stores.comment_store import CommentStore

logger = logging.getLogger(__name__)

class CommentService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.posts = PostStore(db)
        self.comments = CommentStore(db)
        self.identities = IdentityService(db)

    async def add_comment(
        self,
        post_id: str,
        user_id: Optional[str],
        text: Optional[str]
    ) -> CommentOut:
        """
        Create a comment and bump the post's comment count.

        The two writes are not atomic. If the count update fails the comment
        stays and the count under-reports.
        """
        if not user_id:
            raise Unauthorized()

        if not text or not text.strip():
            raise ValidationError("Comment text is required")

        post = await self.posts.find_by_id(post_id)
        if not post:
            raise NotFound("Post not found")

        comment = await self.comments.create(post_id=post_id, author_id=user_id, text=text)

        try:
            post.comment_count = (post.comment_count or 0) + 1
            await self.posts.save(post)
        except Exception as e:
            logger.error(f"Comment {comment.id} created but count of post {post_id} not updated: {e}")
            await self.db.rollback()
            raise InternalError(str(e)) from e

        logger.info(f"Created comment {comment.id} by user {user_id} on post {post_id}")

        return await self.identities.project_comment(comment)

    async def get_comments(self, post_id: str) -> List[CommentOut]:
        """Comments for a post, newest first"""
        comments = await self.comments.find_by_post(post_id)
        return await self.identities.project_comments(comments)

    async def toggle_like(self, comment_id: str, user_id: Optional[str]) -> Tuple[CommentOut, bool]:
        """Like the comment, or unlike it if the user already did"""
        if not user_id:
            raise Unauthorized()

        comment = await self._get_comment(comment_id)

        comment, liked = await toggle_like(comment, user_id, self.comments)

        return await self.identities.project_comment(comment), liked

    async def edit_comment(
        self,
        comment_id: str,
        user_id: Optional[str],
        text: Optional[str]
    ) -> CommentOut:
        """Replace the text of the caller's own comment"""
        if not text or not text.strip():
            raise ValidationError("Comment text is required")

        comment = await self._get_comment(comment_id)
        self._check_author(comment, user_id)

        comment.text = text.strip()
        comment = await self.comments.save(comment)

        logger.info(f"Comment {comment_id} edited by user {user_id}")

        return await self.identities.project_comment(comment)

    async def delete_comment(self, comment_id: str, user_id: Optional[str]) -> None:
        """
        Delete the caller's own comment, then decrement the post's comment
        count (floored at 0). The decrement is best-effort: a missing post or a
        failed save leaves the count stale and the deletion stands.
        """
        comment = await self._get_comment(comment_id)
        self._check_author(comment, user_id)

        post_id = comment.post_id
        await self.comments.delete(comment)

        logger.info(f"Comment {comment_id} deleted by user {user_id}")

        try:
            post = await self.posts.find_by_id(post_id)
            if post:
                post.comment_count = max(0, (post.comment_count or 0) - 1)
                await self.posts.save(post)
            else:
                logger.warning(f"Post {post_id} of deleted comment {comment_id} not found")
        except Exception as e:
            await self.db.rollback()
            logger.warning(f"Comment count of post {post_id} not decremented: {e}")

    async def _get_comment(self, comment_id: str) -> Comment:
        comment = await self.comments.find_by_id(comment_id)
        if not comment:
            raise NotFound("Comment not found")
        return comment

    @staticmethod
    def _check_author(comment: Comment, user_id: Optional[str]) -> None:
        if comment.author_id != user_id:
            raise Forbidden("Not authorized")
