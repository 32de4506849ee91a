"""
Read-time projection of stored posts and comments into display payloads.

Author and liker ids are resolved to ``UserIdentity`` objects in a single
user query per batch. Nothing here writes to the database.
"""
from typing import Dict, Iterable, List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from postboard.models.post import Post
from postboard.models.comment import Comment
from postboard.models.user import User
from postboard.schemas.user_schema import UserIdentity
from postboard.schemas.post_schema import PostOut, PostWithComments
from postboard.schemas.comment_schema import CommentOut
from postboard.stores.user_store import UserStore


def _referenced_ids(entities: Iterable) -> set:
    ids = set()
    for entity in entities:
        ids.add(entity.author_id)
        ids.update(entity.likes or [])
    return ids


def _identity(users: Dict[str, User], user_id: str) -> Optional[UserIdentity]:
    user = users.get(user_id)
    return UserIdentity.model_validate(user) if user else None


def _liker_identities(users: Dict[str, User], likes: List[str]) -> List[UserIdentity]:
    # Unknown likers are left out of the payload, not out of storage
    return [UserIdentity.model_validate(users[uid]) for uid in likes or [] if uid in users]


class IdentityService:
    def __init__(self, db: AsyncSession):
        self.users = UserStore(db)

    def _post_out(self, post: Post, users: Dict[str, User]) -> PostOut:
        return PostOut(
            id=post.id,
            author=_identity(users, post.author_id),
            text=post.text,
            image=post.image,
            likes=_liker_identities(users, post.likes),
            comment_count=post.comment_count or 0,
            created_at=post.created_at,
            updated_at=post.updated_at
        )

    def _comment_out(self, comment: Comment, users: Dict[str, User]) -> CommentOut:
        return CommentOut(
            id=comment.id,
            post_id=comment.post_id,
            author=_identity(users, comment.author_id),
            text=comment.text,
            likes=_liker_identities(users, comment.likes),
            created_at=comment.created_at,
            updated_at=comment.updated_at
        )

    async def project_post(self, post: Post) -> PostOut:
        return (await self.project_posts([post]))[0]

    async def project_posts(self, posts: List[Post]) -> List[PostOut]:
        users = await self.users.find_many(_referenced_ids(posts))
        return [self._post_out(post, users) for post in posts]

    async def project_comment(self, comment: Comment) -> CommentOut:
        return (await self.project_comments([comment]))[0]

    async def project_comments(self, comments: List[Comment]) -> List[CommentOut]:
        users = await self.users.find_many(_referenced_ids(comments))
        return [self._comment_out(comment, users) for comment in comments]

    async def project_posts_with_comments(
        self,
        posts: List[Post],
        comments_by_post: Dict[str, List[Comment]]
    ) -> List[PostWithComments]:
        """Attach each post's comments, resolving all identities in one query"""
        all_comments = [c for post in posts for c in comments_by_post.get(post.id, [])]
        users = await self.users.find_many(
            _referenced_ids(posts) | _referenced_ids(all_comments)
        )

        return [
            PostWithComments(
                **self._post_out(post, users).model_dump(),
                comments=[
                    self._comment_out(comment, users)
                    for comment in comments_by_post.get(post.id, [])
                ]
            )
            for post in posts
        ]
