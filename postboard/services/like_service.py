from typing import Any, List, Protocol, Tuple, TypeVar
import logging

logger = logging.getLogger(__name__)


class Likeable(Protocol):
    """Anything with an id and an ordered list of liker ids"""
    id: Any
    likes: List[str]


L = TypeVar("L", bound=Likeable)


class LikeableStore(Protocol[L]):
    async def save(self, entity: L) -> L:
        ...


def toggled_likes(likes: List[str], user_id: str) -> Tuple[List[str], bool]:
    """
    Return a new likes list with ``user_id`` flipped, and whether it is now liked.
    Order of the remaining ids is preserved.
    """
    current = list(likes or [])
    if user_id in current:
        return [liker for liker in current if liker != user_id], False
    return current + [user_id], True


async def toggle_like(likeable: L, user_id: str, store: LikeableStore[L]) -> Tuple[L, bool]:
    """Like or unlike ``likeable`` for ``user_id`` and persist it"""
    # Reassign rather than mutate in place so the ORM flushes the JSON column
    likeable.likes, liked = toggled_likes(likeable.likes, user_id)

    saved = await store.save(likeable)

    logger.info(
        f"{type(likeable).__name__} {likeable.id} "
        f"{'liked' if liked else 'unliked'} by user {user_id}"
    )

    return saved, liked
