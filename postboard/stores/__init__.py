from postboard.stores.user_store import UserStore
from postboard.stores.post_store import PostStore
from postboard.stores.comment_store import CommentStore

__all__ = ['UserStore', 'PostStore', 'CommentStore']
