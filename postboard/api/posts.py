from fastapi import APIRouter, Body, Depends, status, Form, UploadFile, File
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from postboard.db.session import get_db
from postboard.exceptions import PostboardError, InternalError
from postboard.schemas.comment_schema import CommentCreate, CommentUpdate, CommentOut
from postboard.schemas.post_schema import PostOut, PostWithComments
from postboard.schemas.response_schema import Envelope
from postboard.services.auth_service import verify_token
from postboard.services.comment_service import CommentService
from postboard.services.post_service import PostService
from postboard.utils.file_upload import save_upload_file, delete_file

logger = logging.getLogger(__name__)

router = APIRouter()

# Posts

@router.post("/create", response_model=Envelope[PostOut], status_code=status.HTTP_201_CREATED)
async def create_post(
    text: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    user_id: str = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Create a new post, optionally with an image"""
    image_url = None
    try:
        post_service = PostService(db)

        if image is not None and image.filename:
            image_url = await save_upload_file(image)

        post = await post_service.create_post(user_id, text, image_url)
        return Envelope(success=True, message="Post created successfully", data=post)
    except Exception as e:
        if image_url:
            await delete_file(image_url)
        if isinstance(e, PostboardError):
            raise
        logger.error(f"Error creating post: {e}")
        raise InternalError(str(e)) from e

@router.get("/getall", response_model=List[PostWithComments])
async def get_all_posts(db: AsyncSession = Depends(get_db)):
    """All posts with their comments, newest first"""
    try:
        post_service = PostService(db)
        return await post_service.list_posts_with_comments()
    except PostboardError:
        raise
    except Exception as e:
        logger.error(f"Error fetching posts: {e}")
        raise InternalError(str(e)) from e

@router.post("/{post_id}/like", response_model=Envelope[PostOut])
async def toggle_post_like(
    post_id: str,
    user_id: str = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Like or unlike a post"""
    try:
        post_service = PostService(db)
        post, liked = await post_service.toggle_like(post_id, user_id)
        return Envelope(
            success=True,
            message="Post liked" if liked else "Post unliked",
            data=post
        )
    except PostboardError:
        raise
    except Exception as e:
        logger.error(f"Error toggling like: {e}")
        raise InternalError(str(e)) from e

# Comments

@router.post(
    "/{post_id}/comments",
    response_model=Envelope[CommentOut],
    status_code=status.HTTP_201_CREATED
)
async def add_comment(
    post_id: str,
    comment_data: Optional[CommentCreate] = Body(None),
    user_id: str = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Add a comment to a post"""
    try:
        comment_service = CommentService(db)
        comment = await comment_service.add_comment(
            post_id, user_id, comment_data.text if comment_data else None
        )
        return Envelope(success=True, message="Comment added successfully", data=comment)
    except PostboardError:
        raise
    except Exception as e:
        logger.error(f"Error adding comment: {e}")
        raise InternalError(str(e)) from e

@router.get("/{post_id}/comments", response_model=List[CommentOut])
async def get_comments(post_id: str, db: AsyncSession = Depends(get_db)):
    """Comments for a post, newest first"""
    try:
        comment_service = CommentService(db)
        return await comment_service.get_comments(post_id)
    except PostboardError:
        raise
    except Exception as e:
        logger.error(f"Error fetching comments: {e}")
        raise InternalError(str(e)) from e

@router.put("/comments/{comment_id}", response_model=Envelope[CommentOut])
async def edit_comment(
    comment_id: str,
    comment_update: Optional[CommentUpdate] = Body(None),
    user_id: str = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Edit the text of your own comment"""
    try:
        comment_service = CommentService(db)
        comment = await comment_service.edit_comment(
            comment_id, user_id, comment_update.text if comment_update else None
        )
        return Envelope(success=True, message="Comment updated successfully", data=comment)
    except PostboardError:
        raise
    except Exception as e:
        logger.error(f"Error editing comment: {e}")
        raise InternalError(str(e)) from e

@router.delete("/comments/{comment_id}", response_model=Envelope[None])
async def delete_comment(
    comment_id: str,
    user_id: str = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Delete your own comment"""
    try:
        comment_service = CommentService(db)
        await comment_service.delete_comment(comment_id, user_id)
        return Envelope(success=True, message="Comment deleted")
    except PostboardError:
        raise
    except Exception as e:
        logger.error(f"Error deleting comment: {e}")
        raise InternalError(str(e)) from e

@router.post("/comments/{comment_id}/like", response_model=Envelope[CommentOut])
async def toggle_comment_like(
    comment_id: str,
    user_id: str = Depends(verify_token),
    db: AsyncSession = Depends(get_db)
):
    """Like or unlike a comment"""
    try:
        comment_service = CommentService(db)
        comment, liked = await comment_service.toggle_like(comment_id, user_id)
        return Envelope(
            success=True,
            message="Comment liked" if liked else "Comment unliked",
            data=comment
        )
    except PostboardError:
        raise
    except Exception as e:
        logger.error(f"Error toggling comment like: {e}")
        raise InternalError(str(e)) from e
