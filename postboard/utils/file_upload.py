"""
File upload utility functions
"""
import uuid
from pathlib import Path
from fastapi import UploadFile
import aiofiles
import logging

from postboard.config import settings
from postboard.exceptions import ValidationError

logger = logging.getLogger(__name__)


def is_allowed_file(filename: str) -> bool:
    """Check if file extension is allowed"""
    if not filename:
        return False

    file_extension = Path(filename).suffix.lower()
    return file_extension in settings.ALLOWED_EXTENSIONS


async def save_upload_file(upload_file: UploadFile) -> str:
    """
    Save an uploaded image to disk

    Returns:
        URL path to the saved file
    """
    if not is_allowed_file(upload_file.filename):
        raise ValidationError("Unsupported image type")

    content = await upload_file.read()
    if len(content) > settings.MAX_UPLOAD_SIZE:
        raise ValidationError("Image too large")

    # Generate unique filename
    file_extension = Path(upload_file.filename).suffix.lower()
    unique_filename = f"{uuid.uuid4()}{file_extension}"

    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    try:
        async with aiofiles.open(upload_dir / unique_filename, 'wb') as out_file:
            await out_file.write(content)
    except OSError as e:
        logger.error(f"Error saving uploaded file: {e}")
        raise

    return f"/uploads/{unique_filename}"


async def delete_file(file_path: str) -> bool:
    """Delete a previously saved upload by its URL path"""
    full_path = Path(settings.UPLOAD_DIR) / Path(file_path).name
    if full_path.exists():
        full_path.unlink()
        return True
    return False
