import pytest
from io import BytesIO
from pathlib import Path
from fastapi import UploadFile

from postboard.config import settings
from postboard.exceptions import ValidationError
from postboard.utils.file_upload import save_upload_file, delete_file, is_allowed_file


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    directory = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(directory))
    return directory


def test_is_allowed_file():
    assert is_allowed_file("photo.PNG")
    assert is_allowed_file("photo.jpeg")
    assert not is_allowed_file("script.sh")
    assert not is_allowed_file("")
    assert not is_allowed_file(None)


@pytest.mark.asyncio
async def test_save_and_delete(upload_dir):
    upload = UploadFile(file=BytesIO(b"image-bytes"), filename="photo.png")

    url = await save_upload_file(upload)

    assert url.startswith("/uploads/")
    assert url.endswith(".png")
    saved = upload_dir / Path(url).name
    assert saved.read_bytes() == b"image-bytes"

    assert await delete_file(url) is True
    assert not saved.exists()
    assert await delete_file(url) is False


@pytest.mark.asyncio
async def test_rejects_bad_extension(upload_dir):
    upload = UploadFile(file=BytesIO(b"#!/bin/sh"), filename="evil.sh")

    with pytest.raises(ValidationError):
        await save_upload_file(upload)


@pytest.mark.asyncio
async def test_rejects_oversized_file(upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 4)
    upload = UploadFile(file=BytesIO(b"too many bytes"), filename="big.png")

    with pytest.raises(ValidationError):
        await save_upload_file(upload)

    assert not upload_dir.exists() or list(upload_dir.iterdir()) == []
