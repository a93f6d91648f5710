"""Image upload storage on local disk, served under /uploads."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final
from uuid import uuid4

from fastapi import UploadFile

from src.portfolio.core.config import get_settings
from src.portfolio.core.exceptions import ApiError
from src.portfolio.core.logging import get_logger

logger = get_logger(__name__)

UPLOAD_URL_PREFIX: Final[str] = "/uploads"

# Stored extension comes from the accepted MIME type, never the client filename
ALLOWED_MIME_TYPES: Final[dict[str, str]] = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
}


class UploadKind(str, Enum):
    """Upload subdirectory, one per content type."""

    PROJECTS = "projects"
    BLOG = "blog"


@dataclass(frozen=True)
class StoredUpload:
    filename: str
    url: str


def get_upload_root() -> Path:
    return Path(get_settings().upload_dir).resolve()


def ensure_upload_dirs() -> None:
    """Create the upload root and one directory per upload kind."""
    root = get_upload_root()
    for kind in UploadKind:
        (root / kind.value).mkdir(parents=True, exist_ok=True)


def get_upload_url(filename: str, kind: UploadKind) -> str:
    return f"{UPLOAD_URL_PREFIX}/{kind.value}/{filename}"


def build_filename(content_type: str) -> str:
    """Random filename with the extension of an allowed image MIME type."""
    return f"{uuid4()}{ALLOWED_MIME_TYPES[content_type]}"


async def save_image(file: UploadFile, kind: UploadKind) -> StoredUpload:
    """Validate and store an uploaded image.

    Raises:
        ApiError: 400 for a disallowed MIME type, 413 when the file exceeds
            the configured size limit.
    """
    settings = get_settings()

    content_type = file.content_type or ""
    if content_type not in ALLOWED_MIME_TYPES:
        raise ApiError.bad_request(
            f"Invalid file type: {file.content_type}. "
            f"Allowed types: {', '.join(ALLOWED_MIME_TYPES)}"
        )

    # Read one byte past the limit to detect oversized files without buffering them whole
    content = await file.read(settings.upload_max_bytes + 1)
    if len(content) > settings.upload_max_bytes:
        raise ApiError.payload_too_large(
            f"File exceeds maximum size of {settings.upload_max_bytes} bytes"
        )

    filename = build_filename(content_type)
    target_dir = get_upload_root() / kind.value
    target_dir.mkdir(parents=True, exist_ok=True)
    await asyncio.to_thread((target_dir / filename).write_bytes, content)

    logger.info("Image uploaded", kind=kind.value, filename=filename, size=len(content))
    return StoredUpload(filename=filename, url=get_upload_url(filename, kind))


def resolve_upload_path(url: str) -> Path:
    """Map a public upload URL to its file on disk.

    Raises:
        ValueError: If the URL is not an upload URL or resolves outside the
            upload directory.
    """
    if not url.startswith(f"{UPLOAD_URL_PREFIX}/"):
        raise ValueError(f"Not an upload URL: {url}")

    root = get_upload_root()
    path = (root / url.removeprefix(f"{UPLOAD_URL_PREFIX}/")).resolve()
    if not path.is_relative_to(root):
        raise ValueError("Invalid file path")
    return path


def delete_uploaded_file(url: str | None) -> bool:
    """Delete an uploaded file by its public URL.

    External URLs are left alone. A file that is already gone is not an error.

    Returns:
        True if a file was removed.

    Raises:
        ValueError: If the URL points outside the upload directory.
    """
    if not url or not url.startswith(f"{UPLOAD_URL_PREFIX}/"):
        return False

    path = resolve_upload_path(url)
    if not path.exists():
        return False
    path.unlink()
    logger.info("Upload deleted", path=str(path))
    return True


def discard_uploaded_file(url: str | None) -> None:
    """Best-effort delete used when the owning record is removed."""
    try:
        delete_uploaded_file(url)
    except (OSError, ValueError) as e:
        logger.warning("Failed to delete upload", url=url, error=str(e))
