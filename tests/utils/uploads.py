"""Helpers for building image uploads in tests."""

import io

from fastapi import UploadFile
from starlette.datastructures import Headers

# Smallest valid PNG: 1x1 transparent pixel
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6300010000050001"
    "0d0a2db40000000049454e44ae426082"
)


def make_upload_file(
    content: bytes = PNG_BYTES,
    filename: str = "photo.png",
    content_type: str = "image/png",
) -> UploadFile:
    """Build an UploadFile as FastAPI would hand it to an endpoint."""
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )
