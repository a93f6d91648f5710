"""Test utilities package."""

from tests.utils.uploads import PNG_BYTES, make_upload_file

__all__ = [
    "PNG_BYTES",
    "make_upload_file",
]
