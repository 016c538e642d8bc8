"""
Uploader Backend — Object Key Helpers
=====================================

What:  Builds, validates, and publishes S3 object keys for uploads.
Why:   The key string is the only thing the issue and confirm steps share,
       so its format lives in one place.
How:   Pure functions over strings; no I/O, no shared state.

Key format:
    uploads/<unix_ms>-<uuid4>-<sanitized filename>

    e.g. uploads/1717171717171-0b6f0d8e-3c1a-4a63-9a43-58a0c7f0f0a1-my_photo.png

    The timestamp + UUID prefix makes keys unique even when two clients
    upload the same filename in the same millisecond.
"""

import re
import time
import uuid
from typing import Optional

KEY_PREFIX = "uploads/"

# Anything outside this set in a filename becomes "_"
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_.\-]")

# prefix, digits, identifier (no slash, no whitespace), then anything but newlines
_OBJECT_KEY_PATTERN = re.compile(r"uploads/[0-9]+-[^/\s]+-.*")


def sanitize_filename(filename: str) -> str:
    """Replace every character outside ``[A-Za-z0-9_.-]`` with ``_``."""
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)


def build_object_key(
    filename: str,
    timestamp_ms: Optional[int] = None,
    unique_id: Optional[str] = None,
) -> str:
    """
    Build a fresh object key for an upload.

    Args:
        filename: Original client filename (sanitized here).
        timestamp_ms: Override for the epoch-milliseconds component.
        unique_id: Override for the random identifier component.

    Returns:
        A key of the form ``uploads/<ms>-<uuid>-<filename>``.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if unique_id is None:
        unique_id = str(uuid.uuid4())
    return f"{KEY_PREFIX}{timestamp_ms}-{unique_id}-{sanitize_filename(filename)}"


def is_valid_object_key(key: str) -> bool:
    """Shape check only: does not verify the UUID or that the object exists."""
    return _OBJECT_KEY_PATTERN.fullmatch(key) is not None


def build_public_url(bucket: str, key: str, domain: str = "s3.amazonaws.com") -> str:
    return f"https://{bucket}.{domain}/{key}"
