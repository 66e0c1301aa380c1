"""URL-safe, padding-free base64 text segments."""

from __future__ import annotations

import base64
import binascii
import re

from ..errors import MalformedTokenError

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode_text(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def decode_text(segment: str) -> bytes:
    """Decode one token segment; reject anything outside the URL-safe alphabet."""
    if not _SEGMENT_RE.fullmatch(segment):
        raise MalformedTokenError("token segment contains characters outside the URL-safe alphabet")
    padding = "=" * (-len(segment) % 4)
    try:
        return base64.urlsafe_b64decode(segment + padding)
    except binascii.Error as exc:
        raise MalformedTokenError("token segment has an invalid length") from exc
