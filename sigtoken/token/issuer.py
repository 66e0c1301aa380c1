"""Token issuance."""

from __future__ import annotations

from typing import Any

from .types import Token


def issue(payload: Any, secret: str | bytes) -> str:
    """Serialize, sign and frame ``payload`` as token text.

    Raises ``EncodingError`` when the payload cannot be serialized. No
    timestamp or other claim is added.
    """
    return Token.issue(payload, secret).encode()
