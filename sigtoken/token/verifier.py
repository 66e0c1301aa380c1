"""Token verification."""

from __future__ import annotations

import logging
from typing import Any, Type, TypeVar

from ..errors import DecodingError, MalformedTokenError, SignatureMismatchError, TokenError
from .types import Token, VerificationResult

logger = logging.getLogger(__name__)

P = TypeVar("P")

_REASONS = {
    MalformedTokenError: "malformed_token",
    SignatureMismatchError: "invalid_signature",
    DecodingError: "invalid_payload",
}


def verify(token: str, secret: str | bytes, payload_type: Type[P] | None = None) -> P | Any:
    """Return the payload of a valid token or raise a ``TokenError`` subclass."""
    try:
        return Token.verify(token, secret, payload_type).payload
    except TokenError as exc:
        logger.debug("Token rejected: %s", type(exc).__name__)
        raise


def check(token: str, secret: str | bytes, payload_type: Type[P] | None = None) -> VerificationResult:
    """Verify without raising on token errors."""
    try:
        payload = verify(token, secret, payload_type)
    except TokenError as exc:
        return VerificationResult(False, _REASONS.get(type(exc), "invalid_token"))
    return VerificationResult(True, "ok", payload=payload)
