"""Token error taxonomy."""

from __future__ import annotations


class TokenError(ValueError):
    """Base class for every token failure. Callers should reject on any subclass."""


class MalformedTokenError(TokenError):
    """Token text does not have two segments or a segment is not valid text encoding."""


class EncodingError(TokenError):
    """Payload cannot be serialized."""


class DecodingError(TokenError):
    """Decoded bytes do not fit the expected payload shape."""


class SignatureMismatchError(TokenError):
    """Recomputed signature disagrees with the one carried by the token."""

    def __init__(self) -> None:
        super().__init__("token signature mismatch")
