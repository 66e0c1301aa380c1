"""Token datatypes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Type, TypeVar

from ..codec import decode_text, deserialize, encode_text, serialize
from ..config import SEPARATOR, secret_bytes
from ..errors import MalformedTokenError, SignatureMismatchError
from ..signing import equal, sign

P = TypeVar("P")


@dataclass(frozen=True)
class Token(Generic[P]):
    """A payload together with its signature and the exact bytes that were signed.

    Built only by ``Token.issue`` or by a successful ``Token.verify``.
    """

    payload: P
    signature: bytes
    body: bytes = field(repr=False)

    @classmethod
    def issue(cls, payload: P, secret: str | bytes) -> "Token[P]":
        body = serialize(payload)
        return cls(payload=payload, signature=sign(body, secret_bytes(secret)), body=body)

    @classmethod
    def verify(cls, token: str, secret: str | bytes, payload_type: Type[P] | None = None) -> "Token[P]":
        """Parse ``token`` and check its signature before decoding the payload."""
        if not isinstance(token, str):
            raise MalformedTokenError("token must be a string")
        parts = token.split(SEPARATOR)
        if len(parts) != 2:
            raise MalformedTokenError("token must contain exactly one separator")
        payload_segment, signature_segment = parts

        provided = decode_text(signature_segment)
        body = decode_text(payload_segment)
        expected = sign(body, secret_bytes(secret))
        if not equal(expected, provided):
            raise SignatureMismatchError()

        return cls(payload=deserialize(body, payload_type), signature=provided, body=body)

    def encode(self) -> str:
        """Return ``<payload>.<signature>`` text for this token."""
        return f"{encode_text(self.body)}{SEPARATOR}{encode_text(self.signature)}"

    def is_valid(self, secret: str | bytes) -> bool:
        """Recompute the signature over the signed body and compare."""
        expected = sign(self.body, secret_bytes(secret))
        return equal(expected, self.signature)


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    payload: Any | None = None
