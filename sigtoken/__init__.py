"""sigtoken package.

Compact signed tokens carrying an opaque JSON payload. The token text never
names its signing algorithm: issuer and verifier agree on it out of band.
"""

from .config import SEPARATOR, load_secret
from .errors import (
    DecodingError,
    EncodingError,
    MalformedTokenError,
    SignatureMismatchError,
    TokenError,
)
from .token import Token, VerificationResult, check, issue, verify

__all__ = [
    "issue",
    "verify",
    "check",
    "load_secret",
    "Token",
    "VerificationResult",
    "SEPARATOR",
    "TokenError",
    "MalformedTokenError",
    "EncodingError",
    "DecodingError",
    "SignatureMismatchError",
]
