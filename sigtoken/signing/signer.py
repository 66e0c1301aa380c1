"""HMAC-SHA256 signer."""

from __future__ import annotations

import hmac
import logging
from hashlib import sha256

logger = logging.getLogger(__name__)

SIGNATURE_SIZE = sha256().digest_size


def sign(message: bytes, secret: bytes) -> bytes:
    """Return the HMAC-SHA256 tag of ``message`` keyed by ``secret``.

    The algorithm is fixed. Secret strength is the caller's responsibility;
    an empty secret is accepted.
    """
    if not secret:
        logger.warning("Signing with an empty secret.")
    return hmac.new(secret, message, sha256).digest()
