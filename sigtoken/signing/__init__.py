"""Message authentication and constant-time comparison."""

from .compare import equal
from .signer import SIGNATURE_SIZE, sign

__all__ = ["sign", "equal", "SIGNATURE_SIZE"]
