"""Signed token issuance and verification."""

from .issuer import issue
from .types import Token, VerificationResult
from .verifier import check, verify

__all__ = ["issue", "verify", "check", "Token", "VerificationResult"]
