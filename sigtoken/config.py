"""Token constants and secret loading."""

from __future__ import annotations

import os

SEPARATOR = "."
TEXT_ENCODING = "utf-8"
DEFAULT_SECRET_ENV = "SIGTOKEN_SECRET"


def secret_bytes(secret: str | bytes) -> bytes:
    """Normalize a caller-supplied secret to bytes."""
    if isinstance(secret, bytes):
        return secret
    if isinstance(secret, str):
        return secret.encode(TEXT_ENCODING)
    raise TypeError(f"secret must be str or bytes, not {type(secret).__name__}")


def load_secret(env_var: str = DEFAULT_SECRET_ENV) -> bytes:
    """Read a signing secret from the environment.

    The value is returned to the caller and not cached; pass it to
    ``issue``/``verify`` explicitly.
    """
    value = os.getenv(env_var)
    if not value:
        raise ValueError(f"Environment variable `{env_var}` must be set to a non-empty secret.")
    return secret_bytes(value)
