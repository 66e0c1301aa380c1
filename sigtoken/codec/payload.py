"""Canonical JSON serialization for token payloads."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Type, TypeVar

from ..config import TEXT_ENCODING
from ..errors import DecodingError, EncodingError

P = TypeVar("P")


def _to_json_value(payload: Any) -> Any:
    if is_dataclass(payload) and not isinstance(payload, type):
        return asdict(payload)
    return payload


def serialize(payload: Any) -> bytes:
    """Return stable compact JSON bytes with sorted keys."""
    try:
        raw = json.dumps(
            _to_json_value(payload),
            sort_keys=True,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingError(f"payload cannot be serialized: {exc}") from exc
    return raw.encode(TEXT_ENCODING)


def deserialize(data: bytes, payload_type: Type[P] | None = None) -> P | Any:
    """Decode JSON bytes, optionally into ``payload_type``.

    Dataclass targets are rebuilt from a JSON object by keyword; nested
    dataclass fields stay as plain dicts. Any other target is checked with
    ``isinstance``; JSON booleans do not satisfy ``int``.
    """
    try:
        value = json.loads(data.decode(TEXT_ENCODING))
    except UnicodeDecodeError as exc:
        raise DecodingError("payload is not valid UTF-8") from exc
    except (ValueError, RecursionError) as exc:
        raise DecodingError(f"payload is not valid JSON: {exc}") from exc

    if payload_type is None:
        return value

    if is_dataclass(payload_type):
        if not isinstance(value, dict):
            raise DecodingError(f"expected a JSON object for {payload_type.__name__}")
        try:
            return payload_type(**value)
        except TypeError as exc:
            raise DecodingError(f"payload does not match {payload_type.__name__}") from exc

    if not isinstance(value, payload_type) or (isinstance(value, bool) and not issubclass(payload_type, bool)):
        raise DecodingError(f"expected {payload_type.__name__}, got {type(value).__name__}")
    return value
