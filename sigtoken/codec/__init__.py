"""Payload serialization and URL-safe text encoding."""

from .payload import deserialize, serialize
from .text import decode_text, encode_text

__all__ = ["serialize", "deserialize", "encode_text", "decode_text"]
