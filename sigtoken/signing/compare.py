"""Constant-time byte comparison."""

from __future__ import annotations


def equal(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without exiting early on the first difference.

    Lengths are not secret and may short-circuit. Once they match, every
    byte pair is folded into the accumulator.
    """
    if len(a) != len(b):
        return False
    acc = 0
    for x, y in zip(a, b):
        acc |= x ^ y
    return acc == 0
