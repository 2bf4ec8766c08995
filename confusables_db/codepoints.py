"""Unicode scalar value helpers."""

from __future__ import annotations

from typing import Union

MAX_CODEPOINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

Codepoint = Union[int, str]


def is_valid_scalar(cp: int) -> bool:
    """Return True when ``cp`` is a Unicode scalar value.

    Python integers are arbitrary precision, so the range check always runs on
    the full value. ``0x100000041`` is rejected rather than read as ``0x41``.
    """
    if isinstance(cp, bool) or not isinstance(cp, int):
        return False
    if cp < 0 or cp > MAX_CODEPOINT:
        return False
    return not (SURROGATE_MIN <= cp <= SURROGATE_MAX)


def format_codepoint(cp: int) -> str:
    if cp < 0:
        return "-U+%04X" % -cp
    return "U+%04X" % cp


def to_codepoint(value: Codepoint) -> int:
    """Accept an integer codepoint or a single character."""
    if isinstance(value, bool):
        raise TypeError("codepoint must be an int or a single character, not bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and len(value) == 1:
        return ord(value)
    raise TypeError(f"codepoint must be an int or a single character, got {value!r}")


__all__ = [
    "Codepoint",
    "MAX_CODEPOINT",
    "format_codepoint",
    "is_valid_scalar",
    "to_codepoint",
]
