"""Character classes and numeric parsing used across the shell."""

from __future__ import annotations

LLONG_MAX = 2**63 - 1
LLONG_MIN = -(2**63)

_SPACE_CHARS = frozenset("\t\n\v\f\r ")
_SPECIAL_CHARS = frozenset("|<>")
_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_DIGITS = frozenset("0123456789")


def is_space(char: str) -> bool:
    """Return True for ASCII whitespace (tab through carriage return, and space)."""
    return char in _SPACE_CHARS


def is_special_char(char: str) -> bool:
    """Return True for the operator characters ``|``, ``<`` and ``>``."""
    return char in _SPECIAL_CHARS


def is_name_start(char: str) -> bool:
    """Return True if ``char`` may begin a variable name (ASCII letter or underscore)."""
    return char in _ASCII_LETTERS or char == "_"


def is_name_char(char: str) -> bool:
    """Return True if ``char`` may appear inside a variable name."""
    return char in _ASCII_LETTERS or char in _ASCII_DIGITS or char == "_"


def parse_long_long(text: str) -> int:
    """Parse a leading signed decimal integer within the 64-bit signed range.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text without digits yields 0.
    Raises OverflowError when the value does not fit in 64 bits.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    magnitude = 0
    for char in text[pos:]:
        if char not in _ASCII_DIGITS:
            break
        magnitude = magnitude * 10 + int(char)
        value = sign * magnitude
        if value > LLONG_MAX or value < LLONG_MIN:
            raise OverflowError(f"{text!r} is out of the 64-bit integer range")
    return sign * magnitude