"""Conversions between decimal text and integers with C ``int`` semantics."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_OVERFLOW_DIGITS = 20
_WORD = 1 << 64
_INT = 1 << 32


def _to_int32(value: int) -> int:
    value %= _INT
    return value - _INT if value >= _INT // 2 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text`` as a 32-bit ``int``.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. Text with nothing to parse gives 0. When
    the whole text is consumed and it runs to 20 characters or more, the
    value is taken as overflowed: -1 for a positive number, 0 for a negative
    one. Other results wrap to the 32-bit range.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    result = 0
    while pos < len(text):
        ch = text[pos]
        if ch not in _DIGITS:
            return _to_int32(-result if negative else result)
        result = (result * 10 + int(ch)) % _WORD
        pos += 1
    if pos >= _OVERFLOW_DIGITS:
        return 0 if negative else -1
    return _to_int32(-result if negative else result)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def num_len(n: int) -> int:
    """Number of characters in the decimal text of ``n``, sign included."""
    return len(itoa(n))