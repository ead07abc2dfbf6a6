"""ASCII character classification and case conversion.

Each function accepts either an integer character code or a one-character
string. Only the ASCII ranges count: anything outside them is never a letter,
digit or printable character.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def is_upper(c: CharLike) -> bool:
    """True for ``A``-``Z``."""
    return _UPPER_FIRST <= _code(c) <= _UPPER_LAST


def is_lower(c: CharLike) -> bool:
    """True for ``a``-``z``."""
    return _LOWER_FIRST <= _code(c) <= _LOWER_LAST


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    return is_upper(c) or is_lower(c)


def is_digit(c: CharLike) -> bool:
    """True for ``0``-``9``."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def _shift(c: CharLike, offset: int) -> CharLike:
    code = _code(c) + offset
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; return anything else unchanged."""
    return _shift(c, _CASE_OFFSET) if is_upper(c) else c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; return anything else unchanged."""
    return _shift(c, -_CASE_OFFSET) if is_lower(c) else c