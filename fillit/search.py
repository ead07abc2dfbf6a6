"""Searching and comparing strings and byte buffers.

Searches return an index, or ``None`` when nothing is found. Comparisons
return the difference between the first pair of differing characters (an
exhausted string counts as a terminating zero), or 0 when equal.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Sequence, Union

Text = Union[str, bytes, bytearray]


def _codes(s: Text) -> Sequence[int]:
    if isinstance(s, str):
        return [ord(ch) for ch in s]
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s)
    raise TypeError(f"expected str or bytes, got {type(s).__name__}")


def _diff(a: Sequence[int], b: Sequence[int]) -> int:
    for x, y in zip_longest(a, b, fillvalue=0):
        if x != y:
            return x - y
    return 0


def find_char(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL finds the end of ``s``."""
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL finds the end of ``s``."""
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def find_sub(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle gives 0."""
    index = haystack.find(needle)
    return None if index < 0 else index


def find_sub_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`find_sub`, but the match must lie within ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def compare(s1: Text, s2: Text) -> int:
    """Three-way comparison of two strings."""
    return _diff(_codes(s1), _codes(s2))


def compare_n(s1: Text, s2: Text, n: int) -> int:
    """Three-way comparison of at most the first ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _diff(_codes(s1)[:n], _codes(s2)[:n])


def equal(s1: Optional[Text], s2: Optional[Text]) -> bool:
    """True when both strings are given and equal."""
    if s1 is None or s2 is None:
        return False
    return compare(s1, s2) == 0


def equal_n(s1: Optional[Text], s2: Optional[Text], n: int) -> bool:
    """True when the first ``n`` characters agree; always true for ``n == 0``."""
    if n == 0:
        return True
    if s1 is None or s2 is None:
        return False
    return compare_n(s1, s2, n) == 0


def _check_span(data: Sequence[int], n: int) -> None:
    if n < 0 or n > len(data):
        raise ValueError(f"n={n} outside buffer of length {len(data)}")


def mem_find(data: Union[bytes, bytearray], c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` within the first ``n`` bytes."""
    raw = bytes(data)
    _check_span(raw, n)
    index = raw.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def mem_compare(a: Union[bytes, bytearray], b: Union[bytes, bytearray], n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values."""
    left, right = bytes(a), bytes(b)
    _check_span(left, n)
    _check_span(right, n)
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0