"""Splitting, trimming, joining and mapping strings."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Optional, Sequence, TypeVar

_BLANKS = " \n\t"

S = TypeVar("S", bound=Sequence[Any])


def _require_str(s: object, name: str = "s") -> None:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a str, got {type(s).__name__}")


def _require_char(c: object) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"delimiter must be a single character, got {c!r}")


def split_words(s: str, c: str) -> list[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty words."""
    _require_str(s)
    _require_char(c)
    return [word for word in s.split(c) if word]


def count_words(s: str, c: str) -> int:
    """Number of non-empty words in ``s`` separated by ``c``."""
    return len(split_words(s, c))


def word_len(s: str, c: str) -> int:
    """Length of the first word of ``s`` after any leading delimiters."""
    _require_str(s)
    _require_char(c)
    rest = s.lstrip(c)
    end = rest.find(c)
    return len(rest) if end < 0 else end


def trim(s: str) -> str:
    """Strip spaces, newlines and tabs from both ends of ``s``."""
    _require_str(s)
    return s.strip(_BLANKS)


def concat(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    return s1 + s2


def substring(s: str, start: int, length: int) -> str:
    """Return the ``length`` characters of ``s`` beginning at ``start``."""
    _require_str(s)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(s):
        raise IndexError(
            f"substring [{start}, {start + length}) outside string of length {len(s)}"
        )
    return s[start:start + length]


def map_chars(s: str, f: Callable[[str], str]) -> str:
    """Build a new string from ``f`` applied to each character of ``s``."""
    _require_str(s)
    return "".join(f(ch) for ch in s)


def map_chars_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    _require_str(s)
    return "".join(f(index, ch) for index, ch in enumerate(s))


def iter_chars(chars: MutableSequence[Any], f: Callable[[Any], Optional[Any]]) -> None:
    """Call ``f`` on each element; a non-``None`` result replaces the element."""
    for index, ch in enumerate(chars):
        result = f(ch)
        if result is not None:
            chars[index] = result


def iter_chars_indexed(
    chars: MutableSequence[Any], f: Callable[[int, Any], Optional[Any]]
) -> None:
    """Call ``f(index, element)``; a non-``None`` result replaces the element."""
    for index, ch in enumerate(chars):
        result = f(index, ch)
        if result is not None:
            chars[index] = result


def duplicate(s: S) -> S:
    """Return a copy of the sequence ``s``."""
    if s is None:
        raise TypeError("cannot duplicate None")
    return s[:]  # type: ignore[return-value]