"""Building new strings from existing ones: slicing, joining, trimming,
splitting and per-character mapping.

Strings are treated as ending at their first NUL character, the way a
C string would.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end of the string gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    s = _cstr(s)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    return _cstr(s).strip(_cstr(charset))


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in _cstr(s).split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(_cstr(s)))


def striteri(
    s: MutableSequence[T], func: Callable[[int, T], Optional[T]]
) -> None:
    """Call ``func(index, item)`` for each item of ``s`` in order.

    A result other than None replaces the item in place. The number of
    items visited is fixed before the first call.
    """
    for index in range(len(s)):
        replacement = func(index, s[index])
        if replacement is not None:
            s[index] = replacement