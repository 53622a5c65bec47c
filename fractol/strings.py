"""String searching, comparison and conversion with C string semantics.

Strings are treated as ending at their first NUL character, the way a
C string would.
"""

from __future__ import annotations

from typing import Optional, Tuple

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32
_MAX_DIGITS = 20


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _wrap32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def find_char(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``; a NUL ``c`` finds the terminator.

    Returns None when ``c`` does not occur.
    """
    s = _cstr(s)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``; a NUL ``c`` finds the terminator.

    Returns None when ``c`` does not occur.
    """
    s = _cstr(s)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the sign gives the ordering.

    The result is the difference of the first differing character codes,
    with the end of a string counting as code 0.
    """
    s1, s2 = _cstr(s1), _cstr(s2)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at 0. Returns None when there is no match
    lying wholly inside the limit.
    """
    haystack, needle = _cstr(haystack), _cstr(needle)
    if not needle:
        return 0
    for i in range(min(length, len(haystack))):
        if i + len(needle) <= length and haystack.startswith(needle, i):
            return i
    return None


def atoi(text: str) -> int:
    """Parse a leading decimal integer as a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. Arithmetic wraps like a 32-bit int. More than twenty digits
    yield -1, or 0 when the number is negative.
    """
    text = _cstr(text)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    num = 0
    count = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        if count >= _MAX_DIGITS:
            return 0 if sign == -1 else -1
        count += 1
        num = _wrap32(num * 10 + ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap32(sign * num)


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return f"{n:d}"


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied (possibly truncated) string and the full length of
    ``src``, so truncation shows as a length of at least ``size``.
    """
    src = _cstr(src)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the new contents and the length the string would have had
    without truncation: ``min(len(dst), size) + len(src)``.
    """
    dst, src = _cstr(dst), _cstr(src)
    result = dst
    if size > 0 and len(dst) < size - 1:
        result = dst + src[: size - 1 - len(dst)]
    return result, min(len(dst), size) + len(src)