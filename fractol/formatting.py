"""A small printf: conversions %c %s %p %d %i %u %x %X and %%.

A conversion letter that is not recognised produces no output and uses
no argument. A lone ``%`` at the end of the format is dropped.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_CONVERSIONS = frozenset("cspdiuxX")


def _cstr(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _wrap32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _digits(n: int, base_digits: str) -> str:
    base = len(base_digits)
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(base_digits[rem])
        if not n:
            break
    return "".join(reversed(out))


def utoa(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit unsigned integer."""
    return _digits(n & _UINT_MASK, _LOWER_DIGITS[:10])


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal text of ``n`` taken as a 32-bit unsigned integer."""
    return _digits(n & _UINT_MASK, _UPPER_DIGITS if upper else _LOWER_DIGITS)


def _char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c requires a single character, got {arg!r}")
        return arg
    return chr(arg & 0xFF)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _CONVERSIONS:
        return ""
    try:
        arg = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _char(arg)
    if spec == "s":
        return "(null)" if arg is None else _cstr(str(arg))
    if spec == "p":
        return "0x" + _digits(arg & _ULONG_MASK, _LOWER_DIGITS)
    if spec in "di":
        return str(_wrap32(arg))
    if spec == "u":
        return utoa(arg)
    return to_hex(arg, upper=spec == "X")


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument."""
    values = iter(args)
    chars = iter(_cstr(fmt))
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)