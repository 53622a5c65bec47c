"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to its first NUL; None writes nothing."""
    if s is None:
        return
    end = s.find("\0")
    _target(stream).write(s if end < 0 else s[:end])


def putendl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    putstr(s, stream)
    _target(stream).write("\n")


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of ``n``."""
    _target(stream).write(f"{n:d}")