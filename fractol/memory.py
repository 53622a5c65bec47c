"""Byte-buffer operations on ``bytearray`` and other bytes-like objects.

Functions that change a buffer do so in place. Every count is checked
against the buffers it touches and a ValueError is raised when it does
not fit.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"count {n} exceeds buffer of length {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c & 0xFF`` within ``n`` bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare ``n`` bytes; the difference of the first unequal pair, else 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dst`` within ``buf``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n)
    if dst + n > len(buf) or src + n > len(buf):
        raise ValueError(f"move of {n} bytes runs past buffer of length {len(buf)}")
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c & 0xFF``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf