"""Byte-buffer fill, search, compare and copy operations."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_span(data: Bytes, n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0:
        raise ValueError("sizes and offsets must be non-negative")
    if offset + n > len(data):
        raise IndexError("range lies outside the buffer")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_span(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    return bytearray(count * size)


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` in ``data[:n]``, or None."""
    _check_span(data, n)
    target = value & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index < 0 else index


def memcmp(first: Bytes, second: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    _check_span(first, n)
    _check_span(second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_span(src, n)
    _check_span(dest, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to ``dest``; overlap is safe."""
    _check_span(buf, n, src)
    _check_span(buf, n, dest)
    if n and dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf