"""Byte-buffer operations on bytes-like objects.

Buffers written to must be mutable (``bytearray`` or a writable
``memoryview``). Counts larger than a buffer raise ``ValueError``
instead of reaching past its end.
"""

from __future__ import annotations

from typing import Optional, Union

Readable = Union[bytes, bytearray, memoryview]
Writable = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: Writable, c: int, length: int) -> Writable:
    """Fill the first ``length`` bytes of ``buf`` with the low byte of ``c``."""
    _check_count(length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: Writable, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(num: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``num * size`` bytes."""
    if num < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(num * size)


def memchr(data: Readable, c: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to the low byte of ``c``
    within the first ``count`` bytes, or None."""
    _check_count(count, data)
    index = bytes(data[:count]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Readable, b: Readable, size: int) -> int:
    """Compare ``size`` bytes; return the difference of the first unequal pair."""
    _check_count(size, a, b)
    for x, y in zip(bytes(a[:size]), bytes(b[:size])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Optional[Writable], src: Optional[Readable], count: int) -> Optional[Writable]:
    """Copy ``count`` bytes from ``src`` into the start of ``dest``; return ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def memmove(dest: Writable, src: Readable, n: int) -> Writable:
    """Copy ``n`` bytes from ``src`` into ``dest``; safe when the two overlap."""
    if dest is src or n == 0:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest