"""Byte-buffer primitives: fill, copy, move, search and compare.

Buffers are ``bytearray`` for anything written to and any bytes-like object
for anything only read. Operations that would run past the end of a buffer
raise ``IndexError`` instead of touching memory they do not own.
"""

from __future__ import annotations

import sys
from typing import Optional

BytesLike = "bytes | bytearray | memoryview"


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count cannot be negative: {n!r}")


def _check_span(buffer, start: int, n: int, role: str) -> None:
    _check_count(n)
    if start < 0 or start + n > len(buffer):
        raise IndexError(
            f"{role} span [{start}, {start + n}) exceeds buffer of {len(buffer)} bytes"
        )


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_span(buffer, 0, n, "destination")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``.

    When both buffers are missing nothing happens and ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(src, 0, n, "source")
    _check_span(dest, 0, n, "destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied
    aside first.
    """
    _check_span(buffer, src, n, "source")
    _check_span(buffer, dest, n, "destination")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data, value: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``value`` within ``n`` bytes."""
    _check_span(data, 0, n, "search")
    target = value & 0xFF
    return next((offset for offset, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(first, second, n: int) -> int:
    """Compare ``n`` bytes; return the difference at the first mismatch, else 0."""
    _check_span(first, 0, n, "first")
    _check_span(second, 0, n, "second")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count`` elements of ``size`` bytes each."""
    _check_count(count)
    _check_count(size)
    total = count * size
    if total > sys.maxsize:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(total)