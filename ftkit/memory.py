"""Byte-buffer operations on ``bytearray`` and other byte sequences.

Buffers are filled, copied and moved in place; lengths are checked
against the buffers, and a length that would run past one raises
``ValueError``.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

__all__ = ["bzero", "calloc", "memchr", "memcmp", "memcpy", "memmove", "memset"]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_length(n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to the low byte of ``c``."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer for ``nmemb`` items of ``size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    return bytearray(nmemb * size)


def memchr(buf: Sequence[int], c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in ``buf[:n]``, or None."""
    _check_length(n, buf)
    target = c & 0xFF
    return next((i for i, b in enumerate(buf[:n]) if b == target), None)


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_length(n, a, b)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_length(n, dest, src)
    if dest is not src:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError(f"moving {n} bytes runs past buffer of size {len(buf)}")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf