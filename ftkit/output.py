"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from ftkit.strings import strdup

__all__ = ["putchar_fd", "putendl_fd", "putnbr_fd", "putstr_fd"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: str | bytes | bytearray) -> bytes:
    text = strdup(s)
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def putchar_fd(c: str | int, fd: int) -> None:
    """Write one character to ``fd``; an int is written as its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: str | bytes | bytearray | None, fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _encode(s))


def putendl_fd(s: str | bytes | bytearray | None, fd: int) -> None:
    """Write ``s`` and a newline to ``fd``; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _encode(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of a 32-bit signed integer to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    _write_all(fd, str(n).encode("ascii"))