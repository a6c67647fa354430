"""C-style string functions over ``str``, ``bytes`` and ``bytearray``.

A string ends at its first NUL character, if it has one. Positions are
returned as indices, and ``None`` stands for "not found". The bounded
copy functions ``strlcpy`` and ``strlcat`` write into a ``bytearray``.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Union

__all__ = [
    "atoi",
    "strchr",
    "strdup",
    "strlcat",
    "strlcpy",
    "strlen",
    "strncmp",
    "strnstr",
    "strrchr",
]

Text = Union[str, bytes, bytearray, memoryview]

_ATOI_PATTERN = re.compile(r"[ \t\n\x0b\x0c\r]*([+-]?)([0-9]*)")


def _terminated(s: Text) -> str | bytes:
    """Return ``s`` cut at its first NUL."""
    if isinstance(s, str):
        return s.split("\0", 1)[0]
    return bytes(s).split(b"\0", 1)[0]


def _codes(text: str | bytes) -> Iterator[int]:
    return map(ord, text) if isinstance(text, str) else iter(text)


def _target(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c & 0xFF


def _source_bytes(src: bytes | bytearray | memoryview) -> bytes:
    if isinstance(src, str):
        raise TypeError("source must be bytes-like, not str")
    return bytes(src).split(b"\0", 1)[0]


def _check_size(dest: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds buffer of size {len(dest)}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace (space and ``\\t`` to ``\\r``) is skipped, then one
    optional sign, then as many digits as follow. Anything else stops the
    parse; no digits at all gives 0.
    """
    match = _ATOI_PATTERN.match(_terminated(text))
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def strlen(s: Text) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: Text, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    An int ``c`` is reduced to its low byte.
    """
    text = _terminated(s)
    target = _target(c)
    if target == 0:
        return len(text)
    return next((i for i, code in enumerate(_codes(text)) if code == target), None)


def strrchr(s: Text, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    target = _target(c)
    if target == 0:
        return len(text)
    matches = [i for i, code in enumerate(_codes(text)) if code == target]
    return matches[-1] if matches else None


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    first = [*_codes(_terminated(s1)), 0]
    second = [*_codes(_terminated(s2)), 0]
    for _, x, y in zip(range(n), first, second):
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly in the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _terminated(haystack)
    pattern = _terminated(needle)
    if type(text) is not type(pattern):
        raise TypeError("haystack and needle must both be str or both be bytes")
    if not pattern:
        return 0
    found = text[:length].find(pattern)
    return None if found < 0 else found


def strlcpy(dest: bytearray, src: bytes | bytearray | memoryview, size: int) -> int:
    """Copy ``src`` into ``dest`` with room for ``size`` bytes, NUL included.

    Returns the length of ``src``; a result of ``size`` or more means the
    copy was truncated.
    """
    source = _source_bytes(src)
    _check_size(dest, size)
    if size:
        count = min(len(source), size - 1)
        dest[:count] = source[:count]
        dest[count] = 0
    return len(source)


def strlcat(dest: bytearray | None, src: bytes | bytearray | memoryview, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest``, within ``size`` bytes.

    Returns the length the full result would have; if ``dest`` already
    fills ``size`` or more, nothing is written and ``size + len(src)`` is
    returned.
    """
    source = _source_bytes(src)
    if dest is None:
        if size == 0:
            return len(source)
        raise TypeError("dest may be None only when size is 0")
    _check_size(dest, size)
    start = strlen(dest)
    if size <= start:
        return size + len(source)
    count = min(len(source), size - start - 1)
    dest[start:start + count] = source[:count]
    dest[start + count] = 0
    return start + len(source)


def strdup(s: Text) -> str | bytes | bytearray:
    """Return a new copy of ``s`` up to its first NUL."""
    text = _terminated(s)
    if isinstance(s, bytearray):
        return bytearray(text)
    return text