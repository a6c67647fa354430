"""Building new strings: substrings, joins, trims, splits and maps.

Inputs are ``str``, ``bytes`` or ``bytearray`` and end at their first
NUL, if they have one. Results have the same kind as the input.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import takewhile
from typing import Any, Union

from ftkit.strings import strdup

__all__ = ["itoa", "split", "striteri", "strjoin", "strmapi", "strtrim", "substr"]

Text = Union[str, bytes, bytearray]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _text(s: Text | None, name: str) -> Text:
    if s is None:
        raise TypeError(f"{name} must not be None")
    return strdup(s)


def _same_kind(a: Text, b: Text) -> None:
    if isinstance(a, str) != isinstance(b, str):
        raise TypeError("arguments must both be str or both be bytes-like")


def _separator(sep: int | str | bytes, text: Text) -> str | bytes:
    if isinstance(sep, bool):
        raise TypeError("separator must be an int or a single character")
    if isinstance(sep, int):
        return chr(sep & 0xFF) if isinstance(text, str) else bytes([sep & 0xFF])
    if isinstance(sep, (str, bytes, bytearray)):
        if len(sep) != 1:
            raise ValueError(f"expected a single character separator, got {sep!r}")
        _same_kind(text, sep)
        return sep if isinstance(sep, str) else bytes(sep)
    raise TypeError(f"separator must be an int or a single character, not {type(sep).__name__}")


def substr(s: Text, start: int, length: int) -> Text:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    text = _text(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return text[:0]
    return text[start:start + length]


def strjoin(s1: Text | None, s2: Text | None) -> Text:
    """Return ``s1`` followed by ``s2``; a missing part counts as empty."""
    if s1 is None and s2 is None:
        return ""
    if s1 is None:
        second = strdup(s2)
        return second[:0] + second
    first = strdup(s1)
    if s2 is None:
        return first
    second = strdup(s2)
    _same_kind(first, second)
    return first + second


def strtrim(s: Text, charset: Text) -> Text:
    """Return ``s`` without the leading and trailing characters found in ``charset``."""
    text = _text(s, "s")
    chars = _text(charset, "charset")
    _same_kind(text, chars)
    return text.strip(chars)


def split(s: Text, sep: int | str | bytes) -> list[Text]:
    """Split ``s`` on ``sep``, dropping the empty words between runs of separators."""
    text = _text(s, "s")
    mark = _separator(sep, text)
    return [word for word in text.split(mark) if word]


def itoa(n: int) -> str:
    """Return the decimal form of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: Text, f: Callable[[int, Any], Any]) -> Text:
    """Return a new string of ``f(index, char)`` for each character of ``s``.

    For bytes-like input ``f`` takes and returns byte values. A NUL in the
    result ends it.
    """
    text = _text(s, "s")
    if isinstance(text, str):
        return strdup("".join(f(i, ch) for i, ch in enumerate(text)))
    mapped = bytes(f(i, b) & 0xFF for i, b in enumerate(text))
    return strdup(bytearray(mapped) if isinstance(text, bytearray) else mapped)


def striteri(s: MutableSequence[Any] | None, f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, char)`` for each character of ``s`` up to its first NUL.

    ``s`` is changed in place: a value returned by ``f`` replaces the
    character, and None leaves it as it was. ``s`` must be mutable, such
    as a ``bytearray`` or a list of one-character strings; None does nothing.
    """
    if s is None:
        return
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence such as a bytearray")
    chars = list(takewhile(lambda ch: ch not in (0, "\0"), s))
    for i, ch in enumerate(chars):
        value = f(i, ch)
        if value is not None:
            s[i] = value