"""ASCII character classification and case conversion.

Every function takes either an integer code point or a one-character
string. Classification functions return ``bool``; the case converters
return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import overload

__all__ = [
    "isalnum",
    "isalpha",
    "isascii",
    "isdigit",
    "isprint",
    "tolower",
    "toupper",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def isalpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """Return True for a code in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


@overload
def tolower(c: int) -> int: ...
@overload
def tolower(c: str) -> str: ...


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code


@overload
def toupper(c: int) -> int: ...
@overload
def toupper(c: str) -> str: ...


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return chr(code) if isinstance(c, str) else code