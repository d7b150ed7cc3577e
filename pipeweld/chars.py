"""ASCII character classification and case conversion.

Every function accepts either a code point (``int``) or a one-character
string. The case converters return the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

__all__ = [
    "isalpha",
    "isdigit",
    "isalnum",
    "isascii",
    "isprint",
    "toupper",
    "tolower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the code point behind ``c``."""
    if isinstance(c, bool):
        raise TypeError("expected an int or a one-character str, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += _CASE_OFFSET
    return _same_kind(c, code)