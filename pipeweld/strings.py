"""String helpers: searching, slicing, joining, splitting and comparison.

Positions are returned as indices into the string, or ``None`` when there
is no match. Where a C string would have its terminating NUL, the end of the
Python string stands in for it: searching for ``"\\0"`` finds ``len(text)``.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, TypeVar

__all__ = [
    "split",
    "strchr",
    "strrchr",
    "strnstr",
    "substr",
    "strtrim",
    "strjoin",
    "strlcpy",
    "strlcat",
    "strncat",
    "strmapi",
    "striteri",
    "strncmp",
]

T = TypeVar("T")

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty fields."""
    _single_char(sep)
    return [field for field in text.split(sep) if field]


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``; ``"\\0"`` matches the end."""
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``; ``"\\0"`` matches the end."""
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of ``little`` in ``big`` where the match lies within the first
    ``length`` characters. An empty ``little`` is found at 0."""
    _non_negative("length", length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Strip every character in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the copied text and ``len(src)``; the copy was truncated when
    the length is not less than ``size``. A size of 0 copies nothing.
    """
    _non_negative("size", size)
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``size`` does not exceed ``len(dst)`` nothing is appended and the
    length reported is ``len(src) + size``.
    """
    _non_negative("size", size)
    if size == 0 or size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strncat(dest: str, src: str, n: int) -> str:
    """Append at most ``n`` characters of ``src`` to ``dest``."""
    _non_negative("n", n)
    return dest + src[:n]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[T], func: Callable[[int, T], Optional[T]]
) -> None:
    """Call ``func(index, item)`` for each item of a mutable sequence.

    A value other than ``None`` returned by ``func`` replaces the item in
    place.
    """
    for index, item in enumerate(text):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code-point difference at
    the first mismatch, or 0. Comparison stops at the end of the strings."""
    _non_negative("n", n)
    pairs = islice(zip_longest(s1, s2, fillvalue=_NUL), n)
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0