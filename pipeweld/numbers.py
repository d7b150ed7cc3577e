"""Conversions between decimal text and integers."""

from __future__ import annotations

__all__ = ["atoi", "itoa"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace (space, tab, newline, vertical tab, form feed and
    carriage return) is skipped, one optional ``+`` or ``-`` is accepted,
    and digits are read until the first non-digit. Text without digits
    gives 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    negative = False
    if stripped[:1] in ("+", "-"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if char not in _DIGITS:
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Render ``n`` in decimal, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)