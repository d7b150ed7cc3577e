"""Formatted output: number rendering, a small printf, and writes to descriptors.

The printf family understands ``%s``, ``%c``, ``%p``, ``%d``, ``%i``,
``%u``, ``%x``, ``%X`` and ``%%``. Integer conversions follow 32-bit C
semantics: ``%d`` and ``%i`` wrap to a signed 32-bit value, ``%u``,
``%x`` and ``%X`` to an unsigned one. Any other conversion character is
dropped without consuming an argument.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Iterator, List, Optional, TextIO, Union

__all__ = [
    "format_base",
    "format_int",
    "format_unsigned",
    "format_hex",
    "format_pointer",
    "sprintf",
    "printf",
    "putchar_fd",
    "putstr_fd",
    "putendl_fd",
    "putnbr_fd",
]

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def format_base(nb: int, base: str) -> str:
    """Render the non-negative ``nb`` using the characters of ``base`` as digits."""
    nb = _as_int(nb)
    if nb < 0:
        raise ValueError(f"number must not be negative, got {nb}")
    if len(base) < 2:
        raise ValueError(f"base needs at least two digits, got {base!r}")
    radix = len(base)
    digits: List[str] = []
    while True:
        nb, remainder = divmod(nb, radix)
        digits.append(base[remainder])
        if nb == 0:
            break
    return "".join(reversed(digits))


def format_int(nb: int) -> str:
    """Render ``nb`` as a signed 32-bit decimal integer."""
    value = _to_int32(_as_int(nb))
    if value < 0:
        return "-" + format_base(-value, "0123456789")
    return format_base(value, "0123456789")


def format_unsigned(nb: int) -> str:
    """Render ``nb`` as an unsigned 32-bit decimal integer."""
    return format_base(_as_int(nb) & _UINT32_MASK, "0123456789")


def format_hex(nb: int, upper: bool = False) -> str:
    """Render ``nb`` as an unsigned 32-bit hexadecimal integer."""
    return format_base(_as_int(nb) & _UINT32_MASK, _UPPER_HEX if upper else _LOWER_HEX)


def format_pointer(ptr: Any) -> str:
    """Render an address as ``0x`` followed by lower-case hex.

    ``None`` and 0 render as ``(nil)``. An int is taken as the address
    itself; any other object is represented by its identity.
    """
    if ptr is None:
        return "(nil)"
    if isinstance(ptr, int) and not isinstance(ptr, bool):
        address = ptr
    else:
        address = id(ptr)
    if address == 0:
        return "(nil)"
    if address < 0:
        raise ValueError(f"address must not be negative, got {address}")
    return "0x" + format_base(address, _LOWER_HEX)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec == "s":
        value = _next_arg(args)
        return "(null)" if value is None else str(value)
    if spec == "c":
        return _format_char(_next_arg(args))
    if spec == "p":
        return format_pointer(_next_arg(args))
    if spec in ("d", "i"):
        return format_int(_next_arg(args))
    if spec == "u":
        return format_unsigned(_next_arg(args))
    if spec in ("x", "X"):
        return format_hex(_next_arg(args), upper=spec == "X")
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    arg_iter = iter(args)
    parts: List[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, arg_iter))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to the file descriptor ``fd``."""
    _write_all(fd, _format_char(c).encode("utf-8"))


def putstr_fd(s: str, fd: int) -> None:
    """Write ``s`` to the file descriptor ``fd``."""
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write ``s`` followed by a newline to the file descriptor ``fd``."""
    putstr_fd(s + "\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the signed 32-bit decimal form of ``n`` to the file descriptor ``fd``."""
    putstr_fd(format_int(n), fd)