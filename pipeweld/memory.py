"""Byte-buffer helpers operating on ``bytearray`` and other buffers."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

__all__ = ["memset", "bzero", "calloc", "memchr", "memcmp", "memcpy", "memmove"]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer holding ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: BytesLike, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` within the first ``n`` bytes, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dest, src) + n > len(buf):
        raise ValueError("move runs past the end of the buffer")
    buf[dest:dest + n] = buf[src:src + n]
    return buf