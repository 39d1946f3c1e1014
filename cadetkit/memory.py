"""Byte-buffer operations over bytearray and bytes objects."""

from __future__ import annotations


def _check_span(name: str, n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"{name}: negative length {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"{name}: length {n} exceeds buffer of {len(buf)} bytes")


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` cut to a byte."""
    _check_span("memset", length, buf)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` in the first ``n`` bytes, or None."""
    _check_span("memchr", n, data)
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_span("memcmp", n, a, b)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dest``."""
    _check_span("memcpy", n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move ``length`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled: the source bytes are read in full
    before any is written.
    """
    if length < 0 or dst < 0 or src < 0:
        raise ValueError("memmove: offsets and length must not be negative")
    if max(dst, src) + length > len(buf):
        raise ValueError("memmove: region runs past the end of the buffer")
    buf[dst:dst + length] = buf[src:src + length]
    return buf