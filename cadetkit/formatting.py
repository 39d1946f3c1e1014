"""A small printf: %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any

_UINT_MASK = 0xFFFFFFFF


def _as_signed32(n: int) -> int:
    return ((n + 2**31) & _UINT_MASK) - 2**31


def _as_unsigned32(n: int) -> int:
    return n & _UINT_MASK


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, without prefix."""
    if n < 0:
        raise ValueError(f"to_hex: negative value {n}")
    return format(n, "X" if upper else "x")


def int_len(n: int) -> int:
    """Number of decimal digits of ``n`` as a 32-bit unsigned value; 0 has none."""
    value = _as_unsigned32(n)
    return len(str(value)) if value else 0


def _convert(spec: str, args: list[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csxXidpu":
        return spec
    if not args:
        raise ValueError(f"not enough arguments for %{spec}")
    arg = args.pop(0)
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError(f"%c expects a single character, got {arg!r}")
            return arg
        return chr(arg & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec in "xX":
        return to_hex(_as_unsigned32(arg), upper=spec == "X")
    if spec in "id":
        return str(_as_signed32(arg))
    if spec == "p":
        return "0x" + to_hex(0 if arg is None else arg)
    return str(_as_unsigned32(arg))


def format_message(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    An unknown conversion character stands for itself and a lone ``%``
    at the end of ``fmt`` is dropped. Raises ValueError when a
    conversion has no argument left.
    """
    remaining = list(args)
    out: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, remaining))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded ``fmt`` to standard output and return its length."""
    text = format_message(fmt, *args)
    sys.stdout.write(text)
    return len(text)