"""Character classification, case conversion and integer parsing."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\f\r"
_INT_MAX = 2147483647
_INT_MIN_MAGNITUDE = 2147483648


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, codes 32 to 126."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one optional sign is accepted.
    Parsing stops at the first non-digit. A positive value above
    2147483647 yields -1 and a negative value below -2147483648 yields 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
        if sign == 1 and result > _INT_MAX:
            return -1
        if sign == -1 and result > _INT_MIN_MAGNITUDE:
            return 0
    return sign * result


def lenient_atoi(text: str) -> int:
    """Parse the first run of digits found anywhere in ``text``.

    Every character before the first digit is skipped, signs included,
    so the result is never negative. Raises ValueError when the text
    holds no digit at all.
    """
    start = next((i for i, ch in enumerate(text) if is_digit(ch)), None)
    if start is None:
        raise ValueError(f"no digits in {text!r}")
    result = 0
    for ch in text[start:]:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return result