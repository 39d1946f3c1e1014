"""String helpers: searching, bounded copying, comparison and splitting."""

from __future__ import annotations


def _char(c: int | str) -> str:
    """Normalise a character given as a one-character str or an int code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        if c < 0:
            raise ValueError(f"negative character code {c}")
        return chr(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _check_non_negative(name: str, **values: int) -> None:
    for key, value in values.items():
        if value < 0:
            raise ValueError(f"{name}: {key} must not be negative, got {value}")


def split(s: str, c: int | str) -> list[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty pieces."""
    delimiter = _char(c)
    return [piece for piece in s.split(delimiter) if piece]


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string,
    so the length of ``s`` is returned.
    """
    ch = _char(c)
    if ch == "\0" and ch not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character returns the length of ``s``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty needle matches at index 0. Returns None when there is no match.
    """
    _check_non_negative("strnstr", length=length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the codes of the first differing pair, with
    the end of a string counting as code 0, or 0 when they agree.
    """
    _check_non_negative("strncmp", n=n)
    a, b = s1[:n], s2[:n]
    width = max(len(a), len(b))
    for x, y in zip(a.ljust(width, "\0"), b.ljust(width, "\0")):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters including its terminator.

    Returns the copied text, truncated to ``dstsize - 1`` characters, and
    the full length of ``src``.
    """
    _check_non_negative("strlcpy", dstsize=dstsize)
    copied = src[: dstsize - 1] if dstsize > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    Returns the resulting text and the length it tried to create. When the
    buffer cannot hold even ``dst`` and its terminator, ``dst`` is left
    unchanged and ``dstsize + len(src)`` is returned as the length.
    """
    _check_non_negative("strlcat", dstsize=dstsize)
    if dstsize < len(dst) + 1:
        return dst, dstsize + len(src)
    room = dstsize - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    A start beyond the end of ``s`` gives an empty string.
    """
    _check_non_negative("substr", start=start, length=length)
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are None.
    """
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")