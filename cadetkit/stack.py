"""A stack of integers built from command-line arguments."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence

from cadetkit.chars import atoi

MARKER_VALUE = 69


class Stack:
    """An ordered sequence of integers, first element at the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the stack."""
        self._items.append(value)

    def attach(self, other: Stack) -> None:
        """Add every value of ``other``, in order, at the end of the stack."""
        self._items.extend(other)

    def last(self) -> int:
        """Return the value at the end of the stack."""
        if not self._items:
            raise IndexError("last() on an empty stack")
        return self._items[-1]

    def swap_values(self, i: int, j: int) -> None:
        """Exchange the values at positions ``i`` and ``j``."""
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


def parse_stack(args: Sequence[str]) -> Stack:
    """Build a stack from decimal arguments, parsed as atoi does."""
    if not args:
        raise ValueError("at least one value is needed to build a stack")
    return Stack(atoi(arg) for arg in args)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a stack from the arguments, attach the marker value and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    print(f"Size of argc = {len(args) + 1}\n")
    try:
        stack = parse_stack(args)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    stack.attach(Stack([MARKER_VALUE]))
    for value in stack:
        print(value)
    return 0