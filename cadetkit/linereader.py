"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import sys
from typing import AnyStr, Generic, Iterator, Sequence

DEFAULT_BUFFER_SIZE = 1
DEFAULT_FILES = ("test.txt", "test2.txt")


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    The stream is read ``buffer_size`` units at a time. Each line keeps its
    trailing newline; the last line of a stream that does not end with one
    is returned without it. Once the stream is exhausted, ``read_line``
    returns None.
    """

    def __init__(self, stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._store: AnyStr | None = None
        self._newline: AnyStr | None = None
        self._eof = False

    def _fill(self) -> None:
        """Read until the store holds a newline or the stream ends."""
        while not self._eof:
            if self._store and self._newline in self._store:
                return
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                return
            if self._newline is None:
                self._newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
            self._store = chunk if self._store is None else self._store + chunk

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when nothing is left."""
        self._fill()
        store = self._store
        if not store:
            self._store = None
            return None
        index = store.find(self._newline)
        if index < 0:
            self._store = None
            return store
        line, rest = store[: index + 1], store[index + 1:]
        self._store = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator:
    """Yield the lines of ``stream`` as LineReader returns them."""
    yield from LineReader(stream, buffer_size)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the lines of the given files side by side, numbered from 00."""
    paths = list(sys.argv[1:] if argv is None else argv) or list(DEFAULT_FILES)
    handles = []
    try:
        for path in paths:
            try:
                handles.append(open(path, encoding="utf-8", newline=""))
            except OSError as exc:
                print(f"{path}: {exc.strerror}", file=sys.stderr)
                return 1
        print("\n\nstarting\n")
        readers = [LineReader(handle) for handle in handles]
        index = 0
        while True:
            lines = [reader.read_line() for reader in readers]
            for line in lines:
                if line is not None:
                    print(f"line [{index:02d}]: {line}")
            if all(line is None for line in lines):
                break
            index += 1
    finally:
        for handle in handles:
            handle.close()
    return 0