"""Reading a stream one line at a time through a fixed-size read buffer.

A stream is either an object with a ``read(size)`` method, returning text or
bytes, or an integer file descriptor. Each line keeps its trailing newline;
the last line of a stream may lack one.
"""

from __future__ import annotations

import os
from functools import partial
from typing import Any, Callable, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 1

Chunk = Union[str, bytes]


def _find_newline(data: Chunk) -> int:
    """Index of the first newline in ``data``, or -1 if there is none."""
    if isinstance(data, str):
        return data.find("\n")
    return data.find(b"\n")


class LineReader:
    """Yields the lines of a stream, reading ``buffer_size`` units at a time."""

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if isinstance(stream, int) and not isinstance(stream, bool):
            if stream < 0:
                raise ValueError("file descriptor must not be negative")
            self._read: Callable[[int], Chunk] = partial(os.read, stream)
        else:
            self._read = stream.read
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _fill(self) -> None:
        while self._pending is None or _find_newline(self._pending) < 0:
            chunk = self._read(self._buffer_size)
            if not chunk:
                return
            if isinstance(chunk, (bytearray, memoryview)):
                chunk = bytes(chunk)
            self._pending = chunk if self._pending is None else self._pending + chunk

    def read_line(self) -> Optional[Chunk]:
        """The next line, or None when the stream has nothing more to give."""
        self._fill()
        pending = self._pending
        if not pending:
            return None
        end = _find_newline(pending)
        if end < 0:
            self._pending = pending[:0]
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[Chunk]:
    """Iterate over the lines of ``stream``."""
    yield from LineReader(stream, buffer_size)