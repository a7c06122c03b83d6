"""Line-at-a-time reading from a stream through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import IO, AnyStr, Generic, Iterator


class LineReader(Generic[AnyStr]):
    """Read a stream line by line, fetching at most buffer_size per read.

    Each line keeps its trailing newline; the last line of the stream is
    returned without one if the stream does not end in a newline.  The
    stream may be a file-like object with a ``read`` method, or a file
    descriptor.
    """

    def __init__(self, stream: IO[AnyStr] | int, buffer_size: int = 10) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        if isinstance(stream, int):
            descriptor = stream
            self._read = lambda size: os.read(descriptor, size)
        else:
            self._read = stream.read
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _take_line(self) -> AnyStr | None:
        if not self._pending:
            return None
        newline = "\n" if isinstance(self._pending, str) else b"\n"
        index = self._pending.find(newline)
        if index < 0:
            return None
        line = self._pending[: index + 1]
        self._pending = self._pending[index + 1 :]
        return line

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            line = self._take_line()
            if line is not None:
                return line
            try:
                chunk = self._read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                rest, self._pending = self._pending, None
                return rest or None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line