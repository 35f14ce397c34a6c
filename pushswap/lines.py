"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Union

GNL_BUFFERSIZE = 100

Chunk = Union[str, bytes]


class LineReader:
    """Yield successive lines from a file descriptor or a readable object.

    Each line keeps its trailing newline; the last line may lack one.
    Text sources give ``str`` lines, binary sources and descriptors give ``bytes``.
    """

    def __init__(self, source, buffer_size: int = GNL_BUFFERSIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        if isinstance(source, int) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self._source = source
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _read_chunk(self) -> Chunk:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the source is exhausted."""
        pending = self._pending
        while True:
            if pending:
                newline = b"\n" if isinstance(pending, (bytes, bytearray)) else "\n"
                index = pending.find(newline)
                if index >= 0:
                    self._pending = pending[index + 1:] or None
                    return pending[:index + 1]
            chunk = self._read_chunk()
            if not chunk:
                self._pending = None
                return pending or None
            pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line