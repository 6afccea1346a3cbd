"""Reading a source one line at a time with a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 4

Chunk = Union[bytes, str]


def _newline_index(data: Chunk) -> int:
    """Return the index of the first newline in ``data``, or -1."""
    newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
    return data.find(newline)


class LineReader:
    """Return successive lines from a file descriptor or file object.

    The source is read ``buffer_size`` units at a time; anything read
    past the end of a line is kept for the next call. Lines keep their
    trailing newline; the last line may lack one.
    """

    def __init__(self, source: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        if isinstance(source, int) and source < 0:
            raise ValueError(f"invalid file descriptor {source}")
        self._source = source
        self._buffer_size = buffer_size
        self._remainder: Optional[Chunk] = None

    def _read_chunk(self) -> Chunk:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        return self._source.read(self._buffer_size)

    def next_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the source is exhausted.

        A read error discards any buffered data and propagates.
        """
        stack = self._remainder
        self._remainder = None
        try:
            while stack is None or _newline_index(stack) < 0:
                chunk = self._read_chunk()
                if not chunk:
                    break
                stack = chunk if stack is None else stack + chunk
        except (OSError, ValueError):
            self._remainder = None
            raise
        if not stack:
            return None
        end = _newline_index(stack)
        if end < 0:
            return stack
        self._remainder = stack[end + 1:] or None
        return stack[: end + 1]

    def reset(self) -> None:
        """Discard anything read ahead of the last returned line."""
        self._remainder = None

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(source: Any, buffer_size: int = BUFFER_SIZE) -> Iterator[Chunk]:
    """Yield every line of ``source`` in order."""
    yield from LineReader(source, buffer_size)