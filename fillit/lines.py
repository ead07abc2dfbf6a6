"""Reading newline-terminated lines from a stream, and the program's errors."""

from __future__ import annotations

from typing import IO, Iterator, Optional, Union

BUFFER_SIZE = 700

_INVALID_MESSAGE = "error"
_USAGE_MESSAGE = "usage: ./fillit file_with_tetrominos"


class InvalidInputError(ValueError):
    """The input file is missing, unreadable or malformed."""

    def __init__(self, message: str = _INVALID_MESSAGE) -> None:
        super().__init__(message)


class UsageError(Exception):
    """The program was started with the wrong arguments."""

    def __init__(self, message: str = _USAGE_MESSAGE) -> None:
        super().__init__(message)


class LineReader:
    """Split a stream into lines, reading it in fixed-size chunks.

    Every chunk read from the stream must end with a newline; a chunk that
    does not raises :class:`InvalidInputError`. In particular the input has
    to end with a newline.
    """

    def __init__(self, stream: IO[Union[str, bytes]], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._residue = ""

    def _read(self) -> str:
        chunk = self._stream.read(self._buffer_size)
        if isinstance(chunk, (bytes, bytearray)):
            return bytes(chunk).decode("latin-1")
        return chunk or ""

    def next_line(self) -> Optional[str]:
        """Return the next line without its newline, or ``None`` at the end."""
        newline = self._residue.find("\n")
        if newline >= 0:
            line = self._residue[:newline]
            self._residue = self._residue[newline + 1:]
            return line
        line, self._residue = self._residue, ""
        while True:
            chunk = self._read()
            if not chunk:
                return line or None
            if not chunk.endswith("\n"):
                raise InvalidInputError()
            newline = chunk.find("\n")
            self._residue = chunk[newline + 1:]
            return line + chunk[:newline]

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[Union[str, bytes]]) -> Iterator[str]:
    """Yield the lines of ``stream`` as :class:`LineReader` reads them."""
    yield from LineReader(stream)