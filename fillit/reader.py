"""Reading tetromino descriptions and checking that each one is a valid piece."""

from __future__ import annotations

import io
import os
from typing import Iterable, List, Sequence, Union

from .lines import InvalidInputError, LineReader
from .piece import BLOCK, EMPTY, Piece

GRID_SIZE = 4
MAX_PIECES = 26
_VALID_LINKS = (6, 8)
_MISSING_ROW = "\0" * GRID_SIZE


def _collect(lines: Iterable[str]) -> List[Piece]:
    """Group lines into 4x4 pieces separated by single empty lines.

    Rows of a piece that the input never supplies are filled with NUL
    characters, which :func:`validate` rejects.
    """
    pieces: List[Piece] = []
    rows: List[str] = []
    for line in lines:
        if len(rows) == GRID_SIZE:
            if line:
                raise InvalidInputError()
            if len(pieces) + 1 >= MAX_PIECES:
                raise InvalidInputError()
            pieces.append(Piece(rows, len(pieces)))
            rows = []
            continue
        if len(line) != GRID_SIZE:
            raise InvalidInputError()
        rows.append(line)
    rows.extend([_MISSING_ROW] * (GRID_SIZE - len(rows)))
    pieces.append(Piece(rows, len(pieces)))
    return pieces


def parse_pieces(text: Union[str, bytes]) -> List[Piece]:
    """Split the text of a tetromino file into numbered pieces.

    Only the layout is checked here: four lines of four characters per
    piece, one empty line between pieces, at most 26 pieces. The shapes are
    checked by :func:`validate`.
    """
    if isinstance(text, str):
        stream: io.IOBase = io.StringIO(text)
    elif isinstance(text, (bytes, bytearray)):
        stream = io.BytesIO(bytes(text))
    else:
        raise TypeError(f"expected str or bytes, got {type(text).__name__}")
    return _collect(LineReader(stream))


def read_pieces(path: Union[str, os.PathLike]) -> List[Piece]:
    """Read and split the tetromino file at ``path``."""
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise InvalidInputError() from exc
    with handle:
        try:
            return _collect(LineReader(handle))
        except OSError as exc:
            raise InvalidInputError() from exc


def count_links(grid: Sequence[str], row: int, col: int) -> int:
    """Number of ``#`` cells directly above, below, left and right of a cell."""
    neighbours = ((row + 1, col), (row, col + 1), (row - 1, col), (row, col - 1))
    return sum(
        1
        for r, c in neighbours
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == BLOCK
    )


def validate_grid(grid: Sequence[str]) -> int:
    """Check that a 4x4 grid holds exactly one tetromino.

    The grid may contain only ``#`` and ``.``, exactly four ``#`` cells, and
    those cells must touch each other 6 or 8 times counted from both sides.
    Returns that count; raises :class:`InvalidInputError` otherwise.
    """
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise InvalidInputError()
    blocks = 0
    links = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == BLOCK:
                blocks += 1
                links += count_links(grid, r, c)
            elif cell != EMPTY:
                raise InvalidInputError()
    if blocks != GRID_SIZE or links not in _VALID_LINKS:
        raise InvalidInputError()
    return links


def validate(pieces: Iterable[Piece]) -> None:
    """Check every piece with :func:`validate_grid`."""
    for piece in pieces:
        validate_grid(piece.rows())