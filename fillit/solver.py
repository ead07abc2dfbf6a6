"""Fitting tetrominoes into the smallest square by exhaustive search."""

from __future__ import annotations

from typing import List, Sequence

from .piece import EMPTY, Piece
from .reader import validate

_CELLS_PER_PIECE = 4
_SMALLEST_START = 3


def min_size(pieces: Sequence[Piece]) -> int:
    """Smallest side, at least 3, whose square has room for every cell."""
    cells = len(pieces) * _CELLS_PER_PIECE
    size = _SMALLEST_START
    while size * size < cells:
        size += 1
    return size


def _reaches(piece: Piece, line: int, span: int) -> bool:
    """True when row ``line`` or column ``line`` holds a cell within ``span``."""
    if line >= piece.size:
        return False
    grid = piece.grid
    return any(cell != EMPTY for cell in grid[line][:span]) or any(
        row[line] != EMPTY for row in grid[:span]
    )


def real_size(pieces: Sequence[Piece], size: int) -> int:
    """Correct a starting side of 3 for pieces already packed top-left.

    It grows to 4 when some piece needs four rows or columns, and shrinks to
    2 when every piece fits in two. Any other side is returned unchanged.
    """
    if size == 3:
        size = 4 if any(_reaches(piece, 3, 4) for piece in pieces) else 3
    if size == 3:
        size = 3 if any(_reaches(piece, 2, 3) for piece in pieces) else 2
    return size


def refresh(pieces: Sequence[Piece], size: int) -> int:
    """Pack every piece top-left and give all of them the board's side.

    Returns the side actually used, as corrected by :func:`real_size`.
    """
    for piece in pieces:
        piece.move_up_left()
    size = real_size(pieces, size)
    for piece in pieces:
        piece.resize(size)
    return size


def _grow(pieces: Sequence[Piece]) -> None:
    size = pieces[0].size + 1
    for piece in pieces:
        piece.move_up_left()
        piece.resize(size)


def conflicts(pieces: Sequence[Piece], index: int) -> bool:
    """True when the piece at ``index`` overlaps any piece before it."""
    target = pieces[index]
    return any(piece.overlaps(target) for piece in pieces[:index])


def backtrack(pieces: Sequence[Piece]) -> int:
    """Move the pieces until none overlaps, growing the board when needed.

    Each piece is tried in every position in reading order; when one runs
    out of positions the piece before it advances and all later pieces start
    again from the top-left corner. When the first piece runs out, the board
    grows by one. Returns the final side of the board.
    """
    if not pieces:
        raise ValueError("no pieces to place")
    index = 0
    while index < len(pieces):
        while conflicts(pieces, index):
            if pieces[index].step():
                while pieces[index].step():
                    if index == 0:
                        _grow(pieces)
                        break
                    index -= 1
                for later in pieces[index + 1:]:
                    later.move_up_left()
        index += 1
    return pieces[0].size


def join(pieces: Sequence[Piece]) -> List[str]:
    """Overlay all pieces onto a board the size of the first one."""
    if not pieces:
        raise ValueError("no pieces to join")
    size = pieces[0].size
    board = [[EMPTY] * size for _ in range(size)]
    for piece in pieces:
        for r, row in enumerate(piece.grid[:size]):
            for c, cell in enumerate(row[:size]):
                if cell != EMPTY:
                    board[r][c] = cell
    return ["".join(row) for row in board]


def solve(pieces: Sequence[Piece]) -> List[str]:
    """Validate the pieces and return the rows of the solved board.

    Each piece is drawn with its letter, ``A`` for the first. The pieces
    passed in are left untouched.
    """
    if not pieces:
        raise ValueError("no pieces to solve")
    work = [Piece(piece.rows(), piece.num) for piece in pieces]
    validate(work)
    refresh(work, min_size(work))
    for piece in work:
        piece.label()
    backtrack(work)
    return join(work)