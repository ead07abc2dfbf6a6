"""A tetromino held in a square grid, and the moves the solver makes with it."""

from __future__ import annotations

from typing import Iterable, List

EMPTY = "."
BLOCK = "#"


def _filled(cell: str) -> bool:
    return cell != EMPTY


class Piece:
    """A square grid of cells; any cell other than ``.`` is occupied."""

    def __init__(self, rows: Iterable[Iterable[str]], num: int = 0) -> None:
        grid = [list(row) for row in rows]
        if not grid:
            raise ValueError("a piece needs at least one row")
        if any(len(row) != len(grid) for row in grid):
            raise ValueError("a piece grid must be square")
        self.grid: List[List[str]] = grid
        self.num = num

    @property
    def size(self) -> int:
        return len(self.grid)

    def _blank_row(self) -> List[str]:
        return [EMPTY] * self.size

    def rows(self) -> List[str]:
        """The grid as a list of strings."""
        return ["".join(row) for row in self.grid]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.num == other.num and self.grid == other.grid

    def __repr__(self) -> str:
        return f"Piece({self.rows()!r}, num={self.num})"

    def move_up(self) -> None:
        """Push every occupied row to the top, keeping their order."""
        occupied = [row for row in self.grid if any(map(_filled, row))]
        blanks = [self._blank_row() for _ in range(self.size - len(occupied))]
        self.grid = occupied + blanks

    def move_left(self) -> None:
        """Push every occupied column to the left, keeping their order."""
        columns = [list(col) for col in zip(*self.grid)]
        occupied = [col for col in columns if any(map(_filled, col))]
        blanks = [self._blank_row() for _ in range(self.size - len(occupied))]
        self.grid = [list(row) for row in zip(*(occupied + blanks))]

    def move_up_left(self) -> None:
        """Pack the piece into the top-left corner."""
        self.move_up()
        self.move_left()

    def touches_bottom(self) -> bool:
        """True when the last row holds an occupied cell."""
        return any(map(_filled, self.grid[-1]))

    def touches_right(self) -> bool:
        """True when the last column holds an occupied cell."""
        return any(_filled(row[-1]) for row in self.grid)

    def move_down(self) -> None:
        """Shift the piece down one row unless it already touches the bottom."""
        if not self.touches_bottom():
            self.grid = [self._blank_row()] + self.grid[:-1]

    def move_right(self) -> None:
        """Shift the piece right one column unless it already touches the right."""
        if not self.touches_right():
            self.grid = [[EMPTY] + row[:-1] for row in self.grid]

    def step(self) -> bool:
        """Advance to the next position in reading order.

        Returns True, leaving the piece where it is, when it already sits in
        the bottom-right corner and has no further position.
        """
        right = self.touches_right()
        if right and self.touches_bottom():
            return True
        if right:
            self.move_left()
            self.move_down()
        else:
            self.move_right()
        return False

    def resize(self, size: int) -> None:
        """Make the grid ``size`` by ``size``, cropping or padding with ``.``."""
        if size < 1:
            raise ValueError("size must be positive")
        grid = []
        for row in self.grid[:size]:
            kept = row[:size]
            grid.append(kept + [EMPTY] * (size - len(kept)))
        grid.extend([EMPTY] * size for _ in range(size - len(grid)))
        self.grid = grid

    def overlaps(self, other: "Piece") -> bool:
        """True when both pieces occupy some same cell."""
        if other.size != self.size:
            raise ValueError("pieces of different sizes cannot be compared")
        return any(
            _filled(a) and _filled(b)
            for mine, theirs in zip(self.grid, other.grid)
            for a, b in zip(mine, theirs)
        )

    def label(self) -> None:
        """Replace every ``#`` with the piece's letter, ``A`` for number 0."""
        letter = chr(ord("A") + self.num)
        self.grid = [[letter if cell == BLOCK else cell for cell in row] for row in self.grid]