# fillit

A library that packs a set of tetrominoes into the smallest square that holds
them all.

## Installing

    pip install .

## Input format

A tetromino file holds 1 to 26 pieces. Each piece is four lines of four
characters, using `#` for a filled cell and `.` for an empty one. A single
empty line separates two pieces, and the text must end with a newline. Each
piece must hold exactly four `#` cells, all joined edge to edge:

    ....
    ##..
    .#..
    .#..

    ....
    ####
    ....
    ....

## Usage

    from fillit.reader import read_pieces
    from fillit.solver import solve

    pieces = read_pieces("pieces.txt")
    for row in solve(pieces):
        print(row)

`solve` returns the rows of the filled square as strings. Each piece is drawn
with a letter in the order it was read: `A` for the first piece, `B` for the
second, and so on. Empty cells are `.`. The pieces passed in are not changed.

`fillit.reader.parse_pieces` reads the same format from a `str` or `bytes`
value. A missing or unreadable file, a wrong layout, or a piece that is not a
valid tetromino raises `fillit.lines.InvalidInputError`.

## Modules

- `fillit.reader`: `parse_pieces`, `read_pieces`, `validate`, `validate_grid`
  and `count_links` for reading and checking pieces.
- `fillit.solver`: `solve`, plus the steps it is built from: `min_size`,
  `real_size`, `refresh`, `conflicts`, `backtrack` and `join`.
- `fillit.piece`: the `Piece` class, a square grid with the moves the search
  uses (`move_up_left`, `step`, `resize`, `overlaps`, `label`, `rows` and
  others).
- `fillit.lines`: `LineReader` and `read_lines` for splitting a stream into
  lines, and the `InvalidInputError` and `UsageError` exceptions.
- `fillit.chars`, `fillit.numbers`, `fillit.search`, `fillit.strings` and
  `fillit.linked`: small helpers for ASCII character tests, C-style integer
  parsing, string searching and comparison, string splitting and mapping, and
  a singly linked list.

## What it does not do

The package has no command-line program. Reading a file, solving it and
printing the rows, as in the example above, is left to the caller, as is
turning `InvalidInputError` into a message or an exit status.