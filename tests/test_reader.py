import pytest

from fillit.lines import InvalidInputError
from fillit.piece import Piece
from fillit.reader import (
    count_links,
    parse_pieces,
    read_pieces,
    validate,
    validate_grid,
)

SQUARE = ["##..", "##..", "....", "...."]
LINE = ["#...", "#...", "#...", "#..."]
TEE = [".#..", "###.", "....", "...."]
ESS = ["....", "..##", ".##.", "...."]


def text_of(*grids):
    return "\n".join("\n".join(grid) + "\n" for grid in grids)


def test_single_piece_rows_kept():
    pieces = parse_pieces(text_of(TEE))
    assert len(pieces) == 1
    assert pieces[0].rows() == TEE
    assert pieces[0].num == 0


def test_pieces_numbered_in_order():
    pieces = parse_pieces(text_of(SQUARE, LINE, ESS))
    assert [p.num for p in pieces] == list(range(3))
    assert [p.rows() for p in pieces] == [SQUARE, LINE, ESS]


def test_bytes_input_matches_text():
    text = text_of(SQUARE, TEE)
    assert parse_pieces(text.encode()) == parse_pieces(text)


def test_wrong_line_length_rejected():
    with pytest.raises(InvalidInputError):
        parse_pieces("##...\n##..\n....\n....\n")


def test_non_empty_separator_rejected():
    text = "\n".join(SQUARE) + "\n....\n" + "\n".join(LINE) + "\n"
    with pytest.raises(InvalidInputError):
        parse_pieces(text)


def test_missing_final_newline_rejected():
    with pytest.raises(InvalidInputError):
        parse_pieces(text_of(SQUARE).rstrip("\n"))


def test_twenty_six_pieces_allowed():
    pieces = parse_pieces(text_of(*[SQUARE] * 26))
    assert len(pieces) == 26
    assert pieces[-1].num == 25


def test_twenty_seven_pieces_rejected():
    with pytest.raises(InvalidInputError):
        parse_pieces(text_of(*[SQUARE] * 27))


def test_trailing_blank_line_fails_validation():
    pieces = parse_pieces(text_of(SQUARE) + "\n")
    assert len(pieces) == 2
    with pytest.raises(InvalidInputError):
        validate(pieces)


def test_incomplete_piece_fails_validation():
    pieces = parse_pieces("##..\n##..\n")
    with pytest.raises(InvalidInputError):
        validate(pieces)


def test_empty_input_fails_validation():
    with pytest.raises(InvalidInputError):
        validate(parse_pieces(""))


def test_read_pieces_matches_parse(tmp_path):
    text = text_of(LINE, ESS)
    path = tmp_path / "pieces.txt"
    path.write_bytes(text.encode())
    assert read_pieces(path) == parse_pieces(text)


def test_read_missing_file_rejected(tmp_path):
    with pytest.raises(InvalidInputError):
        read_pieces(tmp_path / "absent.txt")


def test_square_has_eight_links():
    assert validate_grid(SQUARE) == 8


@pytest.mark.parametrize("grid", [LINE, TEE, ESS])
def test_other_shapes_have_six_links(grid):
    assert validate_grid(grid) == 6


@pytest.mark.parametrize("grid", [SQUARE, LINE, TEE, ESS])
def test_links_sum_over_blocks(grid):
    total = sum(
        count_links(grid, r, c)
        for r in range(4)
        for c in range(4)
        if grid[r][c] == "#"
    )
    assert total == validate_grid(grid)


def test_count_links_is_symmetric():
    for r in range(4):
        for c in range(4):
            if TEE[r][c] == "#":
                assert count_links(TEE, r, c) >= 1


@pytest.mark.parametrize(
    "grid",
    [
        ["##..", "##..", "#...", "...."],
        ["##..", "....", "..##", "...."],
        ["##..", "#X..", "#...", "...."],
        ["#...", "#...", "#...", "...."],
        ["##.", "##.", "..."],
    ],
)
def test_invalid_grids_rejected(grid):
    with pytest.raises(InvalidInputError):
        validate_grid(grid)


def test_validate_leaves_pieces_unchanged():
    pieces = [Piece(SQUARE, 0), Piece(TEE, 1)]
    validate(pieces)
    assert [p.rows() for p in pieces] == [SQUARE, TEE]


def test_validate_rejects_one_bad_piece():
    pieces = [Piece(SQUARE, 0), Piece(["####", "#...", "....", "...."], 1)]
    with pytest.raises(InvalidInputError):
        validate(pieces)