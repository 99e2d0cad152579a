"""Unit tests for n x n win detection."""

import pytest

from tictactoe.win_detector import WinResult, evaluate, is_full, win_length


def board_from(rows):
    """'X.O' style rows -> flat board tuple"""
    cells = []
    for row in rows:
        cells.extend(None if ch == "." else ch for ch in row)
    return tuple(cells)


@pytest.mark.parametrize("size, expected", [(3, 3), (4, 4), (5, 5), (7, 5), (12, 5)])
def test_win_length_caps_at_five(size, expected):
    assert win_length(size) == expected


def test_empty_board_has_no_winner():
    assert evaluate((None,) * 9, 3) is None
    assert evaluate((None,) * 49, 7) is None


def test_top_row_win():
    board = board_from(["XXX", ".O.", "..O"])
    assert evaluate(board, 3) == WinResult("X", (0, 1, 2))


def test_column_win():
    board = board_from(["XO.", "XO.", ".OX"])
    assert evaluate(board, 3) == WinResult("O", (1, 4, 7))


def test_main_diagonal_win():
    board = board_from(["XO.", "OX.", "..X"])
    assert evaluate(board, 3) == WinResult("X", (0, 4, 8))


def test_anti_diagonal_win():
    board = board_from(["X.O", "XO.", "O.X"])
    assert evaluate(board, 3) == WinResult("O", (2, 4, 6))


def test_full_board_without_line_is_not_a_win():
    board = board_from(["XOX", "XOO", "OXX"])
    assert evaluate(board, 3) is None
    assert is_full(board)


def test_two_in_a_row_not_enough_on_3x3():
    board = board_from(["XX.", "OO.", "..."])
    assert evaluate(board, 3) is None


def test_seven_board_needs_five_not_seven():
    board = board_from([
        ".......",
        ".XXXXX.",
        ".......",
        "OOOO...",
        ".......",
        ".......",
        ".......",
    ])
    result = evaluate(board, 7)
    assert result == WinResult("X", (8, 9, 10, 11, 12))


def test_four_on_seven_board_is_not_a_win():
    board = board_from([
        "XXXX...",
        ".......",
        "O......",
        ".O.....",
        "..O....",
        "...O...",
        ".......",
    ])
    assert evaluate(board, 7) is None


def test_anti_diagonal_on_large_board():
    board = board_from([
        "......",
        ".....O",
        "....O.",
        "...O..",
        "..O...",
        ".O....",
    ])
    result = evaluate(board, 6)
    assert result.winner == "O"
    assert result.line == (11, 16, 21, 26, 31)


def test_line_does_not_wrap_around_rows():
    # indices 2,3,4 are consecutive in memory but split across rows
    board = board_from(["..X", "XX.", "..."])
    assert evaluate(board, 3) is None


def test_first_line_in_scan_order_wins_tie():
    # X holds both the top row and the left column from cell 0
    board = board_from(["XXX", "XO.", "XOO"])
    assert evaluate(board, 3) == WinResult("X", (0, 1, 2))


def test_earlier_start_cell_beats_earlier_direction():
    # column from cell 3 is found before the row starting at cell 4
    board = board_from(["...X", "XXXX", "...X", "...X"])
    assert evaluate(board, 4) == WinResult("X", (3, 7, 11, 15))


@pytest.mark.parametrize("size", [3, 4, 5, 6, 8])
def test_single_line_reports_its_cells(size):
    length = win_length(size)
    cells = [None] * (size * size)
    line = [(size - 1) * size + c for c in range(length)]  # bottom row
    for i in line:
        cells[i] = "O"
    result = evaluate(tuple(cells), size)
    assert result.winner == "O"
    assert len(result.line) == length
    assert all(cells[i] == "O" for i in result.line)


def test_evaluate_does_not_modify_board():
    board = [None, "X", None, None, "O", None, None, None, None]
    before = list(board)
    evaluate(board, 3)
    assert board == before
