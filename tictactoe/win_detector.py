from collections import namedtuple

MAX_WIN_LENGTH = 5  # cap so big boards don't need a full row

# (d_row, d_col) scan order: right, down, down-right, down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

WinResult = namedtuple("WinResult", ["winner", "line"])


def win_length(size):
    """
    marks in a row needed to win on a size x size board
    """
    return min(size, MAX_WIN_LENGTH)


def is_full(board):
    # every cell has a mark
    return all(cell is not None for cell in board)


def _fits(row, col, d_row, d_col, length, size):
    # last cell of the line must still be on the board
    end_row = row + d_row * (length - 1)
    end_col = col + d_col * (length - 1)
    return 0 <= end_row < size and 0 <= end_col < size


def evaluate(board, size):
    """
    scan every cell as a line start, row-major, trying each direction
    returns WinResult(winner, line) for the first line found, else None
    """
    length = win_length(size)
    for row in range(size):
        for col in range(size):
            player = board[row * size + col]
            if player is None:
                continue
            for d_row, d_col in DIRECTIONS:
                if not _fits(row, col, d_row, d_col, length, size):
                    continue
                line = tuple((row + k * d_row) * size + (col + k * d_col)
                             for k in range(length))
                if all(board[i] == player for i in line):
                    return WinResult(player, line)
    return None
