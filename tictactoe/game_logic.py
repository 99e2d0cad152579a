import logging
from collections import namedtuple

from .win_detector import evaluate, is_full

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 3   # board shown at startup
MIN_BOARD_SIZE = 3       # anything smaller is refused

# one history entry; location is 1-indexed (row, col), None for game start
Move = namedtuple("Move", ["board", "location", "index"])

# everything the view needs to draw one frame
Snapshot = namedtuple("Snapshot", ["board", "board_size", "status", "move_list",
                                   "ascending", "winning_line", "game_over"])

MoveEntry = namedtuple("MoveEntry", ["move", "location", "current", "description"])


class UnknownCommandError(KeyError):
    """raised by dispatch for an event name with no handler"""


def parse_board_size(raw):
    """
    raw text from the size input -> int > 2, or None if unusable
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip(), 10)
        except ValueError:
            return None
    return value if value >= MIN_BOARD_SIZE else None


def _empty_board(size):
    return (None,) * (size * size)


def _format_location(location):
    return f"({location[0]}, {location[1]})" if location else ""


class GameState:
    """
    move history, cursor, board size and list order
    history is append-only; play from an older move drops the moves after it
    """
    def __init__(self, board_size=DEFAULT_BOARD_SIZE):
        """
        init empty history at board_size (falls back to default if invalid)
        """
        size = parse_board_size(board_size)
        if size is None:
            logger.debug("board size %r refused, using %d", board_size, DEFAULT_BOARD_SIZE)
            size = DEFAULT_BOARD_SIZE
        self.board_size = size
        self.ascending = True
        self.history = [Move(_empty_board(size), None, 0)]
        self.current_move = 0
        self._commands = {
            "cell-click": self.play,
            "history-jump-click": self.jump_to,
            "size-input-change": self._on_size_input,
            "sort-toggle-click": self.toggle_sort,
            "new-game": self.reset,
        }

    # ---- derived state ----

    @property
    def current_squares(self):
        return self.history[self.current_move].board

    @property
    def x_is_next(self):
        return self.current_move % 2 == 0

    @property
    def next_player(self):
        return 'X' if self.x_is_next else 'O'

    @property
    def winner_info(self):
        # recomputed on every call
        return evaluate(self.current_squares, self.board_size)

    @property
    def status(self):
        info = self.winner_info
        if info:
            return f"Winner: {info.winner}"
        if is_full(self.current_squares):
            return "Draw"
        return f"Next player: {self.next_player}"

    @property
    def sort_label(self):
        return "Sort by: " + ("Ascending" if self.ascending else "Descending")

    def move_list(self):
        """
        history entries in display order with their button text
        """
        entries = []
        for step in self.history:
            location = _format_location(step.location)
            current = step.index == self.current_move
            if current:
                description = f"You are at move #{step.index} {location}".rstrip()
            elif step.index > 0:
                description = f"Go to move #{step.index} {location}"
            else:
                description = "Go to game start"
            entries.append(MoveEntry(step.index, step.location, current, description))
        if not self.ascending:
            entries.reverse()
        return entries

    def snapshot(self):
        info = self.winner_info
        return Snapshot(
            board=self.current_squares,
            board_size=self.board_size,
            status=self.status,
            move_list=self.move_list(),
            ascending=self.ascending,
            winning_line=info.line if info else (),
            game_over=bool(info) or is_full(self.current_squares),
        )

    # ---- transitions ----

    def play(self, index):
        """
        place next player's mark at index
        returns False (state untouched) if cell taken, off board or game won
        """
        squares = self.current_squares
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < len(squares):
            logger.debug("play(%r) ignored: not a cell", index)
            return False
        if squares[index] is not None:
            logger.debug("play(%d) ignored: cell taken", index)
            return False
        if self.winner_info:
            logger.debug("play(%d) ignored: game already won", index)
            return False
        player = self.next_player
        next_squares = squares[:index] + (player,) + squares[index + 1:]
        location = (index // self.board_size + 1, index % self.board_size + 1)
        # branch overwrite: keep [0..current_move], then append
        self.history = self.history[:self.current_move + 1] + [
            Move(next_squares, location, self.current_move + 1)
        ]
        self.current_move = len(self.history) - 1
        logger.debug("move #%d: %s at %s", self.current_move, player, location)
        return True

    def jump_to(self, move_index):
        """
        move cursor to move_index, history unchanged
        """
        if isinstance(move_index, bool) or not isinstance(move_index, int) \
           or not 0 <= move_index < len(self.history):
            logger.debug("jump_to(%r) ignored: no such move", move_index)
            return False
        self.current_move = move_index
        logger.debug("jumped to move #%d", move_index)
        return True

    def resize(self, new_size):
        """
        new empty game on a new_size x new_size board; sizes <= 2 are refused
        """
        if isinstance(new_size, bool) or not isinstance(new_size, int) \
           or new_size < MIN_BOARD_SIZE:
            logger.debug("resize(%r) ignored: need an integer > 2", new_size)
            return False
        self.board_size = new_size
        self.reset()
        return True

    def reset(self):
        # back to a single empty board of the current size
        self.history = [Move(_empty_board(self.board_size), None, 0)]
        self.current_move = 0
        logger.debug("new game on %dx%d board", self.board_size, self.board_size)
        return True

    def toggle_sort(self):
        # display order only, history keeps its order
        self.ascending = not self.ascending
        return True

    # ---- command dispatch ----

    def _on_size_input(self, raw):
        size = parse_board_size(raw)
        if size is None:
            logger.debug("size input %r ignored", raw)
            return False
        if size == self.board_size:
            # retyping the current size keeps the game going
            return False
        return self.resize(size)

    def dispatch(self, event, *args):
        """
        run the operation mapped to a UI event name
        returns whether the state changed
        """
        try:
            handler = self._commands[event]
        except KeyError:
            raise UnknownCommandError(event) from None
        return handler(*args)
