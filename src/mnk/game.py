"""
Game rules for tic-tac-toe on a rows x cols grid.

Board representation: flat sequence of int, length rows * cols, row-major
  - 0: empty
  - +1: X
  - -1: O

The run length needed to win is min(rows, cols). Correctness needs
rows, cols >= 1; on a 1 x n board a single mark is already a winning line.
"""

from functools import lru_cache
from typing import List, NamedTuple, Optional, Sequence, Tuple

from .grid import EMPTY, BoardConfig, index

X = +1
O = -1

IN_PROGRESS = "in_progress"
WIN = "win"
DRAW = "draw"

_SYMBOLS = {EMPTY: " ", X: "X", O: "O"}


class Outcome(NamedTuple):
    status: str
    winner: Optional[int] = None


@lru_cache(maxsize=None)
def win_lines(rows: int, cols: int) -> Tuple[Tuple[int, ...], ...]:
    """
    All lines of length min(rows, cols), in scan order.

    Order: horizontal runs, vertical runs, main diagonals, anti-diagonals.
    """
    k = BoardConfig(rows, cols).win_length
    lines = []
    # rows
    for r in range(rows):
        for c in range(cols - k + 1):
            lines.append(tuple(index(r, c + i, cols) for i in range(k)))
    # columns
    for c in range(cols):
        for r in range(rows - k + 1):
            lines.append(tuple(index(r + i, c, cols) for i in range(k)))
    # main diagonals
    for r in range(rows - k + 1):
        for c in range(cols - k + 1):
            lines.append(tuple(index(r + i, c + i, cols) for i in range(k)))
    # anti-diagonals, walking up and to the right
    for r in range(k - 1, rows):
        for c in range(cols - k + 1):
            lines.append(tuple(index(r - i, c + i, cols) for i in range(k)))
    return tuple(lines)


def detect_winner(board: Sequence[int], rows: int, cols: int) -> Optional[int]:
    """Return the mark of the first completed line, or None."""
    for line in win_lines(rows, cols):
        first = board[line[0]]
        if first != EMPTY and all(board[i] == first for i in line):
            return first
    return None


def is_full(board: Sequence[int]) -> bool:
    return all(v != EMPTY for v in board)


def is_draw(board: Sequence[int], rows: int, cols: int) -> bool:
    return detect_winner(board, rows, cols) is None and is_full(board)


def outcome(board: Sequence[int], config: BoardConfig) -> Outcome:
    w = detect_winner(board, config.rows, config.cols)
    if w is not None:
        return Outcome(WIN, w)
    if is_full(board):
        return Outcome(DRAW)
    return Outcome(IN_PROGRESS)


def legal_moves(board: Sequence[int]) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def apply_move(board: Sequence[int], player: int, action: int) -> Tuple[int, ...]:
    """Apply move and return new board."""
    new_board = list(board)
    new_board[action] = player
    return tuple(new_board)


def player_for_move(move: int) -> int:
    """X moves on even history indices, O on odd ones."""
    return X if move % 2 == 0 else O


def other(player: int) -> int:
    return -player


def symbol(cell: int) -> str:
    return _SYMBOLS[cell]
