"""
Exhaustive minimax opponent.

Scores are from X's point of view: +1 X wins, -1 O wins, 0 draw.
There is no pruning, depth limit or caching, so the search is only
practical on small boards (3x3, or nearly full larger boards).
"""

import logging
from functools import lru_cache
from typing import Dict, List, Sequence, Tuple

from .errors import NoLegalMove
from .game import O, X, detect_winner, legal_moves
from .grid import EMPTY, position

logger = logging.getLogger(__name__)

CENTER_OUT = "center_out"
LEGACY = "legacy"
ORDERINGS = (CENTER_OUT, LEGACY)

# Centre, corners, edges of a 3x3 board
LEGACY_MOVE_ORDER = (4, 0, 2, 6, 8, 1, 3, 5, 7)


@lru_cache(maxsize=None)
def _center_out_order(rows: int, cols: int) -> Tuple[int, ...]:
    cr = (rows - 1) / 2
    cc = (cols - 1) / 2

    def key(idx: int):
        r, c = position(idx, cols)
        dr, dc = abs(r - cr), abs(c - cc)
        # ring first, then corners of the ring before its edges
        return (max(dr, dc), -(dr + dc), idx)

    return tuple(sorted(range(rows * cols), key=key))


def move_order(rows: int, cols: int, ordering: str = CENTER_OUT) -> Tuple[int, ...]:
    """
    Candidate order for the minimax phase of `find_best_move`.

    center_out: by distance from the board centre, corners of each ring
        before edges, then by index. Equals LEGACY_MOVE_ORDER on 3x3.
    legacy: LEGACY_MOVE_ORDER used positionally on any board; cells with
        index above 8 are never candidates.
    """
    if ordering == CENTER_OUT:
        return _center_out_order(rows, cols)
    if ordering == LEGACY:
        return tuple(i for i in LEGACY_MOVE_ORDER if i < rows * cols)
    raise ValueError(f"unknown move ordering: {ordering!r}")


def minimax(board: List[int], rows: int, cols: int, maximizing: bool) -> int:
    """
    Score a position by full search.

    Args:
        board: Board to search; cells are placed and restored in place
        maximizing: True when X is to move

    Returns:
        +1, 0 or -1
    """
    w = detect_winner(board, rows, cols)
    if w is not None:
        return 1 if w == X else -1
    if EMPTY not in board:
        return 0

    mark = X if maximizing else O
    best = -2 if maximizing else 2
    for i in range(len(board)):
        if board[i] != EMPTY:
            continue
        board[i] = mark
        score = minimax(board, rows, cols, not maximizing)
        board[i] = EMPTY
        if maximizing:
            best = max(best, score)
        else:
            best = min(best, score)
    return best


def winning_move(board: Sequence[int], rows: int, cols: int, player: int):
    """Return the first empty cell that completes a line for `player`, or None."""
    work = list(board)
    for i in legal_moves(work):
        work[i] = player
        won = detect_winner(work, rows, cols) == player
        work[i] = EMPTY
        if won:
            return i
    return None


def score_moves(
    board: Sequence[int],
    rows: int,
    cols: int,
    player: int,
    ordering: str = CENTER_OUT,
) -> Dict[int, int]:
    """
    Minimax score of every candidate cell for `player`, in preference order.

    Returns:
        dict mapping cell index -> score (X's point of view)
    """
    work = list(board)
    scores: Dict[int, int] = {}
    for idx in move_order(rows, cols, ordering):
        if work[idx] != EMPTY:
            continue
        work[idx] = player
        scores[idx] = minimax(work, rows, cols, player != X)
        work[idx] = EMPTY
    return scores


def find_best_move(
    board: Sequence[int],
    rows: int,
    cols: int,
    player: int,
    ordering: str = CENTER_OUT,
) -> int:
    """
    Pick a move for `player`.

    An immediately winning cell is taken without searching. Otherwise every
    candidate is scored by minimax; X keeps the highest score, O the lowest,
    and ties go to the earliest candidate in the preference order.

    Raises:
        NoLegalMove: no candidate cell is empty
    """
    action = winning_move(board, rows, cols, player)
    if action is not None:
        logger.debug("player %+d wins at %d", player, action)
        return action

    scores = score_moves(board, rows, cols, player, ordering)
    if not scores:
        raise NoLegalMove(f"no empty cell for player {player:+d} ({ordering} ordering)")

    best_move = None
    best_score = None
    for idx, score in scores.items():
        if best_score is None or (score > best_score if player == X else score < best_score):
            best_move, best_score = idx, score

    logger.debug("player %+d plays %d (score %+d)", player, best_move, best_score)
    return best_move
