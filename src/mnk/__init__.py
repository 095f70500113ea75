"""
mnk - tic-tac-toe on a rows x cols board with a minimax opponent.

The win length is min(rows, cols). The opponent runs a full, unpruned
minimax search, which is only practical on small boards.
"""

from .errors import GameError, IllegalMove, OutOfRange, NoLegalMove
from .grid import BoardConfig, EMPTY, index, position, empty_board, remap
from .game import X, O, Outcome, win_lines, detect_winner, legal_moves, apply_move, outcome
from .minimax import CENTER_OUT, LEGACY, minimax, find_best_move, score_moves, move_order
from .state import (
    Game,
    GameState,
    new_game,
    play,
    jump_to,
    resize,
    respond,
    winner,
    is_draw,
    best_move,
)
from .render import render_board, score, status_line, move_labels
from .eval import EvalConfig, eval_vs_random

__version__ = "0.1.0"
__all__ = [
    "GameError",
    "IllegalMove",
    "OutOfRange",
    "NoLegalMove",
    "BoardConfig",
    "EMPTY",
    "X",
    "O",
    "index",
    "position",
    "empty_board",
    "remap",
    "Outcome",
    "win_lines",
    "detect_winner",
    "legal_moves",
    "apply_move",
    "outcome",
    "CENTER_OUT",
    "LEGACY",
    "minimax",
    "find_best_move",
    "score_moves",
    "move_order",
    "Game",
    "GameState",
    "new_game",
    "play",
    "jump_to",
    "resize",
    "respond",
    "winner",
    "is_draw",
    "best_move",
    "render_board",
    "score",
    "status_line",
    "move_labels",
    "EvalConfig",
    "eval_vs_random",
]
