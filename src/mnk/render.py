"""
Text rendering of boards, status lines and history labels.
"""

from typing import List, Optional, Sequence

from .game import DRAW, WIN, X, outcome, symbol
from .grid import BoardConfig, index
from .state import GameState


def render_board(board: Sequence[int], config: BoardConfig, show_indices: bool = False) -> str:
    """
    Grid with '|' between cells and a separator line between rows.

    With show_indices, empty cells show their flat index instead of a blank.
    """
    width = len(str(config.size - 1)) if show_indices else 1
    lines = []
    for r in range(config.rows):
        cells = []
        for c in range(config.cols):
            i = index(r, c, config.cols)
            text = symbol(board[i])
            if show_indices and text == " ":
                text = str(i)
            cells.append(text.rjust(width))
        lines.append(" " + " | ".join(cells) + " ")
        if r < config.rows - 1:
            lines.append("+".join(["-" * (width + 2)] * config.cols))
    return "\n".join(lines)


def score(board: Sequence[int], config: BoardConfig) -> Optional[int]:
    """+1 if X won, -1 if O won, 0 for a draw, None while the game is on."""
    result = outcome(board, config)
    if result.status == WIN:
        return 1 if result.winner == X else -1
    if result.status == DRAW:
        return 0
    return None


def status_line(state: GameState) -> str:
    result = state.outcome
    if result.status == WIN:
        return f"Winner: {symbol(result.winner)}"
    if result.status == DRAW:
        return "Draw"
    return f"Next player: {symbol(state.player)}"


def move_label(move: int) -> str:
    if move > 0:
        return f"Go to move #{move}"
    return "Go to game start"


def move_labels(state: GameState) -> List[str]:
    return [move_label(m) for m in range(len(state.history))]
