"""
Game history and turn handling.

A GameState bundles the board history, the index of the displayed board
and the board dimensions. Transitions are pure functions returning a new
GameState; `Game` is a small mutable holder that also makes the automated
opponent reply after every human move.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

from . import game
from .errors import IllegalMove, OutOfRange
from .game import IN_PROGRESS, O, Outcome
from .grid import BoardConfig, empty_board, remap
from .minimax import CENTER_OUT, find_best_move

logger = logging.getLogger(__name__)

Board = Tuple[int, ...]


@dataclass(frozen=True)
class GameState:
    """Immutable game state."""
    history: Tuple[Board, ...]
    current_move: int = 0
    config: BoardConfig = field(default_factory=BoardConfig)

    @property
    def board(self) -> Board:
        return self.history[self.current_move]

    @property
    def player(self) -> int:
        """Side to move: X on even move indices, O on odd ones."""
        return game.player_for_move(self.current_move)

    @property
    def outcome(self) -> Outcome:
        return game.outcome(self.board, self.config)


def new_game(config: Optional[BoardConfig] = None) -> GameState:
    config = config or BoardConfig()
    return GameState(history=(empty_board(config),), current_move=0, config=config)


def winner(board: Sequence[int], config: BoardConfig) -> Optional[int]:
    return game.detect_winner(board, config.rows, config.cols)


def is_draw(board: Sequence[int], config: BoardConfig) -> bool:
    return game.is_draw(board, config.rows, config.cols)


def best_move(board: Sequence[int], config: BoardConfig, player: int,
              ordering: str = CENTER_OUT) -> int:
    return find_best_move(board, config.rows, config.cols, player, ordering)


def play(state: GameState, cell: int) -> GameState:
    """
    Place the side-to-move's mark on `cell` of the displayed board.

    Any history after the displayed board is discarded.

    Raises:
        IllegalMove: cell off the board, occupied, or game already decided
    """
    board = state.board
    if not state.config.contains(cell):
        raise IllegalMove(cell, "off the board")
    if state.outcome.status != IN_PROGRESS:
        raise IllegalMove(cell, "game is over")
    if board[cell] != game.EMPTY:
        raise IllegalMove(cell, "cell is occupied")

    next_board = game.apply_move(board, state.player, cell)
    history = state.history[:state.current_move + 1] + (next_board,)
    logger.debug("move %d: %s at %d", len(history) - 1, game.symbol(state.player), cell)
    return replace(state, history=history, current_move=len(history) - 1)


def jump_to(state: GameState, move: int) -> GameState:
    """Display history entry `move`; history itself is kept."""
    if not 0 <= move < len(state.history):
        raise OutOfRange(move, len(state.history))
    return replace(state, current_move=move)


def resize(state: GameState, rows: int, cols: int) -> GameState:
    """
    Move the displayed board onto a rows x cols grid.

    The overlapping top-left cells are kept and history restarts from the
    remapped board.
    """
    config = BoardConfig(rows, cols)
    board = remap(state.board, state.config, config)
    logger.debug("resize %dx%d -> %dx%d", state.config.rows, state.config.cols, rows, cols)
    return GameState(history=(board,), current_move=0, config=config)


def respond(state: GameState, auto_player: Optional[int] = O,
            ordering: str = CENTER_OUT) -> GameState:
    """Let the automated player move if it is its turn and the game is still on."""
    if auto_player is None or state.player != auto_player:
        return state
    if state.outcome.status != IN_PROGRESS:
        return state
    cell = best_move(state.board, state.config, auto_player, ordering)
    return play(state, cell)


class Game:
    """
    Owns one GameState and runs the automated opponent.

    auto_player=None gives a game between two humans. With auto_player=X the
    computer opens on every fresh board (new game, reset, resize).
    """

    def __init__(self, config: Optional[BoardConfig] = None,
                 auto_player: Optional[int] = O, ordering: str = CENTER_OUT):
        self.auto_player = auto_player
        self.ordering = ordering
        self.state = self._respond(new_game(config))

    def _respond(self, state: GameState) -> GameState:
        return respond(state, self.auto_player, self.ordering)

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def config(self) -> BoardConfig:
        return self.state.config

    def play(self, cell: int) -> GameState:
        self.state = play(self.state, cell)
        self.state = self._respond(self.state)
        return self.state

    def jump_to(self, move: int) -> GameState:
        self.state = jump_to(self.state, move)
        return self.state

    def resize(self, rows: int, cols: int) -> GameState:
        self.state = self._respond(resize(self.state, rows, cols))
        return self.state

    def reset(self) -> GameState:
        self.state = self._respond(new_game(self.state.config))
        return self.state

    def best_move(self) -> int:
        return best_move(self.board, self.config, self.state.player, self.ordering)

    def winner(self) -> Optional[int]:
        return winner(self.board, self.config)

    def is_draw(self) -> bool:
        return is_draw(self.board, self.config)
