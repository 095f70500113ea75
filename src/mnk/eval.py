"""
Evaluation of the minimax opponent against a uniformly random player.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
from tqdm.auto import trange

from .game import DRAW, IN_PROGRESS, X, apply_move, legal_moves, other, outcome
from .grid import BoardConfig, empty_board
from .minimax import CENTER_OUT, find_best_move


@dataclass
class EvalConfig:
    """Evaluation configuration."""

    # Board
    rows: int = 3
    cols: int = 3

    # Games; minimax plays X in even-numbered games, O in odd ones
    games: int = 100

    # Random seed for the random player
    seed: int = 0

    # Candidate order used by the minimax player
    ordering: str = CENTER_OUT

    # Progress bar
    progress: bool = True


def play_minimax_vs_random(
    board_config: BoardConfig,
    minimax_side: int,
    rng: np.random.Generator,
    ordering: str = CENTER_OUT,
    cache: Optional[Dict[Tuple[Tuple[int, ...], int], int]] = None,
) -> Tuple[int, int]:
    """
    Play one game.

    Args:
        cache: (board, player) -> move memo shared between games; the search
            is deterministic so reusing its answers does not change play

    Returns:
        (winner, length) where winner is +1/-1/0
    """
    board = empty_board(board_config)
    player = X
    length = 0

    while True:
        result = outcome(board, board_config)
        if result.status != IN_PROGRESS:
            return (0 if result.status == DRAW else result.winner), length

        if player == minimax_side:
            key = (board, player)
            if cache is not None and key in cache:
                action = cache[key]
            else:
                action = find_best_move(board, board_config.rows, board_config.cols, player, ordering)
                if cache is not None:
                    cache[key] = action
        else:
            moves = legal_moves(board)
            action = moves[int(rng.integers(0, len(moves)))]

        board = apply_move(board, player, action)
        player = other(player)
        length += 1


def eval_vs_random(config: EvalConfig) -> Dict[str, float]:
    """
    Evaluate the minimax player vs a random opponent.

    Returns:
        Dict with 'games', 'minimax_w', 'minimax_d', 'minimax_l', 'mean_length'
    """
    if config.games < 1:
        raise ValueError(f"games must be at least 1, got {config.games}")
    board_config = BoardConfig(config.rows, config.cols)
    rng = np.random.default_rng(config.seed)
    cache: Dict[Tuple[Tuple[int, ...], int], int] = {}

    wins = draws = losses = 0
    lengths = []

    for g in trange(config.games, desc="Games", disable=not config.progress):
        minimax_side = X if g % 2 == 0 else other(X)
        winner, length = play_minimax_vs_random(board_config, minimax_side, rng, config.ordering, cache)
        if winner == 0:
            draws += 1
        elif winner == minimax_side:
            wins += 1
        else:
            losses += 1
        lengths.append(length)

    total = wins + draws + losses
    return {
        "games": total,
        "minimax_w": wins / total,
        "minimax_d": draws / total,
        "minimax_l": losses / total,
        "mean_length": float(np.mean(lengths)),
    }
