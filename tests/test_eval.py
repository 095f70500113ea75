import numpy as np
import pytest

from mnk.eval import EvalConfig, eval_vs_random, play_minimax_vs_random
from mnk.game import O, X
from mnk.grid import BoardConfig


def test_minimax_never_loses_to_random():
    results = eval_vs_random(EvalConfig(games=4, seed=1, progress=False))
    assert results["games"] == 4
    assert results["minimax_l"] == 0
    assert results["minimax_w"] + results["minimax_d"] == 1
    assert 5 <= results["mean_length"] <= 9


def test_single_game_uses_cache():
    cache = {}
    rng = np.random.default_rng(0)
    winner, length = play_minimax_vs_random(BoardConfig(), O, rng, cache=cache)
    assert winner in (X, 0, O)
    assert winner != X
    assert 5 <= length <= 9
    assert cache
    assert all(player == O for (_board, player) in cache)


def test_rejects_empty_run():
    with pytest.raises(ValueError):
        eval_vs_random(EvalConfig(games=0, progress=False))
