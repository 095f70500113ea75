from mnk.game import O, X
from mnk.grid import EMPTY, BoardConfig
from mnk.render import move_labels, render_board, score, status_line
from mnk.state import GameState, new_game, play

_ = EMPTY


def test_render_board():
    board = (X, _, _, _, O, _, _, _, _)
    assert render_board(board, BoardConfig()) == "\n".join([
        " X |   |   ",
        "---+---+---",
        "   | O |   ",
        "---+---+---",
        "   |   |   ",
    ])


def test_render_board_with_indices():
    board = (X,) + (_,) * 11
    text = render_board(board, BoardConfig(3, 4), show_indices=True)
    lines = text.split("\n")
    assert lines[0] == "  X |  1 |  2 |  3 "
    assert lines[1] == "----+----+----+----"
    assert lines[4] == "  8 |  9 | 10 | 11 "


def test_score():
    config = BoardConfig()
    assert score((X, X, X, O, O, _, _, _, _), config) == 1
    assert score((O, O, O, X, X, _, X, _, _), config) == -1
    assert score((X, O, X, X, O, O, O, X, X), config) == 0
    assert score((_,) * 9, config) is None


def test_status_line():
    state = new_game()
    assert status_line(state) == "Next player: X"
    assert status_line(play(state, 4)) == "Next player: O"

    won = GameState(history=((O, O, O, X, X, _, X, _, _),))
    assert status_line(won) == "Winner: O"

    drawn = GameState(history=((X, O, X, X, O, O, O, X, X),))
    assert status_line(drawn) == "Draw"


def test_move_labels():
    state = play(play(new_game(), 4), 0)
    assert move_labels(state) == ["Go to game start", "Go to move #1", "Go to move #2"]
