import itertools

from mnk.game import (
    DRAW,
    IN_PROGRESS,
    WIN,
    O,
    X,
    apply_move,
    detect_winner,
    is_draw,
    legal_moves,
    outcome,
    player_for_move,
    symbol,
    win_lines,
)
from mnk.grid import EMPTY, BoardConfig

_ = EMPTY

CLASSIC_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]


def test_3x3_lines_in_scan_order():
    assert win_lines(3, 3) == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8),
        (6, 4, 2),
    )


def test_line_count_on_rectangular_board():
    # 3x4, run of 3: 6 horizontal, 4 vertical, 2 diagonal, 2 anti-diagonal
    assert len(win_lines(3, 4)) == 14
    assert all(len(line) == 3 for line in win_lines(3, 4))


def test_every_3x3_board_matches_classic_lines():
    for cells in itertools.product((_, X, O), repeat=9):
        expected = {cells[a] for a, b, c in CLASSIC_LINES
                    if cells[a] != _ and cells[a] == cells[b] == cells[c]}
        w = detect_winner(cells, 3, 3)
        if not expected:
            assert w is None
        else:
            assert w in expected


def test_is_draw_iff_no_winner_and_full():
    for cells in itertools.product((_, X, O), repeat=9):
        full = _ not in cells
        assert is_draw(cells, 3, 3) == (detect_winner(cells, 3, 3) is None and full)


def test_4x4_line_families():
    row = [_] * 16
    for i in (8, 9, 10, 11):
        row[i] = X
    assert detect_winner(row, 4, 4) == X

    col = [_] * 16
    for i in (3, 7, 11, 15):
        col[i] = O
    assert detect_winner(col, 4, 4) == O

    diag = [_] * 16
    for i in (0, 5, 10, 15):
        diag[i] = X
    assert detect_winner(diag, 4, 4) == X

    anti = [_] * 16
    for i in (12, 9, 6, 3):
        anti[i] = O
    assert detect_winner(anti, 4, 4) == O

    three = [_] * 16
    for i in (0, 1, 2):
        three[i] = X
    assert detect_winner(three, 4, 4) is None


def test_short_runs_on_wide_board():
    # 3x5 needs three in a row anywhere along the row
    board = [_] * 15
    for i in (7, 8, 9):
        board[i] = X
    assert detect_winner(board, 3, 5) == X

    # anti-diagonal from (2,1) up to (0,3)
    board = [_] * 15
    for i in (11, 7, 3):
        board[i] = O
    assert detect_winner(board, 3, 5) == O


def test_single_row_board_any_mark_wins():
    assert detect_winner([_, X, _], 1, 3) == X
    assert detect_winner([_, _, _], 1, 3) is None


def test_drawn_board():
    board = [X, O, X, X, O, O, O, X, X]
    assert detect_winner(board, 3, 3) is None
    assert is_draw(board, 3, 3)
    assert outcome(board, BoardConfig()).status == DRAW


def test_outcome():
    config = BoardConfig()
    assert outcome([_] * 9, config).status == IN_PROGRESS
    won = outcome([O, O, O, X, X, _, X, _, _], config)
    assert won.status == WIN
    assert won.winner == O


def test_apply_move_returns_new_board():
    board = (_,) * 9
    after = apply_move(board, X, 4)
    assert after[4] == X
    assert board[4] == _
    assert legal_moves(after) == [0, 1, 2, 3, 5, 6, 7, 8]


def test_turn_owner_from_move_index():
    assert player_for_move(0) == X
    assert player_for_move(1) == O
    assert player_for_move(6) == X
    assert [symbol(v) for v in (X, O, _)] == ["X", "O", " "]


def test_line_length_follows_config():
    for rows, cols in [(5, 3), (3, 5), (4, 4), (1, 3)]:
        k = BoardConfig(rows, cols).win_length
        assert {len(line) for line in win_lines(rows, cols)} == {k}
