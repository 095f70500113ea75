"""
Command-line entry points: interactive play and minimax evaluation.
"""

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from tqdm.auto import tqdm

from .errors import GameError
from .eval import EvalConfig, eval_vs_random
from .game import IN_PROGRESS, O, other, symbol
from .grid import BoardConfig
from .minimax import ORDERINGS, CENTER_OUT, score_moves
from .render import move_labels, render_board, score, status_line
from .state import Game

# Smallest board the scripts accept; the engine itself works down to 1x1
MIN_SIZE = 3

HELP = """Commands:
  <n>             place your mark on cell n
  jump <n>        show the board after move n
  resize <r> <c>  move the board onto an r x c grid (history restarts)
  hint            minimax score of every empty cell
  history         list the recorded moves
  new             start over
  quit            leave"""


def board_dim(text: str) -> int:
    value = int(text)
    if value < MIN_SIZE:
        raise argparse.ArgumentTypeError(f"board dimension must be at least {MIN_SIZE}")
    return value


def game_count(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("number of games must be at least 1")
    return value


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def add_board_args(parser: argparse.ArgumentParser):
    parser.add_argument("--rows", type=board_dim, default=3, help="Board rows")
    parser.add_argument("--cols", type=board_dim, default=3, help="Board columns")
    parser.add_argument("--ordering", choices=ORDERINGS, default=CENTER_OUT,
                        help="Candidate order of the minimax player")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def print_state(game: Game):
    print(render_board(game.board, game.config, show_indices=True))
    print()
    print(status_line(game.state))
    final = score(game.board, game.config)
    if final is not None:
        print(f"Score: {final}")


def handle_command(game: Game, line: str) -> bool:
    """
    Run one command against `game`.

    Returns:
        False when the player wants to quit
    """
    parts = line.split()
    if not parts:
        return True
    cmd = parts[0].lower()

    if cmd in ("q", "quit", "exit"):
        return False
    if cmd == "help":
        print(HELP)
    elif cmd == "new":
        game.reset()
        print_state(game)
    elif cmd == "history":
        for move, label in enumerate(move_labels(game.state)):
            marker = "*" if move == game.state.current_move else " "
            print(f" {marker} {move:2d}. {label}")
    elif cmd == "hint":
        if game.state.outcome.status != IN_PROGRESS:
            print("Game is over")
            return True
        scores = score_moves(game.board, game.config.rows, game.config.cols,
                             game.state.player, game.ordering)
        print(" ".join(f"{idx}:{s:+d}" for idx, s in scores.items()))
        print(f"Best move for {symbol(game.state.player)}: {game.best_move()}")
    elif cmd == "jump":
        game.jump_to(int(parts[1]))
        print_state(game)
    elif cmd == "resize":
        game.resize(board_dim(parts[1]), board_dim(parts[2]))
        print_state(game)
    else:
        game.play(int(cmd))
        print_state(game)
    return True


def play_interactive(game: Game):
    """Play in the terminal until the player quits."""
    print("\n=== m,n tic-tac-toe ===")
    if game.auto_player is None:
        print("Two players, X moves first")
    else:
        print(f"You are {symbol(other(game.auto_player))}, the computer plays {symbol(game.auto_player)}")
    print("Type 'help' for commands")
    print()
    print_state(game)

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("\nGame aborted")
            return
        try:
            if not handle_command(game, line):
                return
        except GameError as e:
            print(f"{e}")
        except (ValueError, IndexError, argparse.ArgumentTypeError):
            print("Invalid command, type 'help'")


def play_main(argv=None):
    parser = argparse.ArgumentParser(description="Play m,n tic-tac-toe against minimax")
    add_board_args(parser)
    parser.add_argument("--two-player", action="store_true", help="No computer opponent")
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    game = Game(
        BoardConfig(args.rows, args.cols),
        auto_player=None if args.two_player else O,
        ordering=args.ordering,
    )
    play_interactive(game)


def eval_main(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate the minimax player vs a random player")
    add_board_args(parser)
    parser.add_argument("--games", type=game_count, default=100, help="Number of games")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--out", type=str, default=None, help="Write results as JSON")
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    config = EvalConfig(
        rows=args.rows,
        cols=args.cols,
        games=args.games,
        seed=args.seed,
        ordering=args.ordering,
    )

    print(f"\nMinimax vs Random on {config.rows}x{config.cols} ({config.games} games)...")
    results = eval_vs_random(config)
    tqdm.write(f"  Wins:   {results['minimax_w']:.2%}")
    tqdm.write(f"  Draws:  {results['minimax_d']:.2%}")
    tqdm.write(f"  Losses: {results['minimax_l']:.2%}")
    tqdm.write(f"  Mean length: {results['mean_length']:.2f}")

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w") as f:
            json.dump({"config": asdict(config), "results": results}, f, indent=2)
        print(f"✓ Results saved to {out_path}")
    return results
