"""Errors raised by the rules engine and move search."""


class GameError(Exception):
    """Base class for recoverable game errors."""


class IllegalMove(GameError, ValueError):
    """Target cell is occupied, off the board, or the game is already decided."""

    def __init__(self, cell: int, reason: str):
        super().__init__(f"illegal move at {cell}: {reason}")
        self.cell = cell
        self.reason = reason


class OutOfRange(GameError, IndexError):
    """Move-history index outside the recorded history."""

    def __init__(self, move: int, size: int):
        super().__init__(f"move {move} out of range (history has {size} entries)")
        self.move = move
        self.size = size


class NoLegalMove(GameError):
    """Move search invoked on a board with no candidate cell."""
