"""
Board geometry: dimensions, flat indexing and resize remapping.

Boards are flat row-major sequences of length rows * cols.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

EMPTY = 0


@dataclass(frozen=True)
class BoardConfig:
    """Board dimensions. The win length is derived, never stored."""

    rows: int = 3
    cols: int = 3

    def __post_init__(self):
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"board dimensions must be positive, got {self.rows}x{self.cols}")

    @property
    def win_length(self) -> int:
        return min(self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def contains(self, idx: int) -> bool:
        return 0 <= idx < self.size


def index(row: int, col: int, cols: int) -> int:
    """Convert (row, col) to flat index."""
    assert row >= 0 and 0 <= col < cols, (row, col, cols)
    return row * cols + col


def position(idx: int, cols: int) -> Tuple[int, int]:
    """Convert flat index to (row, col)."""
    return divmod(idx, cols)


def empty_board(config: BoardConfig) -> Tuple[int, ...]:
    return (EMPTY,) * config.size


def remap(board: Sequence[int], old: BoardConfig, new: BoardConfig) -> Tuple[int, ...]:
    """
    Copy the overlapping top-left rectangle of `board` into a board of the new size.

    Cells outside the overlap are empty.
    """
    out = [EMPTY] * new.size
    for r in range(min(old.rows, new.rows)):
        for c in range(min(old.cols, new.cols)):
            out[index(r, c, new.cols)] = board[index(r, c, old.cols)]
    return tuple(out)
