from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .candidates import CandidateBoard
from .model import SIZE, Cell, Digit, FixedGrid

Rows = Tuple[Tuple[Digit, ...], ...]


@dataclass(frozen=True)
class Solution:
    """Immutable, hashable solved grid."""
    grid: Rows

    @classmethod
    def from_board(cls, board: CandidateBoard) -> "Solution":
        rows = []
        for r in range(SIZE):
            row = []
            for c in range(SIZE):
                value = board.value((r, c))
                if value is None:
                    raise ValueError(f"cell ({r}, {c}) is not determined")
                row.append(value)
            rows.append(tuple(row))
        return cls(tuple(rows))

    def cell(self, cell: Cell) -> Digit:
        row, col = cell
        return self.grid[row][col]

    def to_grid(self) -> FixedGrid:
        return [list(row) for row in self.grid]
