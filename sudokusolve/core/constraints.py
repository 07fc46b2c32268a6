"""Consistency and completeness checks."""

from __future__ import annotations

from typing import List, Tuple

from .candidates import CandidateBoard
from .grid import partition_families, partitions
from .model import DIGITS, SIZE, FixedGrid, is_single


def is_consistent(board: CandidateBoard) -> bool:
    """No empty cell, and no digit forced twice into the same group."""
    for partition in partitions():
        seen = 0
        for cell in partition:
            mask = board.mask(cell)
            if mask == 0:
                return False
            if is_single(mask):
                if seen & mask:
                    return False
                seen |= mask
    return True


def is_complete(board: CandidateBoard) -> bool:
    return all(board.is_singleton(cell) for cell in board.cells())


def is_valid(grid: FixedGrid) -> bool:
    """True if ``grid`` is a fully filled, correct Sudoku."""
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        return False
    expected = set(DIGITS)
    for partition in partitions():
        if {grid[r][c] for r, c in partition} != expected:
            return False
    return True


def conflicts(grid: FixedGrid) -> List[Tuple[str, int, int]]:
    """Givens repeated inside a group, as ``(kind, index, digit)``."""
    found = []
    for kind, family in partition_families().items():
        for index, partition in enumerate(family):
            seen = set()
            for r, c in partition:
                value = grid[r][c]
                if value is None:
                    continue
                if value in seen:
                    found.append((kind, index, value))
                seen.add(value)
    return found
