from __future__ import annotations

from typing import List, Optional, Tuple

SIZE = 9
BOX = 3

DIGITS = range(1, SIZE + 1)

# Bit d-1 set means digit d is still possible.
FULL_MASK = (1 << SIZE) - 1

Cell = Tuple[int, int]
Digit = int
FixedGrid = List[List[Optional[Digit]]]


def empty_grid() -> FixedGrid:
    """A 9x9 grid with every cell unknown."""
    return [[None] * SIZE for _ in range(SIZE)]


def cell_index(cell: Cell) -> int:
    row, col = cell
    return row * SIZE + col


def digit_mask(digit: Digit) -> int:
    return 1 << (digit - 1)


def mask_digits(mask: int) -> Tuple[Digit, ...]:
    """Digits set in ``mask``, ascending."""
    return tuple(d for d in DIGITS if mask & (1 << (d - 1)))


def is_single(mask: int) -> bool:
    return mask != 0 and mask & (mask - 1) == 0
