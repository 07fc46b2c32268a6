"""Per-cell candidate sets stored as 9-bit masks."""

from __future__ import annotations

from typing import FrozenSet, Iterator, List, Optional, Sequence

from .model import (
    DIGITS,
    FULL_MASK,
    SIZE,
    Cell,
    Digit,
    FixedGrid,
    cell_index,
    digit_mask,
    is_single,
    mask_digits,
)


class CandidateBoard:
    """Working board of the solver.

    Every cell holds the set of digits not yet ruled out.  The board is
    mutated in place by propagation and copied when the search branches.
    """

    __slots__ = ("_masks",)

    def __init__(self, masks: Optional[Sequence[int]] = None) -> None:
        if masks is None:
            masks = [FULL_MASK] * (SIZE * SIZE)
        if len(masks) != SIZE * SIZE:
            raise ValueError(f"expected {SIZE * SIZE} cells, got {len(masks)}")
        self._masks: List[int] = list(masks)

    @classmethod
    def from_grid(cls, grid: FixedGrid) -> "CandidateBoard":
        """Unknown cells get every digit, given cells a singleton."""
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError("grid must be 9x9")
        masks = []
        for r, row in enumerate(grid):
            for c, value in enumerate(row):
                if value is None:
                    masks.append(FULL_MASK)
                elif value in DIGITS:
                    masks.append(digit_mask(value))
                else:
                    raise ValueError(f"invalid digit {value!r} at ({r}, {c})")
        return cls(masks)

    def copy(self) -> "CandidateBoard":
        return CandidateBoard(self._masks)

    def mask(self, cell: Cell) -> int:
        return self._masks[cell_index(cell)]

    def set_mask(self, cell: Cell, mask: int) -> None:
        self._masks[cell_index(cell)] = mask

    def candidates(self, cell: Cell) -> FrozenSet[Digit]:
        return frozenset(mask_digits(self.mask(cell)))

    def is_singleton(self, cell: Cell) -> bool:
        return is_single(self.mask(cell))

    def value(self, cell: Cell) -> Optional[Digit]:
        mask = self.mask(cell)
        if not is_single(mask):
            return None
        return mask.bit_length()

    def fix(self, cell: Cell, digit: Digit) -> None:
        self.set_mask(cell, digit_mask(digit))

    def cells(self) -> Iterator[Cell]:
        for r in range(SIZE):
            for c in range(SIZE):
                yield r, c

    def count_solved(self) -> int:
        return sum(1 for m in self._masks if is_single(m))

    def to_grid(self) -> FixedGrid:
        return [[self.value((r, c)) for c in range(SIZE)] for r in range(SIZE)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateBoard):
            return NotImplemented
        return self._masks == other._masks

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"CandidateBoard(solved={self.count_solved()}/{SIZE * SIZE})"
