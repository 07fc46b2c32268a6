"""Row, column and box partitions of the 9x9 board.

Each family is a tuple of nine partitions and each partition is a tuple of
nine ``(row, col)`` cells.  Together the three families form the 27 groups
that must each hold every digit exactly once.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .model import BOX, SIZE, Cell

Partition = Tuple[Cell, ...]


def box_of(cell: Cell) -> int:
    row, col = cell
    return BOX * (row // BOX) + col // BOX


def box_origin(box: int) -> Cell:
    """Top-left cell of ``box``."""
    return BOX * (box // BOX), BOX * (box % BOX)


def _rows() -> Tuple[Partition, ...]:
    return tuple(tuple((r, c) for c in range(SIZE)) for r in range(SIZE))


def _columns() -> Tuple[Partition, ...]:
    return tuple(tuple((r, c) for r in range(SIZE)) for c in range(SIZE))


def _boxes() -> Tuple[Partition, ...]:
    result = []
    for b in range(SIZE):
        top, left = box_origin(b)
        result.append(tuple((top + i, left + j) for i in range(BOX) for j in range(BOX)))
    return tuple(result)


_ROWS = _rows()
_COLUMNS = _columns()
_BOXES = _boxes()
_PARTITIONS = _ROWS + _COLUMNS + _BOXES


def rows() -> Tuple[Partition, ...]:
    return _ROWS


def columns() -> Tuple[Partition, ...]:
    return _COLUMNS


def boxes() -> Tuple[Partition, ...]:
    return _BOXES


def partitions() -> Tuple[Partition, ...]:
    """All 27 partitions: rows, then columns, then boxes."""
    return _PARTITIONS


def partition_families() -> Dict[str, Tuple[Partition, ...]]:
    return {"row": _ROWS, "column": _COLUMNS, "box": _BOXES}


def peers(cell: Cell) -> frozenset:
    """The 20 cells sharing a row, column or box with ``cell``."""
    row, col = cell
    group = set(_ROWS[row]) | set(_COLUMNS[col]) | set(_BOXES[box_of(cell)])
    group.discard(cell)
    return frozenset(group)
