"""Shrink candidate sets to a fixed point.

The only rule: a digit that is the sole candidate of some cell in a row,
column or box is removed from every other cell of that group.  Sets only
shrink, so repeating passes until nothing changes always terminates.  An
emptied cell is left as is; :func:`~sudokusolve.core.constraints.is_consistent`
reports it.
"""

from __future__ import annotations

import logging

from .candidates import CandidateBoard
from .grid import Partition, partitions
from .model import is_single

log = logging.getLogger(__name__)


def simplify_partition(board: CandidateBoard, partition: Partition) -> bool:
    """Remove the digits fixed in ``partition`` from its undetermined cells."""
    fixed = 0
    for cell in partition:
        mask = board.mask(cell)
        if is_single(mask):
            fixed |= mask
    if not fixed:
        return False

    changed = False
    for cell in partition:
        mask = board.mask(cell)
        if is_single(mask) or not mask & fixed:
            continue
        board.set_mask(cell, mask & ~fixed)
        changed = True
    return changed


def simplify(board: CandidateBoard) -> bool:
    """One pass over all 27 partitions.  Returns whether the board changed."""
    changed = False
    for partition in partitions():
        if simplify_partition(board, partition):
            changed = True
    return changed


def full_simplify(board: CandidateBoard) -> int:
    """Run :func:`simplify` until a pass changes nothing.

    Returns the number of passes that changed the board.
    """
    passes = 0
    while simplify(board):
        passes += 1
    log.debug("fixed point after %d pass(es), %d cells solved", passes, board.count_solved())
    return passes
