"""Backtracking search with constraint propagation.

Every node propagates to a fixed point, then either dies (inconsistent),
yields a solution (complete) or branches over the candidates of one
undetermined cell.  All solutions are enumerated unless a cap is set.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Iterator, List, Mapping, Optional

from .candidates import CandidateBoard
from .constraints import is_complete, is_consistent
from .model import Cell, FixedGrid, is_single, mask_digits
from .propagation import full_simplify
from .solution import Solution

log = logging.getLogger(__name__)

STRATEGIES = ("first", "fewest")


@dataclass
class SearchOptions:
    strategy: str = "first"
    max_solutions: Optional[int] = None
    max_nodes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"unknown strategy {self.strategy!r}; expected one of {', '.join(STRATEGIES)}"
            )
        for name in ("max_solutions", "max_nodes"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be positive, got {value}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SearchOptions":
        """Build options from a puzzle file's ``options`` section."""
        data = dict(data or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"unknown search option(s): {', '.join(unknown)}")
        return cls(**data)

    def merged(self, **overrides: Any) -> "SearchOptions":
        """Copy with every non-None override applied."""
        values = asdict(self)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SearchOptions(**values)


@dataclass
class SearchStats:
    nodes: int = 0
    dead_ends: int = 0
    solutions: int = 0
    max_depth: int = 0
    truncated: bool = False


@dataclass
class SearchResult:
    solutions: List[Solution]
    stats: SearchStats = field(default_factory=SearchStats)
    truncated: bool = False

    @property
    def solved(self) -> bool:
        return bool(self.solutions)

    @property
    def unique(self) -> bool:
        return len(self.solutions) == 1 and not self.truncated


class SearchLimitExceeded(RuntimeError):
    """The search visited more nodes than ``max_nodes`` allows."""

    def __init__(self, limit: int, stats: SearchStats) -> None:
        super().__init__(f"search exceeded {limit} nodes")
        self.limit = limit
        self.stats = stats


def choose_cell(board: CandidateBoard, strategy: str = "first") -> Optional[Cell]:
    """Pick the undetermined cell to branch on, or None if there is none."""
    best = None
    best_count = None
    for cell in board.cells():
        mask = board.mask(cell)
        if mask == 0 or is_single(mask):
            continue
        if strategy == "first":
            return cell
        count = bin(mask).count("1")
        if best_count is None or count < best_count:
            best, best_count = cell, count
            if count == 2:
                break
    return best


def expand_choices(board: CandidateBoard, strategy: str = "first") -> Iterator[CandidateBoard]:
    """Yield one copy of ``board`` per candidate of the chosen cell, fixed to it."""
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown strategy {strategy!r}")
    cell = choose_cell(board, strategy)
    if cell is None:
        return
    digits = mask_digits(board.mask(cell))
    log.debug("branching on %s over %s", cell, digits)
    for digit in digits:
        child = board.copy()
        child.fix(cell, digit)
        yield child


class _Search:
    def __init__(self, options: SearchOptions, stats: SearchStats) -> None:
        self.options = options
        self.stats = stats
        self.solutions: List[Solution] = []

    def done(self) -> bool:
        cap = self.options.max_solutions
        return cap is not None and len(self.solutions) >= cap

    def visit(self, board: CandidateBoard, depth: int) -> None:
        stats = self.stats
        stats.nodes += 1
        stats.max_depth = max(stats.max_depth, depth)
        limit = self.options.max_nodes
        if limit is not None and stats.nodes > limit:
            raise SearchLimitExceeded(limit, stats)

        full_simplify(board)
        if not is_consistent(board):
            stats.dead_ends += 1
            return
        if is_complete(board):
            self.solutions.append(Solution.from_board(board))
            stats.solutions += 1
            return

        children = list(expand_choices(board, self.options.strategy))
        log.debug("branching at depth %d over %d choice(s)", depth, len(children))
        for i, child in enumerate(children):
            self.visit(child, depth + 1)
            if self.done():
                if i < len(children) - 1:
                    self.stats.truncated = True
                return


def search(
    board: CandidateBoard,
    options: Optional[SearchOptions] = None,
    stats: Optional[SearchStats] = None,
) -> List[Solution]:
    """Find every solution reachable from ``board``.

    ``board`` is left untouched.  An empty list means the puzzle has no
    solution; more than one entry means it is ambiguous.
    """
    runner = _Search(options or SearchOptions(), stats if stats is not None else SearchStats())
    runner.visit(board.copy(), 0)
    return runner.solutions


def solve(grid: FixedGrid, options: Optional[SearchOptions] = None) -> SearchResult:
    """Convenience wrapper: grid in, solutions and statistics out."""
    options = options or SearchOptions()
    stats = SearchStats()
    solutions = search(CandidateBoard.from_grid(grid), options, stats)
    log.info(
        "search finished: %d solution(s), %d node(s), %d dead end(s), depth %d",
        len(solutions),
        stats.nodes,
        stats.dead_ends,
        stats.max_depth,
    )
    return SearchResult(solutions=solutions, stats=stats, truncated=stats.truncated)
