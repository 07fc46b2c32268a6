"""Command-line interface: parse, solve, print."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..core.constraints import conflicts
from ..core.csp import STRATEGIES, SearchLimitExceeded, SearchOptions, solve
from . import parser

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Constraint-propagation Sudoku solver")
    ap.add_argument("puzzle", nargs="?", help="Path to puzzle YAML")
    ap.add_argument("--grid", nargs="+", metavar="ROW", help="Nine rows, digits or '.'")
    ap.add_argument("--strategy", choices=STRATEGIES, help="Branching cell selection")
    ap.add_argument("--max-solutions", type=int, help="Stop after this many solutions")
    ap.add_argument("--max-nodes", type=int, help="Abort after visiting this many search nodes")
    ap.add_argument("--pretty", action="store_true", help="Draw box separators")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if bool(args.puzzle) == bool(args.grid):
        ap.error("give either a puzzle file or --grid")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.grid:
            rows = args.grid[0] if len(args.grid) == 1 else args.grid
            puz = parser.Puzzle(name="command line", grid=parser.parse_grid(rows))
        else:
            puz = parser.load_puzzle(Path(args.puzzle))
        options = SearchOptions.from_mapping(puz.options).merged(
            strategy=args.strategy,
            max_solutions=args.max_solutions,
            max_nodes=args.max_nodes,
        )
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    log.info("solving %s", puz.name)
    try:
        result = solve(puz.grid, options)
    except SearchLimitExceeded as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for i, solution in enumerate(result.solutions):
        if i:
            print()
        grid = solution.to_grid()
        print(parser.pretty_grid(grid) if args.pretty else "\n".join(parser.format_grid(grid)))

    count = len(result.solutions)
    suffix = "+" if result.truncated else ""
    print(f"{count}{suffix} solution(s), {result.stats.nodes} nodes")
    if not result.solved:
        for kind, index, digit in conflicts(puz.grid):
            print(f"digit {digit} repeated in {kind} {index + 1}")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
