from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

from ..core.model import BOX, SIZE, FixedGrid, empty_grid

UNKNOWN = "."


class PuzzleFormatError(ValueError):
    """Puzzle text or file does not describe a 9x9 grid."""


@dataclass
class Puzzle:
    name: str
    grid: FixedGrid
    options: Dict[str, Any] = field(default_factory=dict)
    solutions: List[FixedGrid] = field(default_factory=list)


def parse_grid(rows: Sequence[str] | str) -> FixedGrid:
    """Parse nine rows of nine characters, ``1``-``9`` or ``.`` for unknown.

    A single 81-character string is accepted as well.
    """
    if isinstance(rows, str):
        text = "".join(rows.split())
        if len(text) != SIZE * SIZE:
            raise PuzzleFormatError(f"expected {SIZE * SIZE} characters, got {len(text)}")
        rows = [text[i : i + SIZE] for i in range(0, SIZE * SIZE, SIZE)]

    if not isinstance(rows, (list, tuple)):
        raise PuzzleFormatError(f"expected a list of rows, got {type(rows).__name__}")
    if len(rows) != SIZE:
        raise PuzzleFormatError(f"expected {SIZE} rows, got {len(rows)}")

    grid = empty_grid()
    for r, line in enumerate(rows):
        if not isinstance(line, str):
            raise PuzzleFormatError(f"row {r + 1} is not a string: {line!r}")
        if len(line) != SIZE:
            raise PuzzleFormatError(f"row {r + 1} has {len(line)} characters, expected {SIZE}")
        for c, ch in enumerate(line):
            if ch == UNKNOWN:
                continue
            if ch not in "123456789":
                raise PuzzleFormatError(f"invalid character {ch!r} at row {r + 1}, column {c + 1}")
            grid[r][c] = int(ch)
    return grid


def format_grid(grid: FixedGrid) -> List[str]:
    """Inverse of :func:`parse_grid`."""
    return ["".join(UNKNOWN if v is None else str(v) for v in row) for row in grid]


def pretty_grid(grid: FixedGrid) -> str:
    lines = []
    for r, row in enumerate(grid):
        if r and r % BOX == 0:
            lines.append("------+-------+------")
        chunks = []
        for c, value in enumerate(row):
            if c and c % BOX == 0:
                chunks.append("|")
            chunks.append(UNKNOWN if value is None else str(value))
        lines.append(" ".join(chunks))
    return "\n".join(lines)


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a YAML puzzle description into a Puzzle object."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PuzzleFormatError(f"{path}: invalid YAML: {exc}") from exc

    if not isinstance(data, dict) or "grid" not in data:
        raise PuzzleFormatError(f"{path}: missing 'grid'")

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise PuzzleFormatError(f"{path}: 'options' must be a mapping")

    solutions = data.get("solutions") or []
    if not isinstance(solutions, list):
        raise PuzzleFormatError(f"{path}: 'solutions' must be a list")

    return Puzzle(
        name=str(data.get("name", path.stem)),
        grid=parse_grid(data["grid"]),
        options=options,
        solutions=[parse_grid(s) for s in solutions],
    )
