from pathlib import Path

import pytest

from sudokusolve.io.parser import load_puzzle

PUZZLES = Path(__file__).resolve().parent.parent / "puzzles"


@pytest.fixture
def puzzle_path():
    return lambda name: PUZZLES / f"{name}.yaml"


@pytest.fixture
def puzzle(puzzle_path):
    return lambda name: load_puzzle(puzzle_path(name))
