from sudokusolve.core.candidates import CandidateBoard
from sudokusolve.core.constraints import is_consistent
from sudokusolve.core.grid import boxes
from sudokusolve.core.model import empty_grid
from sudokusolve.core.propagation import full_simplify, simplify, simplify_partition


def _board(*givens):
    grid = empty_grid()
    for (r, c), v in givens:
        grid[r][c] = v
    return CandidateBoard.from_grid(grid)


def test_single_given_clears_its_peers():
    board = _board(((4, 4), 5))
    full_simplify(board)
    assert 5 not in board.candidates((4, 0))
    assert 5 not in board.candidates((0, 4))
    assert 5 not in board.candidates((3, 3))
    assert 5 in board.candidates((0, 0))
    assert board.candidates((4, 4)) == {5}


def test_partition_without_singletons_is_untouched():
    board = CandidateBoard()
    assert not simplify_partition(board, boxes()[0])
    assert not simplify(board)
    assert full_simplify(board) == 0


def test_naked_single_cascades():
    # Row 0 holds 1..8, so (0, 8) must be 9, which then leaves column 8.
    board = _board(*[((0, c), c + 1) for c in range(8)])
    full_simplify(board)
    assert board.value((0, 8)) == 9
    assert 9 not in board.candidates((5, 8))


def test_emptied_cell_is_left_for_consistency_check():
    board = _board(*[((0, c), c + 1) for c in range(8)], ((1, 8), 9))
    full_simplify(board)
    assert not is_consistent(board)


def test_idempotent(puzzle):
    board = CandidateBoard.from_grid(puzzle("easy").grid)
    full_simplify(board)
    once = board.copy()
    assert full_simplify(board) == 0
    assert board == once


def test_monotone(puzzle):
    board = CandidateBoard.from_grid(puzzle("diabolical").grid)
    while True:
        before = {cell: board.candidates(cell) for cell in board.cells()}
        changed = simplify(board)
        for cell in board.cells():
            assert board.candidates(cell) <= before[cell]
        if not changed:
            break


def test_givens_survive_propagation(puzzle):
    grid = puzzle("easy").grid
    board = CandidateBoard.from_grid(grid)
    full_simplify(board)
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value is not None:
                assert board.value((r, c)) == value
