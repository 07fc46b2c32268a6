import pytest

from sudokusolve.core.candidates import CandidateBoard
from sudokusolve.core.model import FULL_MASK, empty_grid, is_single, mask_digits
from sudokusolve.core.solution import Solution


def test_mask_helpers():
    assert mask_digits(FULL_MASK) == tuple(range(1, 10))
    assert mask_digits(0b101) == (1, 3)
    assert is_single(0b100)
    assert not is_single(0)
    assert not is_single(0b110)


def test_from_grid_candidates():
    grid = empty_grid()
    grid[0][0] = 5
    board = CandidateBoard.from_grid(grid)
    assert board.candidates((0, 0)) == {5}
    assert board.value((0, 0)) == 5
    assert board.candidates((0, 1)) == set(range(1, 10))
    assert board.value((0, 1)) is None
    assert board.count_solved() == 1
    assert board.to_grid() == grid


@pytest.mark.parametrize("value", [0, 10, "5"])
def test_from_grid_rejects_bad_digit(value):
    grid = empty_grid()
    grid[3][4] = value
    with pytest.raises(ValueError):
        CandidateBoard.from_grid(grid)


def test_from_grid_rejects_bad_shape():
    with pytest.raises(ValueError):
        CandidateBoard.from_grid(empty_grid()[:8])


def test_copy_is_independent():
    board = CandidateBoard()
    child = board.copy()
    child.fix((4, 4), 7)
    assert child.candidates((4, 4)) == {7}
    assert board.candidates((4, 4)) == set(range(1, 10))
    assert board != child
    assert board == CandidateBoard()


def test_board_is_unhashable():
    with pytest.raises(TypeError):
        hash(CandidateBoard())


def test_solution_hash_and_access():
    grid = tuple(tuple((3 * (r % 3) + r // 3 + c) % 9 + 1 for c in range(9)) for r in range(9))
    board = CandidateBoard.from_grid([list(row) for row in grid])
    s1 = Solution.from_board(board)
    s2 = Solution(grid)
    assert s1 == s2
    assert hash(s1) == hash(s2)
    assert s1.cell((1, 0)) == 4
    assert s1.to_grid()[8] == [9, 1, 2, 3, 4, 5, 6, 7, 8]


def test_solution_requires_complete_board():
    with pytest.raises(ValueError):
        Solution.from_board(CandidateBoard())
