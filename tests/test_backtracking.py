import pytest

from dsakit.backtracking import format_board, n_queens, solve_sudoku


def _attacks(board):
    queens = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell]
    for i, (r1, c1) in enumerate(queens):
        for r2, c2 in queens[i + 1:]:
            if r1 == r2 or c1 == c2 or abs(r1 - r2) == abs(c1 - c2):
                return True
    return False


def test_four_queens_matches_sample():
    boards = [format_board(board) for board in n_queens(4)]
    assert boards == [
        "0 1 0 0 0 0 0 1 1 0 0 0 0 0 1 0",
        "0 0 1 0 1 0 0 0 0 0 0 1 0 1 0 0",
    ]


def test_one_queen():
    assert n_queens(1) == [[[1]]]


@pytest.mark.parametrize("n", [2, 3])
def test_no_configuration(n):
    assert n_queens(n) == []


@pytest.mark.parametrize("n", [5, 6, 7])
def test_boards_are_valid_and_distinct(n):
    boards = n_queens(n)
    assert boards
    for board in boards:
        assert len(board) == n
        assert all(sum(row) == 1 for row in board)
        assert not _attacks(board)
    assert len({format_board(b) for b in boards}) == len(boards)


def test_negative_board_size():
    with pytest.raises(ValueError):
        n_queens(-1)


def _solved_grid():
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


def _is_valid_solution(grid):
    digits = set(range(1, 10))
    rows = all(set(row) == digits for row in grid)
    cols = all({grid[r][c] for r in range(9)} == digits for c in range(9))
    boxes = all(
        {grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)} == digits
        for br in range(0, 9, 3)
        for bc in range(0, 9, 3)
    )
    return rows and cols and boxes


def test_solves_puzzle_keeping_givens():
    solution = _solved_grid()
    puzzle = [
        [0 if (r + c) % 3 == 0 else solution[r][c] for c in range(9)] for r in range(9)
    ]
    result = solve_sudoku(puzzle)
    assert _is_valid_solution(result)
    for r in range(9):
        for c in range(9):
            if puzzle[r][c]:
                assert result[r][c] == puzzle[r][c]


def test_single_blank_is_filled_with_missing_digit():
    solution = _solved_grid()
    puzzle = [row[:] for row in solution]
    puzzle[4][4] = 0
    assert solve_sudoku(puzzle) == solution
    assert puzzle[4][4] == 0


def test_accepts_digit_strings():
    solution = _solved_grid()
    rows = ["".join(str(digit) for digit in row) for row in solution]
    rows[4] = rows[4][:4] + "0" + rows[4][5:]
    assert solve_sudoku(rows) == solution


def test_conflicting_givens():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = 5
    grid[0][5] = 5
    with pytest.raises(ValueError):
        solve_sudoku(grid)


def test_unsolvable_grid():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[1][8] = 9
    with pytest.raises(ValueError):
        solve_sudoku(grid)


def test_wrong_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])