"""Backtracking puzzles: placing N queens and solving sudoku grids."""

from __future__ import annotations

from collections.abc import Sequence

_SUDOKU_SIZE = 9
_BOX = 3


def n_queens(n: int) -> list[list[list[int]]]:
    """Return every placement of ``n`` non-attacking queens on an n x n board.

    Each board is a list of rows with 1 where a queen stands and 0 elsewhere.
    Queens are placed row by row, trying columns from left to right, and the
    boards are returned in the order they are found.
    """
    if n < 0:
        raise ValueError(f"board size must be non-negative, got {n}")
    solutions: list[list[list[int]]] = []
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            placed != col and abs(placed - col) != row - placed_row
            for placed_row, placed in enumerate(columns)
        )

    def place(row: int) -> None:
        if row == n:
            solutions.append(
                [[1 if col == queen else 0 for col in range(n)] for queen in columns]
            )
            return
        for col in range(n):
            if safe(row, col):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return solutions


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Return the board's cells row by row on one line, separated by spaces."""
    return " ".join(str(cell) for row in board for cell in row)


def _read_grid(grid: Sequence[Sequence[int] | str]) -> list[list[int]]:
    if len(grid) != _SUDOKU_SIZE:
        raise ValueError(f"a sudoku grid has {_SUDOKU_SIZE} rows, got {len(grid)}")
    cells: list[list[int]] = []
    for row in grid:
        values = [int(cell) for cell in row]
        if len(values) != _SUDOKU_SIZE:
            raise ValueError(
                f"a sudoku row has {_SUDOKU_SIZE} cells, got {len(values)}"
            )
        if any(not 0 <= value <= _SUDOKU_SIZE for value in values):
            raise ValueError("sudoku cells must hold 0 (empty) or a digit 1-9")
        cells.append(values)
    return cells


def _box_cells(grid: list[list[int]], row: int, col: int) -> list[int]:
    top = row - row % _BOX
    left = col - col % _BOX
    return [grid[r][c] for r in range(top, top + _BOX) for c in range(left, left + _BOX)]


def _is_safe(grid: list[list[int]], row: int, col: int, digit: int) -> bool:
    return (
        digit not in grid[row]
        and all(line[col] != digit for line in grid)
        and digit not in _box_cells(grid, row, col)
    )


def _check_givens(grid: list[list[int]]) -> None:
    for row in range(_SUDOKU_SIZE):
        for col in range(_SUDOKU_SIZE):
            digit = grid[row][col]
            if digit == 0:
                continue
            grid[row][col] = 0
            safe = _is_safe(grid, row, col, digit)
            grid[row][col] = digit
            if not safe:
                raise ValueError(f"digit {digit} at ({row}, {col}) conflicts with the grid")


def _first_empty(grid: list[list[int]]) -> tuple[int, int] | None:
    return next(
        (
            (row, col)
            for row, line in enumerate(grid)
            for col, value in enumerate(line)
            if value == 0
        ),
        None,
    )


def _solve(grid: list[list[int]]) -> bool:
    empty = _first_empty(grid)
    if empty is None:
        return True
    row, col = empty
    for digit in range(1, _SUDOKU_SIZE + 1):
        if _is_safe(grid, row, col, digit):
            grid[row][col] = digit
            if _solve(grid):
                return True
            grid[row][col] = 0
    return False


def solve_sudoku(grid: Sequence[Sequence[int] | str]) -> list[list[int]]:
    """Return a solved copy of a 9 x 9 sudoku grid, 0 marking an empty cell.

    Rows may be sequences of integers or strings of digits. Empty cells are
    filled in row-major order, trying digits from 1 to 9. Raises ValueError
    if the givens conflict or the grid has no solution.
    """
    cells = _read_grid(grid)
    _check_givens(cells)
    if not _solve(cells):
        raise ValueError("the sudoku grid has no solution")
    return cells