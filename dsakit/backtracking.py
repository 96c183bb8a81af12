"""Backtracking solvers for sudoku and the rat-in-a-maze puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["is_valid_placement", "solve_sudoku", "solve_maze"]

EMPTY = "."
DIGITS = "123456789"
SIZE = 9


def is_valid_placement(
    board: Sequence[Sequence[str]], row: int, col: int, digit: str
) -> bool:
    """Return True if ``digit`` occurs nowhere in the row, column or 3x3 box."""
    box_row, box_col = 3 * (row // 3), 3 * (col // 3)
    for i in range(SIZE):
        if board[i][col] == digit or board[row][i] == digit:
            return False
        if board[box_row + i // 3][box_col + i % 3] == digit:
            return False
    return True


def _normalise_board(board: Iterable[Iterable[str]]) -> list[list[str]]:
    grid = [list(row) for row in board]
    if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
        raise ValueError("sudoku board must be 9x9")
    for row in grid:
        for cell in row:
            if cell != EMPTY and cell not in DIGITS:
                raise ValueError(f"invalid sudoku cell {cell!r}")
    return grid


def solve_sudoku(board: Iterable[Iterable[str]]) -> list[list[str]]:
    """Return a solved copy of ``board``; empty cells are ``"."``.

    Raise ValueError if the board is malformed or has no solution.
    """
    grid = _normalise_board(board)

    def solve() -> bool:
        for row in range(SIZE):
            for col in range(SIZE):
                if grid[row][col] != EMPTY:
                    continue
                for digit in DIGITS:
                    if is_valid_placement(grid, row, col, digit):
                        grid[row][col] = digit
                        if solve():
                            return True
                        grid[row][col] = EMPTY
                return False
        return True

    if not solve():
        raise ValueError("sudoku has no solution")
    return grid


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]]:
    """Find a path of open cells (1) from the top-left to the bottom-right.

    Moves are tried down, up, right, left. Return a matrix marking the path
    with 1s; raise ValueError if no path exists.
    """
    n = len(maze)
    if any(len(row) != n for row in maze):
        raise ValueError("maze must be square")
    solution = [[0] * n for _ in range(n)]

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < n and 0 <= y < n and maze[x][y] == 1

    def walk(x: int, y: int) -> bool:
        if x == n - 1 and y == n - 1 and maze[x][y] == 1:
            solution[x][y] = 1
            return True
        if not is_open(x, y) or solution[x][y] == 1:
            return False
        solution[x][y] = 1
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            if walk(x + dx, y + dy):
                return True
        solution[x][y] = 0
        return False

    if n == 0 or not walk(0, 0):
        raise ValueError("solution doesn't exist")
    return solution