"""Rat-in-a-maze path finding by backtracking."""

from __future__ import annotations

from collections.abc import Sequence


def solve_maze(maze: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Find a path from the top-left to the bottom-right cell.

    Open cells hold 1; moves go right first, then down. Returns a grid with 1
    on every cell of the path, or ``None`` when no path exists.
    """
    grid = [list(row) for row in maze]
    if not grid or not grid[0]:
        return None
    last_row = len(grid) - 1
    last_col = len(grid[-1]) - 1
    solution = [[0] * len(row) for row in grid]

    def is_open(x: int, y: int) -> bool:
        return 0 <= x < len(grid) and 0 <= y < len(grid[x]) and grid[x][y] == 1

    def walk(x: int, y: int) -> bool:
        if x == last_row and y == last_col and is_open(x, y):
            solution[x][y] = 1
            return True
        if not is_open(x, y):
            return False
        solution[x][y] = 1
        if walk(x, y + 1) or walk(x + 1, y):
            return True
        solution[x][y] = 0
        return False

    return solution if walk(0, 0) else None


def format_path(solution: Sequence[Sequence[int]]) -> str:
    """Render a solution grid as text, one row per line."""
    lines = ["Path from start to end:"]
    lines.extend(" ".join(str(cell) for cell in row) for row in solution)
    return "\n".join(lines)