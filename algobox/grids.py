"""Problems over rectangular grids: Pascal's triangle, traversals and coverings."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import chain, pairwise

Grid = Sequence[Sequence[int]]


def _dimensions(matrix: Grid) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError("matrix must have at least one row and one column")
    return len(matrix), len(matrix[0])


def pascals_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 1:
        raise ValueError("num_rows must be at least 1")
    rows = [[1]]
    for _ in range(1, num_rows):
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in pairwise(previous)), 1])
    return rows


def diagonal_order(matrix: Grid) -> list[int]:
    """Elements of ``matrix`` read along anti-diagonals, alternating direction."""
    m, n = _dimensions(matrix)
    result: list[int] = []
    for diagonal in range(m + n - 1):
        rows: Iterator[int] | range = range(max(0, diagonal - n + 1), min(m - 1, diagonal) + 1)
        if diagonal % 2 == 0:
            rows = reversed(rows)
        result.extend(matrix[i][diagonal - i] for i in rows)
    return result


def count_squares(matrix: Grid) -> int:
    """Number of square submatrices made only of ones."""
    _, n = _dimensions(matrix)
    total = 0
    previous = [0] * n
    for i, row in enumerate(matrix):
        current = [0] * n
        for j, cell in enumerate(row):
            if i == 0 or j == 0:
                current[j] = cell
            elif cell == 1:
                current[j] = min(previous[j], current[j - 1], previous[j - 1]) + 1
            total += current[j]
        previous = current
    return total


def count_submatrices(mat: Grid) -> int:
    """Number of rectangular submatrices made only of ones."""
    rows, cols = _dimensions(mat)
    widths: list[list[int]] = []
    for row in mat:
        run = 0
        line = []
        for cell in row:
            run = run + 1 if cell == 1 else 0
            line.append(run)
        widths.append(line)

    total = 0
    for bottom in range(rows):
        for col in range(cols):
            min_width = math.inf
            for top in range(bottom, -1, -1):
                min_width = min(min_width, widths[top][col])
                if min_width == 0:
                    break
                total += int(min_width)
    return total


def minimum_sum_three_rectangles(grid: Grid) -> int:
    """Smallest total area of three disjoint rectangles covering every one."""
    m, n = _dimensions(grid)

    def area(i1: int, j1: int, i2: int, j2: int) -> float:
        cells = [
            (i, j)
            for i in range(i1, i2 + 1)
            for j in range(j1, j2 + 1)
            if grid[i][j] == 1
        ]
        if not cells:
            return math.inf
        rows = [i for i, _ in cells]
        cols = [j for _, j in cells]
        return (max(rows) - min(rows) + 1) * (max(cols) - min(cols) + 1)

    def candidates() -> Iterator[float]:
        for i1 in range(m - 1):
            for i2 in range(i1 + 1, m - 1):
                yield (
                    area(0, 0, i1, n - 1)
                    + area(i1 + 1, 0, i2, n - 1)
                    + area(i2 + 1, 0, m - 1, n - 1)
                )
        for j1 in range(n - 1):
            for j2 in range(j1 + 1, n - 1):
                yield (
                    area(0, 0, m - 1, j1)
                    + area(0, j1 + 1, m - 1, j2)
                    + area(0, j2 + 1, m - 1, n - 1)
                )
        for i in range(m - 1):
            for j in range(n - 1):
                yield area(0, 0, i, j) + area(0, j + 1, i, n - 1) + area(i + 1, 0, m - 1, n - 1)
                yield area(0, 0, i, n - 1) + area(i + 1, 0, m - 1, j) + area(i + 1, j + 1, m - 1, n - 1)
                yield area(0, 0, i, j) + area(i + 1, 0, m - 1, j) + area(0, j + 1, m - 1, n - 1)
                yield area(0, 0, m - 1, j) + area(0, j + 1, i, n - 1) + area(i + 1, j + 1, m - 1, n - 1)

    return int(min(chain([m * n], candidates())))


def _top_right_path(fruits: Grid) -> int:
    """Best haul for the child walking from the top-right to the bottom-right corner."""
    n = len(fruits)
    dp = [[0] * n for _ in range(n)]
    dp[0][n - 1] = fruits[0][n - 1]
    for x in range(n):
        for y in range(n):
            if x >= y and not (x == n - 1 and y == n - 1):
                continue
            for dx, dy in ((1, -1), (1, 0), (1, 1)):
                i, j = x - dx, y - dy
                if not (0 <= i < n and 0 <= j < n):
                    continue
                if i < j < n - 1 - i:
                    continue
                dp[x][y] = max(dp[x][y], dp[i][j] + fruits[x][y])
    return dp[n - 1][n - 1]


def max_collected_fruits(fruits: Grid) -> int:
    """Most fruit three children collect walking from three corners to the fourth."""
    n = len(fruits)
    if n == 0 or any(len(row) != n for row in fruits):
        raise ValueError("fruits must be a non-empty square grid")
    diagonal = sum(fruits[i][i] for i in range(n))
    transposed = [list(column) for column in zip(*fruits)]
    return (
        diagonal
        + _top_right_path(fruits)
        + _top_right_path(transposed)
        - 2 * fruits[n - 1][n - 1]
    )