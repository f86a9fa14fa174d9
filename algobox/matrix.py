"""In-place and read-only operations on rectangular integer matrices."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def rotate_image(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    n = len(matrix)
    for i in range(n - 1):
        for j in range(i + 1, n):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the values read clockwise in a spiral from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while left <= right and top <= bottom:
        result.extend(matrix[top][col] for col in range(left, right + 1))
        top += 1
        result.extend(matrix[row][right] for row in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][col] for col in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[row][left] for row in range(bottom, top - 1, -1))
            left += 1
    return result


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and every column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def row_and_maximum_ones(mat: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return (row index, count) for the first row holding the most 1s.

    Raises ValueError for a matrix without rows.
    """
    if not mat:
        raise ValueError("matrix has no rows")
    best_row, best_count = 0, -1
    for index, row in enumerate(mat):
        ones = sum(1 for value in row if value == 1)
        if ones > best_count:
            best_row, best_count = index, ones
    return (best_row, best_count)