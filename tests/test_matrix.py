import copy

import pytest

from algobox.matrix import row_and_maximum_ones, rotate_image, set_zeroes, spiral_order


def _square(n):
    return [[i * n + j for j in range(n)] for i in range(n)]


def test_rotate_two_by_two():
    matrix = [[1, 2], [3, 4]]
    rotate_image(matrix)
    assert matrix == [[3, 1], [4, 2]]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_rotate_moves_each_cell(n):
    original = _square(n)
    matrix = copy.deepcopy(original)
    rotate_image(matrix)
    for i in range(n):
        for j in range(n):
            assert matrix[i][j] == original[n - 1 - j][i]


@pytest.mark.parametrize("n", [1, 2, 3, 6])
def test_rotate_four_times_is_identity(n):
    matrix = _square(n)
    for _ in range(4):
        rotate_image(matrix)
    assert matrix == _square(n)


def test_spiral_three_by_three():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


@pytest.mark.parametrize("rows,cols", [(1, 1), (1, 4), (4, 1), (3, 4), (4, 3), (5, 5)])
def test_spiral_visits_every_cell_once(rows, cols):
    matrix = [[r * cols + c for c in range(cols)] for r in range(rows)]
    order = spiral_order(matrix)
    assert sorted(order) == list(range(rows * cols))
    assert order[:cols] == matrix[0]


def test_spiral_single_row_and_column():
    assert spiral_order([[7, 8, 9]]) == [7, 8, 9]
    assert spiral_order([[7], [8], [9]]) == [7, 8, 9]


def test_spiral_empty():
    assert spiral_order([]) == []


def test_set_zeroes_invariants():
    original = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5], [6, 0, 7, 8]]
    matrix = copy.deepcopy(original)
    set_zeroes(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]


def test_set_zeroes_without_zero_changes_nothing():
    matrix = [[1, 2], [3, 4]]
    set_zeroes(matrix)
    assert matrix == [[1, 2], [3, 4]]


def test_set_zeroes_corner_zero():
    matrix = [[0, 1], [1, 1]]
    set_zeroes(matrix)
    assert matrix[0] == [0, 0]
    assert matrix[1][0] == 0
    assert matrix[1][1] == 1


def test_row_with_most_ones_counts_and_ties():
    mat = [[0, 1, 0], [1, 1, 0], [0, 1, 1], [1, 0, 0]]
    row, count = row_and_maximum_ones(mat)
    assert row == 1
    assert count == sum(mat[1])
    assert all(sum(r) <= count for r in mat)


def test_row_with_most_ones_all_zero():
    assert row_and_maximum_ones([[0, 0], [0, 0]]) == (0, 0)


def test_row_with_most_ones_empty_raises():
    with pytest.raises(ValueError):
        row_and_maximum_ones([])