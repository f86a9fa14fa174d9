import bisect
import statistics

import pytest

from algobox.searching import (
    binary_search,
    find_kth_positive,
    find_median_sorted_arrays,
    find_min_rotated,
    find_peak_element,
    first_occurrence,
    last_occurrence,
    min_days,
    min_eating_speed,
    search_insert,
    search_matrix,
    search_range,
    search_rotated,
    search_rotated_with_duplicates,
    search_sorted_matrix,
    ship_within_days,
    single_non_duplicate,
    smallest_divisor,
    split_array,
)

SORTED = [1, 3, 4, 8, 10, 15, 21]


def _rotations(values):
    return [values[i:] + values[:i] for i in range(len(values))]


@pytest.mark.parametrize(
    "a, b",
    [
        ([1, 3], [2]),
        ([1, 2], [3, 4]),
        ([], [5]),
        ([], [1, 2, 3, 4]),
        ([-5, 0, 9, 12], [1, 2, 30]),
        ([7, 7, 7], [7, 7]),
    ],
)
def test_median_matches_statistics(a, b):
    assert find_median_sorted_arrays(a, b) == statistics.median(a + b)
    assert find_median_sorted_arrays(b, a) == statistics.median(a + b)


def test_median_of_two_empty_raises():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


def test_search_rotated_finds_every_element():
    for rotated in _rotations(SORTED):
        for index, value in enumerate(rotated):
            assert search_rotated(rotated, value) == index
        assert search_rotated(rotated, 5) == -1


def test_search_rotated_empty():
    assert search_rotated([], 3) == -1


def test_first_and_last_occurrence():
    nums = [1, 2, 2, 2, 5, 5, 9]
    for value in set(nums):
        assert first_occurrence(nums, value) == nums.index(value)
        assert last_occurrence(nums, value) == len(nums) - 1 - nums[::-1].index(value)
    assert first_occurrence(nums, 3) == -1
    assert last_occurrence(nums, 3) == -1


def test_search_range():
    nums = [5, 7, 7, 8, 8, 10]
    first, last = search_range(nums, 8)
    assert nums[first:last + 1] == [8, 8]
    assert search_range(nums, 6) == (-1, -1)
    assert search_range([], 0) == (-1, -1)


@pytest.mark.parametrize("target", [0, 1, 2, 4, 9, 21, 30])
def test_search_insert_keeps_order(target):
    index = search_insert(SORTED, target)
    assert index == bisect.bisect_left(SORTED, target)
    assert all(v < target for v in SORTED[:index])
    assert all(v >= target for v in SORTED[index:])


def test_search_matrix():
    matrix = [[1, 3, 5, 7], [10, 11, 16, 20], [23, 30, 34, 60]]
    for row in matrix:
        for value in row:
            assert search_matrix(matrix, value) is True
    assert search_matrix(matrix, 13) is False
    assert search_matrix(matrix, 61) is False
    assert search_matrix([[]], 1) is False


def test_search_rotated_with_duplicates():
    assert search_rotated_with_duplicates([2, 5, 6, 0, 0, 1, 2], 0) is True
    assert search_rotated_with_duplicates([2, 5, 6, 0, 0, 1, 2], 3) is False
    assert search_rotated_with_duplicates([1, 0, 1, 1, 1], 0) is True
    assert search_rotated_with_duplicates([], 1) is False


def test_search_rotated_with_duplicates_all_rotations():
    values = [1, 1, 2, 3, 3, 3, 4, 6]
    for rotated in _rotations(values):
        for value in values:
            assert search_rotated_with_duplicates(rotated, value) is True
        assert search_rotated_with_duplicates(rotated, 5) is False


def test_find_min_rotated():
    for rotated in _rotations(SORTED):
        assert find_min_rotated(rotated) == min(SORTED)
    assert find_min_rotated([4, 5, 6, 7, 0, 1, 2]) == 0


def test_find_min_rotated_empty_raises():
    with pytest.raises(ValueError):
        find_min_rotated([])


@pytest.mark.parametrize(
    "nums",
    [[1, 2, 3, 1], [1, 2, 1, 3, 5, 6, 4], [5, 4, 3], [1, 2, 3], [42], [1, 3, 2, 4, 1]],
)
def test_find_peak_element_is_peak(nums):
    index = find_peak_element(nums)
    left = nums[index - 1] if index > 0 else float("-inf")
    right = nums[index + 1] if index < len(nums) - 1 else float("-inf")
    assert nums[index] > left
    assert nums[index] > right


def test_find_peak_element_empty_raises():
    with pytest.raises(ValueError):
        find_peak_element([])


def test_search_sorted_matrix():
    matrix = [
        [1, 4, 7, 11, 15],
        [2, 5, 8, 12, 19],
        [3, 6, 9, 16, 22],
        [10, 13, 14, 17, 24],
        [18, 21, 23, 26, 30],
    ]
    for row in matrix:
        for value in row:
            assert search_sorted_matrix(matrix, value) is True
    assert search_sorted_matrix(matrix, 20) is False
    assert search_sorted_matrix(matrix, 0) is False


def test_split_array_example():
    assert split_array([7, 2, 5, 10, 8], 2) == 18


def test_split_array_extremes():
    nums = [7, 2, 5, 10, 8]
    assert split_array(nums, 1) == sum(nums)
    assert split_array(nums, len(nums)) == max(nums)
    results = [split_array(nums, k) for k in range(1, len(nums) + 1)]
    assert results == sorted(results, reverse=True)


def test_single_non_duplicate():
    assert single_non_duplicate([1, 1, 2, 3, 3, 4, 4, 8, 8]) == 2
    assert single_non_duplicate([3, 3, 7, 7, 10, 11, 11]) == 10
    assert single_non_duplicate([9]) == 9
    assert single_non_duplicate([1, 1, 5]) == 5
    assert single_non_duplicate([0, 2, 2]) == 0


def test_single_non_duplicate_every_position():
    pairs = [1, 2, 3, 4, 5]
    for lone in range(0, 7):
        nums = sorted([v for v in pairs for _ in range(2)] + [lone * 10 + 100])
        assert single_non_duplicate(nums) == lone * 10 + 100


def test_single_non_duplicate_empty_raises():
    with pytest.raises(ValueError):
        single_non_duplicate([])


def test_binary_search():
    for value in SORTED:
        assert binary_search(SORTED, value) == SORTED.index(value)
    assert binary_search(SORTED, 2) == -1
    assert binary_search([], 2) == -1


def test_min_eating_speed_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


def test_min_eating_speed_invariants():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, len(piles)) == max(piles)
    for h in range(len(piles), 40):
        rate = min_eating_speed(piles, h)
        assert sum(-(-p // rate) for p in piles) <= h
        if rate > 1:
            assert sum(-(-p // (rate - 1)) for p in piles) > h


def test_ship_within_days_example():
    assert ship_within_days([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 5) == 15


def test_ship_within_days_extremes():
    weights = [3, 2, 2, 4, 1, 4]
    assert ship_within_days(weights, 1) == sum(weights)
    assert ship_within_days(weights, len(weights)) == max(weights)


def test_smallest_divisor():
    nums = [1, 2, 5, 9]
    assert smallest_divisor(nums, len(nums)) == max(nums)
    assert smallest_divisor(nums, sum(nums)) == 1
    for threshold in range(len(nums), sum(nums) + 1):
        d = smallest_divisor(nums, threshold)
        assert sum(-(-v // d) for v in nums) <= threshold


def test_min_days():
    assert min_days([1, 10, 3, 10, 2], 3, 1) == 3
    assert min_days([1, 10, 3, 10, 2], 3, 2) == -1
    assert min_days([7, 7, 7, 7, 12, 7, 7], 2, 3) == 12


def test_find_kth_positive_invariant():
    arr = [2, 3, 4, 7, 11]
    present = set(arr)
    for k in range(1, 12):
        result = find_kth_positive(arr, k)
        assert result not in present
        missing_below = [v for v in range(1, result) if v not in present]
        assert len(missing_below) == k - 1


def test_find_kth_positive_no_gaps():
    assert find_kth_positive([1, 2, 3, 4], 2) == 6
    assert find_kth_positive([], 3) == 3