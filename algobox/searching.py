"""Binary searches over sorted, rotated and two-dimensional data, and over answers."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence
from math import inf


def _lowest_feasible(low: int, high: int, feasible: Callable[[int], bool]) -> int:
    """Return the smallest value in [low, high] for which ``feasible`` holds.

    ``feasible`` must be monotone; ``high + 1`` is returned when no value qualifies.
    """
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences.

    Raises ValueError when both sequences are empty.
    """
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    total = n1 + n2
    if total == 0:
        raise ValueError("median of two empty sequences is undefined")
    left_size = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        mid1 = (low + high) // 2
        mid2 = left_size - mid1
        l1 = nums1[mid1 - 1] if mid1 > 0 else -inf
        l2 = nums2[mid2 - 1] if mid2 > 0 else -inf
        r1 = nums1[mid1] if mid1 < n1 else inf
        r2 = nums2[mid2] if mid2 < n2 else inf
        if l1 <= r2 and l2 <= r1:
            if total % 2 == 1:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2.0
        if l1 > r2:
            high = mid1 - 1
        else:
            low = mid1 + 1
    return 0.0


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def first_occurrence(nums: Sequence[int], x: int) -> int:
    """Return the first index of ``x`` in a sorted sequence, or -1."""
    index = bisect_left(nums, x)
    return index if index < len(nums) and nums[index] == x else -1


def last_occurrence(nums: Sequence[int], x: int) -> int:
    """Return the last index of ``x`` in a sorted sequence, or -1."""
    index = bisect_right(nums, x) - 1
    return index if index >= 0 and nums[index] == x else -1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target``, or (-1, -1)."""
    first = first_occurrence(nums, target)
    if first == -1:
        return (-1, -1)
    return (first, last_occurrence(nums, target))


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target``, or where it would be inserted to keep order."""
    return bisect_left(nums, target)


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows, read one after another, are sorted."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    low, high = 0, len(matrix) * cols - 1
    while low <= high:
        mid = (low + high) // 2
        value = matrix[mid // cols][mid % cols]
        if value == target:
            return True
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return False


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` is in a rotated sorted sequence that may hold duplicates."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
            continue
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence of distinct values.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("minimum of an empty sequence")
    low, high = 0, len(nums) - 1
    best = nums[0]
    while low <= high:
        mid = (low + high) // 2
        if nums[low] <= nums[mid]:
            best = min(best, nums[low])
            low = mid + 1
        else:
            best = min(best, nums[mid])
            high = mid - 1
    return best


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours.

    Raises ValueError for an empty sequence.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("no peak in an empty sequence")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        rising = nums[mid] > nums[mid - 1]
        falling = nums[mid] > nums[mid + 1]
        if rising and falling:
            return mid
        if rising or not falling:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_sorted_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are each sorted ascending."""
    if not matrix or not matrix[0]:
        return False
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return True
        if value < target:
            row += 1
        else:
            col -= 1
    return False


def _count_pieces(nums: Sequence[int], limit: int) -> int:
    pieces, current = 1, 0
    for value in nums:
        if current + value <= limit:
            current += value
        else:
            pieces += 1
            current = value
    return pieces


def split_array(nums: Sequence[int], k: int) -> int:
    """Return the smallest possible largest sum when splitting ``nums`` into k parts."""
    return _lowest_feasible(
        max(nums), sum(nums), lambda limit: _count_pieces(nums, limit) <= k
    )


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value that appears once in a sorted sequence of pairs.

    Raises ValueError for an empty sequence.
    """
    n = len(nums)
    if n == 0:
        raise ValueError("empty sequence")
    if n == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] != nums[mid + 1] and nums[mid] != nums[mid - 1]:
            return nums[mid]
        on_left = (mid % 2 == 1 and nums[mid] == nums[mid - 1]) or (
            mid % 2 == 0 and nums[mid] == nums[mid + 1]
        )
        if on_left:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a sorted sequence of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if target > nums[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest eating rate that finishes all piles within h hours."""
    return _lowest_feasible(
        1, max(piles), lambda rate: sum(_ceil_div(p, rate) for p in piles) <= h
    )


def _days_needed(weights: Sequence[int], capacity: int) -> int:
    days, load = 1, 0
    for weight in weights:
        if load + weight > capacity:
            days += 1
            load = weight
        else:
            load += weight
    return days


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Return the least ship capacity that carries all weights, in order, within ``days``."""
    return _lowest_feasible(
        max(weights), sum(weights), lambda cap: _days_needed(weights, cap) <= days
    )


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Return the least divisor whose rounded-up quotients sum to at most ``threshold``."""
    return _lowest_feasible(
        1, max(nums), lambda d: sum(_ceil_div(v, d) for v in nums) <= threshold
    )


def _bouquets_by(bloom_day: Sequence[int], day: int, k: int) -> int:
    bouquets = run = 0
    for bloom in bloom_day:
        if bloom <= day:
            run += 1
        else:
            bouquets += run // k
            run = 0
    return bouquets + run // k


def min_days(bloom_day: Sequence[int], m: int, k: int) -> int:
    """Return the first day on which m bouquets of k adjacent flowers can be made, or -1."""
    if len(bloom_day) < m * k:
        return -1
    return _lowest_feasible(
        min(bloom_day), max(bloom_day), lambda day: _bouquets_by(bloom_day, day, k) >= m
    )


def find_kth_positive(arr: Sequence[int], k: int) -> int:
    """Return the k-th positive integer missing from a strictly increasing sequence."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] - (mid + 1) < k:
            low = mid + 1
        else:
            high = mid - 1
    return low + k