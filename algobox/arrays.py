"""Classic problems over integer sequences: sums, runs, counting and in-place rearranging."""

from __future__ import annotations

from collections import Counter
from collections.abc import MutableSequence, Sequence
from functools import reduce
from operator import xor

_MOD = 1_000_000_007


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return indices (i, j), i < j, of two values adding up to ``target``, or (-1, -1)."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        needed = target - value
        if needed in seen:
            return (seen[needed], index)
        seen[value] = index
    return (-1, -1)


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold between them."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values summing to zero, each triple ascending."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, len(values) - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct quadruple of values summing to ``target``, each ascending."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j != i + 1 and values[j] == values[j - 1]:
                continue
            k, l = j + 1, n - 1
            while k < l:
                total = values[i] + values[j] + values[k] + values[l]
                if total == target:
                    result.append([values[i], values[j], values[k], values[l]])
                    k += 1
                    l -= 1
                    while k < l and values[k] == values[k - 1]:
                        k += 1
                    while k < l and values[l] == values[l + 1]:
                        l -= 1
                elif total < target:
                    k += 1
                else:
                    l -= 1
    return result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact the distinct values of a sorted sequence to its front; return their count."""
    if not nums:
        return 0
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next lexicographic permutation.

    The last permutation wraps round to the first (ascending order).
    """
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if pivot == -1:
        nums.reverse()
        return
    swap_with = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap_with] = nums[swap_with], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("maximum subarray of an empty sequence")
    running = 0
    best = nums[0]
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping (or touching) closed intervals; return them in order."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low = mid = 0
    high = len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: MutableSequence[int], n: int
) -> None:
    """Merge the first n values of ``nums2`` into the first m of ``nums1``.

    ``nums1`` must have room for m + n values; afterwards it holds them all sorted.
    ``nums2`` is used as scratch space and is left reordered.
    """

    def slot(index: int) -> tuple[MutableSequence[int], int]:
        return (nums1, index) if index < m else (nums2, index - m)

    length = m + n
    gap = (length + 1) // 2
    while gap > 0:
        for left in range(length - gap):
            a_seq, a_idx = slot(left)
            b_seq, b_idx = slot(left + gap)
            if a_seq[a_idx] > b_seq[b_idx]:
                a_seq[a_idx], b_seq[b_idx] = b_seq[b_idx], a_seq[a_idx]
        if gap == 1:
            break
        gap = (gap + 1) // 2
    nums1[m:m + n] = nums2[:n]


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell, or 0.

    Raises ValueError for an empty sequence.
    """
    if not prices:
        raise ValueError("no prices given")
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers among the values."""
    values = set(nums)
    longest = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end + 1 in values:
            end += 1
        longest = max(longest, end - value + 1)
    return longest


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("empty sequence")
    return reduce(xor, nums)


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than len(nums) // 2 times, or -1."""
    candidate = None
    count = 0
    for value in nums:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    if candidate is not None and nums.count(candidate) > len(nums) // 2:
        return candidate
    return -1


def rotate_array(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by k places in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the values occurring more than len(nums) // 3 times, in the order they qualify."""
    needed = len(nums) // 3 + 1
    counts: Counter[int] = Counter()
    found: list[int] = []
    for value in nums:
        counts[value] += 1
        if counts[value] == needed:
            found.append(value)
            if len(found) == 2:
                break
    return found


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..len(nums) that is absent from ``nums``."""
    return reduce(xor, range(len(nums) + 1), 0) ^ reduce(xor, nums, 0)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the other values."""
    first_zero = next((i for i, value in enumerate(nums) if value == 0), -1)
    if first_zero == -1:
        return
    slot = first_zero
    for i in range(first_zero + 1, len(nums)):
        if nums[i] != 0:
            nums[i], nums[slot] = nums[slot], nums[i]
            slot += 1


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    best = run = 0
    for value in nums:
        if value == 1:
            run += 1
            best = max(best, run)
        else:
            run = 0
    return best


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Return how many contiguous runs sum to exactly k."""
    prefix_counts: Counter[int] = Counter({0: 1})
    prefix = count = 0
    for value in nums:
        prefix += value
        count += prefix_counts[prefix - k]
        prefix_counts[prefix] += 1
    return count


def len_longest_fib_subseq(arr: Sequence[int]) -> int:
    """Return the length of the longest Fibonacci-like subsequence of a strictly increasing sequence, or 0."""
    position = {value: index for index, value in enumerate(arr)}
    lengths: dict[tuple[int, int], int] = {}
    best = 0
    for k in range(len(arr)):
        for j in range(1, k):
            i = position.get(arr[k] - arr[j])
            length = lengths.get((i, j), 2) + 1 if i is not None and i < j else 2
            lengths[(j, k)] = length
            best = max(best, length)
    return best if best >= 3 else 0


def num_equiv_domino_pairs(dominoes: Sequence[Sequence[int]]) -> int:
    """Return how many pairs of dominoes are equal, either way round."""
    seen: Counter[tuple[int, int]] = Counter()
    pairs = 0
    for a, b in dominoes:
        key = (min(a, b), max(a, b))
        pairs += seen[key]
        seen[key] += 1
    return pairs


def num_odd_sum_subarrays(arr: Sequence[int]) -> int:
    """Return how many contiguous runs have an odd sum, modulo 1_000_000_007."""
    count = 0
    even, odd = 1, 0
    total = 0
    for value in arr:
        total += value
        if total % 2 == 0:
            count = (count + odd) % _MOD
            even += 1
        else:
            count = (count + even) % _MOD
            odd += 1
    return count


def max_absolute_sum(nums: Sequence[int]) -> int:
    """Return the largest absolute value of the sum of a non-empty contiguous run.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("empty sequence")
    cur_max = cur_min = best_max = best_min = nums[0]
    for value in nums[1:]:
        cur_max = max(value, cur_max + value)
        best_max = max(best_max, cur_max)
        cur_min = min(value, cur_min + value)
        best_min = min(best_min, cur_min)
    return max(best_max, abs(best_min))


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Interleave the values, non-negative first, keeping each sign's order.

    Raises ValueError unless there are as many negative values as non-negative ones.
    """
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != len(negatives):
        raise ValueError("need equal numbers of positive and negative values")
    return [value for pair in zip(positives, negatives) for value in pair]