"""Stack-based structures: a stack that tracks its minimum, and histogram areas."""

from __future__ import annotations

from collections.abc import Sequence


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        """Remove the top element; raises IndexError when the stack is empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._items.pop()

    def top(self) -> int:
        """Return the top element; raises IndexError when the stack is empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element; raises IndexError when the stack is empty."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]


def _nearest_smaller(arr: Sequence[int], indices: range) -> list[int]:
    result = [-1] * len(arr)
    stack: list[int] = []
    for i in indices:
        while stack and arr[stack[-1]] >= arr[i]:
            stack.pop()
        result[i] = stack[-1] if stack else -1
        stack.append(i)
    return result


def next_smaller(arr: Sequence[int]) -> list[int]:
    """For each index, the index of the next strictly smaller value to the right, or -1."""
    return _nearest_smaller(arr, range(len(arr) - 1, -1, -1))


def prev_smaller(arr: Sequence[int]) -> list[int]:
    """For each index, the index of the nearest strictly smaller value to the left, or -1."""
    return _nearest_smaller(arr, range(len(arr)))


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle under a histogram; 0 when it is empty."""
    n = len(heights)
    following = [n if j == -1 else j for j in next_smaller(heights)]
    preceding = prev_smaller(heights)
    return max(
        (h * (nxt - prv - 1) for h, nxt, prv in zip(heights, following, preceding)),
        default=0,
    )