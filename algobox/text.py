"""Checks and constructions over strings."""

from __future__ import annotations

from collections.abc import Sequence

_OPENING_FOR = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_OPENING_FOR.values())


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket closes in the right order; any other character fails."""
    stack: list[str] = []
    for ch in s:
        if ch in _OPENERS:
            stack.append(ch)
        elif not stack or _OPENING_FOR.get(ch) != stack.pop():
            return False
    return not stack


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits read the same both ways, ignoring case."""
    kept = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return kept == kept[::-1]


def find_different_binary_string(nums: Sequence[str]) -> str:
    """Return a binary string of length len(nums) that differs from each of them.

    Each string must be at least as long as there are strings.
    """
    return "".join("1" if word[index] == "0" else "0" for index, word in enumerate(nums))