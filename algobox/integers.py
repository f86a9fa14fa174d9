"""Problems over single integers: digit reversal, palindromes and number sequences."""

from __future__ import annotations

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_MOD = 1_000_000_007


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of a 32-bit integer; 0 if the result overflows."""
    if x <= _INT_MIN:
        return 0
    reversed_abs = int(str(abs(x))[::-1])
    if reversed_abs > _INT_MAX:
        return 0
    return -reversed_abs if x < 0 else reversed_abs


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def pascal_row(row: int) -> list[int]:
    """Return row ``row`` (counted from 1) of Pascal's triangle.

    Raises ValueError when row is less than 1.
    """
    if row < 1:
        raise ValueError("rows are counted from 1")
    value = 1
    values = [1]
    for col in range(1, row):
        value = value * (row - col) // col
        values.append(value)
    return values


def generate_pascal(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    return [pascal_row(row) for row in range(1, num_rows + 1)]


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; values of n up to 1 are returned as they are."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def num_tilings(n: int) -> int:
    """Count tilings of a 2 x n board by dominoes and trominoes, modulo 1_000_000_007.

    Raises ValueError when n is less than 1.
    """
    if n < 1:
        raise ValueError("board width must be at least 1")
    seeds = [1, 2, 5]
    if n <= 3:
        return seeds[n - 1]
    window = seeds
    for _ in range(n - 3):
        window = [window[1], window[2], (2 * window[2] + window[0]) % _MOD]
    return window[2]