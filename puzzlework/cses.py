"""Introductory counting and sequence problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby

MOD = 1_000_000_007


def bit_strings(n: int) -> int:
    """Number of bit strings of length ``n``, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("length must not be negative")
    return pow(2, n, MOD)


def increasing_array_moves(values: Iterable[int]) -> int:
    """Minimum total increments needed to make ``values`` non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is not None and value < highest:
            moves += highest - value
        else:
            highest = value
    return moves


def missing_number(n: int, numbers: Sequence[int]) -> int:
    """The one number of 1..n that does not appear among ``numbers``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if len(numbers) != n - 1:
        raise ValueError(f"expected {n - 1} numbers, got {len(numbers)}")
    return n * (n + 1) // 2 - sum(numbers)


def number_spiral(row: int, column: int) -> int:
    """The value at 1-based ``row`` and ``column`` of the number spiral."""
    if row < 1 or column < 1:
        raise ValueError("row and column are 1-based")
    if column >= row:
        if column % 2 == 1:
            return column * column - (row - 1)
        return (column - 1) * (column - 1) + row
    if row % 2 == 1:
        return (row - 1) * (row - 1) + column
    return row * row - (column - 1)


def beautiful_permutation(n: int) -> list[int]:
    """A permutation of 1..n in which no neighbours differ by one.

    Raises ValueError when no such permutation exists.
    """
    if n in (2, 3):
        raise ValueError(f"no solution for n={n}")
    return list(range(2, n + 1, 2)) + list(range(1, n + 1, 2))


def longest_repetition(sequence: Iterable[object]) -> int:
    """Length of the longest run of equal consecutive items."""
    return max((sum(1 for _ in run) for _, run in groupby(sequence)), default=0)


def two_knights(n: int) -> list[int]:
    """Ways to place two non-attacking knights on k x k boards, k = 1..n."""
    if n < 0:
        raise ValueError("board size must not be negative")
    if n == 0:
        return [0]
    return [
        (k * k) * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2)
        for k in range(1, n + 1)
    ]


def weird_algorithm(n: int) -> list[int]:
    """The Collatz sequence from ``n`` down to 1."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence