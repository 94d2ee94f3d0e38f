"""Batch answers to range-query problems over integer arrays.

Positions and ranges are 1-based and inclusive, as in the problem
statements; they are converted to 0-based indices internally.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from operator import add, xor
from typing import TypeVar

from puzzlework.segment_tree import SegmentTree

T = TypeVar("T")

UPDATE = 1
QUERY = 2


def _answer_ranges(tree: SegmentTree[T], queries: Iterable[tuple[int, int]]) -> list[T]:
    return [tree.query(start - 1, end - 1) for start, end in queries]


def _run_operations(
    values: Iterable[int],
    operations: Iterable[tuple[int, int, int]],
    combine: Callable[[T, T], T],
    identity: T,
) -> list[T]:
    tree: SegmentTree[T] = SegmentTree(values, combine, identity)
    answers: list[T] = []
    for kind, first, second in operations:
        if kind == UPDATE:
            tree.update(first - 1, second)
        elif kind == QUERY:
            answers.append(tree.query(first - 1, second - 1))
        else:
            raise ValueError(f"unknown operation type {kind}")
    return answers


def static_range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Sum of each 1-based inclusive range ``(start, end)``."""
    return _answer_ranges(SegmentTree(values, add, 0), queries)


def static_range_minimums(
    values: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Minimum of each 1-based inclusive range ``(start, end)``."""
    return _answer_ranges(SegmentTree(values, min, math.inf), queries)


def dynamic_range_sums(
    values: Sequence[int], operations: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Process ``(1, position, value)`` updates and ``(2, start, end)`` sum queries.

    Returns the answers to the queries in order.
    """
    return _run_operations(values, operations, add, 0)


def dynamic_range_minimums(
    values: Sequence[int], operations: Iterable[tuple[int, int, int]]
) -> list[int]:
    """Process ``(1, position, value)`` updates and ``(2, start, end)`` minimum queries.

    Returns the answers to the queries in order.
    """
    return _run_operations(values, operations, min, math.inf)


def range_xors(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Bitwise xor of each 1-based inclusive range ``(start, end)``."""
    return _answer_ranges(SegmentTree(values, xor, 0), queries)