"""A segment tree over any associative combining operation."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """Point updates and inclusive range queries in logarithmic time.

    ``combine`` must be associative and ``identity`` must be its neutral
    element. The order of elements is preserved, so the operation need not
    be commutative.
    """

    def __init__(
        self,
        values: Iterable[T],
        combine: Callable[[T, T], T],
        identity: T,
    ) -> None:
        items = list(values)
        self._size = len(items)
        self._combine = combine
        self._identity = identity
        self._tree: list[T] = [identity] * self._size + items
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = combine(self._tree[2 * node], self._tree[2 * node + 1])

    def __len__(self) -> int:
        return self._size

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for {self._size} elements")

    def update(self, index: int, value: T) -> None:
        """Replace the element at ``index`` with ``value``."""
        self._check_index(index)
        node = index + self._size
        self._tree[node] = value
        node //= 2
        while node >= 1:
            self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2

    def query(self, start: int, end: int) -> T:
        """Combine the elements from ``start`` to ``end``, both inclusive."""
        self._check_index(start)
        self._check_index(end)
        if start > end:
            raise ValueError(f"start {start} is after end {end}")
        left_result = self._identity
        right_result = self._identity
        low = start + self._size
        high = end + self._size + 1
        while low < high:
            if low & 1:
                left_result = self._combine(left_result, self._tree[low])
                low += 1
            if high & 1:
                high -= 1
                right_result = self._combine(self._tree[high], right_result)
            low //= 2
            high //= 2
        return self._combine(left_result, right_result)