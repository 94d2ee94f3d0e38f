"""Classic dynamic-programming problems."""

from __future__ import annotations

from collections.abc import Sequence


def assignment_cost(costs: Sequence[Sequence[int]]) -> int:
    """Minimum total cost of assigning each person to a distinct job.

    ``costs[person][job]`` is the cost of that pairing; the matrix is square.
    """
    n = len(costs)
    if any(len(row) != n for row in costs):
        raise ValueError("cost matrix must be square")
    full = (1 << n) - 1
    best: list[float] = [float("inf")] * (full + 1)
    best[0] = 0
    for mask in range(full + 1):
        person = mask.bit_count()
        if person == n:
            continue
        for job in range(n):
            bit = 1 << job
            if not mask & bit:
                candidate = best[mask] + costs[person][job]
                if candidate < best[mask | bit]:
                    best[mask | bit] = candidate
    return int(best[full])


def catalan_numbers(count: int) -> list[int]:
    """The first ``count`` Catalan numbers."""
    numbers: list[int] = []
    for n in range(count):
        if n <= 1:
            numbers.append(1)
        else:
            numbers.append(sum(numbers[i] * numbers[n - 1 - i] for i in range(n)))
    return numbers


def catalan(n: int) -> int:
    """The ``n``-th Catalan number; 1 for any ``n`` of at most 1."""
    if n <= 1:
        return 1
    return catalan_numbers(n + 1)[n]


def max_subarray(values: Sequence[int]) -> tuple[int, int, int]:
    """Largest subarray sum with its inclusive start and end indices.

    The empty subarray counts, so the sum is never negative; when it wins,
    ``start`` is one past ``end``.
    """
    if not values:
        raise ValueError("values must not be empty")
    best: int | None = None
    start = end = 0
    running = 0
    run_start = 0
    for index, value in enumerate(values):
        running += value
        if running < 0:
            running = 0
            run_start = index + 1
        if best is None or running > best:
            best = running
            start, end = run_start, index
    assert best is not None
    return best, start, end


def _match_table(first: str, second: str, base_row, base_col, on_match, on_miss):
    previous = [base_row(j) for j in range(len(second) + 1)]
    for i, left in enumerate(first, start=1):
        current = [base_col(i)]
        for j, right in enumerate(second, start=1):
            if left == right:
                current.append(on_match(previous[j - 1]))
            else:
                current.append(on_miss(previous[j], current[j - 1]))
        previous = current
    return previous


def longest_common_subsequence(first: str, second: str) -> int:
    """Length of the longest common subsequence."""
    row = _match_table(
        first,
        second,
        base_row=lambda j: 0,
        base_col=lambda i: 0,
        on_match=lambda diagonal: diagonal + 1,
        on_miss=max,
    )
    return row[-1]


def shortest_common_supersequence(first: str, second: str) -> int:
    """Length of the shortest string having both inputs as subsequences."""
    row = _match_table(
        first,
        second,
        base_row=lambda j: j,
        base_col=lambda i: i,
        on_match=lambda diagonal: diagonal + 1,
        on_miss=lambda up, left: min(up, left) + 1,
    )
    return row[-1]


def longest_common_substring(first: str, second: str) -> int:
    """Length of the longest contiguous string found in both inputs."""
    longest = 0
    previous = [0] * (len(second) + 1)
    for left in first:
        current = [0]
        for j, right in enumerate(second, start=1):
            length = previous[j - 1] + 1 if left == right else 0
            current.append(length)
            longest = max(longest, length)
        previous = current
    return longest


def max_stolen_value(values: Sequence[int]) -> int:
    """Largest total of items taken with no two adjacent ones."""
    if not values:
        raise ValueError("values must not be empty")
    if len(values) == 1:
        return values[0]
    before, last = values[0], max(values[0], values[1])
    for value in values[2:]:
        before, last = last, max(last, before + value)
    return last