# puzzlework

Solutions to classic competitive-programming puzzles: a generic segment
tree, batch range-query helpers, introductory counting and sequence
problems, and a set of dynamic-programming classics. Pure Python, no
dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library overview

### `puzzlework.segment_tree`

`SegmentTree(values, combine, identity)` builds a tree over `values` with an
associative `combine` function (`operator.add`, `min`, `operator.xor`, ...)
and its neutral `identity` element. Element order is kept, so `combine` need
not be commutative.

- `len(tree)`: number of elements
- `tree.update(index, value)`: replace one element (0-based)
- `tree.query(start, end)`: combine the elements from `start` to `end`,
  both inclusive and 0-based

An index outside the tree raises `IndexError`; `start > end` raises
`ValueError`.

```python
import operator
from puzzlework.segment_tree import SegmentTree

tree = SegmentTree([5, 8, 6, 3], operator.add, 0)
tree.query(0, 3)   # 22
tree.update(1, 2)
tree.query(0, 1)   # 7
```

### `puzzlework.range_queries`

Batch helpers built on the segment tree. Positions and ranges are 1-based
and inclusive, as in the usual problem statements.

- `static_range_sums(values, queries)`: sum of each `(start, end)` range
- `static_range_minimums(values, queries)`: minimum of each range
- `range_xors(values, queries)`: bitwise XOR of each range
- `dynamic_range_sums(values, operations)`
- `dynamic_range_minimums(values, operations)`

The dynamic helpers take operations `(1, position, value)` to set a value and
`(2, start, end)` to ask about a range; they return the answers to the range
requests in order. Any other operation type raises `ValueError`.

```python
from puzzlework.range_queries import dynamic_range_sums

dynamic_range_sums([3, 2, 4], [(2, 1, 3), (1, 2, 10), (2, 1, 2)])   # [9, 13]
```

### `puzzlework.cses`

Introductory counting and sequence problems:

- `bit_strings(n)`: number of bit strings of length `n`, modulo 10^9 + 7
- `increasing_array_moves(values)`: minimum total increments to make a list
  non-decreasing
- `missing_number(n, numbers)`: the one number of `1..n` not among the
  `n - 1` given numbers
- `number_spiral(row, column)`: the value at a 1-based cell of the number
  spiral
- `beautiful_permutation(n)`: a permutation of `1..n` with no neighbours
  differing by one; raises `ValueError` for `n` of 2 or 3
- `longest_repetition(sequence)`: length of the longest run of equal
  consecutive items (0 for an empty sequence)
- `two_knights(n)`: for each board size `k = 1..n`, the ways to place two
  non-attacking knights on a `k` x `k` board (`[0]` for `n = 0`)
- `weird_algorithm(n)`: the 3n + 1 sequence from `n` down to 1

```python
from puzzlework.cses import bit_strings, number_spiral, weird_algorithm

bit_strings(3)        # 8
number_spiral(2, 3)   # 8
weird_algorithm(3)    # [3, 10, 5, 16, 8, 4, 2, 1]
```

### `puzzlework.dp`

Dynamic-programming classics:

- `assignment_cost(costs)`: minimum total cost of giving each person a
  distinct job, from a square cost matrix `costs[person][job]`
- `catalan(n)` and `catalan_numbers(count)`
- `max_subarray(values)`: `(sum, start, end)` of the largest subarray sum;
  the empty subarray counts, so the sum is never negative
- `longest_common_subsequence(first, second)`
- `shortest_common_supersequence(first, second)`: length of the shortest
  string having both inputs as subsequences
- `longest_common_substring(first, second)`
- `max_stolen_value(values)`: best total taking no two adjacent items

```python
from puzzlework.dp import catalan, longest_common_subsequence, max_subarray

catalan(5)                                        # 42
longest_common_subsequence("ABCBDAB", "BDCABA")   # 4
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])     # (6, 3, 6)
```

## Command line

`puzzlework PROBLEM` reads the problem's input from standard input, in the
whitespace-separated format of the judge, and prints the answer:

```
echo 3 | puzzlework weird-algorithm
```

prints `3 10 5 16 8 4 2 1`. The problems are:

`bit-strings`, `increasing-array`, `missing-number`, `number-spiral`,
`permutations`, `repetitions`, `two-knights`, `weird-algorithm`,
`static-range-sum`, `static-range-min`, `dynamic-range-sum`,
`dynamic-range-min` and `range-xor`.

The range problems expect `n q`, then the `n` values, then `q` requests
(pairs for the static and XOR problems, `type a b` triples for the dynamic
ones). `permutations` prints `NO SOLUTION` when none exists. Malformed input
prints an `error:` message to standard error and exits with status 1.

The same dispatch is available in code as `puzzlework.cli.run(problem, text)`,
which returns the output text.

## Limitations

The dynamic-programming functions in `puzzlework.dp` are library functions
only; the command line has no problem names for them.