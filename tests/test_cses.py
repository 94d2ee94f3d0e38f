import random
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from puzzlework.cses import (
    MOD,
    beautiful_permutation,
    bit_strings,
    increasing_array_moves,
    longest_repetition,
    missing_number,
    number_spiral,
    two_knights,
    weird_algorithm,
)


def test_bit_strings_of_zero_length():
    assert bit_strings(0) == 1


@given(st.integers(0, 5000))
def test_bit_strings_doubles(n):
    assert bit_strings(n + 1) == bit_strings(n) * 2 % MOD


def test_bit_strings_stays_below_modulus():
    assert 0 <= bit_strings(10**6) < MOD


def test_bit_strings_negative():
    with pytest.raises(ValueError):
        bit_strings(-1)


def test_increasing_array_example():
    assert increasing_array_moves([3, 2, 5, 1, 7]) == 5


@given(st.lists(st.integers(-100, 100)))
def test_increasing_array_sorted_needs_nothing(values):
    assert increasing_array_moves(sorted(values)) == 0


@given(st.lists(st.integers(-100, 100)), st.integers(-50, 50))
def test_increasing_array_shift_invariant(values, shift):
    assert increasing_array_moves([v + shift for v in values]) == increasing_array_moves(values)


@given(st.integers(1, 200), st.randoms())
def test_missing_number_finds_removed(n, rng):
    numbers = list(range(1, n + 1))
    rng.shuffle(numbers)
    removed = numbers.pop()
    assert missing_number(n, numbers) == removed


def test_missing_number_wrong_count():
    with pytest.raises(ValueError):
        missing_number(5, [1, 2, 3])


@pytest.mark.parametrize("size", [1, 2, 5, 8])
def test_number_spiral_fills_square_with_permutation(size):
    values = sorted(number_spiral(r, c) for r in range(1, size + 1) for c in range(1, size + 1))
    assert values == list(range(1, size * size + 1))


def test_number_spiral_rejects_zero():
    with pytest.raises(ValueError):
        number_spiral(0, 3)


@pytest.mark.parametrize("n", [0, 1, 4, 5, 10, 37])
def test_beautiful_permutation_is_valid(n):
    result = beautiful_permutation(n)
    assert sorted(result) == list(range(1, n + 1))
    assert all(abs(a - b) != 1 for a, b in zip(result, result[1:]))


@pytest.mark.parametrize("n", [2, 3])
def test_beautiful_permutation_no_solution(n):
    with pytest.raises(ValueError):
        beautiful_permutation(n)


def test_longest_repetition_example():
    assert longest_repetition("ATTCGGGA") == 3


@given(st.sampled_from("ACGT"), st.integers(1, 50))
def test_longest_repetition_single_run(letter, count):
    assert longest_repetition(letter * count) == count


def test_longest_repetition_empty():
    assert longest_repetition("") == 0


def _brute_knights(k):
    cells = [(r, c) for r in range(k) for c in range(k)]
    total = 0
    for (r1, c1), (r2, c2) in combinations(cells, 2):
        if {abs(r1 - r2), abs(c1 - c2)} != {1, 2}:
            total += 1
    return total


def test_two_knights_example():
    assert two_knights(4) == [0, 6, 28, 96]


def test_two_knights_matches_brute_force():
    assert two_knights(7) == [_brute_knights(k) for k in range(1, 8)]


def test_two_knights_zero_board():
    assert two_knights(0) == [0]


@given(st.integers(1, 10**6))
def test_weird_algorithm_follows_rule(n):
    sequence = weird_algorithm(n)
    assert sequence[0] == n
    assert sequence[-1] == 1
    for current, following in zip(sequence, sequence[1:]):
        expected = current // 2 if current % 2 == 0 else 3 * current + 1
        assert following == expected


def test_weird_algorithm_rejects_zero():
    with pytest.raises(ValueError):
        weird_algorithm(0)


def test_weird_algorithm_of_one():
    assert weird_algorithm(1) == [1]


def test_missing_number_random_large():
    rng = random.Random(7)
    numbers = list(range(1, 1001))
    rng.shuffle(numbers)
    removed = numbers.pop(500)
    assert missing_number(1000, numbers) == removed