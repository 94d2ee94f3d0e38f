"""Command-line solver reading problem input in the judge's format."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from puzzlework import cses, range_queries


class _Tokens:
    """Whitespace-separated tokens of the input, read in order."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.integer(), self.integer()) for _ in range(count)]

    def triples(self, count: int) -> list[tuple[int, int, int]]:
        return [(self.integer(), self.integer(), self.integer()) for _ in range(count)]


def _lines(values: Sequence[object]) -> str:
    return "".join(f"{value}\n" for value in values)


def _spaced(values: Sequence[object]) -> str:
    return " ".join(str(value) for value in values) + "\n"


def _bit_strings(tokens: _Tokens) -> str:
    return _lines([cses.bit_strings(tokens.integer())])


def _increasing_array(tokens: _Tokens) -> str:
    n = tokens.integer()
    return _lines([cses.increasing_array_moves(tokens.integers(n))])


def _missing_number(tokens: _Tokens) -> str:
    n = tokens.integer()
    return _lines([cses.missing_number(n, tokens.integers(n - 1))])


def _number_spiral(tokens: _Tokens) -> str:
    tests = tokens.integer()
    return _lines([cses.number_spiral(row, column) for row, column in tokens.pairs(tests)])


def _permutations(tokens: _Tokens) -> str:
    try:
        return _spaced(cses.beautiful_permutation(tokens.integer()))
    except ValueError as error:
        if "no solution" in str(error):
            return "NO SOLUTION\n"
        raise


def _repetitions(tokens: _Tokens) -> str:
    return _lines([cses.longest_repetition(tokens.word())])


def _two_knights(tokens: _Tokens) -> str:
    return _lines(cses.two_knights(tokens.integer()))


def _weird_algorithm(tokens: _Tokens) -> str:
    return _spaced(cses.weird_algorithm(tokens.integer()))


def _range_problem(solver: Callable, operations: bool) -> Callable[[_Tokens], str]:
    def handle(tokens: _Tokens) -> str:
        n, q = tokens.integer(), tokens.integer()
        values = tokens.integers(n)
        requests = tokens.triples(q) if operations else tokens.pairs(q)
        return _lines(solver(values, requests))

    return handle


PROBLEMS: dict[str, Callable[[_Tokens], str]] = {
    "bit-strings": _bit_strings,
    "increasing-array": _increasing_array,
    "missing-number": _missing_number,
    "number-spiral": _number_spiral,
    "permutations": _permutations,
    "repetitions": _repetitions,
    "two-knights": _two_knights,
    "weird-algorithm": _weird_algorithm,
    "static-range-sum": _range_problem(range_queries.static_range_sums, False),
    "static-range-min": _range_problem(range_queries.static_range_minimums, False),
    "dynamic-range-sum": _range_problem(range_queries.dynamic_range_sums, True),
    "dynamic-range-min": _range_problem(range_queries.dynamic_range_minimums, True),
    "range-xor": _range_problem(range_queries.range_xors, False),
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the output text."""
    try:
        handler = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    return handler(_Tokens(text))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="puzzlework", description="Solve a problem from its judge input."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read())
    except (ValueError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())