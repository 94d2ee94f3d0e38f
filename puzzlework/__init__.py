"""Segment trees, range queries, counting puzzles and dynamic-programming classics."""

__version__ = "0.1.0"