"""Total winnings of a card game: pairwise column differences summed over a table."""

from __future__ import annotations

import sys
from typing import Sequence


def _pairwise_difference_sum(column: Sequence[int]) -> int:
    total = 0
    prefix = 0
    for count, value in enumerate(sorted(column)):
        total += value * count - prefix
        prefix += value
    return total


def total_winnings(table: Sequence[Sequence[int]]) -> int:
    """Sum ``|a - b|`` over every pair of rows, column by column."""
    rows = [list(row) for row in table]
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    return sum(_pairwise_difference_sum(column) for column in zip(*rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases of ``n m`` tables from stdin; print each total."""
    numbers = iter(int(token) for token in sys.stdin.read().split())
    cases = next(numbers, 0)
    for _ in range(cases):
        height, width = next(numbers), next(numbers)
        table = [[next(numbers) for _ in range(width)] for _ in range(height)]
        print(total_winnings(table))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())