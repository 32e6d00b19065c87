"""Fewest gondolas for children, at most two per gondola."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence


def count_gondolas(weights: Iterable[int], capacity: int) -> int:
    """Return the fewest gondolas needed when each holds two children at most.

    A gondola's total weight may not exceed ``capacity``.
    """
    ordered = sorted(weights)
    light, heavy = 0, len(ordered) - 1
    gondolas = 0
    while light <= heavy:
        if ordered[light] + ordered[heavy] <= capacity:
            light += 1
        heavy -= 1
        gondolas += 1
    return gondolas


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n x`` and n weights from stdin; print the gondola count."""
    numbers = [int(token) for token in sys.stdin.read().split()]
    if len(numbers) < 2:
        return 0
    size, capacity = numbers[0], numbers[1]
    print(count_gondolas(numbers[2 : 2 + size], capacity))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())