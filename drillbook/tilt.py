"""Highest position reachable by hopping through portals."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence


@dataclass(frozen=True, order=True)
class Portal:
    """A portal usable between ``low`` and ``high`` that leads to ``target``."""

    low: int
    high: int
    target: int


def max_reachable(start: int, portals: Iterable[Portal]) -> int:
    """Walk portals sorted by (low, high, target) and return the final position.

    A portal entirely below the current position, or one whose range holds
    it, lifts the position to its target if that is higher; the walk stops at
    the first portal whose lower end lies above the position.
    """
    position = start
    for portal in sorted(portals):
        if position > portal.low and position > portal.high:
            position = max(position, portal.target)
        elif portal.low <= position <= portal.high:
            position = max(position, portal.target)
        elif position < portal.low:
            break
    return position


def max_reachable_by_range(start: int, portals: Iterable[Portal]) -> int:
    """Return the highest position reached using any portal whose low end is reachable."""
    position = start
    for portal in sorted(portals, key=lambda p: (p.low, p.target)):
        if portal.low > position:
            break
        position = max(position, portal.target)
    return position


_MODES: dict[str, Callable[[int, Iterable[Portal]], int]] = {
    "range": max_reachable_by_range,
    "bounds": max_reachable,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases of portals from stdin; print the position reached in each."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("mode", nargs="?", default="range", choices=sorted(_MODES))
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    solve = _MODES[args.mode]

    numbers = iter(int(token) for token in sys.stdin.read().split())
    cases = next(numbers, 0)
    for _ in range(cases):
        count, start = next(numbers), next(numbers)
        portals = [
            Portal(next(numbers), next(numbers), next(numbers)) for _ in range(count)
        ]
        print(solve(start, portals))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())