"""Binary search and bound searches over sorted sequences."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence


def binary_search(values: Sequence[int], target: int) -> int:
    """Return the 1-based position of ``target`` in sorted ``values``, or -1."""
    low, high = 1, len(values)
    while low <= high:
        mid = low + (high - low) // 2
        current = values[mid - 1]
        if target == current:
            return mid
        if target > current:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def _first_match(values: Sequence[int], matches: Callable[[int], bool]) -> int:
    low, high = 0, len(values) - 1
    result = -1
    while low <= high:
        mid = high - (high - low) // 2
        if matches(values[mid]):
            result = mid + 1
            high = mid - 1
        else:
            low = mid + 1
    return result


def lower_bound_position(values: Sequence[int], target: int) -> int:
    """Return the 1-based position of the first value >= ``target``, or -1."""
    return _first_match(values, lambda value: value >= target)


def upper_bound_position(values: Sequence[int], target: int) -> int:
    """Return the 1-based position of the first value > ``target``, or -1."""
    return _first_match(values, lambda value: value > target)


_MODES: dict[str, Callable[[Sequence[int], int], int]] = {
    "search": binary_search,
    "lower": lower_bound_position,
    "upper": upper_bound_position,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n q``, n sorted values and q queries from stdin; answer each query."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("mode", nargs="?", default="search", choices=sorted(_MODES))
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    search = _MODES[args.mode]

    numbers = iter(int(token) for token in sys.stdin.read().split())
    try:
        size, queries = next(numbers), next(numbers)
    except StopIteration:
        return 0
    values = [next(numbers) for _ in range(size)]
    for _ in range(queries):
        try:
            target = next(numbers)
        except StopIteration:
            break
        print(search(values, target))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())