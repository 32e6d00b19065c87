"""Sort two rows with adjacent swaps so that the first row never exceeds the second."""

from __future__ import annotations

import sys
from typing import Sequence

Operation = tuple[int, int]

ROW_FIRST = 1
ROW_SECOND = 2
CROSS_SWAP = 3


def bubble_sort_operations(values: Sequence[int], kind: int) -> list[Operation]:
    """Bubble-sort a copy of ``values`` and return the swaps it made.

    Each swap of positions ``j`` and ``j + 1`` (1-based) is reported as
    ``(kind, j)``. The input itself is left untouched.
    """
    work = list(values)
    operations: list[Operation] = []
    size = len(work)
    for done in range(size):
        swapped = False
        for j in range(size - 1 - done):
            if work[j] > work[j + 1]:
                work[j], work[j + 1] = work[j + 1], work[j]
                operations.append((kind, j + 1))
                swapped = True
        if not swapped:
            break
    return operations


def sort_two_rows(first: Sequence[int], second: Sequence[int]) -> list[Operation]:
    """Return the operations that sort both rows with ``first[i] <= second[i]``.

    Operation ``(3, i)`` swaps the i-th elements of the two rows, ``(1, j)``
    and ``(2, j)`` swap neighbours ``j`` and ``j + 1`` inside row one or two.
    """
    if len(first) != len(second):
        raise ValueError("rows must have the same length")
    top = list(first)
    bottom = list(second)
    operations: list[Operation] = []
    for position, (upper, lower) in enumerate(zip(first, second), start=1):
        if upper > lower:
            top[position - 1], bottom[position - 1] = lower, upper
            operations.append((CROSS_SWAP, position))
    operations.extend(bubble_sort_operations(top, ROW_FIRST))
    operations.extend(bubble_sort_operations(bottom, ROW_SECOND))
    return operations


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases from stdin and print the operations for each."""
    numbers = iter(int(token) for token in sys.stdin.read().split())
    cases = next(numbers, 0)
    for _ in range(cases):
        size = next(numbers)
        first = [next(numbers) for _ in range(size)]
        second = [next(numbers) for _ in range(size)]
        operations = sort_two_rows(first, second)
        print(len(operations))
        for kind, position in operations:
            print(kind, position)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())