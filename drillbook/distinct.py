"""Count distinct values."""

from __future__ import annotations

import sys
from typing import Hashable, Iterable, Sequence


def count_distinct(values: Iterable[Hashable]) -> int:
    """Return how many different values ``values`` holds."""
    return len(set(values))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a size and that many integers from stdin; print the distinct count."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    size = int(tokens[0])
    values = [int(token) for token in tokens[1 : 1 + max(size, 0)]]
    print(count_distinct(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())