"""Minimum set of rows and columns covering every marked cell of a square grid."""

from __future__ import annotations

import sys
from collections import deque
from typing import Sequence

MARK = "o"
ROW = 1
COLUMN = 2


def minimum_cover(grid: Sequence[str]) -> list[tuple[int, int]]:
    """Return a smallest list of lines covering every ``'o'`` cell.

    A row ``r`` is reported as ``(1, r)`` and a column ``c`` as ``(2, c)``,
    both 1-based; rows come first, each group in increasing order.
    """
    rows = list(grid)
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("grid must be square")

    adjacency: list[list[int]] = [[]]
    adjacency.extend(
        [column for column, cell in enumerate(row, start=1) if cell == MARK]
        for row in rows
    )
    match_left = [0] * (size + 1)
    match_right = [0] * (size + 1)
    dist = [0] * (size + 1)

    def layer() -> bool:
        queue: deque[int] = deque()
        for u in range(1, size + 1):
            if match_left[u]:
                dist[u] = -1
            else:
                dist[u] = 0
                queue.append(u)
        dist[0] = -1
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                w = match_right[v]
                if dist[w] == -1:
                    dist[w] = dist[u] + 1
                    if w:
                        queue.append(w)
        return dist[0] != -1

    def augment(u: int) -> bool:
        if u == 0:
            return True
        for v in adjacency[u]:
            w = match_right[v]
            if dist[w] == dist[u] + 1 and augment(w):
                match_left[u] = v
                match_right[v] = u
                return True
        return False

    while layer():
        for u in range(1, size + 1):
            if not match_left[u]:
                augment(u)

    marked_left: set[int] = set()
    marked_right: set[int] = set()
    pending = [u for u in range(1, size + 1) if not match_left[u]]
    while pending:
        u = pending.pop()
        if u in marked_left:
            continue
        marked_left.add(u)
        for v in adjacency[u]:
            if v not in marked_right:
                marked_right.add(v)
                if match_right[v]:
                    pending.append(match_right[v])

    cover = [(ROW, u) for u in range(1, size + 1) if u not in marked_left]
    cover.extend((COLUMN, v) for v in sorted(marked_right))
    return cover


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and an n-by-n grid from stdin; print the cover."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    size = int(tokens[0])
    cells = "".join(tokens[1:])
    grid = [cells[start : start + size] for start in range(0, size * size, size)]
    cover = minimum_cover(grid)
    print(len(cover))
    for kind, index in cover:
        print(kind, index)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())