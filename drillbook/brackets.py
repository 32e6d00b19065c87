"""Check whether strings of brackets are balanced."""

from __future__ import annotations

import sys
from itertools import islice
from typing import Sequence

_OPENERS = frozenset("([{")


def _closes(opener: str, char: str) -> bool:
    # A closing bracket sits at most two code points after its opener:
    # '(' -> ')', '[' -> ']', '{' -> '}'.
    return abs(ord(opener) - ord(char)) <= 2


def is_balanced(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order.

    Every character that is not an opening bracket is treated as a closer.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or not _closes(stack[-1], char):
            return False
        else:
            stack.pop()
    return not stack


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many strings from stdin; print YES or NO for each."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    count = int(tokens[0])
    for text in islice(tokens[1:], max(count, 0)):
        print("YES" if is_balanced(text) else "NO")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())