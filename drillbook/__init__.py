"""Classic algorithm drills: brackets, postfix, binary search, sorting, matching and greedy exercises."""

__version__ = "0.1.0"