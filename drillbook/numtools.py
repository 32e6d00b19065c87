"""Small integer helpers."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def find_index(values: Sequence[T], item: T) -> int:
    """Return the index of the first occurrence of ``item``, or -1."""
    try:
        return values.index(item)
    except ValueError:
        return -1


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple; both zero raises ZeroDivisionError."""
    return (a * b) // math.gcd(a, b)


def total_digits(n: int) -> int:
    """Return the number of decimal digits of a positive integer."""
    if n <= 0:
        raise ValueError("total_digits needs a positive integer")
    return len(str(n))


def sum_range(i: int, j: int) -> int:
    """Return the sum of the integers from ``i`` to ``j`` inclusive."""
    return (j - i + 1) * (i + j) // 2


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, by 6k +/- 1 trial division."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    candidate = 5
    while candidate * candidate <= n:
        if n % candidate == 0 or n % (candidate + 2) == 0:
            return False
        candidate += 6
    return True


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0