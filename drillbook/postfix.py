"""Evaluate arithmetic expressions written in postfix notation."""

from __future__ import annotations

import math
import operator
import sys
from typing import Callable, Sequence


class PostfixError(ValueError):
    """Raised when a postfix expression cannot be evaluated."""


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise ZeroDivisionError("division by zero")
    return left / right


def _modulo(left: float, right: float) -> float:
    if right == 0 or math.isinf(left):
        return math.nan
    return math.fmod(left, right)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
    "%": _modulo,
    "^": _power,
}


def _parse_number(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise PostfixError(f"invalid token: {token!r}") from None


def evaluate_postfix(expression: str) -> float:
    """Evaluate a whitespace-separated postfix expression.

    Returns the value on top of the stack once every token is consumed.
    Raises PostfixError for a missing operand or a bad token and
    ZeroDivisionError for division by zero.
    """
    stack: list[float] = []
    for token in expression.split():
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(_parse_number(token))
            continue
        if len(stack) < 2:
            raise PostfixError(f"not enough operands for {token!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise PostfixError("empty expression")
    return stack[-1]


def format_result(value: float) -> str:
    """Format a value with six significant digits."""
    return f"{value:.6g}"


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate the first line of stdin and print the result."""
    line = sys.stdin.readline()
    try:
        value = evaluate_postfix(line)
    except ZeroDivisionError:
        return 0
    except PostfixError as error:
        print(error, file=sys.stderr)
        return 1
    print(format_result(value))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())