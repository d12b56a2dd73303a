"""Arithmetic helpers: calculators, matrix product and list utilities."""

import operator as _op
from collections.abc import Iterable, Sequence
from typing import Any

_OPERATORS = {
    "+": _op.add,
    "-": _op.sub,
    "*": _op.mul,
    "/": _op.truediv,
}


def calculate(a: float, operator: str, b: float) -> float:
    """Apply one of ``+ - * /`` to two numbers."""
    try:
        function = _OPERATORS[operator]
    except KeyError:
        raise ValueError(f"operator is not correct: {operator!r}") from None
    return function(a, b)


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def menu_calculate(option: int, a: int, b: int) -> int:
    """Menu choice 1 adds, 2 subtracts, 3 multiplies, 4 divides (truncating)."""
    actions = {
        1: _op.add,
        2: _op.sub,
        3: _op.mul,
        4: _truncating_divide,
    }
    try:
        action = actions[option]
    except KeyError:
        raise ValueError(f"no menu option {option}") from None
    return action(a, b)


def matrix_multiply(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Product of two matrices given as lists of rows."""
    rows_a = [list(row) for row in a]
    rows_b = [list(row) for row in b]
    inner = len(rows_b)
    if any(len(row) != inner for row in rows_a):
        raise ValueError("columns of the first matrix must match rows of the second")
    width = len(rows_b[0]) if rows_b else 0
    if any(len(row) != width for row in rows_b):
        raise ValueError("second matrix is not rectangular")
    columns = list(zip(*rows_b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in rows_a
    ]


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return the smallest and the largest value."""
    items = list(values)
    if not items:
        raise ValueError("min_max() of an empty sequence")
    return min(items), max(items)


def reverse_list(values: Iterable[Any]) -> list[Any]:
    return list(values)[::-1]