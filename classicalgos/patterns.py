"""Number and text patterns: FizzBuzz, triangles, rule 30 and Hanoi."""

from collections.abc import Iterator
from itertools import count

RULE30 = {
    "   ": " ",
    "  X": "X",
    " X ": "X",
    " XX": "X",
    "X  ": "X",
    "X X": " ",
    "XX ": " ",
    "XXX": " ",
}


def fizzbuzz(limit: int = 100) -> list[str]:
    """FizzBuzz lines for the numbers 1 to ``limit``."""
    lines = []
    for number in range(1, limit + 1):
        if number % 15 == 0:
            lines.append("FizzBuzz")
        elif number % 3 == 0:
            lines.append("Fizz")
        elif number % 5 == 0:
            lines.append("Buzz")
        else:
            lines.append(str(number))
    return lines


def floyd_triangle(lines: int) -> list[list[int]]:
    """Rows of Floyd's triangle: 1; 2 3; 4 5 6; ..."""
    numbers = count(1)
    return [[next(numbers) for _ in range(length)] for length in range(1, lines + 1)]


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    triangle = []
    for i in range(rows):
        row = [1]
        for j in range(1, i + 1):
            row.append(row[-1] * (i - j + 1) // j)
        triangle.append(row)
    return triangle


def star_pattern(rows: int) -> list[str]:
    """Lines of stars shrinking from ``rows`` stars down to one."""
    return [" ".join("*" * width) for width in range(rows, 0, -1)]


def rule30_step(level: str) -> str:
    """Next generation of a rule 30 row of ``X`` and space cells."""
    padded = f"  {level}  "
    try:
        return "".join(RULE30[padded[i : i + 3]] for i in range(len(padded) - 2))
    except KeyError as error:
        raise ValueError(f"cells must be 'X' or ' ', got {error.args[0]!r}") from None


def rule30(levels: int = 20) -> list[str]:
    """``levels`` generations of rule 30 from one cell, indented to a pyramid."""
    lines = []
    level = "X"
    for i in range(levels):
        lines.append(" " * (levels - i) + level)
        level = rule30_step(level)
    return lines


def _hanoi(
    n: int, source: str, intermediate: str, destination: str
) -> Iterator[tuple[str, str]]:
    if n == 1:
        yield source, destination
        return
    yield from _hanoi(n - 1, source, destination, intermediate)
    yield source, destination
    yield from _hanoi(n - 1, intermediate, source, destination)


def hanoi_moves(
    n: int,
    source: str = "Source",
    intermediate: str = "Intermediate",
    destination: str = "Destination",
) -> list[tuple[str, str]]:
    """Moves, as (from, to) pairs, that carry ``n`` disks to ``destination``."""
    if n < 1:
        raise ValueError("number of disks must be positive")
    return list(_hanoi(n, source, intermediate, destination))