"""Small string algorithms: zig-zag reading, vowels, palindromes, word counts."""

from collections import Counter
from dataclasses import dataclass
from string import ascii_letters, digits

VOWELS = frozenset("aeiouAEIOU")


def zigzag(text: str, rows: int) -> str:
    """Write ``text`` in a zig-zag over ``rows`` rows and read it row by row."""
    if rows < 1:
        raise ValueError("rows must be positive")
    if rows == 1:
        return text
    lines: list[list[str]] = [[] for _ in range(rows)]
    row, step = 0, 1
    for char in text:
        lines[row].append(char)
        if row == 0:
            step = 1
        elif row == rows - 1:
            step = -1
        row += step
    return "".join("".join(line) for line in lines)


def is_vowel(char: str) -> bool:
    """True for one of the letters a, e, i, o, u in either case."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char in VOWELS


@dataclass(frozen=True)
class CharacterCounts:
    """How many vowels, consonants, digits and spaces a line holds."""

    vowels: int = 0
    consonants: int = 0
    digits: int = 0
    spaces: int = 0


def count_characters(line: str) -> CharacterCounts:
    """Count ASCII vowels, consonants, digits and space characters."""
    counts = Counter()
    for char in line:
        if char in VOWELS:
            counts["vowels"] += 1
        elif char in ascii_letters:
            counts["consonants"] += 1
        elif char in digits:
            counts["digits"] += 1
        elif char == " ":
            counts["spaces"] += 1
    return CharacterCounts(**counts)


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same backwards."""
    return text == text[::-1]


def reverse_string(text: str) -> str:
    return text[::-1]


def word_frequencies(sentence: str) -> dict[str, int]:
    """Count whitespace-separated words, in order of first appearance."""
    return dict(Counter(sentence.split()))