"""Elementary number theory and integer arithmetic."""

import math
from itertools import repeat

MOD = 1_000_000_007
MAX_SIEVE_LIMIT = 2_000_000


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return a * b // gcd(a, b)


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is defined for non-negative integers only")
    return math.prod(range(2, n + 1))


def power(base: int, exponent: int) -> int:
    """Multiply ``base`` by itself ``exponent`` times; 1 when exponent <= 0."""
    return math.prod(repeat(base, max(exponent, 0)))


def mod_power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` modulo 1_000_000_007."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, MOD)


def is_prime(n: int) -> bool:
    """Trial division by every integer up to the square root of ``n``."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def count_primes(limit: int) -> int:
    """Count primes less than or equal to ``limit`` with a sieve."""
    if limit > MAX_SIEVE_LIMIT:
        raise ValueError(f"limit must not exceed {MAX_SIEVE_LIMIT}")
    if limit < 2:
        return 0
    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return sum(sieve)


def _digit_square_sum(n: int) -> int:
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Reduce by digit-square sums until the value is at most 10; happy if 1."""
    total = _digit_square_sum(n)
    while total > 10:
        total = _digit_square_sum(total)
    return total == 1


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_even(n: int) -> bool:
    return n % 2 == 0


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def century(year: int) -> int:
    """Return the century a positive year belongs to."""
    if year <= 0:
        raise ValueError("year must be positive")
    return (year + 99) // 100


def clock_add(a: int, b: int) -> int:
    """Add two numbers on a 12-hour clock face."""
    return (a + b) % 12


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_upto(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1."""
    sequence = []
    current, following = 0, 1
    for _ in range(n):
        sequence.append(current)
        current, following = following, current + following
    return sequence


def _check_arity(args: tuple[int, ...]) -> None:
    if len(args) not in (2, 3):
        raise TypeError(f"expected 2 or 3 numbers, got {len(args)}")


def calculate_sum(*args: int) -> int:
    """Sum of two or three integers."""
    _check_arity(args)
    return sum(args)


def calculate_average(*args: int) -> int:
    """Integer average of two or three integers, truncated toward zero."""
    _check_arity(args)
    total = sum(args)
    quotient = abs(total) // len(args)
    return quotient if total >= 0 else -quotient