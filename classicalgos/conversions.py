"""Conversions between binary, octal and decimal notations."""


def _binary_digits(binary: str | int) -> str:
    text = str(binary)
    if not text or set(text) - {"0", "1"}:
        raise ValueError(f"not a binary number: {binary!r}")
    return text


def binary_to_decimal(binary: str | int) -> int:
    """Value of a string (or int) made of the digits 0 and 1."""
    return int(_binary_digits(binary), 2)


def binary_to_octal(binary: str | int) -> str:
    """Convert binary digits to octal digits, three bits at a time."""
    digits = _binary_digits(binary)
    digits = "0" * (-len(digits) % 3) + digits
    groups = (digits[start : start + 3] for start in range(0, len(digits), 3))
    octal = "".join(str(int(group, 2)) for group in groups)
    return octal.lstrip("0") or "0"


def _to_base(n: int, base: int) -> str:
    if n < 0:
        raise ValueError("number must be non-negative")
    if n == 0:
        return "0"
    digits = []
    while n > 0:
        n, digit = divmod(n, base)
        digits.append(str(digit))
    return "".join(reversed(digits))


def to_binary(n: int) -> str:
    """Binary digits of a non-negative integer."""
    return _to_base(n, 2)


def to_octal(n: int) -> str:
    """Octal digits of a non-negative integer."""
    return _to_base(n, 8)