"""Plane geometry checks."""

ORIGIN = 0


def quadrant(x: float, y: float) -> int:
    """Quadrant 1 to 4 of the point, or 0 when it lies on the y axis.

    Points on the x axis count as quadrant 4 (right) or 3 (left).
    """
    if x > 0:
        return 1 if y > 0 else 4
    if x < 0:
        return 2 if y > 0 else 3
    return ORIGIN


def can_form_triangle(a: float, b: float, c: float) -> bool:
    """True when the longest side is shorter than the other two together."""
    shortest, middle, longest = sorted((a, b, c))
    return longest < shortest + middle