"""Dynamic programming: LCS, 0/1 knapsack and subset sum."""

from collections.abc import Sequence


def longest_common_subsequence(s1: str, s2: str) -> str:
    """Return a longest common subsequence of two strings.

    On ties the table walk prefers dropping a character of ``s2``.
    """
    rows, cols = len(s1), len(s2)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, a in enumerate(s1, start=1):
        for j, b in enumerate(s2, start=1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i][j - 1], table[i - 1][j])

    result = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            result.append(s1[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] >= table[i - 1][j]:
            j -= 1
        else:
            i -= 1
    return "".join(reversed(result))


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Best total value of items fitting in ``capacity``, each used at most once."""
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    if capacity <= 0:
        return 0
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def subset_sum(values: Sequence[int], target: int) -> bool:
    """True when some subset of the non-negative ``values`` sums to ``target``."""
    if any(value < 0 for value in values):
        raise ValueError("values must be non-negative")
    if target < 0:
        return False
    reachable = {0}
    for value in values:
        reachable |= {total + value for total in reachable if total + value <= target}
    return target in reachable