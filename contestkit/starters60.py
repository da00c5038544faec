"""Solutions to a set of short-contest problems."""

from __future__ import annotations

from collections.abc import Sequence


def distinct_numbers(values: Sequence[int]) -> int:
    """Answer for mirrored pair differences, or -1 when impossible.

    Each value must not exceed its mirror across the middle, and the
    differences from the outside in must not increase; the answer is the
    outermost difference.
    """
    n = len(values)
    if n < 2:
        raise ValueError("at least two values are needed")
    differences: list[int] = []
    for i in range(n // 2):
        left, right = values[i], values[n - i - 1]
        if right < left:
            return -1
        differences.append(right - left)
    if any(inner > outer for outer, inner in zip(differences, differences[1:])):
        return -1
    return differences[0]


def palindrome_flipping(s: str) -> bool:
    """Whether the binary string can be made a palindrome by the flips."""
    zeros = s.count("0")
    others = len(s) - zeros
    return zeros % 2 == 0 or others % 2 == 0


def yet_another_palindrome(k: int, values: Sequence[int]) -> int:
    """Best total obtainable by adding up to ``k`` values from ``1..2n``."""
    limit = 2 * len(values)
    if any(value < 0 or value > limit for value in values):
        raise ValueError("values must lie between 0 and twice their count")
    present = set(values)
    missing = [i for i in range(1, limit + 1) if i not in present]

    highest = max(values, default=0)
    first = 0
    for i in missing[:max(k, 0)]:
        highest = max(highest, i)
        first += highest - i

    second = sum(limit - i for i in missing[:max(k - 1, 0)])
    return max(first, second)