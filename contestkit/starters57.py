"""Solutions to a set of short-contest problems."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate


def chef_profit(x: int, y: int, z: int) -> int:
    """Profit from ``x`` items bought at ``y`` and sold at ``z``."""
    return x * (z - y)


def parallel_processing(times: Sequence[int]) -> int:
    """Least finishing time when a prefix runs on one processor, the rest on another."""
    total = sum(times)
    return min(
        (max(prefix, abs(total - prefix)) for prefix in accumulate(times)),
        default=total,
    )


def can_transform(x: int, y: int, a: Sequence[int], b: Sequence[int]) -> bool:
    """Whether each ``b[i]`` equals ``a[i] + x`` or ``a[i] + y``."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return all(left + x == right or left + y == right for left, right in zip(a, b))


def alice_marks(n: int, m: int) -> bool:
    """Whether ``n`` marks are at least twice ``m``."""
    return n >= 2 * m


def even_splits(s: str) -> str:
    """Lexicographically smallest string reachable by the allowed moves."""
    has_zero_start = False
    has_double_one = False
    for left, right in zip(s, s[1:]):
        if left == "0":
            has_zero_start = True
        if left == "1" and right == "1":
            has_double_one = True
    if has_zero_start or (has_double_one and s and s[-1] == "0"):
        return "".join(sorted(s))
    return s


def maximum_expression(s: str) -> str:
    """Rearrange digits and signs so the expression's value is largest.

    The largest digits form the leading number; each ``+`` then takes the
    next largest digit and each ``-`` the smallest remaining ones.
    """
    pluses = s.count("+")
    minuses = s.count("-")
    digits = [-int(ch) for ch in s if ch not in "+-"]
    if len(digits) < pluses + minuses:
        raise ValueError("not enough digits for the operators")
    heapq.heapify(digits)

    def take() -> str:
        return str(-heapq.heappop(digits))

    leading = len(digits) - pluses - minuses
    parts = [take() for _ in range(leading)]
    parts.extend("+" + take() for _ in range(pluses))
    parts.extend("-" + take() for _ in range(minuses))
    return "".join(parts)


def non_negative_product(values: Iterable[int]) -> int:
    """Fewest changes needed to make the product non-negative."""
    negatives = 0
    has_zero = False
    for value in values:
        if value < 0:
            negatives += 1
        elif value == 0:
            has_zero = True
    return 0 if negatives % 2 == 0 or has_zero else 1


def sum_neq(t: int) -> int:
    """Answer for the sum-inequality counting problem."""
    return t - 1


def two_palindromes(a: int, b: int) -> bool:
    """Whether ``a`` ones and ``b`` zeros form two distinct palindromes."""
    if a == 1 or b == 1:
        return False
    if a % 2 != 0 and b % 2 != 0:
        return False
    return True