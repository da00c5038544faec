"""Solutions to a set of short-contest problems."""

from __future__ import annotations


def sub_permutation(n: int, k: int) -> list[int] | None:
    """Permutation of 1..n with exactly ``k`` prefixes that are permutations.

    Returns ``None`` when no such permutation exists.
    """
    if n == 1 and k == 1:
        return [1]
    if k < 2 or k > n:
        return None
    return list(range(1, k)) + list(range(n, k - 1, -1))


def broken_phone(x: int, y: int) -> str:
    """Cheaper choice between repairing (cost ``x``) and buying (cost ``y``)."""
    if x < y:
        return "repair"
    if x > y:
        return "new phone"
    return "any"


def has_fever(x: int) -> bool:
    """Whether a temperature in Fahrenheit counts as fever."""
    return x > 98