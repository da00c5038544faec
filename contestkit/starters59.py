"""Solutions to a set of short-contest problems."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import accumulate

_VOWELS = frozenset("aeiou")


def is_audible(x: int) -> bool:
    """Whether a frequency lies in the audible range."""
    return 67 <= x <= 45000


def conf_cat(values: Sequence[int]) -> tuple[list[int], list[int]] | None:
    """Split at the first element larger than everything before it.

    Returns the two parts, or ``None`` when no such element exists.
    """
    if not values:
        raise ValueError("values must not be empty")
    running_max = values[0]
    for index, value in enumerate(values[1:], start=1):
        if value > running_max:
            return list(values[:index]), list(values[index:])
        running_max = max(running_max, value)
    return None


def is_happy(s: str) -> bool:
    """Whether ``s`` has more than two vowels in a row."""
    streak = 0
    for ch in s:
        streak = streak + 1 if ch in _VOWELS else 0
        if streak > 2:
            return True
    return False


def max_subarray_after_insert(a: Sequence[int], b: Iterable[int]) -> int:
    """Largest end-anchored sum of ``a`` after inserting the positive values of ``b``."""
    if not a:
        raise ValueError("a must not be empty")
    best_prefix = max(accumulate(a))
    best_suffix = max(accumulate(reversed(a)))
    return max(best_prefix, best_suffix) + sum(value for value in b if value > 0)


def sus_string(s: str) -> str:
    """Result of the alternating game on a binary string.

    Alice takes from the left, putting ``0`` in front and ``1`` at the back;
    Bob takes from the right, putting ``0`` at the back and ``1`` in front.
    """
    remaining = deque(s)
    built: deque[str] = deque()
    alice = True
    while remaining:
        if alice:
            ch = remaining.popleft()
            if ch == "0":
                built.appendleft("0")
            else:
                built.append("1")
        else:
            ch = remaining.pop()
            if ch == "0":
                built.append("0")
            else:
                built.appendleft("1")
        alice = not alice
    return "".join(built)


def speciality(x: int, y: int, z: int) -> str:
    """Role with the highest score; earlier roles win ties."""
    roles = ("Setter", "Tester", "Editorialist")
    scores = (x, y, z)
    best = max(range(3), key=lambda index: (scores[index], -index))
    return roles[best]