"""Bracket-repetition decoding and maximum subarray sums."""

from __future__ import annotations

from collections.abc import Sequence


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def decode(text: str) -> str:
    """Expand ``k[...]`` groups in ``text``.

    A bracket with no number in front of it repeats its contents once.
    A closing bracket with no pending count repeats its contents zero times.
    Unmatched opening brackets are kept in the output.
    """
    counts: list[int] = []
    chars: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if _is_digit(ch):
            end = i
            while end < length and _is_digit(text[end]):
                end += 1
            counts.append(int(text[i:end]))
            i = end
            continue
        if ch == "]":
            count = counts.pop() if counts else 0
            segment: list[str] = []
            while chars and chars[-1] != "[":
                segment.append(chars.pop())
            if chars:
                chars.pop()
            segment.reverse()
            chars.extend(segment * count)
        elif ch == "[":
            if i == 0 or not _is_digit(text[i - 1]):
                counts.append(1)
            chars.append(ch)
        else:
            chars.append(ch)
        i += 1
    return "".join(chars)


def max_subarray_sum_naive(values: Sequence[int]) -> int:
    """Largest sum of a contiguous run, checking every run; never below 0."""
    best = 0
    for start in range(len(values)):
        running = 0
        for value in values[start:]:
            running += value
            best = max(best, running)
    return best


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest contiguous sum in one pass, seeded with the first element."""
    if not values:
        raise ValueError("values must not be empty")
    best = 0
    ending_here = values[0]
    for value in values:
        ending_here = max(ending_here + value, value)
        best = max(best, ending_here)
    return best