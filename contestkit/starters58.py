"""Solutions to a set of short-contest problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import product
from math import gcd, isqrt
from string import ascii_lowercase

MOD = 1_000_000_007
_EMPTY = -MOD


class _MaxTree:
    """Point-assignment, range-maximum segment tree."""

    def __init__(self, size: int) -> None:
        width = 1
        while width < size:
            width *= 2
        self._width = width
        self._seg = [_EMPTY] * (2 * width)

    def set(self, position: int, value: int) -> None:
        position += self._width
        self._seg[position] = value
        position //= 2
        while position:
            self._seg[position] = max(self._seg[2 * position], self._seg[2 * position + 1])
            position //= 2

    def query(self, low: int, high: int) -> int:
        """Maximum over positions ``low..high`` inclusive."""
        left_best = right_best = _EMPTY
        low += self._width
        high += self._width + 1
        while low < high:
            if low & 1:
                left_best = max(left_best, self._seg[low])
                low += 1
            if high & 1:
                high -= 1
                right_best = max(self._seg[high], right_best)
            low //= 2
            high //= 2
        return max(left_best, right_best)


def prefix_max_weight(values: Iterable[int]) -> int:
    """Number of elements that are strictly larger than all before them."""
    best = 0
    weight = 0
    for value in values:
        if value > best:
            best = value
            weight += 1
    return weight


def equal_prefix_max_split(perm: Sequence[int]) -> bool:
    """Whether a permutation splits into two subsequences of equal weight."""
    n = len(perm)
    if sorted(perm) != list(range(1, n + 1)):
        raise ValueError("perm must be a permutation of 1..n")
    best = 0
    is_max: list[bool] = []
    for value in perm:
        if value > best:
            best = value
            is_max.append(True)
        else:
            is_max.append(False)
    record_count = sum(is_max)
    if record_count % 2 == 0:
        return True

    without = _MaxTree(n + 1)
    with_other = _MaxTree(n + 1)
    without.set(0, 0)
    for value, record in zip(perm, is_max):
        if record:
            without.set(value, 2 + without.query(0, value))
            with_other.set(value, 2 + with_other.query(0, value))
        else:
            with_other.set(
                value, 1 + max(without.query(0, value), with_other.query(0, value))
            )
    return with_other.query(1, n) >= record_count


def equal_split_brute(perm: Sequence[int]) -> bool:
    """Exhaustive check of every split into two subsequences."""
    for choice in product((False, True), repeat=len(perm)):
        first = [value for value, taken in zip(perm, choice) if taken]
        second = [value for value, taken in zip(perm, choice) if not taken]
        if prefix_max_weight(first) == prefix_max_weight(second):
            return True
    return False


def no_palindrome_string(n: int) -> str:
    """String of length ``n`` cycling through the lowercase alphabet."""
    full, rest = divmod(max(n, 0), len(ascii_lowercase))
    return ascii_lowercase * full + ascii_lowercase[:rest]


def submex_array(n: int, k: int, x: int) -> list[int] | None:
    """Array of length ``n`` whose subarrays of length ``k`` have mex ``x``.

    Returns ``None`` when ``k < x`` and no such array exists.
    """
    if k < x:
        return None
    if x <= 0:
        return list(range(n))
    return [index % x for index in range(n)]


def watching_movies(x: int, y: int) -> int:
    """Minutes spent when ``y`` minutes of an ``x``-minute film run at double speed."""
    half = abs(y) // 2
    return x - (half if y >= 0 else -half)


def add_to_subsequence(values: Iterable[int]) -> int:
    """Fewest doubling steps needed to cover the most frequent value."""
    most = max(Counter(values).values(), default=0)
    operations = 0
    reach = 1
    while reach < most:
        operations += 1
        reach *= 2
    return operations


def break_elements(values: Sequence[int]) -> int:
    """Operations needed to make all elements odd, or 0 if all are even."""
    evens = sum(1 for value in values if value % 2 == 0)
    return 0 if evens == len(values) else evens


def _smallest_prime_factor(n: int) -> int:
    for divisor in range(2, isqrt(n) + 1):
        if n % divisor == 0:
            return divisor
    return n


def _multiplicity(n: int, factor: int) -> int:
    count = 0
    while n % factor == 0:
        n //= factor
        count += 1
    return count


def equivalent_numbers(a: int, b: int) -> bool:
    """Whether ``a`` and ``b`` are powers of a common base."""
    if a < 2 or b < 2:
        raise ValueError("numbers must be at least 2")
    factor_a = _smallest_prime_factor(a)
    factor_b = _smallest_prime_factor(b)
    if factor_a != factor_b:
        return False
    exp_a = _multiplicity(a, factor_a)
    exp_b = _multiplicity(b, factor_b)
    common = exp_a * exp_b // gcd(exp_a, exp_b)
    return pow(a, common // exp_a, MOD) == pow(b, common // exp_b, MOD)


def piles_parity(piles: Iterable[int]) -> str:
    """Winner of the piles game: ``"CHEF"`` or ``"CHEFINA"``."""
    even_xor = 0
    odd_xor = 0
    for position, pile in enumerate(piles, start=1):
        if position % 2:
            odd_xor ^= pile % 2
        else:
            even_xor ^= pile // 2
    return "CHEF" if even_xor ^ odd_xor else "CHEFINA"


def rank_pages(n: int) -> int:
    """Pages needed to list ``n`` entries, 25 to a page."""
    return -(-n // 25)


def reach_target(x: int, y: int) -> int:
    """Distance still to cover from ``y`` to target ``x``."""
    return x - y


def remove_bad_elements(values: Iterable[int]) -> int:
    """Fewest removals leaving all elements equal."""
    counts = Counter(values)
    return sum(counts.values()) - max(counts.values(), default=0)