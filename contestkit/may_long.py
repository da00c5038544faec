"""Solutions to a set of long-contest problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

MOD = 1_000_000_007

_factorials: list[int] = [1]


def _factorial(n: int) -> int:
    while len(_factorials) <= n:
        _factorials.append(_factorials[-1] * len(_factorials) % MOD)
    return _factorials[n]


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def alternating_diameter(black: int, white: int) -> tuple[str, list[tuple[int, int]]] | None:
    """Colour a star tree so that its alternating diameter is maximal.

    Returns the colours of nodes 1..n and the edge list, or ``None`` when
    no tree exists.
    """
    if black + white == 1:
        return ("B" if black == 1 else "W"), []
    if black == 0 or white == 0:
        return None
    if black + white == 2:
        return "BW", [(1, 2)]
    if black > white:
        colours = ["W", "B", "B"]
        black -= 2
        white -= 1
    else:
        colours = ["B", "W", "W"]
        white -= 2
        black -= 1
    colours += ["B"] * black + ["W"] * white
    edges = [(1, node) for node in range(2, len(colours) + 1)]
    return "".join(colours), edges


def queen_attack_count(n: int, x: int, y: int) -> int:
    """Number of cells a queen at (x, y) attacks on an n by n board."""
    up_left = min(x - 1, n - y)
    up_right = min(n - y, n - x)
    down_right = min(n - x, y - 1)
    down_left = min(x - 1, y - 1)
    return 2 * (n - 1) + up_left + up_right + down_right + down_left


def football_cup(x: int, y: int) -> bool:
    """Whether a scoreline is a draw with goals scored by both sides."""
    return x > 0 and y > 0 and x == y


def ncr_mod(n: int, r: int) -> int:
    """Binomial coefficient modulo 1e9+7; zero outside the valid range."""
    if n < r or n < 0 or r < 0:
        return 0
    denominator = _factorial(r) * _factorial(n - r) % MOD
    return _factorial(n) * pow(denominator, MOD - 2, MOD) % MOD


def _stone_ways(n: int, x: int) -> int:
    ones = n + x
    if ones % 2 == 1:
        return 0
    ones //= 2
    return ncr_mod(n, min(ones, n - ones))


def magical_stone(n: int, low: int, high: int) -> list[int]:
    """Ways to end at each position in ``low..high`` after ``n`` unit steps."""
    return [_stone_ways(n, x) for x in range(low, high + 1)]


def miami_gp(x: int, y: int) -> bool:
    """Whether time ``y`` is within 107% of the best time ``x``."""
    return y * 100 <= 107 * x


def pushpa_max_height(heights: Iterable[int]) -> int:
    """Highest reachable height when each equal-height pile lifts by one."""
    counts = Counter(heights)
    return max((h + c - 1 for h, c in counts.items()), default=0) if counts else 0


def sugarcane_profit(n: int) -> int:
    """Profit from selling ``n`` sugarcanes at 50 each after expenses."""
    revenue = n * 50
    return (
        revenue
        - _div_trunc(revenue * 20, 100)
        - _div_trunc(revenue * 20, 100)
        - _div_trunc(revenue * 30, 100)
    )