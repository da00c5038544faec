"""Solutions to a set of short-contest problems."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from functools import lru_cache
from math import gcd, isqrt


def compressed_length(s: str) -> int:
    """Length left after merging every run of equal adjacent characters."""
    return len(s) - sum(1 for left, right in zip(s, s[1:]) if left == right)


def equidistant_points(d: int) -> list[tuple[int, int]] | None:
    """Four lattice points, each pair at Manhattan distance ``d``.

    Returns ``None`` when ``d`` is odd and no such points exist.
    """
    if d % 2 != 0:
        return None
    half = d // 2
    return [(0, half), (0, -half), (-half, 0), (half, 0)]


def is_good_program(n: int) -> bool:
    """Whether a program of ``n`` lines counts as good."""
    return n % 4 == 0


def lock_draw(a: int, b: int, c: int) -> bool:
    """Whether one of the three numbers is the sum of the other two."""
    low, mid, high = sorted((a, b, c))
    return low + mid == high or low == mid + high


def maximize_colours(red: int, green: int, blue: int) -> int:
    """Most distinct colours obtainable from single drops and mixed pairs."""
    amounts = sorted((red, green, blue), reverse=True)
    if any(amount < 0 for amount in amounts):
        raise ValueError("amounts must not be negative")
    result = 0
    for index, amount in enumerate(amounts):
        if amount:
            result += 1
            amounts[index] -= 1
    for first, second in ((0, 1), (0, 2), (1, 2)):
        if amounts[first] and amounts[second]:
            result += 1
            amounts[first] -= 1
            amounts[second] -= 1
    return result


@lru_cache(maxsize=None)
def _divisors(n: int) -> tuple[int, ...]:
    small = [d for d in range(1, isqrt(n) + 1) if n % d == 0]
    large = [n // d for d in reversed(small) if d * d != n]
    return tuple(small + large)


@lru_cache(maxsize=None)
def _prime_factor_count(n: int) -> int:
    count = 0
    factor = 2
    while factor * factor <= n:
        while n % factor == 0:
            n //= factor
            count += 1
        factor += 1
    return count + (1 if n > 1 else 0)


def min_division_operations(values: Iterable[int]) -> int:
    """Fewest divisions by a prime that make the sequence non-decreasing."""
    previous: tuple[int, ...] = (1,)
    costs: list[int] = [0]
    best = 0
    for value in values:
        if value < 1:
            raise ValueError("values must be positive")
        current = _divisors(value)
        new_costs: list[int] = []
        pointer = 0
        lowest = float("inf")
        for divisor in current:
            while pointer < len(previous) and previous[pointer] <= divisor:
                lowest = min(lowest, costs[pointer])
                pointer += 1
            new_costs.append(int(lowest) + _prime_factor_count(value // divisor))
        previous, costs = current, new_costs
        best = min(new_costs)
    return best


def _min_triangle_steps(k: int, step: int) -> int:
    low = 0
    high = isqrt(max(k, 0) // step * 2 + 1) + 2
    while low + 1 != high:
        mid = (low + high) // 2
        if mid * (mid + 1) // 2 * step >= k:
            high = mid
        else:
            low = mid
    return high


def encode_queries(
    values: Sequence[int],
    edges: Iterable[tuple[int, int]],
    queries: Sequence[tuple[int, int, int]],
) -> list[int]:
    """Answer ``(node, t, k)`` queries on a tree rooted at node 1.

    A node's key is its value plus its neighbours' values. For each query
    the largest key threshold is found such that at least ``t`` nodes on the
    path from the root to ``node`` reach it; the answer is the least ``m``
    with ``m*(m+1)/2 * threshold >= k``, or -1 when no threshold works.
    """
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    n = len(values)
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    keys = [0] + [
        values[node - 1] + sum(values[other - 1] for other in adjacency[node])
        for node in range(1, n + 1)
    ]
    thresholds = sorted({key for key in keys[1:] if key}, reverse=True)

    parent = [0] * (n + 1)
    order: list[int] = []
    if n:
        seen = {1}
        pending = deque([1])
        while pending:
            node = pending.popleft()
            order.append(node)
            for other in adjacency[node]:
                if other not in seen:
                    seen.add(other)
                    parent[other] = node
                    pending.append(other)

    by_node: dict[int, list[tuple[int, int, int]]] = defaultdict(list)
    for index, (node, needed, k) in enumerate(queries):
        by_node[node].append((needed, k, index))

    answers = [-1] * len(queries)
    enough = [False] * (n + 1)
    total = [0] * (n + 1)
    for threshold in thresholds:
        for node in range(1, n + 1):
            if keys[node] >= threshold:
                enough[node] = True
        for node in order:
            total[node] = total[parent[node]] + enough[node]
        for node in range(1, n + 1):
            for needed, k, index in by_node.get(node, ()):
                if answers[index] == -1 and total[node] >= needed:
                    answers[index] = _min_triangle_steps(k, threshold)
    return answers


def max_total_distance(m: int, values: Iterable[int]) -> int:
    """Sum over values of the farther distance to either end of ``1..m``."""
    return sum(max(abs(m - value), abs(value - 1)) for value in values)


def can_split_gcd(k: int, values: Sequence[int]) -> bool:
    """Whether ``k`` consecutive pieces each reach the gcd of the whole."""
    overall = 0
    for value in values:
        overall = gcd(overall, value)
    running = 0
    count = 0
    for value in values:
        running = gcd(running, value)
        if running == overall:
            count += 1
            running = 0
        if count == k:
            break
    return count == k


def subsequence_operations(s: str) -> tuple[int, list[tuple[int, int, int]]]:
    """Answer and operation list for reducing a binary string.

    Each operation ``(l, r, c)`` replaces positions ``l..r`` (1-based) with
    the single character ``c``. When both characters occur the answer is 1
    and the operations end by replacing the whole string with ``0``;
    otherwise the answer is the length and no operation is needed.
    """
    if set(s) - {"0", "1"}:
        raise ValueError("string must contain only '0' and '1'")
    zeros = s.count("0")
    ones = len(s) - zeros
    if not (zeros and ones):
        return len(s), []
    operations: list[tuple[int, int, int]] = []
    current = s
    while zeros != ones:
        position = next(
            index
            for index, (left, right) in enumerate(zip(current, current[1:]))
            if left != right
        )
        fill = 1 if zeros > ones else 0
        operations.append((position + 1, position + 2, fill))
        current = current[:position] + str(fill) + current[position + 2:]
        if fill:
            ones += 1
        else:
            zeros += 1
    operations.append((1, len(current), 0))
    return 1, operations