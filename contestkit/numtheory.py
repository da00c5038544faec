"""Integer helpers: gcd, modular arithmetic, combinatorics and factoring."""

from __future__ import annotations

MOD = 1_000_000_007

_factorials: list[int] = [1, 1]
_inverse_factorials: list[int] = [1, 1]


def _div_trunc(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _mod_trunc(a: int, b: int) -> int:
    return a - b * _div_trunc(a, b)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by repeated remainders."""
    while b:
        a, b = b, _mod_trunc(a, b)
    return a


def gcd_extended(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g`` and ``g`` the gcd."""
    x, y = 1, 0
    x1, y1 = 0, 1
    a1, b1 = a, b
    while b1:
        q = _div_trunc(a1, b1)
        x, x1 = x1, x - q * x1
        y, y1 = y1, y - q * y1
        a1, b1 = b1, a1 - q * b1
    return a1, x, y


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return _div_trunc(a * b, gcd(a, b))


def modpow(x: int, n: int, m: int = MOD) -> int:
    """``x`` to the power ``n`` modulo ``m``; ``0**0`` gives 0."""
    if n < 0:
        raise ValueError("exponent must not be negative")
    if x == 0 and n == 0:
        return 0
    result = 1
    while n:
        if n & 1:
            result = _mod_trunc(_mod_trunc(result, m) * _mod_trunc(x, m), m)
        x = _mod_trunc(_mod_trunc(x, m) * _mod_trunc(x, m), m)
        n >>= 1
    return result


def modinv(x: int, m: int = MOD) -> int:
    """Inverse of ``x`` modulo a prime ``m``."""
    return modpow(x, m - 2, m)


def _extend_tables(n: int) -> None:
    while len(_factorials) <= n:
        value = _factorials[-1] * len(_factorials) % MOD
        _factorials.append(value)
        _inverse_factorials.append(modinv(value))


def ncr(n: int, r: int) -> int:
    """Number of ``r``-combinations of ``n`` items modulo 1e9+7."""
    if n < r:
        return 0
    if r < 0:
        raise ValueError("r must not be negative")
    _extend_tables(n)
    return _factorials[n] * _inverse_factorials[r] % MOD * _inverse_factorials[n - r] % MOD


def npr(n: int, r: int) -> int:
    """Number of ``r``-permutations of ``n`` items modulo 1e9+7."""
    if n < r:
        return 0
    if r < 0:
        raise ValueError("r must not be negative")
    _extend_tables(n)
    return _factorials[n] * _inverse_factorials[n - r] % MOD


def divisors(n: int) -> list[int]:
    """Divisors of ``n``, each small divisor followed by its cofactor."""
    result: list[int] = []
    i = 1
    while i * i <= n:
        if n % i == 0:
            result.append(i)
            if n // i != i:
                result.append(n // i)
        i += 1
    return result


def prime_factors(n: int) -> list[int]:
    """Prime factors with multiplicity, by trial division.

    Division stops once the square of the trial divisor exceeds what is
    left, and a leftover prime above that bound is not included.
    """
    result: list[int] = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            n //= i
            result.append(i)
        i += 1
    return result


def sieve(n: int) -> list[int]:
    """All primes up to and including ``n``."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            composite[i * i::i] = bytes(len(range(i * i, n + 1, i)))
            for j in range(i * i, n + 1, i):
                composite[j] = 1
    return primes


def invert(s: str) -> str:
    """Swap ``0`` and ``1`` throughout a binary string."""
    return "".join(chr(ord(ch) ^ 1) for ch in s)