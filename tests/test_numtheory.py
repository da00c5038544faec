import math

import pytest

from contestkit.numtheory import (
    MOD,
    divisors,
    gcd,
    gcd_extended,
    invert,
    lcm,
    modinv,
    modpow,
    ncr,
    npr,
    prime_factors,
    sieve,
)

PAIRS = [(12, 18), (17, 5), (0, 9), (9, 0), (100, 75), (1, 1), (270, 192)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_extended_bezout(a, b):
    g, x, y = gcd_extended(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,b", [(4, 6), (7, 3), (12, 18), (5, 5)])
def test_lcm_properties(a, b):
    value = lcm(a, b)
    assert value % a == 0 and value % b == 0
    assert value * gcd(a, b) == a * b


def test_lcm_zero_zero_raises():
    with pytest.raises(ZeroDivisionError):
        lcm(0, 0)


@pytest.mark.parametrize("x,n,m", [(2, 10, 1000), (3, 200, MOD), (123456, 789, 97), (5, 1, 7)])
def test_modpow_matches_pow(x, n, m):
    assert modpow(x, n, m) == pow(x, n, m)


def test_modpow_zero_to_zero():
    assert modpow(0, 0) == 0


def test_modpow_negative_exponent_raises():
    with pytest.raises(ValueError):
        modpow(2, -1)


@pytest.mark.parametrize("x", [2, 3, 10, 999_999])
def test_modinv_is_inverse(x):
    assert x * modinv(x) % MOD == 1


@pytest.mark.parametrize("n,r", [(5, 2), (10, 0), (10, 10), (50, 17), (1000, 500)])
def test_ncr_matches_comb(n, r):
    assert ncr(n, r) == math.comb(n, r) % MOD


@pytest.mark.parametrize("n,r", [(5, 2), (10, 10), (30, 7)])
def test_npr_matches_perm(n, r):
    assert npr(n, r) == math.perm(n, r) % MOD


def test_ncr_and_npr_zero_when_r_exceeds_n():
    assert ncr(3, 5) == 0
    assert npr(3, 5) == 0


@pytest.mark.parametrize("n", [1, 12, 36, 97, 360])
def test_divisors_complete_without_duplicates(n):
    found = divisors(n)
    assert len(found) == len(set(found))
    assert sorted(found) == [d for d in range(1, n + 1) if n % d == 0]


def test_divisors_pairs_cofactors():
    found = divisors(36)
    assert found[0] == 1 and found[1] == 36


def test_prime_factors_drops_leftover():
    assert prime_factors(12) == [2, 2]


@pytest.mark.parametrize("n", [180, 1001, 97, 64])
def test_prime_factors_divide_n(n):
    assert n % math.prod(prime_factors(n)) == 0


@pytest.mark.parametrize("n", [0, 1, 2, 30, 100])
def test_sieve_matches_trial_division(n):
    expected = [p for p in range(2, n + 1) if all(p % d for d in range(2, math.isqrt(p) + 1))]
    assert sieve(n) == expected


def test_invert_value_and_round_trip():
    assert invert("0110") == "1001"
    assert invert(invert("000111010")) == "000111010"