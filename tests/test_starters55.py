import pytest

from contestkit.starters55 import broken_phone, has_fever, sub_permutation


def _permutation_prefixes(perm):
    return sum(1 for i in range(1, len(perm) + 1) if set(perm[:i]) == set(range(1, i + 1)))


def test_sub_permutation_single():
    assert sub_permutation(1, 1) == [1]


@pytest.mark.parametrize("n, k", [(5, 1), (3, 4), (2, 0)])
def test_sub_permutation_impossible(n, k):
    assert sub_permutation(n, k) is None


@pytest.mark.parametrize("n, k", [(2, 2), (5, 2), (5, 3), (6, 6), (10, 4)])
def test_sub_permutation_valid(n, k):
    perm = sub_permutation(n, k)
    assert sorted(perm) == list(range(1, n + 1))
    assert _permutation_prefixes(perm) == k


def test_broken_phone():
    assert broken_phone(1, 2) == "repair"
    assert broken_phone(3, 2) == "new phone"
    assert broken_phone(2, 2) == "any"


def test_has_fever():
    assert has_fever(99) is True
    assert has_fever(98) is False