import math

import pytest

from contestkit.may_long import (
    MOD,
    alternating_diameter,
    football_cup,
    magical_stone,
    miami_gp,
    ncr_mod,
    pushpa_max_height,
    queen_attack_count,
    sugarcane_profit,
)


def test_alternating_single_nodes():
    assert alternating_diameter(1, 0) == ("B", [])
    assert alternating_diameter(0, 1) == ("W", [])


@pytest.mark.parametrize("black, white", [(0, 5), (3, 0), (0, 0)])
def test_alternating_impossible(black, white):
    assert alternating_diameter(black, white) is None


def test_alternating_pair():
    assert alternating_diameter(1, 1) == ("BW", [(1, 2)])


@pytest.mark.parametrize("black, white", [(2, 1), (1, 2), (5, 3), (3, 5), (4, 4), (7, 1)])
def test_alternating_star_shape(black, white):
    colours, edges = alternating_diameter(black, white)
    n = black + white
    assert len(colours) == n
    assert colours.count("B") == black
    assert colours.count("W") == white
    assert edges == [(1, node) for node in range(2, n + 1)]
    assert colours[1] == colours[2] != colours[0]


@pytest.mark.parametrize("n", [1, 3])
def test_queen_center_sees_everything_on_small_board(n):
    centre = (n + 1) // 2
    assert queen_attack_count(n, centre, centre) == n * n - 1


@pytest.mark.parametrize("n, x, y", [(8, 1, 1), (8, 3, 5), (5, 2, 4)])
def test_queen_symmetry(n, x, y):
    value = queen_attack_count(n, x, y)
    assert value == queen_attack_count(n, y, x)
    assert value == queen_attack_count(n, n + 1 - x, n + 1 - y)


def test_football_cup():
    assert football_cup(2, 2) is True
    assert football_cup(0, 0) is False
    assert football_cup(1, 2) is False


@pytest.mark.parametrize("n, r", [(0, 0), (5, 2), (10, 10), (30, 12), (100, 50)])
def test_ncr_mod_matches_comb(n, r):
    assert ncr_mod(n, r) == math.comb(n, r) % MOD


@pytest.mark.parametrize("n, r", [(3, 4), (-1, 0), (5, -1)])
def test_ncr_mod_out_of_range(n, r):
    assert ncr_mod(n, r) == 0


@pytest.mark.parametrize("n", [1, 4, 7, 10])
def test_magical_stone_sums_to_power_of_two(n):
    assert sum(magical_stone(n, -n, n)) == 2**n


def test_magical_stone_symmetric_and_parity():
    values = magical_stone(6, -8, 8)
    assert values == values[::-1]
    assert all(v == 0 for v in values[1::2])
    assert values[0] == 0


def test_magical_stone_range_length():
    assert len(magical_stone(4, -2, 3)) == 6


def test_miami_gp_boundary():
    assert miami_gp(100, 107) is True
    assert miami_gp(100, 108) is False


def test_pushpa_distinct_heights():
    assert pushpa_max_height([3, 9, 4]) == 9


def test_pushpa_grouped():
    assert pushpa_max_height([2, 2, 3]) == 3


def test_pushpa_empty():
    assert pushpa_max_height([]) == 0


def test_sugarcane_profit():
    assert sugarcane_profit(1) == 15
    assert sugarcane_profit(10) == 10 * sugarcane_profit(1)