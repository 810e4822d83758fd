import pytest

from contestlib.knuth import optimal_cut_cost


def test_no_cuts_costs_nothing():
    assert optimal_cut_cost(50, []) == 0


def test_single_cut_costs_length():
    assert optimal_cut_cost(37, [12]) == 37


def test_order_of_cuts_does_not_matter():
    assert optimal_cut_cost(10, [8, 4, 7, 5]) == optimal_cut_cost(10, [4, 5, 7, 8])


@pytest.mark.parametrize("factor", [2, 3, 10])
def test_scaling(factor):
    base = optimal_cut_cost(20, [3, 9, 11, 17])
    scaled = optimal_cut_cost(20 * factor, [3 * factor, 9 * factor, 11 * factor, 17 * factor])
    assert scaled == base * factor


def test_bounds_and_monotonic():
    length, cuts = 30, [2, 7, 13, 21, 26]
    cost = optimal_cut_cost(length, cuts)
    assert length <= cost <= length * len(cuts)
    assert optimal_cut_cost(length, cuts[:-1]) <= cost