import pytest

from contestlib.histogram import largest_rectangle, nearest_smaller_bounds

SAMPLES = [
    [2, 1, 5, 6, 2, 3],
    [3, 3, 3],
    [1, 2, 3, 4, 5],
    [5, 4, 3, 2, 1],
    [4, 0, 4, 2, 7, 7, 1],
    [9],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_bounds_are_maximal_spans(values):
    bounds = nearest_smaller_bounds(values)
    assert len(bounds) == len(values)
    for i, (lo, hi) in enumerate(bounds):
        assert 0 <= lo <= i <= hi < len(values)
        assert all(values[j] >= values[i] for j in range(lo, hi + 1))
        if lo > 0:
            assert values[lo - 1] < values[i]
        if hi < len(values) - 1:
            assert values[hi + 1] < values[i]


def test_bounds_pinned():
    assert nearest_smaller_bounds([2, 1, 2]) == [(0, 0), (0, 2), (2, 2)]


def test_largest_rectangle_classic():
    assert largest_rectangle([2, 1, 5, 6, 2, 3]) == 10


def test_empty_histogram():
    assert nearest_smaller_bounds([]) == []
    assert largest_rectangle([]) == 0


@pytest.mark.parametrize("values", SAMPLES)
def test_largest_rectangle_lower_bounds(values):
    best = largest_rectangle(values)
    assert best >= max(values)
    assert best >= min(values) * len(values)


def test_equal_bars_span_everything():
    values = [3, 3, 3]
    assert largest_rectangle(values) == sum(values)