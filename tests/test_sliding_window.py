import random

import pytest

from contestlib.sliding_window import max_sliding_window, min_sliding_window

SAMPLE = [1, 3, -1, -3, 5, 3, 6, 7]


def test_sample_maximum():
    assert max_sliding_window(SAMPLE, 3) == [3, 3, 5, 5, 6, 7]


def test_sample_minimum():
    assert min_sliding_window(SAMPLE, 3) == [-1, -3, -3, -3, 3, 3]


def test_width_one_is_identity():
    assert max_sliding_window(SAMPLE, 1) == SAMPLE
    assert min_sliding_window(SAMPLE, 1) == SAMPLE


def test_full_width():
    assert max_sliding_window(SAMPLE, len(SAMPLE)) == [max(SAMPLE)]
    assert min_sliding_window(SAMPLE, len(SAMPLE)) == [min(SAMPLE)]


@pytest.mark.parametrize("seed", range(20))
def test_random_against_window_scan(seed):
    rng = random.Random(seed)
    values = [rng.randint(-5, 5) for _ in range(rng.randint(1, 30))]
    width = rng.randint(1, len(values))
    windows = [values[i:i + width] for i in range(len(values) - width + 1)]
    assert max_sliding_window(values, width) == [max(w) for w in windows]
    assert min_sliding_window(values, width) == [min(w) for w in windows]


@pytest.mark.parametrize("width", [0, -1, 9])
def test_bad_width(width):
    with pytest.raises(ValueError):
        max_sliding_window(SAMPLE, width)
    with pytest.raises(ValueError):
        min_sliding_window(SAMPLE, width)


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        max_sliding_window([], 1)