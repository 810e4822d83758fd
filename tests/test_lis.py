import pytest

from contestlib.lis import longest_increasing_subsequence


def _is_subsequence(seq, values):
    it = iter(values)
    return all(x in it for x in seq)


def test_empty():
    result = longest_increasing_subsequence([])
    assert result.length == 0
    assert result.sequence == []
    assert result.ends == []


def test_sorted_input_is_its_own_lis():
    values = [1, 4, 6, 9, 12]
    result = longest_increasing_subsequence(values)
    assert result.length == len(values)
    assert result.sequence == values


def test_decreasing_input_keeps_last_element():
    values = [9, 7, 5, 3]
    result = longest_increasing_subsequence(values)
    assert result.length == 1
    assert result.sequence == [values[-1]]


def test_duplicates_do_not_extend():
    result = longest_increasing_subsequence([2, 2, 2])
    assert result.length == 1


def test_small_known_case():
    assert longest_increasing_subsequence([3, 1, 2]).sequence == [1, 2]


@pytest.mark.parametrize(
    "values",
    [
        [10, 9, 2, 5, 3, 7, 101, 18],
        [0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15],
        [5, 5, 6, 6, 7, 1, 2, 3],
        [-3, -1, -2, 0, -5, 4],
        list("hello world"),
    ],
)
def test_invariants(values):
    result = longest_increasing_subsequence(values)
    seq = result.sequence
    assert len(seq) == result.length
    assert all(a < b for a, b in zip(seq, seq[1:]))
    assert _is_subsequence(seq, values)
    assert len(result.ends) == len(values)
    assert max(result.ends) == result.length
    assert min(result.ends) >= 1