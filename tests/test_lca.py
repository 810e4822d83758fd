import pytest

from contestlib.lca import RootedTree

EDGES = [(0, 1), (0, 2), (2, 3), (2, 4), (4, 5), (5, 6), (6, 7), (7, 8), (8, 9), (9, 10)]


@pytest.fixture
def tree():
    return RootedTree(11, EDGES)


def test_lca_values(tree):
    assert tree.lca(3, 4) == 2
    assert tree.lca(1, 10) == 0
    assert tree.lca(10, 5) == 5
    assert tree.lca(7, 7) == 7


def test_lca_symmetric(tree):
    for a in range(11):
        for b in range(11):
            assert tree.lca(a, b) == tree.lca(b, a)


def test_root_subtree_is_whole_tree(tree):
    assert tree.subtree_size(0) == 11
    assert tree.subtree_size(10) == 1


def test_subtree_sizes_sum_over_children(tree):
    assert tree.subtree_size(0) == 1 + tree.subtree_size(1) + tree.subtree_size(2)
    assert tree.subtree_size(2) == 1 + tree.subtree_size(3) + tree.subtree_size(4)


def test_kth_ancestor(tree):
    assert tree.kth_ancestor(1, 10) == 9
    assert tree.kth_ancestor(8, 10) == 0
    assert tree.kth_ancestor(0, 6) == 6


def test_is_ancestor(tree):
    assert tree.is_ancestor(2, 10)
    assert tree.is_ancestor(0, 3)
    assert not tree.is_ancestor(3, 4)
    assert not tree.is_ancestor(10, 2)


def test_equidistant_on_path():
    path = RootedTree(3, [(0, 1), (1, 2)])
    assert path.equidistant_count(0, 2) == 1
    assert path.equidistant_count(0, 1) == 0
    assert path.equidistant_count(1, 1) == 3


def test_equidistant_in_star():
    star = RootedTree(4, [(0, 1), (0, 2), (0, 3)])
    assert star.equidistant_count(1, 2) == 2


def test_negative_k_raises(tree):
    with pytest.raises(ValueError):
        tree.kth_ancestor(-1, 3)


def test_disconnected_raises():
    with pytest.raises(ValueError):
        RootedTree(3, [(0, 1)])