import numpy as np
import pytest
from pypercolation.UnionFind import WeightedUnionFind
from pypercolation.exceptions import InvalidSizeError, OutOfRangeError


def test_initial_components():
    uf = WeightedUnionFind(5)
    assert len(uf) == 5
    for i in range(5):
        assert uf.find(i) == i
        assert uf.is_connected(i, i)
        assert uf.size_of(i) == 1


def test_invalid_size():
    with pytest.raises(InvalidSizeError):
        WeightedUnionFind(0)
    with pytest.raises(InvalidSizeError):
        WeightedUnionFind(-3)
    # still a ValueError for callers catching the builtin
    with pytest.raises(ValueError):
        WeightedUnionFind(0)


def test_union_merges_components():
    uf = WeightedUnionFind(4)
    assert uf.union(0, 1) is True
    assert uf.is_connected(0, 1)
    assert len(uf) == 3
    assert uf.count == 3
    assert uf.size_of(0) == uf.size_of(1) == 2


def test_union_same_set_is_noop():
    uf = WeightedUnionFind(3)
    uf.union(0, 1)
    assert uf.union(1, 0) is False
    assert len(uf) == 2
    assert uf.size_of(0) == 2


def test_tie_attaches_second_root_under_first():
    uf = WeightedUnionFind(4)
    uf.union(2, 3)
    assert uf.find(3) == 2
    uf.union(0, 1)
    uf.union(0, 2)
    assert uf.find(2) == 0
    assert uf.find(3) == 0


def test_smaller_tree_goes_under_larger():
    uf = WeightedUnionFind(5)
    uf.union(1, 2)
    uf.union(1, 3)
    # {1, 2, 3} is larger than {0}, even though 0 is passed first
    uf.union(0, 1)
    assert uf.find(0) == 1
    assert uf.size_of(0) == 4


def test_path_compression_flattens_tree():
    uf = WeightedUnionFind(8)
    for a, b in [(0, 1), (2, 3), (0, 2), (4, 5), (6, 7), (4, 6), (0, 4)]:
        uf.union(a, b)
    root = uf.find(7)
    assert uf.parent[7] == root
    assert uf.parent[6] == root


def test_connectivity_is_equivalence_relation():
    uf = WeightedUnionFind(6)
    uf.union(0, 1)
    uf.union(1, 2)
    uf.union(4, 5)
    assert uf.is_connected(2, 0) and uf.is_connected(0, 2)
    assert uf.is_connected(0, 2)
    assert not uf.is_connected(2, 4)
    uf.union(3, 3)
    uf.union(2, 5)
    # stable under further unions
    assert uf.is_connected(0, 1)
    assert uf.is_connected(0, 4)
    assert not uf.is_connected(0, 3)


def test_sizes_match_membership():
    rng = np.random.default_rng(7)
    uf = WeightedUnionFind(50)
    for a, b in rng.integers(50, size=(40, 2)):
        uf.union(a, b)
    roots = [uf.find(i) for i in range(50)]
    for root in set(roots):
        assert uf.size_of(root) == roots.count(root)
    assert len(uf) == len(set(roots))


@pytest.mark.parametrize("bad", [-1, 4, 100, -(2 ** 31), 2 ** 31 - 1])
def test_out_of_range(bad):
    uf = WeightedUnionFind(4)
    with pytest.raises(OutOfRangeError):
        uf.find(bad)
    with pytest.raises(OutOfRangeError):
        uf.union(0, bad)
    with pytest.raises(OutOfRangeError):
        uf.is_connected(bad, 0)
    assert len(uf) == 4


def test_non_integer_index():
    uf = WeightedUnionFind(4)
    with pytest.raises(TypeError):
        uf.find(1.5)


def test_accepts_numpy_integers():
    uf = WeightedUnionFind(3)
    uf.union(np.int64(0), np.int32(2))
    assert uf.is_connected(0, 2)
    assert isinstance(uf.find(np.int64(2)), int)


def test_out_of_range_leaves_parents_untouched():
    uf = WeightedUnionFind(6)
    uf.union(0, 1)
    uf.union(2, 3)
    uf.union(0, 2)
    # 3 -> 2 -> 0, so a find on 3 would compress its path
    before = uf.parent.copy()
    with pytest.raises(OutOfRangeError):
        uf.union(3, 99)
    with pytest.raises(OutOfRangeError):
        uf.is_connected(3, -1)
    assert np.array_equal(uf.parent, before)
    assert uf.parent[3] == 2
