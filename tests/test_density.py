import itertools

import pytest

from flagalgebra.density import (
    class_matrices,
    count_split,
    count_split_tabulate,
    count_subflag_tabulate,
    count_subflags,
    invariant_classes,
    unlabeling_count_tabulate,
    unlabeling_tabulate,
)
from flagalgebra.graph import ConnectedGraph, Graph


def count_subflags_ext(sigma, h, g):
    return count_subflags(sigma, h.canonical_typed(sigma), g)


def test_unit_count_subflags():
    cherry = Graph(3, [(0, 1), (1, 2)])
    c4 = Graph.cycle(4)
    assert count_subflags_ext(0, cherry, c4) == 4
    assert count_subflags_ext(1, cherry, c4) == 2
    c5 = Graph.cycle(5)
    assert count_subflags(0, c5.canonical(), Graph.petersen().canonical()) == 12


def test_count_subflags_typed():
    p3 = Graph(3, [(0, 1), (1, 2)])
    p4 = Graph(4, [(0, 1), (1, 2), (2, 3)])
    g = Graph(6, [(2, 0), (0, 5), (2, 5), (0, 4), (4, 3)])
    g2 = Graph(7, [(0, 1), (0, 5), (1, 2), (1, 4), (2, 3), (2, 4), (5, 4), (2, 5)])
    g3 = Graph(5, [(0, 1), (1, 2), (1, 4), (2, 4), (2, 3)])
    assert count_subflags_ext(1, p3, g) == 1
    assert count_subflags_ext(3, p4, g2) == 1
    assert count_subflags_ext(2, g3, g2) == 1


def test_unit_count_split():
    cherry = Graph(3, [(0, 1), (1, 2)]).canonical()
    edge = Graph(2, [(0, 1)]).canonical()
    g = Graph(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0), (0, 2)]).canonical()
    assert count_split(0, cherry, edge, g) == 4


def test_count_subflags_requires_canonical():
    cherry = Graph(3, [(0, 1), (1, 2)])
    variants = [cherry.apply_morphism(p) for p in itertools.permutations(range(3))]
    bad = next(v for v in variants if v != v.canonical())
    with pytest.raises(ValueError):
        count_subflags(0, bad, Graph.cycle(4))


def test_count_split_bad_sizes():
    edge = Graph(2, [(0, 1)]).canonical()
    with pytest.raises(ValueError):
        count_split(0, edge, edge, Graph.cycle(5).canonical())


def test_count_subflag_tabulate_consistency():
    a = Graph.generate(3)
    b = Graph.generate(5)
    tab = count_subflag_tabulate(0, a, b)
    for i, ai in enumerate(a):
        for j, bj in enumerate(b):
            assert tab.get((j, i), 0) == count_subflags(0, ai, bj)


def test_count_split_tabulate_consistency():
    left = Graph.generate(2)
    right = Graph.generate(3)
    prod = Graph.generate(5)
    tab = count_split_tabulate(0, left, right, prod)
    assert len(tab) == len(prod)
    for i, lf in enumerate(left):
        for j, rf in enumerate(right):
            for p, pf in enumerate(prod):
                assert tab[p].get((i, j), 0) == count_split(0, lf, rf, pf)


def test_tabulate_non_hereditary_skips_missing():
    small = ConnectedGraph.generate(2)
    large = ConnectedGraph.generate(3)
    assert len(small) == 1
    tab = count_subflag_tabulate(0, small, large)
    for j, g in enumerate(large):
        assert tab.get((j, 0), 0) == len(list(g.edges()))


def test_tabulate_hereditary_missing_flag_raises():
    with pytest.raises(ValueError):
        count_subflag_tabulate(0, [Graph(2, [(0, 1)])], Graph.generate(3))


def test_unlabeling_tabulate():
    rooted = Graph.generate_typed(Graph(1), 3)
    unrooted = Graph.generate(3)
    result = unlabeling_tabulate([], rooted, unrooted)
    assert len(result) == len(rooted)
    for flag, i in zip(rooted, result):
        assert unrooted[i] == flag.canonical()
    assert set(result) == set(range(4))


def test_unlabeling_tabulate_missing_raises():
    rooted = Graph.generate_typed(Graph(1), 3)
    with pytest.raises(ValueError):
        unlabeling_tabulate([], rooted, [Graph(3)])


def test_unlabeling_count_rooted_edges():
    rooted = Graph.generate_typed(Graph(1), 2)
    assert unlabeling_count_tabulate([], 1, rooted) == [2, 2]
    assert unlabeling_count_tabulate([], 0, Graph.generate(2)) == [1, 1]


def test_unlabeling_count_sums_to_vertex_count():
    rooted = Graph.generate_typed(Graph(1), 3)
    counts = unlabeling_count_tabulate([], 1, rooted)
    assert len(counts) == 6
    assert sorted(counts) == [1, 1, 2, 2, 3, 3]
    assert sum(counts) == 12
    unrooted = Graph.generate(3)
    for target in unrooted:
        total = sum(c for flag, c in zip(rooted, counts) if flag.canonical() == target)
        assert total == 3


def test_unlabeling_count_empty_raises():
    with pytest.raises(ValueError):
        unlabeling_count_tabulate([], 0, [])


def test_invariant_classes_on_edge_type():
    flags = Graph.generate_typed(Graph(2, [(0, 1)]), 3)
    assert len(flags) == 4
    classes = invariant_classes([], 2, flags)
    assert classes[0] == 0
    assert len(set(classes)) == 3
    assert sorted(set(classes)) == [0, 1, 2]
    for i, j in itertools.combinations(range(4), 2):
        if classes[i] == classes[j]:
            assert len(flags[i].nbrs(2)) == len(flags[j].nbrs(2)) == 1


def test_invariant_classes_rejects_eta():
    flags = Graph.generate_typed(Graph(2, [(0, 1)]), 3)
    with pytest.raises(ValueError):
        invariant_classes([0], 2, flags)


def test_class_matrices():
    invariant, anti = class_matrices([0, 1, 0, 2, 1])
    assert invariant == {(0, 0): 1, (1, 1): 1, (2, 0): 1, (3, 2): 1, (4, 1): 1}
    assert anti == {(2, 0): 1, (0, 0): -1, (4, 1): 1, (1, 1): -1}


def test_class_matrices_invalid():
    with pytest.raises(ValueError):
        class_matrices([1, 0])
    with pytest.raises(ValueError):
        class_matrices([])