import pytest

from flagalgebra.graph import ConnectedGraph, Graph


def test_new_unit():
    g = Graph(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])
    h = Graph(5, [(3, 2), (1, 2), (3, 4), (0, 4), (1, 0)])
    assert g == h


def test_edge_iterator():
    g = Graph(5, [(0, 1), (1, 2), (0, 4), (2, 3), (3, 4)])
    assert len(list(g.edges())) == 5
    k3 = Graph(5, [(0, 1), (1, 2), (2, 3)])
    assert len(list(k3.edges())) == 3
    e6 = Graph(6, [])
    assert list(e6.edges()) == []


def test_edges_normalised():
    g = Graph(4, [(3, 1), (2, 0)])
    assert list(g.edges()) == [(0, 2), (1, 3)]


def test_generate_graph():
    for size, nb in enumerate([1, 1, 2, 4, 11, 34]):
        assert len(Graph.generate(size)) == nb


def test_display():
    assert str(Graph(3, [(0, 1), (1, 2)])) == "(V=[3], E={ 01 12 })"
    assert str(Graph(2, [])) == "(V=[2], E={ })"
    assert str(Graph.petersen()).startswith("(V=[10], E={ 0-1 ")


def test_nbrs_and_edge():
    g = Graph(4, [(0, 1), (0, 3)])
    assert g.nbrs(0) == [1, 3]
    assert g.nbrs(2) == []
    assert g.edge(1, 0)
    assert not g.edge(0, 0)
    assert not g.edge(1, 2)


def test_connected():
    assert Graph.cycle(5).connected()
    assert not Graph(4, [(0, 1), (2, 3)]).connected()
    assert Graph(1, []).connected()


def test_invalid_edges():
    with pytest.raises(ValueError):
        Graph(3, [(0, 3)])
    with pytest.raises(ValueError):
        Graph(3, [(1, 1)])


def test_empty_and_clique():
    assert Graph.empty(4) == Graph(4)
    assert len(list(Graph.clique(5).edges())) == 10
    assert len(Graph.clique(4).stabilizer(0)) == 24


def test_induce():
    g = Graph(4, [(0, 1), (1, 2), (2, 3)])
    assert g.induce([3, 2, 1]) == Graph(3, [(0, 1), (1, 2)])
    with pytest.raises(IndexError):
        g.induce([0, 4])


def test_superflags_extend():
    g = Graph(2, [(0, 1)])
    extensions = g.superflags()
    assert len(extensions) == 4
    assert all(h.induce([0, 1]) == g for h in extensions)
    assert len(set(extensions)) == 4


def test_petersen_canonical_and_automorphisms():
    p = Graph.petersen()
    relabel = [3, 7, 1, 9, 0, 2, 8, 4, 6, 5]
    assert p.apply_morphism(relabel).canonical() == p.canonical()
    assert len(p.stabilizer(0)) == 120
    assert len(list(p.edges())) == 15


def test_cycle_automorphisms():
    assert len(Graph.cycle(5).stabilizer(0)) == 10
    assert Graph.cycle(5).canonical() != Graph(5, [(0, 1), (1, 2), (2, 3), (3, 4)]).canonical()


def test_connected_subclass():
    assert ConnectedGraph.HEREDITARY is False
    assert len(ConnectedGraph.generate(3)) == 2
    flags = ConnectedGraph.generate(4)
    assert len(flags) == 6
    assert all(f.content.connected() for f in flags)