import pytest

from flagalgebra.common import (
    AntiSym,
    Sym,
    SymNonRefl,
    relation_extensions,
    relation_invariant,
)


def test_symnonrefl():
    assert len(SymNonRefl.filled(42, 0).data) == 0
    assert SymNonRefl.filled(42, 5)[4, 3] == 42
    m = SymNonRefl.filled(0, 12)
    m[3, 2] = 11
    assert m[2, 3] == 11
    m[3, 4] = 22
    assert m[4, 3] == 22

    n = 10
    m = SymNonRefl.filled(0, n)
    for i in range(n):
        for j in range(n):
            if i != j:
                m[i, j] += 1
    assert all(x == 2 for x in m.data)


def test_symnonrefl_diagonal_rejected():
    m = SymNonRefl.filled(0, 3)
    with pytest.raises(IndexError):
        m.get(1, 1)


def test_antisym():
    assert len(AntiSym.filled(42, 0).data) == 0
    rel = AntiSym.filled(0, 12)
    rel.set(5, 2, 42)
    assert rel.get(5, 2) == 42
    assert rel.get(2, 5) == -42
    n = 10
    m = AntiSym.filled(0, n)
    for i in range(n):
        for j in range(n):
            if i != j:
                v = m.get(i, j)
                if i < j:
                    assert v == 0
                    m.set(i, j, 42)
                else:
                    assert v == -42
    assert all(x != 0 for x in m.data)


@pytest.mark.parametrize("cls", [Sym, AntiSym, SymNonRefl])
@pytest.mark.parametrize("n", [0, 1, 5])
def test_flatmatrix_generic(cls, n):
    assert len(cls.line_range(n + 1, n // 2)) == cls.data_size(n + 1) - cls.data_size(n)
    for u in range(n):
        x = cls.filled(0, n)
        for v in cls.line_range(n, u):
            assert x.get(u, v) == 0
            x.set(u, v, 1)


def test_possible_size_invalid():
    with pytest.raises(ValueError):
        SymNonRefl([0, 0]).possible_size()


def test_resize():
    m = SymNonRefl.filled(1, 3)
    m.resize(4, 0)
    assert m.possible_size() == 4
    assert m[0, 1] == 1
    assert m[0, 3] == 0
    m.resize(2, 0)
    assert m.data == [1]


def test_induce_symmetric():
    m = SymNonRefl.filled(False, 4)
    m[0, 1] = True
    m[2, 3] = True
    sub = m.induce([3, 2, 0])
    assert sub[0, 1] is True
    assert sub[0, 2] is False
    assert sub[1, 2] is False


def test_induce_antisymmetric_keeps_orientation():
    m = AntiSym.filled(0, 3)
    m.set(0, 2, 1)
    sub = m.induce([2, 0])
    assert sub.get(1, 0) == 1
    assert sub.get(0, 1) == -1


def test_relation_invariant():
    m = SymNonRefl.filled(False, 4)
    m[0, 1] = True
    m[1, 3] = True
    assert relation_invariant(m, [True, False], 1) == [[2], []]
    assert relation_invariant(m, [False, True], 1) == [[0, 3], []]


def test_relation_extensions():
    m = SymNonRefl.filled(False, 2)
    exts = relation_extensions(m, [True, False], 2)
    assert len(exts) == 4
    assert len(set(exts)) == 4
    for e in exts:
        assert e.possible_size() == 3
        assert e[0, 1] is False


def test_relation_extensions_wrong_size():
    with pytest.raises(ValueError):
        relation_extensions(SymNonRefl.filled(False, 2), [True, False], 3)