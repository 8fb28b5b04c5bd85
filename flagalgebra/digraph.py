"""Directed and oriented graphs as flags."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Sequence
from typing import ClassVar

from flagalgebra.combinatorics import functions
from flagalgebra.common import AntiSym
from flagalgebra.flag import Flag, SubClass

__all__ = ["Arc", "DirectedGraph", "OrientedGraph", "TriangleFreeOrientedGraph"]


class Arc(enum.IntEnum):
    """Relation between an ordered pair of vertices of a directed graph."""

    NONE = 0
    """No arc."""
    EDGE = 1
    """Arc from the first to the second vertex."""
    BACK_EDGE = 2
    """Arc from the second to the first vertex."""
    RECIPROCAL = 3
    """Arcs in both directions."""

    def __neg__(self) -> Arc:
        if self is Arc.EDGE:
            return Arc.BACK_EDGE
        if self is Arc.BACK_EDGE:
            return Arc.EDGE
        return self


def _check_vertex(u: int, graph_size: int) -> None:
    if not 0 <= u < graph_size:
        raise ValueError(
            f"Invalid vertex {u}: the vertex set is {{0, ..., {graph_size - 1}}}"
        )


def _check_arc(u: int, v: int, graph_size: int) -> None:
    _check_vertex(u, graph_size)
    _check_vertex(v, graph_size)
    if u == v:
        raise ValueError(f"Invalid arc ({u}, {v}): graphs have no loop")


def _extended(matrix: AntiSym, n: int, arc_of: Callable[[int], Arc]) -> AntiSym:
    """Copy of ``matrix`` (``n`` lines) with a new vertex ``n`` related by ``arc_of``."""
    extended = matrix.copy()
    extended.resize(n + 1, Arc.NONE)
    for v in range(n):
        extended.set(v, n, arc_of(v))
    return extended


class DirectedGraph(Flag):
    """Loopless directed graph; a pair of vertices may carry arcs both ways."""

    NAME: ClassVar[str] = "DirectedGraph"

    def __init__(self, n: int, arcs: Iterable[tuple[int, int]] = ()) -> None:
        matrix = AntiSym.filled(Arc.NONE, n)
        for u, v in arcs:
            _check_arc(u, v, n)
            current = matrix.get(u, v)
            if current is Arc.NONE:
                matrix.set(u, v, Arc.EDGE)
            elif current is Arc.BACK_EDGE:
                matrix.set(u, v, Arc.RECIPROCAL)
            else:
                raise ValueError(f"Arc ({u}, {v}) specified twice")
        self._size = n
        self._edge = matrix

    @classmethod
    def _from_matrix(cls, n: int, matrix: AntiSym) -> DirectedGraph:
        g = cls.__new__(cls)
        g._size = n
        g._edge = matrix
        return g

    def size(self) -> int:
        return self._size

    def out_nbrs(self, v: int) -> list[int]:
        """Vertices ``u`` with an arc ``v -> u``."""
        return [
            u
            for u in range(self._size)
            if u != v and self._edge.get(u, v) in (Arc.BACK_EDGE, Arc.RECIPROCAL)
        ]

    def in_nbrs(self, v: int) -> list[int]:
        """Vertices ``u`` with an arc ``u -> v``."""
        return [
            u
            for u in range(self._size)
            if u != v and self._edge.get(u, v) in (Arc.EDGE, Arc.RECIPROCAL)
        ]

    def arc(self, u: int, v: int) -> Arc:
        """Relation from ``u`` to ``v``."""
        _check_arc(u, v, self._size)
        return self._edge.get(u, v)

    def induce(self, subset: Sequence[int]) -> DirectedGraph:
        for v in subset:
            if not 0 <= v < self._size:
                raise IndexError(f"vertex {v} out of range")
        return type(self)._from_matrix(len(subset), self._edge.induce(subset))

    def invariant_neighborhood(self, v: int) -> list[list[int]]:
        if not 0 <= v < self._size:
            raise IndexError(f"vertex {v} out of range")
        return [self.out_nbrs(v), self.in_nbrs(v)]

    def superflags(self) -> list[DirectedGraph]:
        choices = (Arc.EDGE, Arc.BACK_EDGE, Arc.NONE, Arc.RECIPROCAL)
        n = self._size
        return [
            type(self)._from_matrix(n + 1, _extended(self._edge, n, lambda v: choices[f[v]]))
            for f in functions(n, len(choices))
        ]

    @classmethod
    def size_zero_flags(cls) -> list[DirectedGraph]:
        return [cls(0)]

    def sort_key(self) -> tuple:
        return (self._size, tuple(int(a) for a in self._edge.data))

    def _arc_list(self) -> list[tuple[int, int]]:
        return [
            (u, v)
            for u in range(self._size)
            for v in range(self._size)
            if u != v and self._edge.get(u, v) in (Arc.EDGE, Arc.RECIPROCAL)
        ]

    def __str__(self) -> str:
        parts = []
        for u in range(self._size):
            for v in range(self._size):
                if u == v:
                    continue
                relation = self._edge.get(u, v)
                if relation is Arc.EDGE:
                    parts.append(f" {u}->{v}")
                elif relation is Arc.RECIPROCAL and u < v:
                    parts.append(f" {u}<->{v}")
        return f"(V=[{self._size}], E={{{''.join(parts)} }})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._size}, {self._arc_list()!r})"


class OrientedGraph(Flag):
    """Loopless oriented graph: every pair of vertices has at most one arc."""

    NAME: ClassVar[str] = "OrientedGraph"

    def __init__(self, n: int, arcs: Iterable[tuple[int, int]] = ()) -> None:
        matrix = AntiSym.filled(Arc.NONE, n)
        for u, v in arcs:
            _check_arc(u, v, n)
            if matrix.get(u, v) is not Arc.NONE:
                raise ValueError(f"Pair {{{u}, {v}}} specified twice")
            matrix.set(u, v, Arc.EDGE)
        self._graph = DirectedGraph._from_matrix(n, matrix)

    @classmethod
    def _wrap(cls, graph: DirectedGraph) -> OrientedGraph:
        g = cls.__new__(cls)
        g._graph = graph
        return g

    @classmethod
    def empty(cls, n: int) -> OrientedGraph:
        """Oriented graph on ``n`` vertices with no arc."""
        return cls(n)

    def as_directed(self) -> DirectedGraph:
        """The same graph seen as a directed graph."""
        return self._graph

    def size(self) -> int:
        return self._graph.size()

    def out_nbrs(self, v: int) -> list[int]:
        """Vertices ``u`` with an arc ``v -> u``."""
        return self._graph.out_nbrs(v)

    def in_nbrs(self, v: int) -> list[int]:
        """Vertices ``u`` with an arc ``u -> v``."""
        return self._graph.in_nbrs(v)

    def arc(self, u: int, v: int) -> Arc:
        """Relation from ``u`` to ``v``."""
        return self._graph.arc(u, v)

    def is_triangle_free(self) -> bool:
        """Whether the graph has no directed triangle."""
        n = self.size()
        for u in range(n):
            # u is taken as the largest vertex of the triangle
            for v in range(u):
                if self.arc(v, u) is not Arc.EDGE:
                    continue
                for w in range(u):
                    if w != v and self.arc(u, w) is Arc.EDGE and self.arc(w, v) is Arc.EDGE:
                        return False
        return True

    def add_sink(self) -> OrientedGraph:
        """Add a vertex receiving an arc from every other vertex."""
        n = self.size()
        matrix = _extended(self._graph._edge, n, lambda v: Arc.EDGE)
        return type(self)._wrap(DirectedGraph._from_matrix(n + 1, matrix))

    def induce(self, subset: Sequence[int]) -> OrientedGraph:
        return type(self)._wrap(self._graph.induce(subset))

    def invariant_neighborhood(self, v: int) -> list[list[int]]:
        return self._graph.invariant_neighborhood(v)

    def superflags(self) -> list[OrientedGraph]:
        choices = (Arc.EDGE, Arc.BACK_EDGE, Arc.NONE)
        n = self.size()
        edge = self._graph._edge
        return [
            type(self)._wrap(
                DirectedGraph._from_matrix(n + 1, _extended(edge, n, lambda v: choices[f[v]]))
            )
            for f in functions(n, len(choices))
        ]

    @classmethod
    def size_zero_flags(cls) -> list[OrientedGraph]:
        return [cls(0)]

    def sort_key(self) -> tuple:
        return self._graph.sort_key()

    def __str__(self) -> str:
        return str(self._graph)

    def __repr__(self) -> str:
        return f"OrientedGraph({self.size()}, {self._graph._arc_list()!r})"


class TriangleFreeOrientedGraph(SubClass):
    """Oriented graphs without a directed triangle."""

    base = OrientedGraph
    NAME = "Triangle-free oriented graph"

    @classmethod
    def is_in_subclass(cls, flag: OrientedGraph) -> bool:
        return flag.is_triangle_free()