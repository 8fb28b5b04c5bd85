"""Undirected graphs as flags."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import ClassVar

from flagalgebra.common import SymNonRefl
from flagalgebra.flag import Flag, SubClass

__all__ = ["Graph", "ConnectedGraph"]


class Graph(Flag):
    """Undirected simple graph on the vertices ``0, ..., n-1``."""

    NAME: ClassVar[str] = "Graph"

    def __init__(self, n: int, edges: Iterable[tuple[int, int]] = ()) -> None:
        matrix = SymNonRefl.filled(False, n)
        for u, v in edges:
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"edge ({u}, {v}) out of the vertex set of size {n}")
            if u == v:
                raise ValueError(f"loop ({u}, {v}) is not allowed")
            matrix[u, v] = True
        self._size = n
        self._edge = matrix

    @classmethod
    def _from_matrix(cls, n: int, matrix: SymNonRefl) -> Graph:
        g = cls.__new__(cls)
        g._size = n
        g._edge = matrix
        return g

    @classmethod
    def empty(cls, n: int) -> Graph:
        """Graph on ``n`` vertices with no edge."""
        return cls(n)

    def size(self) -> int:
        return self._size

    def nbrs(self, v: int) -> list[int]:
        """Vertices adjacent to ``v``."""
        return [u for u in range(self._size) if u != v and self._edge[u, v]]

    def edge(self, u: int, v: int) -> bool:
        """Whether ``uv`` is an edge."""
        return u != v and self._edge[u, v]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Edges as pairs ``(u, v)`` with ``u < v``, ordered by ``v`` then ``u``."""
        for v in range(self._size):
            for u in range(v):
                if self._edge[u, v]:
                    yield (u, v)

    def connected(self) -> bool:
        """Whether the graph is connected."""
        if self._size == 0:
            return True
        visited = set()
        stack = [0]
        while stack:
            v = stack.pop()
            if v not in visited:
                visited.add(v)
                stack.extend(self.nbrs(v))
        return len(visited) == self._size

    def induce(self, subset: Sequence[int]) -> Graph:
        for v in subset:
            if not 0 <= v < self._size:
                raise IndexError(f"vertex {v} out of range")
        return Graph._from_matrix(len(subset), self._edge.induce(subset))

    def invariant_neighborhood(self, v: int) -> list[list[int]]:
        if not 0 <= v < self._size:
            raise IndexError(f"vertex {v} out of range")
        return [self.nbrs(v)]

    def superflags(self) -> list[Graph]:
        n = self._size
        result = []
        for k in range(n + 1):
            for subset in itertools.combinations(range(n), k):
                matrix = self._edge.copy()
                matrix.resize(n + 1, False)
                for v in subset:
                    matrix[v, n] = True
                result.append(Graph._from_matrix(n + 1, matrix))
        return result

    @classmethod
    def size_zero_flags(cls) -> list[Graph]:
        return [cls(0)]

    def sort_key(self) -> tuple:
        return (self._size, tuple(self._edge.data))

    def __str__(self) -> str:
        sep = "" if self._size < 10 else "-"
        pairs = "".join(
            f" {v}{sep}{u}"
            for u in range(self._size)
            for v in range(u)
            if self._edge[u, v]
        )
        return f"(V=[{self._size}], E={{{pairs} }})"

    def __repr__(self) -> str:
        return f"Graph({self._size}, {list(self.edges())!r})"

    @classmethod
    def petersen(cls) -> Graph:
        """The Petersen graph."""
        return cls(
            10,
            [
                (0, 1), (1, 2), (2, 3), (3, 4), (4, 0),
                (5, 7), (6, 8), (7, 9), (8, 5), (9, 6),
                (0, 5), (1, 6), (2, 7), (3, 8), (4, 9),
            ],
        )

    @classmethod
    def clique(cls, n: int) -> Graph:
        """Complete graph on ``n`` vertices."""
        return cls(n, itertools.combinations(range(n), 2))

    @classmethod
    def cycle(cls, n: int) -> Graph:
        """Cycle ``0 - 1 - ... - (n-1) - 0``."""
        if n < 1:
            raise ValueError("a cycle needs at least one vertex")
        edges = [(i, i + 1) for i in range(n - 1)]
        edges.append((n - 1, 0))
        return cls(n, edges)


class ConnectedGraph(SubClass):
    """Connected graphs (not closed under taking induced subgraphs)."""

    base = Graph
    NAME = "Connected graph"
    HEREDITARY = False

    @classmethod
    def is_in_subclass(cls, flag: Graph) -> bool:
        return flag.connected()