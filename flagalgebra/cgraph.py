"""Graphs whose edges carry a colour."""

from __future__ import annotations

import functools
import types
from collections.abc import Iterable, Sequence
from typing import Any, ClassVar

from flagalgebra.combinatorics import functions
from flagalgebra.common import SymNonRefl
from flagalgebra.flag import Flag

__all__ = ["CGraph", "cgraph"]


class CGraph(Flag):
    """Graph whose edges are coloured by a number in ``{1, ..., K-1}``.

    Counting non-edges (value ``0``), each pair of vertices has ``K``
    possible states. Concrete classes are built with :func:`cgraph`.
    """

    K: ClassVar[int]
    NAME: ClassVar[str] = "CGraph"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if hasattr(cls, "K") and "NAME" not in cls.__dict__:
            cls.NAME = f"CGraph_{cls.K}"

    def __init__(self, n: int, edges: Iterable[tuple[tuple[int, int], int]] = ()) -> None:
        cls = type(self)
        if not hasattr(cls, "K"):
            raise TypeError("use cgraph(k) to build a concrete edge-coloured graph class")
        matrix = SymNonRefl.filled(0, n)
        for (u, v), value in edges:
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"edge ({u}, {v}) out of the vertex set of size {n}")
            if u == v:
                raise ValueError(f"loop ({u}, {v}) is not allowed")
            if not 0 <= value < cls.K:
                raise ValueError(f"edge value {value} not in 0..{cls.K - 1}")
            if matrix[u, v] != 0:
                raise ValueError(f"pair {{{u}, {v}}} specified twice")
            matrix[u, v] = value
        self._size = n
        self._edge = matrix

    @classmethod
    def _from_matrix(cls, n: int, matrix: SymNonRefl) -> CGraph:
        g = cls.__new__(cls)
        g._size = n
        g._edge = matrix
        return g

    @classmethod
    def empty(cls, n: int) -> CGraph:
        """Graph on ``n`` vertices with no edge."""
        return cls(n)

    def size(self) -> int:
        return self._size

    def is_edge(self, u: int, v: int) -> bool:
        """Whether ``uv`` is an edge (of any colour)."""
        return u != v and self._edge[u, v] > 0

    def edge(self, u: int, v: int) -> int:
        """Colour of the pair ``uv``; ``0`` when there is no edge."""
        return self._edge[u, v]

    def nbrs(self, v: int) -> list[int]:
        """Vertices adjacent to ``v``."""
        return [u for u in range(self._size) if self.is_edge(u, v)]

    def induce(self, subset: Sequence[int]) -> CGraph:
        for v in subset:
            if not 0 <= v < self._size:
                raise IndexError(f"vertex {v} out of range")
        return type(self)._from_matrix(len(subset), self._edge.induce(subset))

    def invariant_neighborhood(self, v: int) -> list[list[int]]:
        if not 0 <= v < self._size:
            raise IndexError(f"vertex {v} out of range")
        result: list[list[int]] = [[] for _ in range(type(self).K - 1)]
        for u in range(self._size):
            if u != v:
                value = self._edge[u, v]
                if value > 0:
                    result[value - 1].append(u)
        return result

    def superflags(self) -> list[CGraph]:
        n = self._size
        result = []
        for f in functions(n, type(self).K):
            matrix = self._edge.copy()
            matrix.resize(n + 1, 0)
            for v, c in enumerate(f):
                matrix[v, n] = c
            result.append(type(self)._from_matrix(n + 1, matrix))
        return result

    @classmethod
    def size_zero_flags(cls) -> list[CGraph]:
        return [cls(0)]

    def sort_key(self) -> tuple:
        return (self._size, tuple(self._edge.data))

    def _edge_list(self) -> list[tuple[tuple[int, int], int]]:
        return [
            ((v, u), self._edge[u, v])
            for u in range(self._size)
            for v in range(u)
            if self._edge[u, v] > 0
        ]

    def __str__(self) -> str:
        sep = "" if self._size < 10 else "-"
        pairs = "".join(f" {v}{sep}{u}:{value}" for (v, u), value in self._edge_list())
        return f"(|V|={self._size}, E={{{pairs} }})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._size}, {self._edge_list()!r})"


@functools.lru_cache(maxsize=None)
def cgraph(k: int) -> type[CGraph]:
    """Class of the graphs whose pairs take ``k`` states (``k - 1`` edge colours)."""
    if k < 1:
        raise ValueError("an edge-coloured graph needs at least one pair state")
    namespace = {"K": k}
    return types.new_class(
        f"CGraph{k}", (CGraph,), exec_body=lambda ns: ns.update(namespace)
    )