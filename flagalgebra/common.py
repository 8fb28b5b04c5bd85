"""Flat storage of square matrices for binary relations."""

from __future__ import annotations

import functools
from collections.abc import Iterable, Sequence
from typing import Any

from flagalgebra.combinatorics import functions

__all__ = [
    "FlatMatrix",
    "Sym",
    "SymNonRefl",
    "AntiSym",
    "relation_invariant",
    "relation_extensions",
]


@functools.total_ordering
class FlatMatrix:
    """A square matrix stored in a single list, exploiting a symmetry."""

    __slots__ = ("data",)

    def __init__(self, data: Iterable[Any] = ()) -> None:
        self.data = list(data)

    # Layout, defined by subclasses.
    @classmethod
    def data_size(cls, size: int) -> int:
        """Length of the underlying list for a matrix with ``size`` lines."""
        raise NotImplementedError

    @classmethod
    def flat_index(cls, i: int, j: int) -> int:
        """Position of entry ``(i, j)`` in the underlying list."""
        raise NotImplementedError

    @classmethod
    def halfline_range(cls, v: int) -> range:
        """Indices ``u`` such that ``(v, u)`` is stored in line ``v``."""
        raise NotImplementedError

    @classmethod
    def line_range(cls, n: int, v: int) -> tuple[int, ...]:
        """Every index of line ``v`` in a matrix of ``n`` lines."""
        raise NotImplementedError

    @classmethod
    def filled(cls, elem: Any, n: int) -> FlatMatrix:
        """Matrix with ``n`` lines whose entries are all ``elem``."""
        return cls([elem] * cls.data_size(n))

    def possible_size(self) -> int:
        """Number of lines of the matrix."""
        length = len(self.data)
        size = 0
        while True:
            current = self.data_size(size)
            if current == length:
                return size
            if current > length:
                raise ValueError(f"no matrix size matches {length} entries")
            size += 1

    def get(self, i: int, j: int) -> Any:
        return self.data[self.flat_index(i, j)]

    def set(self, i: int, j: int, value: Any) -> None:
        self.data[self.flat_index(i, j)] = value

    def __getitem__(self, ij: tuple[int, int]) -> Any:
        return self.get(*ij)

    def __setitem__(self, ij: tuple[int, int], value: Any) -> None:
        self.set(ij[0], ij[1], value)

    def resize(self, n: int, elem: Any) -> None:
        """Change the number of lines to ``n``, filling new entries with ``elem``."""
        target = self.data_size(n)
        if target <= len(self.data):
            del self.data[target:]
        else:
            self.data.extend([elem] * (target - len(self.data)))

    def induce(self, p: Sequence[int]) -> FlatMatrix:
        """Submatrix on lines ``p``, line ``i`` of the result being line ``p[i]``."""
        data = [self.get(p[v], pu) for u, pu in enumerate(p) for v in self.halfline_range(u)]
        return type(self)(data)

    def copy(self) -> FlatMatrix:
        return type(self)(self.data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.data == other.data

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.data < other.data

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self.data)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


class Sym(FlatMatrix):
    """Relation R with R(x, y) = R(y, x), diagonal included."""

    __slots__ = ()

    @classmethod
    def data_size(cls, size: int) -> int:
        return size * (size + 1) // 2

    @classmethod
    def flat_index(cls, i: int, j: int) -> int:
        if j < i:
            i, j = j, i
        return cls.data_size(j) + i

    @classmethod
    def halfline_range(cls, v: int) -> range:
        return range(v + 1)

    @classmethod
    def line_range(cls, n: int, v: int) -> tuple[int, ...]:
        return tuple(range(n))


class SymNonRefl(FlatMatrix):
    """Symmetric relation R such that R(x, x) never holds."""

    __slots__ = ()

    @classmethod
    def data_size(cls, size: int) -> int:
        return 0 if size == 0 else (size - 1) * size // 2

    @classmethod
    def flat_index(cls, i: int, j: int) -> int:
        if j < i:
            i, j = j, i
        if i == j:
            raise IndexError(f"no diagonal entry ({i}, {j})")
        return cls.data_size(j) + i

    @classmethod
    def halfline_range(cls, v: int) -> range:
        return range(v)

    @classmethod
    def line_range(cls, n: int, v: int) -> tuple[int, ...]:
        return (*range(v), *range(v + 1, n))


class AntiSym(SymNonRefl):
    """Relation R with R(x, y) = -R(y, x) and no diagonal."""

    __slots__ = ()

    def get(self, i: int, j: int) -> Any:
        value = self.data[self.flat_index(i, j)]
        return value if i < j else -value

    def set(self, i: int, j: int, value: Any) -> None:
        self.data[self.flat_index(i, j)] = value if i < j else -value


def relation_invariant(matrix: FlatMatrix, variants: Sequence[Any], v: int) -> list[list[int]]:
    """Neighbourhood of ``v`` split by relation value.

    The ``i``-th list holds the ``u`` related to ``v`` by ``variants[i + 1]``;
    ``variants[0]`` is the absence of relation and is not recorded.
    """
    result: list[list[int]] = [[] for _ in variants]
    n = matrix.possible_size()
    for u in matrix.line_range(n, v):
        value = matrix.get(u, v)
        if value == variants[0]:
            continue
        for i, variant in enumerate(variants[1:]):
            if variant == value:
                result[i].append(u)
                break
    return result


def relation_extensions(matrix: FlatMatrix, variants: Sequence[Any], n: int) -> list[FlatMatrix]:
    """Every matrix with ``n + 1`` lines extending ``matrix`` (which has ``n`` lines)."""
    if len(matrix.data) != matrix.data_size(n):
        raise ValueError(f"matrix does not have {n} lines")
    line_size = len(matrix.halfline_range(n))
    return [
        type(matrix)([*matrix.data, *(variants[i] for i in f)])
        for f in functions(line_size, len(variants))
    ]