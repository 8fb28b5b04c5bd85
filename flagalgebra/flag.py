"""Flag-able combinatorial objects, canonical forms and flag generation."""

from __future__ import annotations

import abc
import functools
import itertools
import types
from collections.abc import Callable, Iterator, Sequence
from typing import Any, ClassVar

from flagalgebra.combinatorics import compose, invert, permutation_of_injection

__all__ = ["Flag", "SubClass", "subclass"]


def _rank(keys: Sequence[Any]) -> list[int]:
    """Replace each key by its rank among the distinct keys."""
    index = {key: i for i, key in enumerate(sorted(set(keys)))}
    return [index[key] for key in keys]


def _refine(colors: list[int], neighborhoods: list[list[list[int]]]) -> list[int]:
    """Refine a vertex colouring until it is equitable with respect to the neighbourhoods."""
    classes = len(set(colors))
    while True:
        signatures = [
            (color, tuple(tuple(sorted(colors[u] for u in part)) for part in parts))
            for color, parts in zip(colors, neighborhoods)
        ]
        colors = _rank(signatures)
        refined = len(set(colors))
        if refined == classes:
            return colors
        classes = refined


def _transposition(n: int, a: int, b: int) -> list[int]:
    p = list(range(n))
    p[a], p[b] = b, a
    return p


class _Search:
    """Individualisation-refinement search tree of a flag with a fixed type."""

    def __init__(self, flag: Flag, type_size: int) -> None:
        n = flag.size()
        if not 0 <= type_size <= n:
            raise ValueError(f"type size {type_size} out of range for a flag of size {n}")
        self.flag = flag
        self.n = n
        self.neighborhoods = [flag.invariant_neighborhood(v) for v in range(n)]
        coloring = flag.invariant_coloring()
        base = list(coloring) if coloring is not None else [0] * n
        keys = [(0, v) if v < type_size else (1, c) for v, c in enumerate(base)]
        self.root = _refine(_rank(keys), self.neighborhoods)
        self.generators: list[list[int]] = []

    def _representatives(self, cell: list[int]) -> list[int]:
        representatives: list[int] = []
        for w in cell:
            for r in representatives:
                swap = _transposition(self.n, r, w)
                if self.flag.apply_morphism(swap) == self.flag:
                    self.generators.append(swap)
                    break
            else:
                representatives.append(w)
        return representatives

    def _leaves(self, colors: list[int]) -> Iterator[list[int]]:
        if len(set(colors)) == self.n:
            yield sorted(range(self.n), key=colors.__getitem__)
            return
        counts: dict[int, int] = {}
        for c in colors:
            counts[c] = counts.get(c, 0) + 1
        target = min(c for c, k in counts.items() if k > 1)
        cell = [v for v, c in enumerate(colors) if c == target]
        for w in self._representatives(cell):
            keys = [(c, 0 if v == w else 1) for v, c in enumerate(colors)]
            yield from self._leaves(_refine(_rank(keys), self.neighborhoods))

    def leaves(self) -> Iterator[list[int]]:
        return self._leaves(self.root)


@functools.total_ordering
class Flag(abc.ABC):
    """A combinatorial object usable as a flag.

    Subclasses describe the structure (size, induced subobjects, vertex
    invariants, one-vertex extensions); canonical forms, automorphisms and
    exhaustive generation are provided here.
    """

    NAME: ClassVar[str] = "Flag"
    HEREDITARY: ClassVar[bool] = True

    @abc.abstractmethod
    def size(self) -> int:
        """Number of vertices."""

    @abc.abstractmethod
    def induce(self, subset: Sequence[int]) -> Flag:
        """Subflag induced by ``subset``; vertex ``i`` of the result is ``subset[i]``."""

    def apply_morphism(self, p: Sequence[int]) -> Flag:
        """Relabel the flag so that vertex ``v`` becomes ``p[v]``."""
        return self.induce(invert(p))

    @abc.abstractmethod
    def invariant_neighborhood(self, v: int) -> list[list[int]]:
        """Neighbourhoods of ``v`` that every isomorphism preserves."""

    def invariant_coloring(self) -> list[int] | None:
        """Vertex colouring preserved by isomorphisms, if any."""
        return None

    @abc.abstractmethod
    def superflags(self) -> list[Flag]:
        """Flags of size ``self.size() + 1`` containing ``self`` on their first vertices."""

    @classmethod
    @abc.abstractmethod
    def size_zero_flags(cls) -> list[Flag]:
        """Every flag with no vertex."""

    @abc.abstractmethod
    def sort_key(self) -> tuple:
        """Hashable key defining equality and order of flags."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash((type(self).__qualname__, self.sort_key()))

    def canonical(self) -> Flag:
        """Representative of the isomorphism class of ``self``."""
        return self.canonical_typed(0)

    def canonical_typed(self, type_size: int) -> Flag:
        """Representative of the class of ``self`` under isomorphisms fixing ``[type_size]``."""
        search = _Search(self, type_size)
        candidates = (self.induce(order) for order in search.leaves())
        return min(candidates, key=lambda f: f.sort_key())

    def stabilizer(self, type_size: int) -> list[list[int]]:
        """Every automorphism of ``self`` fixing each of the first ``type_size`` vertices."""
        search = _Search(self, type_size)
        leaves = search.leaves()
        reference = next(leaves)
        reference_flag = self.induce(reference)
        generators = list(search.generators)
        for order in leaves:
            if self.induce(order) == reference_flag:
                p = [0] * self.size()
                for a, b in zip(reference, order):
                    p[a] = b
                generators.append(p)
        generators.extend(search.generators[len(generators) :])
        generators = [tuple(g) for g in generators + search.generators]
        identity = tuple(range(self.size()))
        group = {identity}
        frontier = [identity]
        while frontier:
            element = frontier.pop()
            for g in generators:
                product = tuple(element[x] for x in g)
                if product not in group:
                    group.add(product)
                    frontier.append(product)
        return [list(p) for p in sorted(group)]

    def select_type(self, eta: Sequence[int]) -> Flag:
        """Reorder ``self`` so that its first vertices are those of ``eta``, in order."""
        return self.apply_morphism(invert(permutation_of_injection(self.size(), eta)))

    @classmethod
    def generate_next(cls, previous: Sequence[Flag]) -> list[Flag]:
        """Flags one vertex larger than those of ``previous``, up to isomorphism, sorted."""
        return sorted({h.canonical() for g in previous for h in g.superflags()})

    @classmethod
    def generate(cls, n: int) -> list[Flag]:
        """Every flag of size ``n`` up to isomorphism, sorted."""
        if n < 0:
            raise ValueError("flag size must be non-negative")
        return list(_generate(cls, n))

    @classmethod
    def generate_typed_up(cls, type_flag: Flag, flags: Sequence[Flag]) -> list[Flag]:
        """Every way to root the flags of ``flags`` on ``type_flag``, up to typed isomorphism."""
        if not flags:
            raise ValueError("no flag to root")
        n = flags[0].size()
        k = type_flag.size()
        if k > n:
            raise ValueError("type larger than the flags")
        result: set[Flag] = set()
        for g in flags:
            for pre_selection in itertools.combinations(range(n), k):
                if g.induce(pre_selection).canonical() != type_flag:
                    continue
                for select in itertools.permutations(range(k)):
                    selection = compose(pre_selection, select)
                    if g.induce(selection) == type_flag:
                        p = invert(permutation_of_injection(n, selection))
                        result.add(g.apply_morphism(p).canonical_typed(k))
        return sorted(result)

    @classmethod
    def generate_typed(cls, type_flag: Flag, size: int) -> list[Flag]:
        """Flags of size ``size`` rooted on ``type_flag``, up to typed isomorphism."""
        return cls.generate_typed_up(type_flag, cls.generate(size))


@functools.lru_cache(maxsize=None)
def _generate(cls: type[Flag], n: int) -> tuple[Flag, ...]:
    if n == 0:
        return tuple(sorted(cls.size_zero_flags()))
    return tuple(cls.generate_next(_generate(cls, n - 1)))


class SubClass(Flag):
    """Flags of ``base`` restricted to those satisfying ``is_in_subclass``.

    Flags are generated by filtering one-vertex extensions, so the whole
    base class is never enumerated.
    """

    base: ClassVar[type[Flag]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "HEREDITARY" not in cls.__dict__ and hasattr(cls, "base"):
            cls.HEREDITARY = cls.base.HEREDITARY

    def __init__(self, content: Flag) -> None:
        self.content = content

    @classmethod
    @abc.abstractmethod
    def is_in_subclass(cls, flag: Flag) -> bool:
        """Whether ``flag`` belongs to the subclass."""

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name == "content":
            raise AttributeError(name)
        return getattr(self.content, name)

    def size(self) -> int:
        return self.content.size()

    def induce(self, subset: Sequence[int]) -> SubClass:
        return type(self)(self.content.induce(subset))

    def apply_morphism(self, p: Sequence[int]) -> SubClass:
        return type(self)(self.content.apply_morphism(p))

    def invariant_neighborhood(self, v: int) -> list[list[int]]:
        return self.content.invariant_neighborhood(v)

    def invariant_coloring(self) -> list[int] | None:
        return self.content.invariant_coloring()

    def superflags(self) -> list[SubClass]:
        cls = type(self)
        return [cls(f) for f in self.content.superflags() if cls.is_in_subclass(f)]

    @classmethod
    def size_zero_flags(cls) -> list[SubClass]:
        return [cls(f) for f in cls.base.size_zero_flags()]

    def sort_key(self) -> tuple:
        return self.content.sort_key()

    def __str__(self) -> str:
        return str(self.content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.content!r})"


def subclass(
    base: type[Flag],
    name: str,
    predicate: Callable[[Any], bool],
    hereditary: bool | None = None,
) -> type[SubClass]:
    """Build the subclass of ``base`` made of the flags satisfying ``predicate``."""
    namespace: dict[str, Any] = {
        "base": base,
        "NAME": name,
        "is_in_subclass": classmethod(lambda cls, flag: bool(predicate(flag))),
    }
    if hereditary is not None:
        namespace["HEREDITARY"] = hereditary
    return types.new_class(
        f"{base.__name__}SubClass", (SubClass,), exec_body=lambda ns: ns.update(namespace)
    )