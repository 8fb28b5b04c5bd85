"""Flags whose vertices carry a colour."""

from __future__ import annotations

import functools
import types
from collections.abc import Sequence
from typing import Any, ClassVar

from flagalgebra.flag import Flag

__all__ = ["Colored", "colored"]


class Colored(Flag):
    """A flag of ``base`` whose vertices are coloured in ``{0, ..., COLORS-1}``.

    Concrete classes are built with :func:`colored`.
    """

    base: ClassVar[type[Flag]]
    COLORS: ClassVar[int]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if hasattr(cls, "base") and hasattr(cls, "COLORS"):
            if "HEREDITARY" not in cls.__dict__:
                cls.HEREDITARY = cls.base.HEREDITARY
            if "NAME" not in cls.__dict__:
                cls.NAME = f"{cls.COLORS}-colored {cls.base.NAME}"

    def __init__(self, content: Flag, color: Sequence[int]) -> None:
        cls = type(self)
        if not hasattr(cls, "COLORS"):
            raise TypeError("use colored(base, colors) to build a concrete coloured class")
        color = list(color)
        if content.size() != len(color):
            raise ValueError(
                f"{len(color)} colours given for a flag of size {content.size()}"
            )
        for c in color:
            if not 0 <= c < cls.COLORS:
                raise ValueError(f"colour {c} not in 0..{cls.COLORS - 1}")
        self.content = content
        self.color = color

    @classmethod
    def _raw(cls, content: Flag, color: list[int]) -> Colored:
        f = cls.__new__(cls)
        f.content = content
        f.color = color
        return f

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in ("content", "color"):
            raise AttributeError(name)
        return getattr(self.content, name)

    def size(self) -> int:
        return self.content.size()

    def induce(self, subset: Sequence[int]) -> Colored:
        return type(self)._raw(self.content.induce(subset), [self.color[u] for u in subset])

    def apply_morphism(self, p: Sequence[int]) -> Colored:
        color = [0] * len(p)
        for i, pi in enumerate(p):
            color[pi] = self.color[i]
        return type(self)._raw(self.content.apply_morphism(p), color)

    def invariant_neighborhood(self, v: int) -> list[list[int]]:
        return self.content.invariant_neighborhood(v)

    def invariant_coloring(self) -> list[int] | None:
        base_coloring = self.content.invariant_coloring()
        if base_coloring is None:
            return list(self.color)
        n = type(self).COLORS
        return [c * n + own for c, own in zip(base_coloring, self.color)]

    def superflags(self) -> list[Colored]:
        cls = type(self)
        return [
            cls._raw(flag, [*self.color, c])
            for flag in self.content.superflags()
            for c in range(cls.COLORS)
        ]

    @classmethod
    def size_zero_flags(cls) -> list[Colored]:
        return [cls._raw(f, []) for f in cls.base.size_zero_flags()]

    def sort_key(self) -> tuple:
        return (self.content.sort_key(), tuple(self.color))

    def __str__(self) -> str:
        return f"{self.content}{self.color!r}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.content!r}, {self.color!r})"


@functools.lru_cache(maxsize=None)
def colored(base: type[Flag], colors: int) -> type[Colored]:
    """Class of the flags of ``base`` with vertices coloured by ``colors`` colours."""
    if colors < 0:
        raise ValueError("the number of colours must be non-negative")
    namespace = {"base": base, "COLORS": colors}
    return types.new_class(
        f"Colored{colors}{base.__name__}",
        (Colored,),
        exec_body=lambda ns: ns.update(namespace),
    )