"""Combinatorial flags: enumeration up to isomorphism, typed flags and density counts."""

__version__ = "0.4.0"

__all__ = [
    "combinatorics",
    "common",
    "flag",
    "graph",
    "digraph",
    "colored",
    "cgraph",
    "density",
]