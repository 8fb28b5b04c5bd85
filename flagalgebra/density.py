"""Coefficients of the flag algebra operators."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from flagalgebra.combinatorics import splits_with_fixed_part, subsets_with_fixed_part
from flagalgebra.flag import Flag

__all__ = [
    "count_subflags",
    "count_split",
    "count_subflag_tabulate",
    "count_split_tabulate",
    "unlabeling_tabulate",
    "unlabeling_count_tabulate",
    "invariant_classes",
    "class_matrices",
]

# Sparse matrices are dictionaries mapping (row, column) to a non-zero value.
SparseMatrix = dict


def _induce_and_reduce(type_size: int, f: Flag, subset: Sequence[int]) -> Flag:
    return f.induce(subset).canonical_typed(type_size)


def _index(flags: Sequence[Flag]) -> dict[Flag, int]:
    return {f: i for i, f in enumerate(flags)}


def _check_sizes(type_size: int, k: int, n: int) -> None:
    if not 0 <= type_size <= k <= n:
        raise ValueError(f"need type size <= {k} <= {n}, got type size {type_size}")


def _check_canonical(type_size: int, f: Flag) -> None:
    if f != f.canonical_typed(type_size):
        raise ValueError(f"flag is not in typed canonical form: {f!r}")


def count_subflags(type_size: int, f: Flag, g: Flag) -> int:
    """Number of induced subflags of ``g`` isomorphic to ``f`` with a type of size ``type_size``.

    ``f`` must be in typed canonical form.
    """
    _check_canonical(type_size, f)
    k, n = f.size(), g.size()
    _check_sizes(type_size, k, n)
    return sum(
        1
        for subset in subsets_with_fixed_part(n, k, type_size)
        if _induce_and_reduce(type_size, g, subset) == f
    )


def count_split(type_size: int, f1: Flag, f2: Flag, g: Flag) -> int:
    """Number of splits of ``g`` meeting in ``[type_size]`` that induce ``f1`` and ``f2``."""
    _check_canonical(type_size, f1)
    _check_canonical(type_size, f2)
    k1, k2, n = f1.size(), f2.size(), g.size()
    _check_sizes(type_size, k1, n)
    if n != k1 + k2 - type_size:
        raise ValueError(f"sizes {k1} and {k2} do not split a flag of size {n}")
    return sum(
        1
        for subset1, subset2 in splits_with_fixed_part(n, k1, type_size)
        if _induce_and_reduce(type_size, g, subset1) == f1
        and _induce_and_reduce(type_size, g, subset2) == f2
    )


def count_subflag_tabulate(
    type_size: int, f_vec: Sequence[Flag], g_vec: Sequence[Flag]
) -> SparseMatrix:
    """Sparse matrix ``m`` with ``m[j, i] == count_subflags(type_size, f_vec[i], g_vec[j])``.

    Rows are indexed by ``g_vec`` and columns by ``f_vec``; zero entries are absent.
    """
    if not f_vec or not g_vec:
        raise ValueError("flag lists must not be empty")
    k, n = f_vec[0].size(), g_vec[0].size()
    _check_sizes(type_size, k, n)
    index = _index(f_vec)
    result: SparseMatrix = {}
    for j, g in enumerate(g_vec):
        column: Counter[int] = Counter()
        for subset in subsets_with_fixed_part(n, k, type_size):
            f0 = _induce_and_reduce(type_size, g, subset)
            i = index.get(f0)
            if i is None:
                if type(g).HEREDITARY:
                    raise ValueError(f"Flag not found: {f0!r}")
            else:
                column[i] += 1
        for i, count in column.items():
            result[j, i] = count
    return result


def count_split_tabulate(
    type_size: int,
    f1_vec: Sequence[Flag],
    f2_vec: Sequence[Flag],
    g_vec: Sequence[Flag],
) -> list[SparseMatrix]:
    """One sparse matrix per flag of ``g_vec``.

    ``m[p][i, j] == count_split(type_size, f1_vec[i], f2_vec[j], g_vec[p])``.
    """
    if not f1_vec or not f2_vec or not g_vec:
        raise ValueError("flag lists must not be empty")
    k1, k2, n = f1_vec[0].size(), f2_vec[0].size(), g_vec[0].size()
    _check_sizes(type_size, k1, n)
    if n != k1 + k2 - type_size:
        raise ValueError(f"sizes {k1} and {k2} do not split a flag of size {n}")
    index1, index2 = _index(f1_vec), _index(f2_vec)
    result: list[SparseMatrix] = []
    for g in g_vec:
        counts: Counter[tuple[int, int]] = Counter()
        for subset1, subset2 in splits_with_fixed_part(n, k1, type_size):
            i1 = index1.get(_induce_and_reduce(type_size, g, subset1))
            i2 = index2.get(_induce_and_reduce(type_size, g, subset2))
            if i1 is not None and i2 is not None:
                counts[i1, i2] += 1
            elif type(g).HEREDITARY:
                raise ValueError("Flag not found")
        result.append(dict(counts))
    return result


def unlabeling_tabulate(
    eta: Sequence[int], input_vec: Sequence[Flag], output_vec: Sequence[Flag]
) -> list[int]:
    """Index in ``output_vec`` of each flag of ``input_vec`` retyped on the image of ``eta``."""
    type_size = len(eta)
    index = _index(output_vec)
    result = []
    for flag in input_vec:
        unlabeled = flag.select_type(eta).canonical_typed(type_size)
        i = index.get(unlabeled)
        if i is None:
            raise ValueError(f"Flag not found (type {type_size}): {unlabeled!r}")
        result.append(i)
    return result


def unlabeling_count_tabulate(
    eta: Sequence[int], type_size: int, input_vec: Sequence[Flag]
) -> list[int]:
    """Number of ways to relabel each flag of ``input_vec`` keeping the image of ``eta`` as type."""
    if not input_vec:
        raise ValueError("flag list must not be empty")
    result = []
    for flag in input_vec:
        retyped = flag.select_type(eta).canonical_typed(len(eta))
        aut_typed = len(flag.stabilizer(type_size))
        aut = len(retyped.stabilizer(len(eta)))
        if aut % aut_typed != 0:
            raise ArithmeticError("automorphism counts are inconsistent")
        result.append(aut // aut_typed)
    return result


def invariant_classes(
    eta: Sequence[int], type_size: int, input_vec: Sequence[Flag]
) -> list[int]:
    """Classify typed flags up to the symmetries of their type.

    ``class[i] == class[j]`` exactly when ``input_vec[i]`` and ``input_vec[j]``
    are equal modulo a permutation of the type. Classes are numbered from 0
    in order of first appearance.
    """
    if not input_vec:
        raise ValueError("flag list must not be empty")
    n = input_vec[0].size()
    if type_size > n:
        raise ValueError("type larger than the flags")
    if eta:
        raise ValueError("invariant classes are only computed for an empty eta")
    type_flag = input_vec[0].induce(range(type_size)).canonical_typed(0)
    automorphisms = [list(phi) + list(range(type_size, n)) for phi in type_flag.stabilizer(0)]
    index = _index(input_vec)
    classes: list[int | None] = [None] * len(input_vec)
    n_classes = 0
    for i, flag in enumerate(input_vec):
        if classes[i] is not None:
            continue
        new_class = n_classes
        n_classes += 1
        for phi in automorphisms:
            image = flag.apply_morphism(phi).canonical_typed(type_size)
            j = index.get(image)
            if j is None:
                raise ValueError(f"Flag not found: {image!r}")
            if classes[j] is None:
                classes[j] = new_class
            elif classes[j] != new_class:
                raise ValueError("inconsistent classes")
    return [c for c in classes if c is not None]


def class_matrices(classes: Sequence[int]) -> tuple[SparseMatrix, SparseMatrix]:
    """Matrices separating the invariant and anti-invariant parts of a vector.

    The invariant matrix has shape ``(len(classes), n_classes)`` and the
    anti-invariant one ``(len(classes), len(classes) - n_classes)``.
    """
    if not classes:
        raise ValueError("class list must not be empty")
    invariant: SparseMatrix = {}
    antiinvariant: SparseMatrix = {}
    first_of_class: list[int] = []
    for i, c in enumerate(classes):
        invariant[i, c] = 1
        if c < len(first_of_class):
            col = i - len(first_of_class)
            antiinvariant[i, col] = 1
            antiinvariant[first_of_class[c], col] = -1
        elif c == len(first_of_class):
            first_of_class.append(i)
        else:
            raise ValueError(f"class {c} appears before class {len(first_of_class)}")
    return invariant, antiinvariant