"""Basic combinatorial functions.

Here ``[n]`` denotes the set ``{0, 1, ..., n-1}``. A function from ``[n]``
to ``[k]`` is represented by a sequence of length ``n``; this holds in
particular for permutations.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator, Sequence

__all__ = [
    "product",
    "factorial",
    "binomial",
    "pre_image",
    "invert",
    "permutation_of_injection",
    "compose",
    "subsets_with_fixed_part",
    "splits_with_fixed_part",
    "functions",
]


def product(start: int, end: int) -> int:
    """Return ``start * (start + 1) * ... * end`` (1 for an empty range)."""
    if start > end + 1:
        raise ValueError(f"invalid range: {start}..{end}")
    result = 1
    for x in range(start, end + 1):
        result *= x
    return result


def factorial(n: int) -> int:
    """Return the product of the integers from 1 to ``n``."""
    return product(1, n)


def binomial(k: int, n: int) -> int:
    """Return the number of subsets of size ``k`` of a set of size ``n``."""
    if k < 0 or k > n:
        return 0
    return product(n - k + 1, n) // factorial(k)


def pre_image(n: int, t: Sequence[int]) -> list[list[int]]:
    """Return ``u`` of length ``n`` where ``u[i]`` lists every ``x`` with ``t[x] == i``."""
    result: list[list[int]] = [[] for _ in range(n)]
    for i, v in enumerate(t):
        result[v].append(i)
    return result


def invert(t: Sequence[int]) -> list[int]:
    """Return the inverse of the permutation ``t``."""
    n = len(t)
    result = [n] * n
    for i, v in enumerate(t):
        if result[v] != n:
            raise ValueError(f"not a permutation: {list(t)}")
        result[v] = i
    return result


def permutation_of_injection(n: int, t: Sequence[int]) -> list[int]:
    """Extend the injection ``t`` from ``[k]`` to ``[n]`` into a bijection of ``[n]``.

    The result equals ``t`` on ``[k]`` and is increasing on ``{k, ..., n-1}``.
    """
    used = set(t)
    return list(t) + [i for i in range(n) if i not in used]


def compose(p: Sequence[int], q: Sequence[int]) -> list[int]:
    """Return ``[p[q[0]], ..., p[q[-1]]]``."""
    if len(p) != len(q):
        raise ValueError("compose expects sequences of the same length")
    return [p[x] for x in q]


def _check_fixed(n: int, k: int, fixed: int) -> None:
    if not 0 <= fixed <= k <= n:
        raise ValueError(f"need 0 <= fixed <= k <= n, got fixed={fixed}, k={k}, n={n}")


def subsets_with_fixed_part(n: int, k: int, fixed: int) -> Iterator[tuple[int, ...]]:
    """Yield the sorted subsets of size ``k`` of ``[n]`` that contain ``[fixed]``."""
    _check_fixed(n, k, fixed)
    head = tuple(range(fixed))
    for rest in itertools.combinations(range(fixed, n), k - fixed):
        yield head + rest


def splits_with_fixed_part(
    n: int, k: int, fixed: int
) -> Iterator[tuple[tuple[int, ...], tuple[int, ...]]]:
    """Yield pairs of subsets of ``[n]`` meeting exactly in ``[fixed]`` and covering ``[n]``.

    The first subset has size ``k``; the second has size ``n - k + fixed``.
    """
    _check_fixed(n, k, fixed)
    head = tuple(range(fixed))
    free = range(fixed, n)
    for rest in itertools.combinations(free, k - fixed):
        chosen = set(rest)
        other = tuple(x for x in free if x not in chosen)
        yield head + rest, head + other


def functions(n: int, k: int) -> Iterator[tuple[int, ...]]:
    """Yield every function from ``[n]`` to ``[k]`` as a tuple of length ``n``."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    return itertools.product(range(k), repeat=n)