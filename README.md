# flagalgebra

Combinatorial building blocks for flag algebras: classes of flags,
enumeration of flags up to isomorphism, typed (rooted) flags, and the
counts of subflags and splits from which flag-algebra operators are built.
Pure Python, no dependencies.

## Installation

    pip install flagalgebra

## Modules

- `flagalgebra.combinatorics` — `product`, `factorial`, `binomial`,
  `pre_image`, `invert`, `permutation_of_injection`, `compose`, and the
  generators `subsets_with_fixed_part`, `splits_with_fixed_part` and
  `functions`.
- `flagalgebra.common` — `FlatMatrix` and its layouts `Sym`, `SymNonRefl`
  and `AntiSym` (square matrices stored in one list), with
  `relation_invariant` and `relation_extensions`.
- `flagalgebra.flag` — the abstract `Flag` class. A subclass provides
  `size`, `induce`, `invariant_neighborhood`, `superflags`,
  `size_zero_flags` and `sort_key`; `Flag` then gives `canonical`,
  `canonical_typed`, `stabilizer`, `select_type`, `generate`,
  `generate_next`, `generate_typed` and `generate_typed_up`.
  `SubClass` and `subclass(base, name, predicate, hereditary=None)` restrict
  a class to the flags satisfying a predicate; flags are generated by
  filtering one-vertex extensions.
- `flagalgebra.graph` — `Graph` (simple undirected graphs, with `nbrs`,
  `edge`, `edges`, `connected`, and the constructors `empty`, `petersen`,
  `clique`, `cycle`) and the non-hereditary subclass `ConnectedGraph`.
- `flagalgebra.digraph` — `Arc`, `DirectedGraph`, `OrientedGraph`
  (with `out_nbrs`, `in_nbrs`, `arc`, `is_triangle_free`, `add_sink`) and
  `TriangleFreeOrientedGraph`.
- `flagalgebra.colored` — vertex-coloured flags: `colored(base, colors)`
  returns a `Colored` class.
- `flagalgebra.cgraph` — edge-coloured graphs: `cgraph(k)` returns a
  `CGraph` class where each pair of vertices takes one of `k` states
  (`0` meaning no edge).
- `flagalgebra.density` — `count_subflags`, `count_split`,
  `count_subflag_tabulate`, `count_split_tabulate`, `unlabeling_tabulate`,
  `unlabeling_count_tabulate`, `invariant_classes` and `class_matrices`.

## Example

```python
from flagalgebra.graph import Graph
from flagalgebra.colored import colored
from flagalgebra.cgraph import cgraph
from flagalgebra.density import count_subflags, count_subflag_tabulate

# Graphs on 0..5 vertices, up to isomorphism.
print([len(Graph.generate(n)) for n in range(6)])  # [1, 1, 2, 4, 11, 34]

# Induced copies of the path on 3 vertices in the 4-cycle.
cherry = Graph(3, [(0, 1), (1, 2)]).canonical()
print(count_subflags(0, cherry, Graph.cycle(4)))  # 4

# Graphs with 2 vertex colours on 3 vertices; graphs with 2 edge colours.
print(len(colored(Graph, 2).generate(3)))  # 20
print(len(cgraph(3).generate(3)))          # 10

# Table of subflag counts between two levels.
table = count_subflag_tabulate(0, Graph.generate(3), Graph.generate(5))
```

Sparse matrices returned by `flagalgebra.density` are plain dictionaries
mapping `(row, column)` to a non-zero integer. In
`count_subflag_tabulate` rows are indexed by the larger flags and columns by
the smaller ones; `count_split_tabulate` returns one such matrix per larger
flag.

Lists of flags produced by `generate` are sorted and cached in memory for
the lifetime of the process.

## What this package does not do

It stops at the combinatorial layer. There is no vector type for elements
of a flag algebra, no arithmetic on them, no inequalities or
Cauchy–Schwarz constraints, and no output of semidefinite programs for a
solver. Nothing is stored on disk: flag lists and tables are recomputed in
each process.

## Running the tests

    pip install flagalgebra[test]
    pytest