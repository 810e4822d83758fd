# contestlib

A library of the algorithms and data structures that programming contests
call for, written in plain Python using only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Contents

| Module | What it provides |
| --- | --- |
| `contestlib.geometry3d` | `Point3` and functions on points, lines, segments, triangles and planes in space: predicates (`collinear`, `coplanar`, `on_segment`, `in_triangle`, parallel/perpendicular tests), intersections, distances and angles |
| `contestlib.histogram` | `nearest_smaller_bounds`, `largest_rectangle` |
| `contestlib.knuth` | `optimal_cut_cost`: least cost of cutting a stick, by interval DP with Knuth's optimisation |
| `contestlib.hld` | `HeavyLightDecomposition`: `lca`, `update_edge` and `path_max` over edge weights of a tree |
| `contestlib.lca` | `RootedTree`: `lca`, `is_ancestor`, `kth_ancestor`, `subtree_size`, `equidistant_count` |
| `contestlib.scc` | `tarjan_scc`, strongly connected components |
| `contestlib.mst` | `DisjointSet`, `minimum_spanning_tree` (Kruskal); returns the total cost and the chosen edges, and raises `ValueError` for a disconnected graph |
| `contestlib.dinic` | `Dinic` maximum flow with directed and undirected edges |
| `contestlib.mincost` | `MinCostFlow` (`min_cost_flow` returns `(flow, cost)`), `min_cost_assignment` for square cost matrices |
| `contestlib.mincut` | `min_cut`: maximum flow value and the edges of a minimum cut in an undirected graph |
| `contestlib.bipartite` | `HopcroftKarp` maximum bipartite matching |
| `contestlib.sliding_window` | `max_sliding_window`, `min_sliding_window` |
| `contestlib.hashing` | `longest_common_substring` by binary search over double polynomial hashes |
| `contestlib.word_search` | `PrefixMatcher` (KMP first-occurrence search) and `WordGrid`, which searches a square grid along rows both ways, columns top to bottom, and every diagonal both ways |
| `contestlib.kmp` | `prefix_function`, `fibonacci_words`, `fibonacci_prefix_sums` |
| `contestlib.manacher` | `palindrome_radii`, `longest_palindrome` |
| `contestlib.lis` | `longest_increasing_subsequence` (strictly increasing), returning a `LisResult` with `length`, `sequence` and `ends` |
| `contestlib.matrix` | immutable square `Matrix` with `@`, `**` and `Matrix.identity`; `count_digit_pair_sequences` |
| `contestlib.burnside` | `phi_table` (Euler's totient), `necklaces` (Burnside's lemma, modulo 1 000 000 007 by default) |
| `contestlib.pick` | lattice `Point`, `cross`, `dot`, line and segment intersection, `convex_hull`, `signed_area` and `area` (both twice the polygon's area), `boundary_points`, `interior_points` by Pick's theorem |
| `contestlib.persistent_queue` | `PersistentQueue`: each `push` or `pop` on any version creates a new version |
| `contestlib.matrix_match` | `contains_submatrix`: 2D pattern search with row hashes and KMP |
| `contestlib.segment_tree` | `MinAssignTree` (range chmin, range minimum) and `min_intervals_cover` |

## Examples

Maximum flow:

```python
from contestlib.dinic import Dinic

flow = Dinic(3)
flow.add_edge(0, 1, 3)
flow.add_edge(0, 2, 2)
flow.add_edge(1, 2, 2)
print(flow.max_flow(0, 2))  # 4
```

Lowest common ancestor:

```python
from contestlib.lca import RootedTree

tree = RootedTree(5, [(0, 1), (0, 2), (2, 3), (2, 4)])
print(tree.lca(3, 4))  # 2
```

Matrix powers:

```python
from contestlib.matrix import Matrix

step = Matrix([[1, 1], [1, 0]])
print((step ** 10).rows[0][1])  # 55
print(step @ step == step ** 2)  # True
```

Persistent queue:

```python
from contestlib.persistent_queue import PersistentQueue

queue = PersistentQueue()
v1 = queue.push(0, 1)        # version 1
value, v2 = queue.pop(v1)    # value 1, version 2
print(queue.length(v1), queue.length(v2))  # 1 0
```

Pick's theorem:

```python
from contestlib.pick import Point, interior_points

square = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]
print(interior_points(square))  # 9
```

Invalid input raises an exception: for example popping from an empty
version of a `PersistentQueue` raises `IndexError`, and a node number out of
range in the graph classes raises `IndexError`.

## What it does not do

contestlib is a library only. It has no command-line program and reads no
problem input from standard input or files; you build the graphs, strings
and matrices in Python and call the functions yourself.