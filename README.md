# algokit

Classic algorithms and data structures in plain Python, using only the
standard library. Python 3.10 or later is required.

## Installation

```
pip install .
```

The test suite uses pytest, available through the `test` extra:

```
pip install ".[test]"
pytest
```

## What is inside

### Disjoint sets

`algokit.dsu`:
- `DSU(n)`: union-find over `0..n-1` with path compression and union by size;
  `find`, `join` (returns `False` if already united) and `hang(child, parent)`.
- `DSURangeJoin(n)`: adds `join_range(a, b)`, uniting every element of `[a, b]`.
- `DSUWithUndo(n)`: no path compression; `undo()` reverts the latest successful
  join (raises `IndexError` when there is nothing to undo). `count` holds the
  number of sets and `history` the joins made.
- `ImplicitDSU()`: works on arbitrary integers, creating them on first use;
  `merge(other)` applies another instance's unions and returns how many joins
  succeeded.

### Range queries

- `algokit.fenwick.FenwickTree(n, value=0)`: 1-based positions; `update`,
  `prefix_sum`, `range_sum` (inclusive) and `set`.
- `algokit.sparse_table.SparseTable(values)`: `query(l, r)` gives the minimum
  over `[l, r)`.
- `algokit.segtree`: `SegTree(n, op, default)` and `SegTree.from_values(...)`
  with point `set` and `get(l, r)` over `[l, r)`; the ready-made
  `SegTreeSum` (with `find_nth_zero`), `SegTreeMin`, `SegTreeMax`,
  `SegTreeMex` (`add`, `remove`, smallest absent index in a range),
  `SegTreeMinRange` (range assignment keeping the larger value, range minimum)
  and `DeltaSegTree` (range add, point read).
- `algokit.segtree_push.SegTreePush`: range add and range sum.
- `algokit.implicit_segtree.ImplicitSegTree`: range assign and range sum,
  creating nodes only when needed.
- `algokit.segtree_ap`: `SegTreeAP.add(l, r, first, step)` adds an arithmetic
  progression over a range; `sum_arithmetic` sums one.
- `algokit.segtree_count.SegTreeCountValue`: point set and
  `count(l, r, value)`.
- `algokit.segtree_2d`: `Rect2D` and `SegTree2D`, a quadtree for point
  assignment and rectangle minimum.

### Trees

- `algokit.lca`: `DynamicLCA` (a tree grown by adding leaves) and `TreeLCA`
  (a fixed tree from an adjacency list), both by binary lifting.
- `algokit.hld.HeavyLightDecomposition`: `path_add`, `path_sum` and
  `is_ancestor` on a tree.
- `algokit.treap.Treap`: sorted multiset of integers; `insert`, `erase`
  (removes every occurrence) and ascending iteration.
- `algokit.implicit_treap.ImplicitTreap`: a sequence with positional `insert`
  and `erase`, `cut(l, r)` returning a new treap, `paste(i, other)` and
  `reverse(l, r)`.

### Math

- `algokit.modular`: `pow_mod`, `inv_mod`, `div_mod`, `comb_mod`, modulo
  `10**9 + 7` by default.
- `algokit.sieve.linear_sieve(n)`: least prime divisors and the primes up to `n`.
- `algokit.fibonacci`: `Mat2`, `mat_pow`, `fib_step_matrix` and
  `fibonacci_pair(n)` returning `(F(n-1), F(n))`, negative `n` included.
- `algokit.convex_hull`: `Line` and `LowerEnvelope` (lines added in decreasing
  slope order, minimum queried at integer points).
- `algokit.fft`: `fft`, `multiply` (cyclic convolution), `next_pow2` and
  `pair_sum_counts`.

### Strings

- `algokit.string_functions`: `prefix_function`, `z_function`.
- `algokit.suffix_array`: `suffix_array`, `lcp_array`.
- `algokit.string_hashing`: `PalindromeHasher`, `power_table`,
  `polynomial_hash`, `DoubleHash` and `PrefixHash`.
- `algokit.aho_corasick`: `AhoCorasick` (`count_matches` counts occurrences of
  dictionary words) and `DynamicAhoCorasick`, which accepts new words between
  queries.
- `algokit.suffix_automaton.SuffixAutomaton`, with `count_endpos`.
- `algokit.suffix_tree.SuffixTree`, with `contains(pattern)`; the text may not
  contain `$`, which is used as terminator.

### Graphs

- Connectivity: `algokit.bridges` (`find_bridges`, `find_articulation_points`),
  `algokit.bridges_online` (`OnlineBridges`, `count_bridges_online`),
  `algokit.dynamic_connectivity.offline_connectivity` for `('+', u, v)`,
  `('-', u, v)` and `('?',)` queries, and
  `algokit.scc.strongly_connected_components`.
- Equal/different constraints on booleans:
  `algokit.two_sat.solve_parity_constraints`.
- Matching: `algokit.matching.max_bipartite_matching`.
- Flows: `algokit.flows.FlowNetwork` (`dinic`, `ford_fulkerson`) and
  `algokit.flows.MinCostFlow` (`solve` returns `(cost, flow)`).
- Spanning trees: `algokit.mst` (`WeightedEdge`, `kruskal`, `prim`).
- Shortest paths: `algokit.shortest_paths` (`bfs`, `find_path`, `dijkstra`,
  `floyd_warshall`).

Vertices are numbered from 0 throughout; out-of-range indices raise
`IndexError` and malformed input raises `ValueError`.

## Example

```python
from algokit.dsu import DSU
from algokit.fenwick import FenwickTree
from algokit.string_functions import prefix_function
from algokit.flows import FlowNetwork

dsu = DSU(5)
dsu.join(0, 1)
assert dsu.find(0) == dsu.find(1)

tree = FenwickTree(8, 0)
tree.update(3, 5)
print(tree.range_sum(1, 4))   # 5

print(prefix_function("abacaba"))  # [0, 0, 1, 0, 1, 2, 3]

net = FlowNetwork(4)
net.add_edge(0, 1, 3)
net.add_edge(1, 3, 2)
net.add_edge(0, 2, 2)
net.add_edge(2, 3, 3)
print(net.dinic(0, 3))        # 4
```

## What it does not do

algokit is a library only. It has no command-line program and does not read
problem input from standard input; build the structures and call the
functions from your own code.