# verialgo

A small collection of classic algorithms in pure Python, with no
dependencies outside the standard library. Each function states what it
accepts, what it returns and which exceptions it raises.

## Installation

```
pip install verialgo
```

To run the test suite:

```
pip install "verialgo[test]"
pytest
```

## Modules

### `verialgo.sorting`

Each sort accepts any iterable and returns a new ascending list. The input
is never modified.

- `bubble_sort`, `insertion_sort`, `heap_sort`, `quick_sort`: general
  comparison sorts.
- `bucket_sort(values)`: sorts numbers in `[0, 1)`. Raises `ValueError`
  for any value outside that range.
- `counting_sort(values, max_value)`: sorts integers in `0..max_value`.
  Raises `ValueError` if `max_value` is negative or a value is out of range.
- `radix_sort(values)`: sorts non-negative integers by decimal digits.
  Raises `ValueError` for a negative value.
- `merge(first, second)`: merges two ascending sequences. On ties the item
  from `first` comes first.

### `verialgo.selection`

- `partition_lomuto(items, lo, hi)`: partitions `items[lo..hi]` in place
  around its last element and returns the pivot's final index.
- `partition_hoare(items, lo, hi)`: partitions in place around the value
  of `items[lo]`. It returns `j` with `lo <= j < hi`, where `items[lo..j]`
  are no greater than the pivot and `items[j+1..hi]` are no smaller. It
  needs `lo < hi`.
- `linear_select(values, k)`: returns the `k`-th smallest value (from 0)
  using the median-of-medians rule. Raises `IndexError` for an invalid rank.
- `max_element(values)`: returns the index of the first largest value, or
  0 for an empty sequence.
- `max_seq(values)`: returns the largest value. Raises `ValueError` when
  the sequence is empty.

The partition functions raise `ValueError` for a range that is too short
and `IndexError` for a range outside the sequence.

### `verialgo.dynamic`

- `edit_distance(source, target)`: Levenshtein distance.
- `lcs_length(first, second)`: length of a longest common subsequence.
- `lis_length(values)`: length of a longest strictly increasing
  subsequence.
- `matrix_chain_order(dims)`: fewest scalar multiplications for a matrix
  chain. Matrix `i` has shape `dims[i-1] x dims[i]`. Raises `ValueError`
  when fewer than two dimensions are given.
- `max_subarray_sum(values)`: largest sum of a non-empty contiguous run,
  found with Kadane's algorithm. Raises `ValueError` when `values` is empty.
- `rod_cutting(prices)`: best revenue for a rod of length `len(prices)`.
  `prices[i]` is the price of a piece of length `i + 1`.

### `verialgo.graphs`

Dense graphs are square matrices. Any non-square matrix raises
`ValueError`, and a start vertex out of range raises `IndexError`.

- `Edge(u, v, weight)`: a frozen dataclass.
- `ShortestPaths`: has `distances` (`math.inf` where a vertex is
  unreachable) and `parents` (`None` for the start vertex and for
  unreached vertices).
- `SpanningTree`: has `edges` (a tuple of `Edge`) and a `weight` property
  that gives their total.
- `bellman_ford(vertex_count, edges, start)`: performs
  `vertex_count - 1` relaxation rounds over directed edges. Negative
  weights are allowed. Negative cycles are not detected.
- `bfs(adjacency, start)`: returns the hop count to each vertex, or `None`
  for a vertex that cannot be reached. An entry of 1 marks an edge.
- `dfs(adjacency, start)`: returns the reachable vertices in the order
  they are discovered.
- `dijkstra(graph, start)`: shortest paths in a weighted matrix, where 0
  means no edge.
- `floyd(graph)`: all-pairs shortest path lengths. Use `math.inf` where
  there is no edge. The function returns a new matrix.
- `kruskal(vertex_count, edges)`: minimum spanning tree or forest. Raises
  `ValueError` unless `vertex_count` is positive.
- `prim(graph)`: minimum spanning tree grown from vertex 0, where 0 means
  no edge. Vertices that vertex 0 cannot reach are left out. Raises
  `ValueError` for an empty graph or a negative weight.
- `topo_sort(graph)`: Kahn's algorithm. Sources are taken in index order.
  Raises `ValueError` if the graph has a cycle.

### `verialgo.numeric`

- `gcd(a, b)`: greatest common divisor of two non-negative integers, by
  Euclid's rule. Raises `ValueError` for a negative argument.
- `horner(coefficients, x)`: evaluates `sum(coefficients[i] * x**i)`.
  Raises `ValueError` when no coefficients are given.

### `verialgo.trees`

- `BSTNode(key, left=None, right=None)` and `bst_search(root, key)`:
  returns the node that holds `key`, or `None`.
- `HuffmanNode(symbol, freq, left=None, right=None)` and
  `build_huffman(nodes)`: repeatedly merges the two lowest-frequency nodes
  and returns the root. Internal nodes have `symbol` set to `None`. Raises
  `ValueError` when no nodes are given or a frequency is not positive.

### `verialgo.hashing`

`LinearProbingTable(size)` is a fixed-size open-addressing table of
integer keys:

- A key's home slot is `key % size`. Collisions move to the next slot and
  wrap around.
- `insert(key)` returns the slot index used. Raises `OverflowError` when
  the table is full.
- Duplicate keys are stored again.
- `search(key)` returns the index of the first slot along the probe path
  that holds the key, or `None`.
- The table also supports `in` and `len()`, and has `size` and `slots`
  properties.
- A size that is not positive raises `ValueError`.

## Examples

```python
from verialgo.sorting import quick_sort, merge
from verialgo.dynamic import edit_distance
from verialgo.numeric import gcd

quick_sort([5, 2, 9, 1])            # [1, 2, 5, 9]
merge([1, 4, 7], [2, 3, 8])         # [1, 2, 3, 4, 7, 8]
edit_distance("kitten", "sitting")  # 3
gcd(48, 18)                         # 6
```

```python
from verialgo.graphs import Edge, bellman_ford, kruskal

edges = [Edge(0, 1, 4), Edge(0, 2, 1), Edge(2, 1, 2)]
paths = bellman_ford(3, edges, 0)
paths.distances  # [0, 3, 1]
paths.parents    # [None, 2, 0]
kruskal(3, edges).weight  # 3
```

```python
from verialgo.hashing import LinearProbingTable

table = LinearProbingTable(7)
table.insert(10)   # 3
table.insert(3)    # 4 (slot 3 is taken)
table.search(3)    # 4
```

## What it does not do

This is a library only. It has no command-line tool. It does not store
anything between calls: the hash table keeps its contents in memory only
and cannot delete keys or grow beyond its size.