# graphwork

Classic graph algorithms in plain Python, with no runtime dependencies.
Graphs are given as ordinary Python lists: edge lists, adjacency lists,
adjacency matrices or grids of cells.

Several problems come in two flavours: an exhaustive or straightforward
version whose name ends in `_bruteforce`, and an efficient version. Both give
the same answers, so the simple one is handy for checking the efficient one on
small inputs.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `graphwork.disjoint_set` | `DisjointSet` with `find`, `union_by_rank`, `union_by_size`, `component_size` |
| `graphwork.grid_paths` | `shortest_path_binary_maze`, `minimum_effort` and their `_bruteforce` variants |
| `graphwork.path_counting` | `count_shortest_paths`, `count_shortest_paths_bruteforce` |
| `graphwork.connectivity` | `make_connected`, `remove_stones` and their `_bruteforce` variants |
| `graphwork.traversal` | `dfs_recursive`, `dfs_iterative`, `flood_fill`, `flood_fill_bruteforce`, `fill_surrounded`, `fill_surrounded_bruteforce` |
| `graphwork.cycles` | `has_cycle_matrix`, `has_cycle_bfs`, `has_cycle_from_matrix`, `has_cycle_from_list` |
| `graphwork.topo` | `DirectedGraph` (`add_edge`, `topo_sort_dfs`, `topo_sort_kahn`, `has_cycle`), `can_finish_bruteforce`, `find_order` |
| `graphwork.shortest_paths` | `shortest_path_dag`, `dijkstra`, `cheapest_flight`, `minimum_multiplications`, `bellman_ford`, `floyd_warshall`, `find_the_city`, `NegativeCycleError`, `INF` |
| `graphwork.mst` | `prim_mst`, `kruskal`, `kruskal_bruteforce` |
| `graphwork.accounts` | `merge_accounts`, `merge_accounts_bruteforce` |
| `graphwork.islands` | `count_enclaves`, `count_islands`, `islands_after_additions`, `islands_after_additions_bruteforce`, `largest_island` |
| `graphwork.critical` | `critical_connections`, `articulation_points`, `count_strongly_connected` |

A few conventions worth knowing:

- `DisjointSet(n)` covers the nodes `0` through `n` inclusive, so both 0-based
  and 1-based labels fit. Its union methods return `True` when two sets were
  joined and `False` when the nodes were already together.
- `dijkstra` and `bellman_ford` report unreachable nodes as `INF` (`10**9`);
  `shortest_path_dag` reports them as `-1`.
- `floyd_warshall` reads `-1` off the diagonal as "no edge" and writes `-1`
  where there is no path.
- `count_shortest_paths` returns its count modulo `10**9 + 7`.
- `dfs_recursive` and `dfs_iterative` start at node 0 and report 1-based labels.
- `articulation_points` returns `[-1]` when the graph has none.
- `flood_fill`, `fill_surrounded` and their variants return new grids and
  leave the input untouched.

## Examples

Shortest path in a binary maze (cells of `1` are open):

```python
from graphwork.grid_paths import shortest_path_binary_maze

grid = [
    [1, 1, 1, 1],
    [1, 1, 0, 1],
    [1, 1, 1, 1],
    [1, 1, 0, 0],
    [1, 0, 0, 1],
]
shortest_path_binary_maze(grid, (0, 1), (2, 2))  # 3
```

Dijkstra on an adjacency list of `(neighbour, weight)` pairs:

```python
from graphwork.shortest_paths import dijkstra

adj = [[(1, 1), (2, 6)], [(2, 3), (0, 1)], [(1, 3), (0, 6)]]
dijkstra(adj, 2)  # [4, 3, 0]
```

Bellman-Ford raises `NegativeCycleError` when a negative cycle is reachable:

```python
from graphwork.shortest_paths import bellman_ford, NegativeCycleError

try:
    bellman_ford(3, 0, [(0, 1, 1), (1, 2, -1), (2, 1, -1)])
except NegativeCycleError:
    print("negative cycle")
```

Topological order of a directed graph:

```python
from graphwork.topo import DirectedGraph

g = DirectedGraph(6)
for u, v in [(5, 0), (5, 2), (4, 0), (4, 1), (2, 3), (3, 1)]:
    g.add_edge(u, v)
g.topo_sort_kahn()  # [4, 5, 0, 2, 3, 1]
g.has_cycle()       # False
```

Minimum spanning tree weight:

```python
from graphwork.mst import kruskal

edges = [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8), (1, 4, 5), (4, 2, 7)]
kruskal(5, edges)  # 16
```

Counting islands as cells are turned into land:

```python
from graphwork.islands import islands_after_additions

islands_after_additions(4, 5, [(1, 1), (0, 1), (3, 3), (3, 4)])  # [1, 1, 2, 2]
```

## What it does not do

`graphwork` is a library only: it has no command-line program, and it does
not read graphs from files or standard input. Build your graphs as Python
lists and call the functions directly.