# algokit

A small collection of classic algorithms. Each comes as a Python function
and as a command that reads whitespace-separated integers from standard input.

| Problem | Functions | Command |
| --- | --- | --- |
| m-colouring of a graph | `algokit.coloring.colorings`, `minimal_colorings`, `colors_used` | `algokit-coloring` |
| Hamiltonian cycles | `algokit.hamiltonian.hamiltonian_cycles`, `format_cycle` | `algokit-hamiltonian` |
| Optimal merge of files | `algokit.merging.optimal_merge_cost` | `algokit-merge` |
| Minimum and maximum, divide and conquer | `algokit.minmax.min_max` | `algokit-minmax` |
| N queens | `algokit.queens.queen_solutions`, `render_board` | `algokit-queens` |
| All-pairs shortest paths (Floyd–Warshall) | `algokit.shortest_paths.floyd_warshall` | `algokit-all-pairs` |
| Single-source shortest paths (Bellman–Ford) | `algokit.shortest_paths.bellman_ford`, `NegativeCycleError` | `algokit-single-source` |
| Sum of subsets | `algokit.subsets.sum_of_subsets` | `algokit-subsets` |

## Installing

```
pip install .
```

No third-party packages are needed. To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

All vertex, row and column numbers in the library are 0-based.

```python
from algokit.coloring import colorings, minimal_colorings
from algokit.queens import queen_solutions, render_board
from algokit.shortest_paths import bellman_ford, format_distance, NegativeCycleError
from algokit.subsets import sum_of_subsets

triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
for coloring in colorings(triangle, 3):
    print(coloring)                      # colours are numbered 1..3

fewest, best = minimal_colorings(triangle, 3)   # (3, [...])

first = next(queen_solutions(4))         # (1, 3, 0, 2)
print(render_board(first))

try:
    distances = bellman_ford(3, [(0, 1, 4), (1, 2, -1)], 0)
    print([format_distance(d) for d in distances])   # ['0', '4', '3']
except NegativeCycleError:
    print("negative cycle")

for subset in sum_of_subsets([5, 10, 12, 13, 15, 18], 30):
    print(subset)
```

Notes on behaviour:

- The search functions (`colorings`, `hamiltonian_cycles`, `queen_solutions`,
  `sum_of_subsets`) are generators that yield solutions lazily in depth-first
  order, so you can stop early or collect them all.
- `colorings` yields colourings in lexicographic order; a vertex with a
  self-loop can never be coloured. `minimal_colorings` returns `(None, [])`
  when no colouring exists.
- `hamiltonian_cycles` yields cycles starting at vertex 0, each undirected
  cycle once per direction. `format_cycle` renders `0 -> 1 -> 2 -> 0`.
- `optimal_merge_cost` sorts the sizes and sums the running totals after the
  first.
- `min_max` raises `ValueError` on an empty sequence.
- `floyd_warshall(vertex_count, edges)` takes `(source, target, weight)`
  edges; later edges replace earlier ones, and unreachable pairs are
  `math.inf` (rendered as `INF` by `format_distance`).
- `bellman_ford` raises `NegativeCycleError` (a `ValueError`) when a
  negative-weight cycle is reachable from the source.
- `sum_of_subsets` requires positive weights in non-decreasing order and a
  positive target, and raises `ValueError` otherwise.
- Out-of-range vertices and non-square matrices raise `ValueError`.

## Using the commands

The commands do not prompt; they read all integers from standard input, so
input is usually piped in. Vertex numbers given to `algokit-all-pairs` and
`algokit-single-source` are 1-based.

```
printf '4\n' | algokit-queens
printf '3 3\n0 1 1\n1 0 1\n1 1 0\n' | algokit-coloring
printf '3 2\n1 2 4\n2 3 -1\n1\n' | algokit-single-source
printf '6\n5 10 12 13 15 18\n30\n' | algokit-subsets
```

Input formats:

| Command | Input |
| --- | --- |
| `algokit-coloring` | vertex count, colour count, adjacency matrix |
| `algokit-hamiltonian` | vertex count, adjacency matrix |
| `algokit-merge` | file count, file sizes |
| `algokit-minmax` | count, values |
| `algokit-queens` | number of queens |
| `algokit-all-pairs` | vertex count, edge count, edges as `source target weight` |
| `algokit-single-source` | as above, then the source vertex |
| `algokit-subsets` | count, weights in non-decreasing order, target |

Options:

- `algokit-coloring --all-only` lists each colouring as `Solution: ...`
  without the summary of minimal colourings.
- `algokit-hamiltonian --one-based` numbers vertices from 1 in the output.

`algokit-all-pairs` reports and skips edges whose vertices are out of range.
`algokit-single-source` prints `Graph contains a negative-weight cycle!` when
it finds one. Malformed or missing input makes a command print
`error: ...` to standard error and exit with status 1.

## Limits

Graphs are given only as adjacency matrices or edge lists of integers on
standard input; there is no reading of graph files in other formats and no
drawing or export of results.