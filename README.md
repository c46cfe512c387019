# mtds

`mtds` finds triangle-dense subgraphs in an undirected graph. Starting from a
seed set of vertices, it repeatedly tries adding neighbouring vertices and then
removing members that still have a neighbour outside the set, keeping every
change whose triangle density stays at or above a threshold `theta`. When a
full round leaves the set unchanged, the result is a locally optimal
triangle-dense subgraph.

The triangle density of a vertex set of size `s` is the number of triangles in
its induced subgraph divided by `s * (s - 1) * (s - 2) / 6`, the number of
vertex triples. Triangles are counted with the forward algorithm over a
descending-degree ordering of the vertices.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graph files

A graph file holds one edge per line, written as two integer vertex ids
separated by whitespace; further fields on a line are ignored:

```
0 1
1 2
2 0
2 4
```

Edges are undirected; each one is stored in both directions. The adjacency
list has one entry for every id from 0 up to the largest id that appears.
Lines that do not start with two integers are skipped, with a warning sent to
the `mtds.adjacency` logger. A negative vertex id raises `ValueError`.

## Command line

Installing the package provides the `mtds` command:

```
mtds GRAPH [SEED ...] [--theta THETA] [--graph-size N]
```

- `GRAPH` is an edge-list file as described above.
- `SEED ...` are the seed vertices; without any, the seed set is `1 2 4`.
- `--theta` is the triangle density threshold (default `0.1`).
- `--graph-size` is how many vertices, counted from 0, the triangle count
  scans (default: every vertex in the file). It must lie between 0 and the
  number of vertices.

The command prints the graph's adjacency list as `vertex: neighbours` lines,
then `Maximal Subgraph` followed by the resulting vertices in ascending order.
If the file cannot be opened it prints `Failed to open file: GRAPH` to standard
error and exits with status 1; seed vertices outside the graph are reported as
a usage error. Run `mtds --help` for the full argument list.

## Library use

```python
from mtds.adjacency import build_adjacency_list
from mtds.search import locally_optimal_triangle_dense_subgraph

adjacency = build_adjacency_list("graph.txt")
result = locally_optimal_triangle_dense_subgraph(
    adjacency,
    len(adjacency),
    {1, 2, 4},
    0.1,
)
print(sorted(result))
```

`locally_optimal_triangle_dense_subgraph` returns a `set` of vertex ids and
raises `ValueError` if a seed vertex is not in the graph.

The building blocks are available on their own as well:

- `mtds.adjacency.parse_adjacency_list(lines)` builds an adjacency list from
  an iterable of edge lines, and `build_adjacency_list(filename)` does the same
  for a file, raising `OSError` if it cannot be opened.
  `format_adjacency_list(adjacency)` renders one as `vertex: neighbours` lines.
- `mtds.triangles.forward_triangle_listing(n, adjacency)` counts the triangles
  among the first `n` vertices; `iter_triangles(n, adjacency)` yields each
  triangle once as a triple of vertex ids, and `degree_order(n, adjacency)`
  gives the descending-degree ordering the count is based on.
- `mtds.density.triangle_density(n, adjacency, size)` computes the triangle
  density of a graph whose vertex set has `size` members. With fewer than
  three members there are no triples, and it returns `nan` (or `inf` if
  triangles were found).
- `mtds.subgraph.get_subgraph_adjacency(adjacency, subgraph_nodes)` returns
  the induced subgraph's adjacency list, keeping the original vertex indices;
  vertices outside the subgraph get empty lists, and a vertex id outside the
  graph raises `IndexError`.

## What it does not do

The package reads plain whitespace-separated integer edge lists only; it has
no support for other graph formats, comment lines are simply skipped as
malformed, and results are printed rather than written to a file.