# grafo

A small toolkit for simple undirected graphs (no loops, no parallel edges)
stored as an adjacency matrix. It checks walks and paths, tests whether a
graph is bipartite in two ways, and builds greedy vertex colourings.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Library use

### `grafo.graph`

`Edge(v1, v2)` is a named tuple; any pair of integers is accepted wherever an
edge is expected. `Graph(num_vertices)` creates a graph with vertices
`0 .. num_vertices - 1`; a negative count raises `ValueError`, and any vertex
outside that range raises `IndexError`.

```python
from grafo.graph import Edge, Graph

g = Graph(4)
g.add_edge(Edge(0, 1))          # True
g.add_edge(Edge(1, 0))          # False, already present
g.add_edge(Edge(2, 2))          # False, loops are rejected
g.add_edge(Edge(1, 2))          # True

g.vertex_count()                # 4
g.edge_count()                  # 2
g.has_edge((2, 1))              # True
g.neighbours(1)                 # [0, 2]
g.degree(1)                     # 2

g.is_walk([0, 1, 2])            # True
g.is_walk([])                   # False
g.is_path([0, 1, 0])            # False, vertex repeated

g.is_bipartite()                # True
g.is_bipartite_by_coloring()    # True

g.remove_edge(Edge(0, 1))       # True
g.remove_edge(Edge(0, 1))       # False, not present

print(g.adjacency_text(), end="")
g.show()                        # prints the same matrix
```

`is_bipartite` splits the vertices greedily into two independent sets,
taking vertices from the highest index down and putting each into the first
set it fits; it does not backtrack. `is_bipartite_by_coloring` two-colours
each connected component with a depth-first search.

### `grafo.coloring`

```python
from grafo.coloring import degree_ordered_coloring, format_coloring, greedy_coloring

colors = greedy_coloring(g)     # one colour per vertex, colours start at 1
print(format_coloring(colors), end="")
```

`greedy_coloring` colours the vertices in index order;
`degree_ordered_coloring` visits them from the highest degree down.
`format_coloring` returns a report of the form:

```
Numero de cores: 2
Cor 1: 0 2 
Cor 2: 1 
```

## Commands

`grafo-demo` builds a four-vertex sample graph with edges 0–1 and 1–2 and
prints its adjacency matrix.

`grafo-bipartite` reads from standard input the number of vertices and of
relations, followed by one relation per line as `x y kind`. Only relations of
kind `A` become edges. It prints `SIM` or `NAO` twice: first for
`is_bipartite`, then for `is_bipartite_by_coloring`.

```
printf '3 2\n0 1 A\n1 2 A\n' | grafo-bipartite
```

`grafo-coloring` reads the number of vertices and edges, the edge list, and
then a mode word. With `P` it prints the index-order colouring; with `A` it
prints that colouring followed by the degree-ordered one. Any other mode, or
none, prints nothing.

```
printf '3 3\n0 1\n1 2\n0 2\nP\n' | grafo-coloring
```

Both reading commands print `error: ...` to standard error and exit with
status 1 on malformed input or an out-of-range vertex.

## What it does not do

Graphs are only undirected and unweighted, and live in memory only: there is
no file format for saving or loading them beyond the plain-text input the
commands read. The colourings are greedy heuristics and are not guaranteed to
use the fewest colours.