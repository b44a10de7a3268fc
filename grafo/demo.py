"""A small example graph printed as an adjacency matrix."""

from __future__ import annotations

from collections.abc import Sequence

from grafo.graph import Edge, Graph


def build_demo_graph() -> Graph:
    """Build a four-vertex graph; the repeated edge is rejected."""
    graph = Graph(4)
    graph.add_edge(Edge(0, 1))
    graph.add_edge(Edge(1, 0))
    graph.add_edge(Edge(1, 2))
    return graph


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demo graph's adjacency matrix."""
    build_demo_graph().show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())