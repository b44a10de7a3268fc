"""Read an edge list and print a vertex colouring of the graph."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence

from grafo.coloring import degree_ordered_coloring, format_coloring, greedy_coloring
from grafo.graph import Edge, Graph


def _next_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    return int(token)


def parse_input(text: str) -> tuple[Graph, str]:
    """Return the graph from ``n m`` and ``m`` edge pairs, and the mode word after them.

    The mode is empty when the input ends after the edges.
    """
    tokens = iter(text.split())
    num_vertices = _next_int(tokens)
    num_edges = _next_int(tokens)
    graph = Graph(num_vertices)
    for _ in range(num_edges):
        x = _next_int(tokens)
        y = _next_int(tokens)
        graph.add_edge(Edge(x, y))
    return graph, next(tokens, "")


def run(text: str) -> str:
    """Return the colouring report for the mode given in the input.

    Mode ``P`` gives the index-order colouring, mode ``A`` that one followed by
    the degree-ordered colouring; any other mode gives nothing.
    """
    graph, mode = parse_input(text)
    if mode == "P":
        return format_coloring(greedy_coloring(graph))
    if mode == "A":
        return format_coloring(greedy_coloring(graph)) + format_coloring(
            degree_ordered_coloring(graph)
        )
    return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Read the graph from standard input and print its colouring."""
    try:
        output = run(sys.stdin.read())
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())