"""Read a relation list and report whether the 'A' relations form a bipartite graph."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from grafo.graph import Edge, Graph

_INT = re.compile(r"\s*([+-]?\d+)")
_CHAR = re.compile(r"\s*(\S)")


class _Scanner:
    """Read integers and single characters from text, skipping whitespace."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        match = pattern.match(self._text, self._pos)
        if match is None:
            raise ValueError(f"expected {what} at offset {self._pos}")
        self._pos = match.end()
        return match.group(1)

    def integer(self) -> int:
        return int(self._take(_INT, "an integer"))

    def char(self) -> str:
        return self._take(_CHAR, "a character")


def read_graph(text: str) -> Graph:
    """Build the graph from a vertex count, a relation count and ``x y kind`` lines.

    Only relations of kind ``A`` become edges.
    """
    scanner = _Scanner(text)
    num_vertices = scanner.integer()
    num_relations = scanner.integer()
    graph = Graph(num_vertices)
    for _ in range(num_relations):
        x = scanner.integer()
        y = scanner.integer()
        kind = scanner.char()
        if kind == "A":
            graph.add_edge(Edge(x, y))
    return graph


def run(text: str) -> str:
    """Return one SIM/NAO line for each of the two bipartiteness checks."""
    graph = read_graph(text)
    results = (graph.is_bipartite(), graph.is_bipartite_by_coloring())
    return "".join(("SIM" if ok else "NAO") + "\n" for ok in results)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the relations from standard input and print the answers."""
    try:
        output = run(sys.stdin.read())
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())