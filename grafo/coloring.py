"""Vertex colourings built one vertex at a time, and their text report."""

from __future__ import annotations

from collections.abc import Iterable

from grafo.graph import Graph

UNCOLORED = -1


def _color_vertex(graph: Graph, colors: list[int], vertex: int) -> None:
    """Give ``vertex`` a colour from the colours its neighbours hold now."""
    neighbours = graph.neighbours(vertex)
    colors[vertex] = 1
    color_max = UNCOLORED
    for u in neighbours:
        color_max = max(color_max, colors[u])
        if colors[vertex] == colors[u]:
            colors[vertex] += 1
    if colors[vertex] == color_max:
        colors[vertex] += 1
    for u in neighbours:
        if colors[vertex] == colors[u]:
            colors[vertex] = color_max
            color_max += 1


def greedy_coloring(graph: Graph) -> list[int]:
    """Colour the vertices in index order; colours start at 1."""
    colors = [UNCOLORED] * graph.vertex_count()
    for vertex in range(graph.vertex_count()):
        _color_vertex(graph, colors, vertex)
    return colors


def _degree_order(graph: Graph) -> list[int]:
    """Return the vertices by descending degree.

    The order among vertices of equal degree is the one an in-place exchange
    sort over a list padded with ``n`` placeholder entries produces, so it is
    not necessarily ascending by index.
    """
    n = graph.vertex_count()
    degrees = [-1] * n + [graph.degree(v) for v in range(n)]
    order = [-1] * n + list(range(n))
    size = len(degrees)
    for i in range(size):
        for j in range(i, size):
            if degrees[i] < degrees[j]:
                degrees[i], degrees[j] = degrees[j], degrees[i]
                order[i], order[j] = order[j], order[i]
    return order[:n]


def degree_ordered_coloring(graph: Graph) -> list[int]:
    """Colour the vertices from the highest degree down; colours start at 1."""
    colors = [UNCOLORED] * graph.vertex_count()
    for vertex in _degree_order(graph):
        _color_vertex(graph, colors, vertex)
    return colors


def format_coloring(colors: Iterable[int]) -> str:
    """Report the number of colours and the vertices holding each colour."""
    colors = list(colors)
    highest = max(colors, default=UNCOLORED)
    lines = [f"Numero de cores: {highest}\n"]
    for color in range(1, highest + 1):
        members = "".join(f"{v} " for v, c in enumerate(colors) if c == color)
        lines.append(f"Cor {color}: {members}\n")
    return "".join(lines)