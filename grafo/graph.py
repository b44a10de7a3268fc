"""Undirected simple graphs stored as an adjacency matrix."""

from __future__ import annotations

from typing import Iterable, NamedTuple


class Edge(NamedTuple):
    """An undirected edge between two vertices."""

    v1: int
    v2: int


class Graph:
    """An undirected graph without loops or parallel edges."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"number of vertices must be non-negative, got {num_vertices}")
        self._vertex_count = num_vertices
        self._edge_count = 0
        self._matrix = [[0] * num_vertices for _ in range(num_vertices)]

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return self._vertex_count

    def edge_count(self) -> int:
        """Return the number of edges."""
        return self._edge_count

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertex_count:
            raise IndexError(
                f"vertex {vertex} out of range for graph with {self._vertex_count} vertices"
            )

    def _endpoints(self, edge: Iterable[int]) -> tuple[int, int]:
        v1, v2 = edge
        self._check_vertex(v1)
        self._check_vertex(v2)
        return v1, v2

    def has_edge(self, edge: Iterable[int]) -> bool:
        """Return True if the edge is present."""
        v1, v2 = self._endpoints(edge)
        return bool(self._matrix[v1][v2])

    def add_edge(self, edge: Iterable[int]) -> bool:
        """Add the edge; return False if it already exists or is a loop."""
        v1, v2 = self._endpoints(edge)
        if self._matrix[v1][v2] or v1 == v2:
            return False
        self._matrix[v1][v2] = 1
        self._matrix[v2][v1] = 1
        self._edge_count += 1
        return True

    def remove_edge(self, edge: Iterable[int]) -> bool:
        """Remove the edge; return False if it was not present."""
        v1, v2 = self._endpoints(edge)
        if not self._matrix[v1][v2]:
            return False
        self._matrix[v1][v2] = 0
        self._matrix[v2][v1] = 0
        self._edge_count -= 1
        return True

    def neighbours(self, vertex: int) -> list[int]:
        """Return the vertices adjacent to ``vertex`` in ascending order."""
        self._check_vertex(vertex)
        return [u for u, linked in enumerate(self._matrix[vertex]) if linked]

    def degree(self, vertex: int) -> int:
        """Return the number of edges at ``vertex``."""
        return len(self.neighbours(vertex))

    def adjacency_text(self) -> str:
        """Return the adjacency matrix, one row per line."""
        return "".join(
            "".join(f"{cell} " for cell in row) + "\n" for row in self._matrix
        )

    def show(self) -> None:
        """Print the adjacency matrix to standard output."""
        print(self.adjacency_text(), end="")

    def is_walk(self, vertices: Iterable[int]) -> bool:
        """Return True if consecutive vertices are joined by edges."""
        seq = list(vertices)
        if not seq:
            return False
        for vertex in seq:
            self._check_vertex(vertex)
        return all(self._matrix[a][b] for a, b in zip(seq, seq[1:]))

    def is_path(self, vertices: Iterable[int]) -> bool:
        """Return True if the vertices form a walk that repeats no vertex."""
        seq = list(vertices)
        if not self.is_walk(seq):
            return False
        return len(set(seq)) == len(seq)

    def is_bipartite(self) -> bool:
        """Greedily split vertices, highest first, into two independent sets."""
        parts: tuple[list[int], list[int]] = ([], [])
        for v in reversed(range(self._vertex_count)):
            row = self._matrix[v]
            for part in parts:
                if not any(row[u] for u in part):
                    part.append(v)
                    break
            else:
                return False
        return True

    def is_bipartite_by_coloring(self) -> bool:
        """Decide bipartiteness by two-colouring each component depth first."""
        color: list[int | None] = [None] * self._vertex_count
        for start in range(self._vertex_count):
            if color[start] is not None:
                continue
            color[start] = 0
            stack = [start]
            while stack:
                v = stack.pop()
                for u in self.neighbours(v):
                    if color[u] is None:
                        color[u] = 1 - color[v]
                        stack.append(u)
                    elif color[u] == color[v]:
                        return False
        return True