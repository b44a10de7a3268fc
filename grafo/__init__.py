"""Undirected graphs on an adjacency matrix: walks, paths, bipartiteness checks and greedy colouring."""

__version__ = "0.1.0"
__all__ = ["graph", "coloring", "demo", "bipartite_cli", "coloring_cli"]