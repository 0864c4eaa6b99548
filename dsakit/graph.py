"""Undirected graph stored as adjacency lists."""

from __future__ import annotations


class Graph:
    """An undirected graph on vertices ``0 .. vertices - 1``.

    Each new edge is placed at the front of both endpoints' adjacency lists.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, source: int, destination: int) -> None:
        """Connect ``source`` and ``destination`` in both directions."""
        self._check(source)
        self._check(destination)
        self._adjacency[source].insert(0, destination)
        self._adjacency[destination].insert(0, source)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the vertices adjacent to ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return "".join(
            f"\n Vertex {vertex}\n: " + "".join(f"{n} -> " for n in adjacent) + "\n"
            for vertex, adjacent in enumerate(self._adjacency)
        )