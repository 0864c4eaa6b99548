"""Square and rectangular matrix helpers and all-pairs shortest paths."""

from __future__ import annotations

from collections.abc import Sequence

INF = 999
"""Distance that stands for 'no edge' in :func:`floyd_warshall`."""

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return rows, cols


def add_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same shape to be added")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply_matrices(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product ``a`` times ``b``."""
    _, inner = _shape(a)
    rows_b, _ = _shape(b)
    if inner != rows_b:
        raise ValueError("columns of the first matrix must match rows of the second")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with each cell right-aligned in four columns.

    Cells equal to :data:`INF` are shown as ``INF``.
    """
    _shape(matrix)
    return "\n".join(
        "".join(f"{'INF' if value == INF else value:>4}" for value in row)
        for row in matrix
    )


def floyd_warshall(graph: Sequence[Sequence[int]]) -> Matrix:
    """Return the all-pairs shortest distances of a weighted adjacency matrix."""
    rows, cols = _shape(graph)
    if rows != cols:
        raise ValueError("adjacency matrix must be square")
    dist = [list(row) for row in graph]
    for k in range(rows):
        for i in range(rows):
            for j in range(rows):
                through_k = dist[i][k] + dist[k][j]
                if dist[i][j] > through_k:
                    dist[i][j] = through_k
    return dist