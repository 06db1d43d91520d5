"""
Adjacency matrix module.

Provides the dense graph representation:
- Row: Fixed-length row of edge weights
- Matrix: n x n adjacency matrix with BFS and Dijkstra
- to_text: Debug rendering of a matrix
"""

from graphula.adj.display import to_text
from graphula.adj.matrix import Matrix
from graphula.adj.row import Row

__all__ = [
    "Matrix",
    "Row",
    "to_text",
]
