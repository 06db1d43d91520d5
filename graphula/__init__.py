"""
graphula: dense adjacency-matrix graphs.

A small toolkit for small, dense weighted graphs with BFS reachability
and Dijkstra shortest paths.
"""

from graphula.adj import Matrix, Row, to_text
from graphula.graph import ShortestPath

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "Row",
    "ShortestPath",
    "to_text",
]
