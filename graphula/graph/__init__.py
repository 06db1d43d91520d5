"""
Graph algorithms module.

Provides traversal algorithms on an adjacency matrix:
- BFS: Reachability and visit order
- Dijkstra: Lightest weighted path
"""

from graphula.graph.shortest_path import ShortestPath, dijkstra, min_distance
from graphula.graph.traversal import bfs, bfs_order

__all__ = [
    "ShortestPath",
    "bfs",
    "bfs_order",
    "dijkstra",
    "min_distance",
]
