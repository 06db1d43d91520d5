"""
Dense adjacency matrix for small weighted graphs.

Usage:
    from graphula import Matrix

    graph = Matrix(6, 0)
    graph.add_w_directed_edge(0, 1, 2)
    graph.add_w_directed_edge(1, 5, 3)
    graph.dijsktra(0, 5)  # ShortestPath(weight=5, path=[0, 1, 5])
    graph.bfs(0, 5)       # True

matrix[i][j] is the weight of the edge from node i to node j. An edge
exists only where that weight is strictly positive; zero and negative
entries mean "no edge" for adjacency queries, BFS and Dijkstra alike.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator, Sequence

import numpy as np

from graphula.adj.display import to_text
from graphula.adj.row import Row, check_index
from graphula.config import DEFAULT_FILLER, WEIGHT_DTYPE
from graphula.graph import shortest_path, traversal
from graphula.graph.shortest_path import ShortestPath


class Matrix:
    """
    n x n grid of edge weights, one Row per source node.

    The node count is fixed at construction; edges can be added or
    overwritten any number of times. Node ids are ints in [0, n).

    Attributes:
        n: Number of nodes
    """

    def __init__(self, nodes: int, filler: int = DEFAULT_FILLER) -> None:
        """
        Create a matrix with every cell set to filler.

        Args:
            nodes: Number of nodes, 0 gives an empty matrix
            filler: Initial weight of every cell
        """
        nodes = operator.index(nodes)
        if nodes < 0:
            raise ValueError(f"Node count must be non-negative, got {nodes}")
        self._n = nodes
        self._data = [Row(nodes, filler) for _ in range(nodes)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Matrix:
        """
        Build a matrix from a square nested sequence of weights.

        Raises:
            ValueError: If rows is not square
        """
        n = len(rows)
        matrix = cls(n)
        for i, values in enumerate(rows):
            if len(values) != n:
                raise ValueError(
                    f"Row {i} has {len(values)} weights, expected {n}"
                )
            for j, weight in enumerate(values):
                matrix._data[i][j] = weight
        return matrix

    @property
    def n(self) -> int:
        return self._n

    # =========================================================================
    # Indexing
    # =========================================================================

    def check_node(self, node: int) -> int:
        """Return node as an int, raising IndexError if it is not in [0, n)."""
        return check_index(node, self._n)

    def __getitem__(self, node: int) -> Row:
        return self._data[self.check_node(node)]

    def __len__(self) -> int:
        return self._n

    def __iter__(self) -> Iterator[Row]:
        return iter(self._data)

    def weight(self, src: int, dst: int) -> int:
        """Weight stored for the edge src -> dst."""
        return self[src][dst]

    def has_edge(self, src: int, dst: int) -> bool:
        """Whether src -> dst carries a strictly positive weight."""
        return self.weight(src, dst) > 0

    def to_array(self) -> np.ndarray:
        """Return a 2-D numpy copy of the weights, shape (n, n)."""
        if not self._data:
            return np.zeros((0, 0), dtype=WEIGHT_DTYPE)
        return np.vstack([row.to_array() for row in self._data])

    # =========================================================================
    # Edge Mutation
    # =========================================================================

    def add_weighted_edge(self, src: int, dst: int, weight: int) -> None:
        """Set the weight of src -> dst, overwriting any previous value."""
        self[src][dst] = weight

    def add_directed_edge(self, src: int, dst: int) -> None:
        """Add src -> dst with weight 1."""
        self.add_weighted_edge(src, dst, 1)

    def add_w_directed_edge(self, src: int, dst: int, weight: int) -> None:
        """Add src -> dst with the given weight. No reverse entry is written."""
        self.add_weighted_edge(src, dst, weight)

    def add_undirected_edge(self, src: int, dst: int) -> None:
        """Add weight 1 in both directions."""
        self.check_node(src)
        self.check_node(dst)
        self.add_weighted_edge(src, dst, 1)
        self.add_weighted_edge(dst, src, 1)

    # =========================================================================
    # Adjacency Queries
    # =========================================================================

    def get_adjs(self, node: int) -> list[int]:
        """Columns of node's row with a strictly positive weight, ascending."""
        return [j for j, weight in enumerate(self[node]) if weight > 0]

    def has_adjs(self, node: int) -> bool:
        """Whether node has at least one outgoing edge."""
        return bool(self.get_adjs(node))

    def adjs_count(self, node: int) -> int:
        """Number of outgoing edges of node."""
        return len(self.get_adjs(node))

    # =========================================================================
    # Algorithms
    # =========================================================================

    def min_distance(self, dists: Sequence[int], done: Sequence[bool]) -> int:
        """
        Undone node with the smallest tentative distance (highest id on ties).

        Raises:
            ValueError: If dists or done do not have one entry per node
        """
        if len(dists) != self._n or len(done) != self._n:
            raise ValueError(
                f"Expected {self._n} distances and flags, "
                f"got {len(dists)} and {len(done)}"
            )
        return shortest_path.min_distance(dists, done)

    def bfs(self, start_node: int, target_node: int) -> bool:
        """Whether target_node is reachable from start_node."""
        return traversal.bfs(self, start_node, target_node)

    def bfs_order(
        self, start_node: int, target_node: int | None = None
    ) -> list[int]:
        """Nodes in the order BFS expands them, stopping before target_node."""
        return traversal.bfs_order(self, start_node, target_node)

    def dijsktra(self, start_node: int, target_node: int) -> ShortestPath | None:
        """
        Shortest weighted path from start_node to target_node.

        Returns:
            ShortestPath(weight, path), or None if target_node is unreachable
        """
        return shortest_path.dijkstra(self, start_node, target_node)

    dijkstra = dijsktra

    # =========================================================================
    # Display
    # =========================================================================

    def __str__(self) -> str:
        return to_text(self)

    def __repr__(self) -> str:
        return f"Matrix(n={self._n})"
