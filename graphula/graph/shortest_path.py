"""
Dijkstra single-source shortest path on a dense adjacency matrix.

Runs in O(n^2) per query with a linear scan for the next node instead of
a priority queue, which suits the small dense graphs Matrix targets.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from graphula.config import DIST_INFINITY, WEIGHT_DTYPE

if TYPE_CHECKING:
    from graphula.adj.matrix import Matrix

logger = logging.getLogger(__name__)


class ShortestPath(NamedTuple):
    """
    Result of a successful shortest-path query.

    Attributes:
        weight: Sum of edge weights along the path
        path: Node ids from start to target (inclusive)
    """

    weight: int
    path: list[int]


def min_distance(dists: Sequence[int], done: Sequence[bool]) -> int:
    """
    Pick the next node to finalize.

    Scans nodes in increasing id order with a non-strict comparison, so a
    later undone node with a distance equal to the running minimum takes
    its place: ties go to the highest id. When every undone node is still
    at DIST_INFINITY the highest undone id is returned.

    Raises:
        ValueError: If dists and done differ in length or all nodes are done
    """
    if len(dists) != len(done):
        raise ValueError(
            f"dists and done must have the same length ({len(dists)} != {len(done)})"
        )

    best = DIST_INFINITY
    min_node = None
    for v in range(len(dists)):
        if not done[v] and dists[v] <= best:
            best = dists[v]
            min_node = v

    if min_node is None:
        raise ValueError("No undone node left to pick")
    return min_node


def dijkstra(matrix: Matrix, start: int, target: int) -> ShortestPath | None:
    """
    Find the lightest path from start to target.

    An edge exists where the stored weight is strictly positive, the same
    rule Matrix.get_adjs and BFS use.

    Args:
        matrix: Graph to search
        start: Source node
        target: Destination node

    Returns:
        ShortestPath(weight, path), or None if target is unreachable

    Raises:
        IndexError: If start or target is not a node of the matrix
    """
    start = matrix.check_node(start)
    target = matrix.check_node(target)
    n = matrix.n
    weights = matrix.to_array()

    dists = np.full(n, DIST_INFINITY, dtype=WEIGHT_DTYPE)
    done = np.zeros(n, dtype=bool)
    previous = np.full(n, -1, dtype=np.intp)
    dists[start] = 0

    for _ in range(n - 1):
        u = min_distance(dists, done)
        done[u] = True
        dist_u = int(dists[u])
        if dist_u == DIST_INFINITY:
            continue

        for v in range(n):
            weight = int(weights[u, v])
            if done[v] or weight <= 0:
                continue
            new_dist = dist_u + weight
            if new_dist < int(dists[v]):
                dists[v] = new_dist
                previous[v] = u

    if dists[target] == DIST_INFINITY:
        logger.debug(f"Node {target} is unreachable from {start}")
        return None

    path = [target]
    node = target
    while node != start:
        node = int(previous[node])
        path.append(node)
    path.reverse()

    result = ShortestPath(int(dists[target]), path)
    logger.debug(
        f"Shortest path {start} -> {target}: {result.path} (weight {result.weight})"
    )
    return result
