"""
Breadth-first reachability over an adjacency matrix.

Nodes are marked as searched when they are dequeued, not when they are
enqueued, so the same node can sit in the frontier more than once. A
node that was already searched is skipped entirely when dequeued again.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Generator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphula.adj.matrix import Matrix

logger = logging.getLogger(__name__)


def _walk(
    matrix: Matrix, start: int, target: int | None
) -> Generator[int, None, bool]:
    """
    Yield nodes in the order BFS expands them.

    Stops without yielding when target is dequeued. The caller can tell
    the two outcomes apart by whether the generator returned True.
    """
    queue = deque([start])
    # ordered set
    searched: dict[int, None] = {}

    while queue:
        node = queue.popleft()
        if node in searched:
            continue

        if node == target:
            logger.debug("The target node was found!")
            logger.debug(f"Searched: {list(searched)}")
            return True

        queue.extend(matrix.get_adjs(node))
        searched[node] = None

        logger.debug(f"Node: {node}")
        logger.debug(f"Q: {list(queue)}")
        yield node

    return False


def _finish(walk: Generator[int, None, bool]) -> bool:
    """Drain a walk and return whether it stopped on the target."""
    try:
        while True:
            next(walk)
    except StopIteration as stop:
        return stop.value


def bfs(matrix: Matrix, start: int, target: int) -> bool:
    """
    Check whether target is reachable from start.

    Args:
        matrix: Graph to search
        start: Node to begin from
        target: Node to look for

    Returns:
        True as soon as target is dequeued, False once the frontier empties

    Raises:
        IndexError: If start or target is not a node of the matrix
    """
    start = matrix.check_node(start)
    target = matrix.check_node(target)

    return _finish(_walk(matrix, start, target))


def bfs_order(matrix: Matrix, start: int, target: int | None = None) -> list[int]:
    """
    Return the nodes BFS expands, in order.

    Expansion stops before target when it is given and reachable;
    otherwise every node reachable from start is listed.
    """
    start = matrix.check_node(start)
    if target is not None:
        target = matrix.check_node(target)
    return list(_walk(matrix, start, target))
