"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graphula import Matrix


@pytest.fixture
def weighted_graph() -> Matrix:
    """
    Return the 6-node weighted route graph.

    Node 0 is home, node 5 is work. The lightest route is 0 -> 1 -> 4 -> 5.
    """
    graph = Matrix(6, 0)
    graph.add_w_directed_edge(0, 1, 2)
    graph.add_w_directed_edge(0, 2, 1)
    graph.add_w_directed_edge(1, 3, 6)
    graph.add_w_directed_edge(1, 4, 2)
    graph.add_w_directed_edge(2, 3, 2)
    graph.add_w_directed_edge(2, 4, 7)
    graph.add_w_directed_edge(3, 5, 10)
    graph.add_w_directed_edge(4, 5, 2)
    return graph


@pytest.fixture
def chain_graph() -> Matrix:
    """Return the 6-node unweighted directed graph used for BFS checks."""
    graph = Matrix(6, 0)
    graph.add_directed_edge(0, 1)
    graph.add_directed_edge(0, 2)
    graph.add_directed_edge(1, 4)
    graph.add_directed_edge(2, 3)
    graph.add_directed_edge(3, 5)
    return graph


@pytest.fixture
def empty_graph() -> Matrix:
    """Return a matrix with no nodes."""
    return Matrix(0, 0)
