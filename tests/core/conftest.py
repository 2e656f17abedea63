"""Shared test fixtures."""

import pytest

from meridian.core.graph import AdjacencyList, new_adjacency_list, add_edge_list

SAMPLE_EDGES = [(0, 1, 1), (1, 2, 2), (0, 2, 4), (2, 3, 1)]


@pytest.fixture
def sample_edges():
    """Fixture providing the edge list of a small weighted graph on vertices 0..3."""
    return list(SAMPLE_EDGES)


@pytest.fixture
def sample_graph(sample_edges) -> AdjacencyList:
    """Fixture providing the undirected adjacency list of sample_edges."""
    graph = new_adjacency_list(4)
    for u, v, weight in sample_edges:
        add_edge_list(graph, u, v, weight)
    return graph


@pytest.fixture
def tree_graph() -> AdjacencyList:
    """
    Fixture providing an unweighted tree:

        0
       / \\
      1   2
      |   |
      3   4
    """
    return AdjacencyList.from_edges(5, [(0, 1), (0, 2), (1, 3), (2, 4)])


@pytest.fixture
def triangle_graph() -> AdjacencyList:
    """Fixture providing a triangle over vertices 0, 1 and 2."""
    return AdjacencyList.from_edges(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def dag() -> AdjacencyList:
    """
    Fixture providing a directed acyclic graph:

    5 -> 2 -> 3 -> 1
    5 -> 0
    4 -> 0, 4 -> 1
    """
    return AdjacencyList.from_edges(
        6, [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)], directed=True
    )
