"""Tests for Kruskal's and Prim's minimum spanning tree algorithms."""

import random
from itertools import combinations

import pytest

from meridian.core.disjoint_set import DisjointSet
from meridian.core.exceptions import VertexIndexError
from meridian.core.graph import AdjacencyList
from meridian.core.spanning_tree import kruskal, prim, total_weight


def random_connected_edges(seed: int, vertex_count: int = 6, extra: int = 6):
    """Random spanning path plus extra random edges, so the graph is connected."""
    rng = random.Random(seed)
    order = list(range(vertex_count))
    rng.shuffle(order)
    edges = [(u, v, rng.randint(1, 9)) for u, v in zip(order, order[1:])]
    for _ in range(extra):
        u, v = rng.sample(range(vertex_count), 2)
        edges.append((u, v, rng.randint(1, 9)))
    return edges


def is_forest(edges, vertex_count: int) -> bool:
    components = DisjointSet(vertex_count)
    return all(components.union(u, v) for u, v, _ in edges)


def brute_force_mst_weight(edges, vertex_count: int) -> float:
    return min(
        total_weight(subset)
        for subset in combinations(edges, vertex_count - 1)
        if is_forest(subset, vertex_count)
    )


def test_kruskal_sample_graph(sample_edges):
    """Test that Kruskal picks the three cheapest non-cycle edges."""
    mst = kruskal(sample_edges, 4)

    assert mst == [(0, 1, 1), (2, 3, 1), (1, 2, 2)]
    assert total_weight(mst) == 4


def test_kruskal_does_not_mutate_input(sample_edges):
    """Test that the caller's edge list keeps its order."""
    edges = list(sample_edges)
    kruskal(edges, 4)

    assert edges == sample_edges


def test_kruskal_spanning_forest():
    """Test that a disconnected graph yields a spanning forest."""
    edges = [(0, 1, 3), (2, 3, 1), (3, 4, 2), (2, 4, 5)]
    forest = kruskal(edges, 6)

    assert forest == [(2, 3, 1), (3, 4, 2), (0, 1, 3)]
    assert is_forest(forest, 6)


def test_kruskal_ignores_self_loops_and_duplicates():
    """Test that self-loops and duplicate edges are never accepted."""
    edges = [(0, 0, 0), (0, 1, 2), (1, 0, 2), (1, 2, 3)]

    assert kruskal(edges, 3) == [(0, 1, 2), (1, 2, 3)]


def test_kruskal_negative_weights():
    """Test that negative weights are ordered like any other weight."""
    edges = [(0, 1, 5), (1, 2, -2), (0, 2, 0)]

    assert kruskal(edges, 3) == [(1, 2, -2), (0, 2, 0)]


@pytest.mark.parametrize("seed", range(6))
def test_kruskal_is_minimal(seed):
    """Test Kruskal against an exhaustive search over edge subsets."""
    edges = random_connected_edges(seed)
    mst = kruskal(edges, 6)

    assert len(mst) == 5
    assert is_forest(mst, 6)
    assert total_weight(mst) == brute_force_mst_weight(edges, 6)


def test_kruskal_invalid_edge():
    """Test that edge endpoints outside the vertex range are rejected."""
    with pytest.raises(VertexIndexError):
        kruskal([(0, 3, 1)], 3)


def test_prim_sample_graph(sample_graph):
    """Test that Prim returns the tree edges in joining order."""
    tree = prim(sample_graph, 0)

    assert tree == [(0, 1, 1), (1, 2, 2), (2, 3, 1)]
    assert total_weight(tree) == 4


def test_prim_record_candidates(sample_graph):
    """Test the legacy output that lists every candidate edge when pushed."""
    edges = prim(sample_graph, 0, record_candidates=True)

    assert edges == [(0, 1, 1), (0, 2, 4), (1, 2, 2), (2, 3, 1)]
    assert len(edges) > sample_graph.vertex_count - 1


@pytest.mark.parametrize("seed", range(6))
def test_prim_agrees_with_kruskal(seed):
    """Test that both algorithms find trees of the same weight."""
    edges = random_connected_edges(seed)
    graph = AdjacencyList.from_edges(6, edges)
    tree = prim(graph, seed % 6)

    assert len(tree) == 5
    assert is_forest(tree, 6)
    assert total_weight(tree) == total_weight(kruskal(edges, 6))


def test_prim_spans_only_start_component():
    """Test that Prim stops at the boundary of the start component."""
    graph = AdjacencyList.from_edges(5, [(0, 1, 1), (1, 2, 1), (3, 4, 1)])

    assert prim(graph, 3) == [(3, 4, 1)]
    assert prim(graph, 2) == [(2, 1, 1), (1, 0, 1)]


def test_prim_single_vertex():
    """Test Prim on a graph without edges."""
    assert prim(AdjacencyList(1), 0) == []


def test_prim_invalid_start(sample_graph):
    """Test that an invalid start vertex raises VertexIndexError."""
    with pytest.raises(VertexIndexError):
        prim(sample_graph, 9)
