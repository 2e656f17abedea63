"""
Minimum spanning tree algorithms.

- kruskal: edge list + disjoint-set, O(E log E); returns a minimum spanning forest
  when the graph is disconnected
- prim: adjacency list + frontier priority queue, O(E log V); spans the component
  containing the start vertex
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .disjoint_set import DisjointSet
from .graph import EdgeRecord, check_vertex, normalize_edges
from .metrics import track_performance
from .priority_queue import PriorityQueue
from .types import GraphProtocol, Vertex, Weight, WeightedEdge

logger = logging.getLogger(__name__)


def kruskal(edges: Iterable[EdgeRecord], vertex_count: int) -> List[WeightedEdge]:
    """
    Kruskal's algorithm.

    Edges are considered in ascending weight order (equal weights keep their input
    order) and accepted when they join two different components. The input is not
    modified.

    Args:
        edges: ``(u, v, weight)`` records
        vertex_count: Number of vertices

    Returns:
        Accepted edges in acceptance order: ``vertex_count - 1`` of them for a
        connected graph, fewer for a spanning forest

    Raises:
        VertexIndexError: If an edge endpoint is out of range
    """
    records = normalize_edges(edges, vertex_count)
    components = DisjointSet(vertex_count)
    mst: List[WeightedEdge] = []

    with track_performance("kruskal") as metrics:
        for edge in sorted(records, key=lambda record: record.weight):
            metrics.vertices_explored += 1
            if components.union(edge.u, edge.v):
                mst.append(edge)
                metrics.edges_relaxed += 1
                if len(mst) == vertex_count - 1:
                    break

    logger.debug(
        f"Kruskal accepted {len(mst)} of {len(records)} edges, "
        f"{components.set_count} component(s) remain"
    )
    return mst


def prim(
    graph: GraphProtocol, start: Vertex, record_candidates: bool = False
) -> List[WeightedEdge]:
    """
    Prim's algorithm from start.

    The frontier holds ``(vertex, parent)`` entries keyed by the connecting edge
    weight. Vertices already in the tree are skipped when popped.

    Args:
        graph: Undirected adjacency list
        start: Root of the tree
        record_candidates: Produce the legacy output shape instead of the tree. Every
            edge from a newly visited vertex to each of its unvisited neighbors is
            recorded when pushed, so the result can contain more than
            ``vertex_count - 1`` edges and non-tree edges.

    Returns:
        Tree edges ``(parent, vertex, weight)`` in the order vertices joined the
        tree, or the candidate edges when record_candidates is set

    Raises:
        VertexIndexError: If start is not a vertex of the graph
    """
    check_vertex(start, graph.vertex_count)
    visited = set()
    edges: List[WeightedEdge] = []

    with track_performance("prim") as metrics:
        frontier = PriorityQueue[Tuple[Vertex, Optional[Vertex]]]()
        frontier.push((start, None), 0)

        while not frontier.empty():
            (u, parent), weight = frontier.pop()
            if u in visited:
                continue
            visited.add(u)
            metrics.vertices_explored += 1
            if parent is not None and not record_candidates:
                edges.append(WeightedEdge(parent, u, weight))

            for v, edge_weight in graph.neighbors(u):
                if v not in visited:
                    frontier.push((v, u), edge_weight)
                    metrics.edges_relaxed += 1
                    if record_candidates:
                        edges.append(WeightedEdge(u, v, edge_weight))

    logger.debug(f"Prim from {start} reached {len(visited)} vertices, recorded {len(edges)} edges")
    return edges


def total_weight(edges: Iterable[EdgeRecord]) -> Weight:
    """Sum the weights of ``(u, v, weight)`` records."""
    return sum(WeightedEdge(*edge).weight for edge in edges)
