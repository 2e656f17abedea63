"""
Single-source shortest path algorithms.

- dijkstra: adjacency list, non-negative weights, O((V + E) log V)
- bellman_ford: directed edge list, negative weights allowed, O(V * E); raises
  NegativeCycleError when a negative cycle is reachable from the source

Both return a :class:`ShortestPaths` pair of distances and predecessors. Unreachable
vertices keep an infinite distance and a ``None`` predecessor.
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Union

from .exceptions import GraphOperationError, NegativeCycleError
from .graph import EdgeRecord, check_vertex, normalize_edges
from .metrics import track_performance
from .priority_queue import PriorityQueue
from .types import GraphProtocol, Vertex, Weight

logger = logging.getLogger(__name__)

# Constants
INFINITY = float("inf")

DistanceMap = Union[Dict[Vertex, Weight], List[Weight]]
PredecessorMap = Union[Dict[Vertex, Optional[Vertex]], List[Optional[Vertex]]]


class ShortestPaths(NamedTuple):
    """Result of a single-source shortest path search."""

    distances: DistanceMap
    previous: PredecessorMap


def dijkstra(graph: GraphProtocol, start: Vertex) -> ShortestPaths:
    """
    Dijkstra's algorithm from start.

    Edge weights must be non-negative. This is not checked; with negative weights
    the result is undefined.

    Args:
        graph: Adjacency list to search
        start: Source vertex

    Returns:
        ShortestPaths with dicts keyed by every vertex of the graph

    Raises:
        VertexIndexError: If start is not a vertex of the graph
    """
    check_vertex(start, graph.vertex_count)
    logger.debug(f"Starting Dijkstra's algorithm from {start}")

    distances: Dict[Vertex, Weight] = {vertex: INFINITY for vertex in graph}
    previous: Dict[Vertex, Optional[Vertex]] = {vertex: None for vertex in graph}
    distances[start] = 0

    with track_performance("dijkstra") as metrics:
        pq = PriorityQueue[Vertex]()
        pq.push(start, 0)

        while not pq.empty():
            u, priority = pq.pop()
            if priority > distances[u]:
                # Superseded by a shorter distance pushed later
                continue
            metrics.vertices_explored += 1

            for v, weight in graph.neighbors(u):
                alt = distances[u] + weight
                if alt < distances[v]:
                    distances[v] = alt
                    previous[v] = u
                    pq.push(v, alt)
                    metrics.edges_relaxed += 1

    return ShortestPaths(distances, previous)


def bellman_ford(edges: Iterable[EdgeRecord], vertex_count: int, start: Vertex) -> ShortestPaths:
    """
    Bellman-Ford algorithm over a directed edge list.

    Runs ``vertex_count - 1`` relaxation passes (stopping early once a pass changes
    nothing), then one more pass: if any edge still relaxes, a negative-weight cycle
    is reachable from start. An undirected edge with negative weight must be given in
    both directions and therefore always forms such a cycle.

    Args:
        edges: ``(u, v, weight)`` records, each one directed from u to v
        vertex_count: Number of vertices
        start: Source vertex

    Returns:
        ShortestPaths with lists indexed by vertex

    Raises:
        VertexIndexError: If start or an edge endpoint is out of range
        NegativeCycleError: If a negative cycle is reachable from start
    """
    records = normalize_edges(edges, vertex_count)
    check_vertex(start, vertex_count)
    logger.debug(
        f"Starting Bellman-Ford from {start} over {len(records)} edges, {vertex_count} vertices"
    )

    distances: List[Weight] = [INFINITY] * vertex_count
    previous: List[Optional[Vertex]] = [None] * vertex_count
    distances[start] = 0

    with track_performance("bellman_ford") as metrics:
        for i in range(vertex_count - 1):
            relaxed = False
            for u, v, weight in records:
                if distances[u] != INFINITY and distances[u] + weight < distances[v]:
                    distances[v] = distances[u] + weight
                    previous[v] = u
                    relaxed = True
                    metrics.edges_relaxed += 1
            metrics.vertices_explored += vertex_count

            if not relaxed:
                logger.debug(f"Bellman-Ford converged after {i + 1} passes")
                break

        # Check for negative cycles
        for u, v, weight in records:
            if distances[u] != INFINITY and distances[u] + weight < distances[v]:
                logger.warning(f"Negative-weight cycle detected through edge {u} -> {v}")
                raise NegativeCycleError("Graph contains a negative-weight cycle")

    return ShortestPaths(distances, previous)


def reconstruct_path(result: ShortestPaths, target: Vertex) -> List[Vertex]:
    """
    Rebuild the vertex path from the source to target using the predecessor map.

    Returns:
        Vertices from source to target inclusive, or an empty list if target is
        unreachable

    Raises:
        VertexIndexError: If target is not covered by the result
        GraphOperationError: If the predecessor chain loops
    """
    check_vertex(target, len(result.distances))
    if result.distances[target] == INFINITY:
        return []

    path = [target]
    current = result.previous[target]
    while current is not None:
        if len(path) > len(result.previous):
            raise GraphOperationError(f"Predecessor chain for {target} contains a cycle")
        path.append(current)
        current = result.previous[current]

    path.reverse()
    return path


def path_weight(graph: GraphProtocol, path: Sequence[Vertex]) -> Weight:
    """
    Total weight of a vertex path, using the lightest edge between consecutive vertices.

    Raises:
        GraphOperationError: If two consecutive vertices are not adjacent
    """
    total: Weight = 0
    for u, v in zip(path, path[1:]):
        weights = [neighbor.weight for neighbor in graph.neighbors(u) if neighbor.vertex == v]
        if not weights:
            raise GraphOperationError(f"No edge exists from {u} to {v}")
        total += min(weights)
    return total
