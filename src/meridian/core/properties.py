"""
Structural properties of graphs.

Eulerian existence checks for undirected graphs, topological ordering for directed
graphs, and the Hamiltonian path check, which is deliberately not implemented.

By default the Eulerian checks look at degree parity only and the topological sort
does not detect cycles. Both behaviors can be tightened with keyword flags.
"""

import logging
from typing import List

from .disjoint_set import DisjointSet
from .exceptions import CycleDetectedError
from .metrics import track_performance
from .types import GraphProtocol, Vertex

logger = logging.getLogger(__name__)


def odd_degree_vertices(graph: GraphProtocol) -> List[Vertex]:
    """List vertices with an odd number of adjacency entries, in id order."""
    with track_performance("odd_degree_vertices") as metrics:
        odd = []
        for vertex in graph:
            metrics.vertices_explored += 1
            if graph.degree(vertex) % 2 != 0:
                odd.append(vertex)
    return odd


def _edges_connected(graph: GraphProtocol) -> bool:
    """Check that all vertices with at least one edge lie in one component."""
    components = DisjointSet(graph.vertex_count)
    for u, v, _ in graph.edges():
        components.union(u, v)
    roots = {components.find(vertex) for vertex in graph if graph.degree(vertex) > 0}
    return len(roots) <= 1


def has_eulerian_circuit(graph: GraphProtocol, check_connectivity: bool = False) -> bool:
    """
    Check whether an undirected graph has an Eulerian circuit.

    True iff every vertex has even degree. Connectivity is not verified unless
    check_connectivity is set, in which case all vertices with edges must also lie
    in a single component.
    """
    with track_performance("has_eulerian_circuit") as metrics:
        for vertex in graph:
            metrics.vertices_explored += 1
            if graph.degree(vertex) % 2 != 0:
                return False
        return not check_connectivity or _edges_connected(graph)


def has_eulerian_path(graph: GraphProtocol, check_connectivity: bool = False) -> bool:
    """
    Check whether an undirected graph has an Eulerian path.

    True iff the number of odd-degree vertices is 0 or exactly 2. Connectivity is
    handled as in :func:`has_eulerian_circuit`.
    """
    with track_performance("has_eulerian_path") as metrics:
        odd = odd_degree_vertices(graph)
        metrics.vertices_explored = graph.vertex_count
        if len(odd) not in (0, 2):
            return False
        return not check_connectivity or _edges_connected(graph)


def has_hamiltonian_path(graph: GraphProtocol) -> bool:
    """Not implemented: the Hamiltonian path problem is NP-complete."""
    raise NotImplementedError("Hamiltonian path check is not implemented")


def topological_sort(graph: GraphProtocol, detect_cycles: bool = False) -> List[Vertex]:
    """
    Topologically sort a directed graph.

    Runs a depth-first postorder over all vertices in id order and returns the
    reverse finishing order. The traversal keeps an explicit stack of
    (vertex, neighbor iterator) frames.

    Without detect_cycles a cyclic graph still yields an ordering of every vertex,
    but it is not a valid topological order and no error is raised.

    Args:
        graph: Directed adjacency list
        detect_cycles: Raise on the first back edge. Every edge of an undirected
            graph is seen from both ends, so this always fails for undirected
            graphs with at least one edge.

    Raises:
        CycleDetectedError: If detect_cycles is set and the graph has a cycle
    """
    visited = set()
    on_stack = set()
    finished: List[Vertex] = []

    with track_performance("topological_sort") as metrics:
        for root in graph:
            if root in visited:
                continue
            visited.add(root)
            on_stack.add(root)
            stack = [(root, iter(graph.neighbors(root)))]

            while stack:
                vertex, neighbors = stack[-1]
                for neighbor, _ in neighbors:
                    if neighbor not in visited:
                        visited.add(neighbor)
                        on_stack.add(neighbor)
                        stack.append((neighbor, iter(graph.neighbors(neighbor))))
                        break
                    if detect_cycles and neighbor in on_stack:
                        logger.warning(f"Cycle detected at edge {vertex} -> {neighbor}")
                        raise CycleDetectedError(
                            f"Graph contains a cycle through vertex {neighbor}", neighbor
                        )
                else:
                    stack.pop()
                    on_stack.discard(vertex)
                    finished.append(vertex)
                    metrics.vertices_explored += 1

    finished.reverse()
    return finished
