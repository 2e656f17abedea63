"""
Graph traversal using the iterator pattern.

Breadth-first and depth-first traversal over an adjacency list. The iterators yield
``(vertex, depth)`` pairs lazily; :func:`bfs` and :func:`dfs` collect the vertices
in discovery order. Neighbors are explored in edge insertion order.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterator, List, Optional, Set, Tuple

from .graph import check_vertex
from .metrics import track_performance
from .types import GraphProtocol, Vertex

logger = logging.getLogger(__name__)


class GraphIterator(ABC):
    """Base class for graph traversal iterators."""

    def __init__(self, graph: GraphProtocol, start: Vertex, visited: Optional[Set[Vertex]] = None):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            start: Starting vertex for traversal
            visited: Set of already visited vertices, updated in place

        Raises:
            VertexIndexError: If start is not a vertex of the graph
        """
        check_vertex(start, graph.vertex_count)
        self.graph = graph
        self.start = start
        self.visited: Set[Vertex] = visited if visited is not None else set()

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[Vertex, int]]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding tuples of (vertex, depth)
        """
        pass


class BFSIterator(GraphIterator):
    """Breadth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[Vertex, int]]:
        """
        Traverse graph in breadth-first order.

        A vertex is marked visited when it is dequeued, so it may sit in the
        frontier several times; only its first dequeue is yielded.

        Yields:
            Tuples of (vertex, depth) in BFS order
        """
        queue = deque([(self.start, 0)])

        while queue:
            vertex, depth = queue.popleft()
            if vertex in self.visited:
                continue
            self.visited.add(vertex)
            yield vertex, depth

            for neighbor in self.graph.neighbors(vertex):
                queue.append((neighbor.vertex, depth + 1))


class DFSIterator(GraphIterator):
    """Depth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[Vertex, int]]:
        """
        Traverse graph in depth-first preorder.

        Uses an explicit stack of (vertex, depth, neighbor iterator) frames, so the
        traversal depth is not bounded by the interpreter's recursion limit. The
        start vertex is always yielded, even if already in the visited set.

        Yields:
            Tuples of (vertex, depth) in DFS order
        """
        self.visited.add(self.start)
        yield self.start, 0

        stack = [(self.start, 0, iter(self.graph.neighbors(self.start)))]
        while stack:
            vertex, depth, neighbors = stack[-1]
            try:
                neighbor = next(neighbors).vertex
                if neighbor not in self.visited:
                    self.visited.add(neighbor)
                    yield neighbor, depth + 1
                    stack.append((neighbor, depth + 1, iter(self.graph.neighbors(neighbor))))
            except StopIteration:
                stack.pop()


def bfs(graph: GraphProtocol, start: Vertex) -> List[Vertex]:
    """
    Breadth-first search from start.

    Args:
        graph: Adjacency list to traverse
        start: Starting vertex

    Returns:
        Vertices reachable from start, in order of first discovery

    Raises:
        VertexIndexError: If start is not a vertex of the graph
    """
    with track_performance("bfs") as metrics:
        order = [vertex for vertex, _ in BFSIterator(graph, start)]
        metrics.vertices_explored = len(order)
    return order


def dfs(
    graph: GraphProtocol, start: Vertex, visited: Optional[Set[Vertex]] = None
) -> List[Vertex]:
    """
    Depth-first search from start.

    Args:
        graph: Adjacency list to traverse
        start: Starting vertex
        visited: Vertices to treat as already explored; updated in place

    Returns:
        Preorder sequence of first visits

    Raises:
        VertexIndexError: If start is not a vertex of the graph
    """
    with track_performance("dfs") as metrics:
        order = [vertex for vertex, _ in DFSIterator(graph, start, visited)]
        metrics.vertices_explored = len(order)
    return order
