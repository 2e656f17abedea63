"""
Graph representations over dense integer vertex ids.

This module provides the two encodings every algorithm in the package consumes:

- AdjacencyList: each vertex maps to an ordered sequence of (neighbor, weight)
  pairs, in edge insertion order. Favors sparse graphs.
- AdjacencyMatrix: an ``n x n`` grid of weights where ``0`` means "no edge". Favors
  dense graphs with O(1) edge lookup, but cannot hold zero-weight edges.

The vertex count is fixed at construction. Edges can be added repeatedly and are
never removed; duplicates and self-loops accumulate. For undirected graphs every
mutation keeps ``(u, v)`` and ``(v, u)`` symmetric with identical weight.

The module-level functions mirror the methods for callers that prefer a functional
style::

    graph = new_adjacency_list(4)
    add_edge_list(graph, 0, 1, 1)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .exceptions import VertexIndexError
from .types import Neighbor, Vertex, Weight, WeightedEdge

logger = logging.getLogger(__name__)

# Constants
DEFAULT_WEIGHT = 1

EdgeRecord = Union[Tuple[Vertex, Vertex], Tuple[Vertex, Vertex, Weight], WeightedEdge]


def _validate_size(vertex_count: int) -> None:
    if not isinstance(vertex_count, int):
        raise TypeError("vertex_count must be an integer")
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")


def check_vertex(vertex: Vertex, vertex_count: int) -> None:
    """Raise VertexIndexError unless ``0 <= vertex < vertex_count``."""
    if not 0 <= vertex < vertex_count:
        raise VertexIndexError(vertex, vertex_count)


def normalize_edges(edges: Iterable[EdgeRecord], vertex_count: int) -> List[WeightedEdge]:
    """Turn ``(u, v)`` / ``(u, v, weight)`` records into checked WeightedEdge tuples."""
    _validate_size(vertex_count)
    records = [WeightedEdge(*edge) for edge in edges]
    for edge in records:
        check_vertex(edge.u, vertex_count)
        check_vertex(edge.v, vertex_count)
    return records


@dataclass
class AdjacencyState:
    """Encapsulates the state of an adjacency list."""

    adjacency: List[List[Neighbor]]
    edge_log: List[WeightedEdge] = field(default_factory=list)


class AdjacencyList:
    """
    Adjacency-list graph with a fixed number of vertices.

    Behaves like a read-only mapping from vertex id to its neighbor sequence:
    ``graph[v]``, ``len(graph)``, ``v in graph`` and iteration over vertex ids all
    work. Neighbor sequences are handed out as tuples so algorithms cannot mutate
    the graph through them.

    Attributes:
        directed (bool): When False (default) each added edge is recorded on both
            endpoints.
    """

    def __init__(self, vertex_count: int, directed: bool = False):
        """
        Initialize a graph with ``vertex_count`` vertices and no edges.

        Args:
            vertex_count (int): Number of vertices, ids are ``0 .. vertex_count-1``
            directed (bool): Whether edges are one-way (default: False)
        """
        _validate_size(vertex_count)
        self._state = AdjacencyState(adjacency=[[] for _ in range(vertex_count)])
        self.directed = directed

    @property
    def vertex_count(self) -> int:
        return len(self._state.adjacency)

    @property
    def edge_count(self) -> int:
        """Number of add_edge calls, not adjacency entries."""
        return len(self._state.edge_log)

    def add_edge(self, u: Vertex, v: Vertex, weight: Weight = DEFAULT_WEIGHT) -> None:
        """
        Add an edge from u to v.

        Appends ``(v, weight)`` to u's sequence and, for undirected graphs,
        ``(u, weight)`` to v's sequence.

        Raises:
            VertexIndexError: If u or v is outside ``[0, vertex_count)``
        """
        check_vertex(u, self.vertex_count)
        check_vertex(v, self.vertex_count)

        self._state.adjacency[u].append(Neighbor(v, weight))
        if not self.directed:
            self._state.adjacency[v].append(Neighbor(u, weight))
        self._state.edge_log.append(WeightedEdge(u, v, weight))

    def add_edges(self, edges: Iterable[EdgeRecord]) -> None:
        """Add ``(u, v)`` or ``(u, v, weight)`` records in order."""
        for edge in edges:
            self.add_edge(*edge)

    def neighbors(self, vertex: Vertex) -> Tuple[Neighbor, ...]:
        """Get the neighbors of a vertex in edge insertion order."""
        check_vertex(vertex, self.vertex_count)
        return tuple(self._state.adjacency[vertex])

    def degree(self, vertex: Vertex) -> int:
        """Get the number of adjacency entries of a vertex (a self-loop counts twice)."""
        check_vertex(vertex, self.vertex_count)
        return len(self._state.adjacency[vertex])

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        """Check if at least one edge from u to v exists."""
        return any(neighbor.vertex == v for neighbor in self.neighbors(u))

    def edges(self) -> List[WeightedEdge]:
        """
        Get the derived edge list.

        One record per added edge, in insertion order. Undirected edges are listed
        once, in the orientation they were added.
        """
        return list(self._state.edge_log)

    def items(self) -> Iterator[Tuple[Vertex, Tuple[Neighbor, ...]]]:
        for vertex in range(self.vertex_count):
            yield vertex, tuple(self._state.adjacency[vertex])

    def copy(self) -> "AdjacencyList":
        """Return an independent copy that can be mutated separately."""
        clone = AdjacencyList(self.vertex_count, directed=self.directed)
        clone._state = AdjacencyState(
            adjacency=[list(neighbors) for neighbors in self._state.adjacency],
            edge_log=list(self._state.edge_log),
        )
        return clone

    def __getitem__(self, vertex: Vertex) -> Tuple[Neighbor, ...]:
        return self.neighbors(vertex)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(range(self.vertex_count))

    def __len__(self) -> int:
        return self.vertex_count

    def __contains__(self, vertex: object) -> bool:
        return isinstance(vertex, int) and 0 <= vertex < self.vertex_count

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"AdjacencyList({self.vertex_count} vertices, {self.edge_count} edges, {kind})"

    @classmethod
    def from_edges(
        cls, vertex_count: int, edges: Iterable[EdgeRecord], directed: bool = False
    ) -> "AdjacencyList":
        """Create an AdjacencyList from ``(u, v)`` or ``(u, v, weight)`` records."""
        graph = cls(vertex_count, directed=directed)
        graph.add_edges(edges)
        logger.debug(f"Built {graph!r}")
        return graph


class AdjacencyMatrix:
    """
    Undirected adjacency-matrix graph.

    ``matrix[u][v]`` holds the weight of the edge between u and v, or ``0`` if there
    is none. Adding an edge again overwrites the previous weight. Rows are handed
    out as tuples; use :meth:`rows` for a mutable copy.
    """

    def __init__(self, vertex_count: int):
        _validate_size(vertex_count)
        self._grid: List[List[Weight]] = [[0] * vertex_count for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._grid)

    def add_edge(self, u: Vertex, v: Vertex, weight: Weight = DEFAULT_WEIGHT) -> None:
        """
        Set the weight of the edge between u and v in both directions.

        Raises:
            VertexIndexError: If u or v is outside ``[0, vertex_count)``
        """
        check_vertex(u, self.vertex_count)
        check_vertex(v, self.vertex_count)
        if weight == 0:
            logger.debug(f"Zero-weight edge {u}-{v} is indistinguishable from no edge")
        self._grid[u][v] = weight
        self._grid[v][u] = weight

    def weight(self, u: Vertex, v: Vertex) -> Weight:
        check_vertex(u, self.vertex_count)
        check_vertex(v, self.vertex_count)
        return self._grid[u][v]

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        return self.weight(u, v) != 0

    def edges(self) -> List[WeightedEdge]:
        """List each non-zero entry once, with ``u <= v``, in row-major order."""
        return [
            WeightedEdge(u, v, self._grid[u][v])
            for u in range(self.vertex_count)
            for v in range(u, self.vertex_count)
            if self._grid[u][v] != 0
        ]

    def rows(self) -> List[List[Weight]]:
        """Return a mutable copy of the grid as a list of lists."""
        return [list(row) for row in self._grid]

    def to_adjacency_list(self) -> AdjacencyList:
        """Convert to an undirected AdjacencyList with neighbors in column order."""
        graph = AdjacencyList(self.vertex_count)
        graph.add_edges(self.edges())
        return graph

    def __getitem__(self, u: Vertex) -> Tuple[Weight, ...]:
        check_vertex(u, self.vertex_count)
        return tuple(self._grid[u])

    def __len__(self) -> int:
        return self.vertex_count

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AdjacencyMatrix):
            return self._grid == other._grid
        if isinstance(other, Sequence):
            if not all(isinstance(row, Sequence) for row in other):
                return False
            return self._grid == [list(row) for row in other]
        return NotImplemented

    def __repr__(self) -> str:
        return f"AdjacencyMatrix({self.vertex_count} vertices)"


def new_adjacency_matrix(vertex_count: int) -> AdjacencyMatrix:
    """Create a zero-filled ``vertex_count x vertex_count`` adjacency matrix."""
    return AdjacencyMatrix(vertex_count)


def add_edge_matrix(
    matrix: AdjacencyMatrix, u: Vertex, v: Vertex, weight: Weight = DEFAULT_WEIGHT
) -> None:
    """Set both ``matrix[u][v]`` and ``matrix[v][u]`` to weight."""
    matrix.add_edge(u, v, weight)


def new_adjacency_list(vertex_count: int, directed: bool = False) -> AdjacencyList:
    """Create an adjacency list with an empty neighbor sequence per vertex."""
    return AdjacencyList(vertex_count, directed=directed)


def add_edge_list(
    graph: AdjacencyList, u: Vertex, v: Vertex, weight: Weight = DEFAULT_WEIGHT
) -> None:
    """Append ``(v, weight)`` to u's sequence, and ``(u, weight)`` to v's if undirected."""
    graph.add_edge(u, v, weight)
