"""
Core type definitions and protocols.

This module provides the value types shared by the graph representations and the
algorithms, and the read-only protocol algorithms rely on.
"""

from typing import Iterator, List, NamedTuple, Protocol, Sequence, Union

Vertex = int
Weight = Union[int, float]


class Neighbor(NamedTuple):
    """Entry of an adjacency sequence: the neighboring vertex and the edge weight."""

    vertex: Vertex
    weight: Weight


class WeightedEdge(NamedTuple):
    """Edge record ``(u, v, weight)`` used by edge-list algorithms and MST results."""

    u: Vertex
    v: Vertex
    weight: Weight = 1


class GraphProtocol(Protocol):
    """Protocol defining the read-only graph operations algorithms need."""

    @property
    def vertex_count(self) -> int:
        """Number of vertices, ids are ``0 .. vertex_count - 1``."""
        ...

    def neighbors(self, vertex: Vertex) -> Sequence[Neighbor]:
        """Get the neighbors of a vertex in edge insertion order."""
        ...

    def degree(self, vertex: Vertex) -> int:
        """Get the number of adjacency entries of a vertex."""
        ...

    def edges(self) -> List[WeightedEdge]:
        """Get the derived edge list."""
        ...

    def __iter__(self) -> Iterator[Vertex]:
        ...
