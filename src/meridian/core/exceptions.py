"""
Custom exceptions for the graph algorithms core.

This module defines the hierarchy of exceptions raised by the graph representations
and the algorithms that consume them. Only a few structural defects are actively
detected; everything else is a documented, unchecked precondition.
"""


class ValidationError(Exception):
    """
    Raised when externally supplied edge data fails validation.

    This exception is raised when edge records handed to the validation utilities do
    not match the expected structure before they are turned into graph edges.

    Examples:
        * Edge record with a missing endpoint
        * Non-numeric weight
        * Vertex id outside the declared vertex range
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class GraphOperationError(Exception):
    """
    Raised when a graph algorithm cannot produce a result.

    This is the base class for structural defects that an algorithm detects in its
    input while running.

    Examples:
        * Negative-weight cycle found by Bellman-Ford
        * Cycle found during a checked topological sort
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NegativeCycleError(GraphOperationError):
    """
    Raised when a negative-weight cycle is reachable from the source.

    Bellman-Ford raises this after its extra relaxation pass finds an edge that can
    still be relaxed. No distances are returned in that case.
    """


class CycleDetectedError(GraphOperationError):
    """
    Raised when a checked topological sort meets a back edge.

    Only raised when cycle detection is requested explicitly; by default the sort
    returns an ordering without checking for cycles.
    """

    def __init__(self, message: str, vertex: int):
        super().__init__(message)
        self.vertex = vertex


class VertexIndexError(IndexError):
    """
    Raised when a vertex id lies outside ``[0, vertex_count)``.

    This is a caller error. Negative ids are rejected rather than wrapped around as
    Python sequence indexing would do.

    Examples:
        * Adding an edge to a vertex that was never allocated
        * Starting a traversal from a negative vertex id
        * Edge list entry referencing a vertex beyond ``vertex_count``
    """

    def __init__(self, vertex: int, vertex_count: int):
        super().__init__(f"Vertex {vertex} out of range [0, {vertex_count})")
        self.vertex = vertex
        self.vertex_count = vertex_count
