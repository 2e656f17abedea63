"""Core graph functionality."""

from .disjoint_set import DisjointSet
from .exceptions import (
    CycleDetectedError,
    GraphOperationError,
    NegativeCycleError,
    ValidationError,
    VertexIndexError,
)
from .graph import (
    AdjacencyList,
    AdjacencyMatrix,
    add_edge_list,
    add_edge_matrix,
    new_adjacency_list,
    new_adjacency_matrix,
)
from .metrics import PerformanceMetrics, track_performance
from .priority_queue import PriorityQueue, QueueEntry
from .properties import (
    has_eulerian_circuit,
    has_eulerian_path,
    has_hamiltonian_path,
    odd_degree_vertices,
    topological_sort,
)
from .shortest_path import ShortestPaths, bellman_ford, dijkstra, path_weight, reconstruct_path
from .spanning_tree import kruskal, prim, total_weight
from .traversal import BFSIterator, DFSIterator, bfs, dfs
from .types import GraphProtocol, Neighbor, Vertex, Weight, WeightedEdge

__all__ = [
    "AdjacencyList",
    "AdjacencyMatrix",
    "BFSIterator",
    "CycleDetectedError",
    "DFSIterator",
    "DisjointSet",
    "GraphOperationError",
    "GraphProtocol",
    "NegativeCycleError",
    "Neighbor",
    "PerformanceMetrics",
    "PriorityQueue",
    "QueueEntry",
    "ShortestPaths",
    "ValidationError",
    "Vertex",
    "VertexIndexError",
    "Weight",
    "WeightedEdge",
    "add_edge_list",
    "add_edge_matrix",
    "bellman_ford",
    "bfs",
    "dfs",
    "dijkstra",
    "has_eulerian_circuit",
    "has_eulerian_path",
    "has_hamiltonian_path",
    "kruskal",
    "new_adjacency_list",
    "new_adjacency_matrix",
    "odd_degree_vertices",
    "path_weight",
    "prim",
    "reconstruct_path",
    "topological_sort",
    "total_weight",
    "track_performance",
]
