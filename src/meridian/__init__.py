"""
Meridian - Graph Algorithms Library

This package builds directed and undirected weighted graphs over dense integer
vertex ids and answers structural questions about them:

- Traversal order (breadth-first and depth-first search)
- Single-source shortest paths (Dijkstra, Bellman-Ford)
- Minimum spanning trees (Kruskal, Prim)
- Eulerian checks and topological ordering

Graphs are owned by the caller; algorithms are stateless functions that never
modify the graph they are given.
"""

__version__ = "0.1.0"
__author__ = "Meridian Team"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Meridian requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.exceptions import GraphOperationError, NegativeCycleError, VertexIndexError
from .core.graph import (
    AdjacencyList,
    AdjacencyMatrix,
    add_edge_list,
    add_edge_matrix,
    new_adjacency_list,
    new_adjacency_matrix,
)
from .core.properties import (
    has_eulerian_circuit,
    has_eulerian_path,
    has_hamiltonian_path,
    topological_sort,
)
from .core.shortest_path import bellman_ford, dijkstra
from .core.spanning_tree import kruskal, prim
from .core.traversal import bfs, dfs

__all__ = [
    "AdjacencyList",
    "AdjacencyMatrix",
    "GraphOperationError",
    "NegativeCycleError",
    "VertexIndexError",
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
    "prim",
    "topological_sort",
]
