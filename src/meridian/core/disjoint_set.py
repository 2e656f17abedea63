"""
Union-Find (disjoint-set) over dense integer vertex ids.

Tracks a partition of ``0 .. size-1`` under incremental unions:
- find(v): representative of the set containing v, with path compression
- union(u, v): merge two sets by rank
- connected(u, v): whether u and v share a representative

Both operations run in O(α(n)) amortized time, where α is the inverse Ackermann
function.
"""

from typing import Dict, List

from .exceptions import VertexIndexError
from .types import Vertex


class DisjointSet:
    """
    Union-Find with path compression and union by rank.

    State lives in two arrays indexed by vertex id. Every vertex starts as its own
    root with rank 0.

    Example:
        >>> ds = DisjointSet(4)
        >>> ds.union(0, 1)
        True
        >>> ds.union(1, 0)
        False
        >>> ds.connected(0, 1), ds.connected(0, 2)
        (True, False)
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("size must be non-negative")
        self.parent: List[Vertex] = list(range(size))
        self.rank: List[int] = [0] * size
        self._set_count = size

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently tracked."""
        return self._set_count

    def _check(self, vertex: Vertex) -> None:
        if not 0 <= vertex < len(self.parent):
            raise VertexIndexError(vertex, len(self.parent))

    def find(self, vertex: Vertex) -> Vertex:
        """
        Find the representative of the set containing vertex.

        Every vertex on the path to the root is re-pointed directly at the root.
        """
        self._check(vertex)
        parent = self.parent

        root = vertex
        while parent[root] != root:
            root = parent[root]

        # Path compression
        current = vertex
        while parent[current] != root:
            parent[current], current = root, parent[current]

        return root

    def union(self, u: Vertex, v: Vertex) -> bool:
        """
        Merge the sets containing u and v.

        The root with the lower rank is attached under the other one; on equal rank
        the root of u wins and its rank grows by one.

        Returns:
            True if two sets were merged, False if u and v were already joined.
        """
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False

        if self.rank[root_u] > self.rank[root_v]:
            self.parent[root_v] = root_u
        elif self.rank[root_u] < self.rank[root_v]:
            self.parent[root_u] = root_v
        else:
            self.parent[root_v] = root_u
            self.rank[root_u] += 1

        self._set_count -= 1
        return True

    def connected(self, u: Vertex, v: Vertex) -> bool:
        """Check if u and v are in the same set."""
        return self.find(u) == self.find(v)

    def groups(self) -> Dict[Vertex, List[Vertex]]:
        """Map each representative to the sorted members of its set."""
        sets: Dict[Vertex, List[Vertex]] = {}
        for vertex in range(len(self.parent)):
            sets.setdefault(self.find(vertex), []).append(vertex)
        return sets
