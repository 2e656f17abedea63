"""
Binary-heap priority queue used by the shortest-path and spanning-tree algorithms.
"""

from heapq import heappop, heappush
from typing import Any, Generic, List, NamedTuple, Optional, TypeVar

T = TypeVar("T")


class QueueEntry(NamedTuple):
    """Entry removed from the queue: the element and its priority."""

    element: Any
    priority: float


class PriorityQueue(Generic[T]):
    """
    Min-priority queue with O(log n) push and pop.

    Entries with equal priority come out in a consistent order, decided by an
    insertion counter, so elements are never compared or hashed. The same element
    may be pushed several times; each push is a separate entry and callers skip
    stale ones when popped.

    Example:
        >>> pq = PriorityQueue[str]()
        >>> pq.push("b", 2)
        >>> pq.push("a", 1)
        >>> pq.pop()
        QueueEntry(element='a', priority=1)
    """

    def __init__(self):
        self._queue: List[List[Any]] = []
        self._counter = 0  # Unique counter to break ties

    def push(self, element: T, priority: float) -> None:
        """Add an entry, keeping any earlier entries for the same element."""
        heappush(self._queue, [priority, self._counter, element])
        self._counter += 1

    def pop(self) -> Optional[QueueEntry]:
        """Remove and return the entry with the lowest priority, or None if empty."""
        if not self._queue:
            return None
        priority, _, element = heappop(self._queue)
        return QueueEntry(element, priority)

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
