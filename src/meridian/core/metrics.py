"""
Performance metrics for graph algorithm calls.

Every algorithm entry point runs inside :func:`track_performance`, which records how
much work the call did and logs a summary at DEBUG level when the call returns or
fails. Memory is sampled from the process resident set size.

Example:
    >>> with track_performance("dijkstra") as metrics:
    ...     metrics.vertices_explored += 1
    >>> metrics.duration >= 0.0
    True
"""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from time import perf_counter
from typing import Dict, Generator, Optional, Union

import psutil  # type: ignore # Missing stubs

logger = logging.getLogger(__name__)


@dataclass
class PerformanceMetrics:
    """
    Container for algorithm performance metrics.

    Attributes:
        operation: Name of the algorithm
        start_time: Start timestamp from ``perf_counter``
        end_time: End timestamp (0.0 while running)
        vertices_explored: Vertices taken off the frontier or settled
        edges_relaxed: Successful relaxations or accepted edges
        memory_delta: RSS growth over the call in bytes (None if not sampled)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    vertices_explored: int = 0
    edges_relaxed: int = 0
    memory_delta: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")
        if self.end_time and self.end_time < self.start_time:
            raise ValueError("end_time cannot be before start_time")

    @property
    def duration(self) -> float:
        """Duration of the call in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """Convert metrics to dictionary format."""
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "vertices_explored": self.vertices_explored,
            "edges_relaxed": self.edges_relaxed,
            "memory_delta": self.memory_delta,
        }


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


@contextmanager
def track_performance(operation: str) -> Generator[PerformanceMetrics, None, None]:
    """Context manager that measures an algorithm call and logs the result."""
    start_memory = get_memory_usage()
    metrics = PerformanceMetrics(operation=operation, start_time=perf_counter())
    try:
        yield metrics
    finally:
        metrics.end_time = perf_counter()
        metrics.memory_delta = max(get_memory_usage() - start_memory, 0)
        logger.debug(
            f"{operation}: {metrics.duration:.3f}ms, "
            f"{metrics.vertices_explored} vertices explored, "
            f"{metrics.edges_relaxed} edges relaxed"
        )
