"""Tests for performance metrics tracking."""

import logging

import pytest

from meridian.core.metrics import PerformanceMetrics, get_memory_usage, track_performance


def test_metrics_validation():
    """Test that invalid metrics are rejected."""
    with pytest.raises(ValueError, match="operation"):
        PerformanceMetrics(operation=" ", start_time=0.0)
    with pytest.raises(ValueError, match="end_time"):
        PerformanceMetrics(operation="bfs", start_time=2.0, end_time=1.0)


def test_metrics_duration_and_dict():
    """Test duration conversion and dictionary export."""
    metrics = PerformanceMetrics(operation="bfs", start_time=1.0, end_time=1.5)
    metrics.vertices_explored = 4

    assert metrics.duration == pytest.approx(500.0)
    assert metrics.to_dict() == {
        "operation": "bfs",
        "duration_ms": pytest.approx(500.0),
        "vertices_explored": 4,
        "edges_relaxed": 0,
        "memory_delta": None,
    }


def test_running_metrics_have_no_duration():
    """Test that duration is zero until end_time is set."""
    assert PerformanceMetrics(operation="bfs", start_time=1.0).duration == 0.0


def test_track_performance_finalizes_metrics(caplog):
    """Test that the context manager fills in timing and logs a summary."""
    with caplog.at_level(logging.DEBUG, logger="meridian.core.metrics"):
        with track_performance("unit") as metrics:
            metrics.vertices_explored += 2

    assert metrics.end_time >= metrics.start_time
    assert metrics.memory_delta is not None and metrics.memory_delta >= 0
    assert "unit:" in caplog.text
    assert "2 vertices explored" in caplog.text


def test_track_performance_finalizes_on_error():
    """Test that metrics are finalized when the body raises."""
    with pytest.raises(RuntimeError):
        with track_performance("failing") as metrics:
            raise RuntimeError("boom")

    assert metrics.end_time > 0.0


def test_memory_usage_is_positive():
    """Test that the process RSS can be sampled."""
    assert get_memory_usage() > 0
