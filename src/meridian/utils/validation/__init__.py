"""
Validation package.

This package validates edge data that arrives from outside the library before it
is turned into graph edges.
"""

from .base import ValidationResult
from .schema import EdgeRecordValidator, validate_edge_records

__all__ = [
    "ValidationResult",
    "EdgeRecordValidator",
    "validate_edge_records",
]
