"""
Schema validation of external edge records.

Edge data read from files, requests or other external sources is checked against a
JSON schema before it reaches the graph constructors. Accepted record shapes:

- ``[u, v]`` (weight defaults to 1)
- ``[u, v, weight]``
- ``{"u": u, "v": v, "weight": weight}`` (weight optional)

Vertex ids must be integers in ``[0, vertex_count)`` and weights must be numbers.
Tuples are accepted wherever arrays are.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from ...core.exceptions import ValidationError
from ...core.graph import DEFAULT_WEIGHT
from ...core.types import WeightedEdge
from .base import ValidationResult

logger = logging.getLogger(__name__)

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def build_edge_schemas(vertex_count: int) -> Dict[str, Dict[str, Any]]:
    """Build the array and object schemas for edge records of a graph."""
    vertex = {"type": "integer", "minimum": 0, "maximum": vertex_count - 1}
    weight = {"type": "number"}
    return {
        "array": {
            "$schema": SCHEMA_DIALECT,
            "type": "array",
            "prefixItems": [vertex, vertex, weight],
            "items": False,
            "minItems": 2,
        },
        "object": {
            "$schema": SCHEMA_DIALECT,
            "type": "object",
            "properties": {"u": vertex, "v": vertex, "weight": weight},
            "required": ["u", "v"],
            "additionalProperties": False,
        },
    }


class EdgeRecordValidator:
    """
    JSON Schema-based validator for edge records of a graph with a fixed vertex count.

    Attributes:
        vertex_count (int): Number of vertices the records must fit into
    """

    def __init__(self, vertex_count: int):
        if vertex_count < 0:
            raise ValueError("vertex_count must be non-negative")
        self.vertex_count = vertex_count
        schemas = build_edge_schemas(vertex_count)
        self._array_validator = Draft202012Validator(schemas["array"])
        self._object_validator = Draft202012Validator(schemas["object"])

    def _record_error(self, record: Any) -> Optional[str]:
        if isinstance(record, tuple):
            record = list(record)
        if isinstance(record, dict):
            error = best_match(self._object_validator.iter_errors(record))
        elif isinstance(record, list):
            error = best_match(self._array_validator.iter_errors(record))
        else:
            return f"{record!r} is not an edge record"
        return error.message if error is not None else None

    def validate(self, records: Iterable[Any]) -> ValidationResult:
        """
        Validate every record and collect all errors.

        Self-loops are reported as warnings, since they are legal edges.
        """
        errors = []
        warnings = []
        count = 0
        for index, record in enumerate(records):
            count += 1
            message = self._record_error(record)
            if message is not None:
                errors.append(f"record {index}: {message}")
                continue
            u, v = (record["u"], record["v"]) if isinstance(record, dict) else record[:2]
            if u == v:
                warnings.append(f"record {index}: self-loop on vertex {u}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"vertex_count": self.vertex_count, "record_count": count},
        )

    def normalize(self, records: Iterable[Any]) -> List[WeightedEdge]:
        """
        Validate records and convert them to WeightedEdge tuples.

        Raises:
            ValidationError: If any record does not match the schema
        """
        records = list(records)
        result = self.validate(records)
        if not result.is_valid:
            logger.warning(f"Rejected {len(result.errors)} of {len(records)} edge records")
            raise ValidationError("; ".join(result.errors))

        edges = []
        for record in records:
            if isinstance(record, dict):
                u, v = record["u"], record["v"]
                weight = record.get("weight", DEFAULT_WEIGHT)
            else:
                u, v, weight = (*record, DEFAULT_WEIGHT)[:3]
            edges.append(WeightedEdge(int(u), int(v), weight))
        return edges


def validate_edge_records(records: Iterable[Any], vertex_count: int) -> List[WeightedEdge]:
    """Validate external edge records and return them as WeightedEdge tuples."""
    return EdgeRecordValidator(vertex_count).normalize(records)
