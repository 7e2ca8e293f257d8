"""Structured serialization of spans.

A span is stored as a two-field record, {"start": ..., "end": ...}, where
each field holds the canonical ISO-8601 text of its point. Records are
checked against SPAN_RECORD_SCHEMA before any point is parsed.

Span variants also plug into pydantic: a model field annotated with a
serializable span variant accepts a span, a record or the canonical
"<start> - <end>" string, and dumps to a record.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar

import jsonschema
from pydantic_core import core_schema

from timespan import span_parser
from timespan.errors import SerializationError, UnsupportedOperationError

if TYPE_CHECKING:
    from timespan.span import Span

S = TypeVar("S", bound="Span")

SPAN_RECORD_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Span",
    "type": "object",
    "properties": {
        "start": {"type": "string", "minLength": 1},
        "end": {"type": "string", "minLength": 1},
    },
    "required": ["start", "end"],
    "additionalProperties": False,
}


def _require_serializable(span_cls: type) -> None:
    if not span_cls.serializable:
        raise UnsupportedOperationError(f"{span_cls.__name__} does not support structured serialization")


def span_to_record(span: Span[Any]) -> dict[str, str]:
    """Convert a span to a {"start", "end"} record of canonical strings."""
    _require_serializable(type(span))
    kind = span.point_kind
    return {"start": kind.format_default(span.start), "end": kind.format_default(span.end)}


def validate_span_record(record: Any) -> tuple[bool, str]:
    """Check a record against SPAN_RECORD_SCHEMA.

    Returns:
        Tuple of (is_valid, error_message). error_message is empty if valid.
    """
    try:
        jsonschema.validate(instance=record, schema=SPAN_RECORD_SCHEMA)
    except jsonschema.ValidationError as e:
        return False, e.message
    return True, ""


def span_from_record(span_cls: type[S], record: Any) -> S:
    """Build a span of the given variant from a {"start", "end"} record.

    Raises:
        SerializationError: If the record does not match SPAN_RECORD_SCHEMA
        TemporalParseError: If a field is not a canonical point
        InvalidOrderError: If the start lies after the end
    """
    _require_serializable(span_cls)
    is_valid, error_message = validate_span_record(record)
    if not is_valid:
        raise SerializationError(f"Invalid {span_cls.__name__} record: {error_message}")
    return span_parser.build_span(span_cls, record["start"], record["end"])


def span_to_json(span: Span[Any]) -> str:
    return json.dumps(span_to_record(span))


def span_from_json(span_cls: type[S], payload: str) -> S:
    try:
        record = json.loads(payload)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid {span_cls.__name__} JSON: {e}") from e
    return span_from_record(span_cls, record)


def span_core_schema(span_cls: type) -> core_schema.CoreSchema:
    """Build the pydantic core schema for a span variant."""

    def validate(value: Any) -> Any:
        if isinstance(value, span_cls):
            return value
        if isinstance(value, str):
            _require_serializable(span_cls)
            return span_cls.parse(value)
        return span_from_record(span_cls, value)

    if span_cls.serializable:
        serializer = span_to_record
    else:
        serializer = str
    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(serializer),
    )
