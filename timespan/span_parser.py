"""Parse spans from text, either through a template or in canonical form."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from timespan.errors import TemporalParseError, UnsupportedOperationError
from timespan.points import PointKind
from timespan.template import DEFAULT_TEMPLATE, split_template

if TYPE_CHECKING:
    from timespan.span import Span

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="Span")


def parse_from_str(
    span_cls: type[S],
    text: str,
    template: str,
    start_format: str,
    end_format: str,
    kind: PointKind | None = None,
) -> S:
    """Parse a span using a template and one strptime pattern per side.

    Args:
        span_cls: Span variant to build
        text: Input such as "from 10.30 to 14.00"
        template: Template such as "from {start} to {end}"
        start_format: strptime pattern for the start text
        end_format: strptime pattern for the end text
        kind: Point kind to parse with, defaults to the variant's own

    Returns:
        The parsed span

    Raises:
        SplitError: If the text does not follow the template
        TemporalParseError: If either side does not match its pattern
        InvalidOrderError: If the start lies after the end
        UnsupportedOperationError: If the variant cannot be parsed
    """
    kind = _parseable_kind(span_cls, kind)
    start_text, end_text = split_template(template, text)
    start = _parse_side("start", start_text, start_format, lambda t: kind.parse(t, start_format))
    end = _parse_side("end", end_text, end_format, lambda t: kind.parse(t, end_format))
    return span_cls(start, end)


def parse_span(span_cls: type[S], text: str, kind: PointKind | None = None) -> S:
    """Parse a span in canonical form, "<start> - <end>" with ISO-8601 points.

    Raises:
        SplitError: If the text has no " - " separator
        TemporalParseError: If either side is not in canonical form
        InvalidOrderError: If the start lies after the end
        UnsupportedOperationError: If the variant cannot be parsed
    """
    kind = _parseable_kind(span_cls, kind)
    start_text, end_text = split_template(DEFAULT_TEMPLATE, text)
    return build_span(span_cls, start_text, end_text, kind)


def build_span(span_cls: type[S], start_text: str, end_text: str, kind: PointKind | None = None) -> S:
    """Build a span from the canonical text of each point.

    Raises:
        TemporalParseError: If either side is not in canonical form
        InvalidOrderError: If the start lies after the end
        UnsupportedOperationError: If the variant cannot be parsed
    """
    kind = _parseable_kind(span_cls, kind)
    start = _parse_side("start", start_text, None, kind.parse_default)
    end = _parse_side("end", end_text, None, kind.parse_default)
    return span_cls(start, end)


def _parseable_kind(span_cls: type, kind: PointKind | None) -> PointKind:
    kind = kind or span_cls.point_kind
    if not kind.parseable:
        raise UnsupportedOperationError(f"{span_cls.__name__} does not support parsing from text")
    return kind


def _parse_side(side: str, text: str, fmt: str | None, parse: Callable[[str], Any]) -> Any:
    try:
        return parse(text)
    except ValueError as e:
        logger.debug(f"Failed to parse {side} {text!r} with format {fmt!r}: {e}")
        raise TemporalParseError(side, text, fmt, str(e)) from e
