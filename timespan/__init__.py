"""Spans of dates and times, parsed from and rendered into text templates.

A span is an ordered pair of points from the datetime module. Spans can be
parsed from text with a template such as "from {start} to {end}" and one
strptime pattern per side, rendered back into any template, and queried for
duration and containment.
"""

from timespan.errors import (
    AmbiguousLocalTimeError,
    EmptySpanError,
    InvalidOrderError,
    NoMatchError,
    NotContinuousError,
    OutOfRangeError,
    SerializationError,
    SpanError,
    SplitError,
    TemplateAdjacentPlaceholdersError,
    TemplateError,
    TemplateMissingPlaceholderError,
    TemporalParseError,
    UnsupportedOperationError,
)
from timespan.points import PointKind, ZonedDate
from timespan.template import split_template
from timespan.delayed_format import RenderedSpan
from timespan.span import Span
from timespan.naive import NaiveDateSpan, NaiveDateTimeSpan, NaiveTimeSpan
from timespan.date_span import DateSpan
from timespan.date_time_span import DateTimeSpan

__all__ = [
    "Span",
    "RenderedSpan",
    "NaiveDateSpan",
    "NaiveTimeSpan",
    "NaiveDateTimeSpan",
    "DateSpan",
    "DateTimeSpan",
    "ZonedDate",
    "PointKind",
    "split_template",
    "SpanError",
    "SplitError",
    "TemplateError",
    "TemplateMissingPlaceholderError",
    "TemplateAdjacentPlaceholdersError",
    "NoMatchError",
    "TemporalParseError",
    "InvalidOrderError",
    "EmptySpanError",
    "NotContinuousError",
    "OutOfRangeError",
    "AmbiguousLocalTimeError",
    "UnsupportedOperationError",
    "SerializationError",
]
