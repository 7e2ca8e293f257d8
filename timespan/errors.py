"""Exceptions raised while building, parsing and combining spans.

Every error derives from SpanError, which is a ValueError, so callers that
only care about "bad input" can catch ValueError like they would for
datetime.strptime.
"""

from __future__ import annotations

from typing import Any


class SpanError(ValueError):
    """Base class for all span errors."""


class SplitError(SpanError):
    """The input text could not be split into start and end text."""


class TemplateError(SplitError):
    """The template itself is malformed."""


class TemplateMissingPlaceholderError(TemplateError):
    """A placeholder is absent from the template or appears more than once."""

    def __init__(self, placeholder: str, count: int, template: str):
        self.placeholder = placeholder
        self.count = count
        self.template = template
        if count == 0:
            detail = "is missing"
        else:
            detail = f"appears {count} times"
        super().__init__(f"Placeholder {placeholder} {detail} in template {template!r}")


class TemplateAdjacentPlaceholdersError(TemplateError):
    """{start} and {end} touch each other, so the split point is undefined."""

    def __init__(self, template: str):
        self.template = template
        super().__init__(
            f"Template {template!r} has no literal text between {{start}} and {{end}}"
        )


class NoMatchError(SplitError):
    """A literal from the template was not found in the input."""

    def __init__(self, literal: str, expected: str, text: str):
        self.literal = literal
        self.expected = expected
        self.text = text
        super().__init__(f"Input {text!r} does not match the template {literal} {expected!r}")


class TemporalParseError(SpanError):
    """The point parser rejected one side of the span."""

    def __init__(self, side: str, text: str, fmt: str | None, reason: str):
        self.side = side
        self.text = text
        self.format = fmt
        if fmt is None:
            super().__init__(f"Could not parse {side} {text!r}: {reason}")
        else:
            super().__init__(f"Could not parse {side} {text!r} with format {fmt!r}: {reason}")


class InvalidOrderError(SpanError):
    """The start of a span lies after its end."""

    def __init__(self, start: Any, end: Any):
        self.start = start
        self.end = end
        super().__init__(f"Span start must not be after its end: got start={start}, end={end}")


class EmptySpanError(SpanError):
    """The resulting span would be empty."""


class NotContinuousError(SpanError):
    """The resulting span would not be continuous."""


class OutOfRangeError(SpanError):
    """A point lies outside the range an operation accepts."""


class AmbiguousLocalTimeError(SpanError):
    """A local wall time maps to zero or several instants in its zone."""


class UnsupportedOperationError(SpanError):
    """The span variant does not support the requested operation."""


class SerializationError(SpanError):
    """A structured record does not describe a span."""
