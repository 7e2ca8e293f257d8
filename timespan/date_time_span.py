"""Date and time spans in a time zone."""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import ClassVar

from timespan import span_parser
from timespan.errors import AmbiguousLocalTimeError
from timespan.naive import NaiveDateTimeSpan
from timespan.points import DateTimeKind, PointKind, localize
from timespan.span import Span

logger = logging.getLogger(__name__)


class DateTimeSpan(Span[datetime]):
    """Span of zone-aware datetime.datetime values.

    Parsing accepts an optional target zone. Without one, a pattern with %z
    gives fixed-offset datetimes and a pattern without %z expects the text to
    end with an IANA zone name. With one, parsed points are expressed in that
    zone.

    Example:
        >>> span = DateTimeSpan.parse("2017-01-01 15:10:00+02:00 - 2017-01-02 09:30:00+02:00", tz=timezone.utc)
        >>> str(span.format("{start} to {end}", "%c", "%c"))
        'Sun Jan  1 13:10:00 2017 to Mon Jan  2 07:30:00 2017'
    """

    point_kind: ClassVar[PointKind] = DateTimeKind()
    serializable: ClassVar[bool] = True

    @classmethod
    def parse_from_str(
        cls,
        text: str,
        template: str,
        start_format: str,
        end_format: str,
        tz: tzinfo | None = None,
    ) -> DateTimeSpan:
        return span_parser.parse_from_str(cls, text, template, start_format, end_format, DateTimeKind(tz))

    @classmethod
    def parse(cls, text: str, tz: tzinfo | None = None) -> DateTimeSpan:
        return span_parser.parse_span(cls, text, DateTimeKind(tz))

    from_str = parse

    @classmethod
    def from_utc_datetimespan(cls, span: NaiveDateTimeSpan, tz: tzinfo) -> DateTimeSpan:
        """Read a naive span as UTC wall time and express it in tz."""
        return cls(
            span.start.replace(tzinfo=timezone.utc).astimezone(tz),
            span.end.replace(tzinfo=timezone.utc).astimezone(tz),
        )

    @classmethod
    def from_local_datetimespan(cls, span: NaiveDateTimeSpan, tz: tzinfo) -> DateTimeSpan:
        """Read a naive span as wall time in tz.

        Raises:
            AmbiguousLocalTimeError: If an end falls in a DST fold or gap of tz
        """
        try:
            return cls(localize(span.start, tz), localize(span.end, tz))
        except AmbiguousLocalTimeError as e:
            logger.debug(f"Could not localize {span} in {tz}: {e}")
            raise

    def astimezone(self, tz: tzinfo) -> DateTimeSpan:
        """Express the same instants in another zone."""
        return type(self)(self.start.astimezone(tz), self.end.astimezone(tz))

