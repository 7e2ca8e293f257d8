"""Date spans labelled with a time zone."""

from __future__ import annotations

from datetime import tzinfo
from typing import ClassVar

from timespan.naive import NaiveDateSpan
from timespan.points import PointKind, ZonedDate, ZonedDateKind
from timespan.span import Span


class DateSpan(Span[ZonedDate]):
    """Span of calendar dates in a time zone.

    The zone of a date cannot be recovered from text, so date spans are not
    parseable and not serializable. Build them from ZonedDate values or with
    from_reference_datespan().

    Example:
        >>> span = DateSpan.from_reference_datespan(NaiveDateSpan.parse("2017-08-03 - 2017-08-05"), ZoneInfo("Europe/Berlin"))
        >>> str(span)
        '2017-08-03CEST - 2017-08-05CEST'
    """

    point_kind: ClassVar[PointKind] = ZonedDateKind()

    @classmethod
    def from_reference_datespan(cls, span: NaiveDateSpan, tz: tzinfo) -> DateSpan:
        """Label the dates of a naive date span with a zone.

        This keeps the calendar dates as they are, it does not convert any
        instant between zones. Use DateTimeSpan.astimezone() for that.
        """
        return cls(ZonedDate(span.start, tz), ZonedDate(span.end, tz))
