"""Spans of points without a time zone.

These are meant for spans where the zone does not matter, like christmas
("2017-12-24 - 2017-12-26") or opening hours ("09:00:00 - 17:00:00").
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import ClassVar

from timespan.points import NaiveDateKind, NaiveDateTimeKind, NaiveTimeKind, PointKind
from timespan.span import Span


class NaiveDateSpan(Span[date]):
    """Span of datetime.date values.

    Example:
        >>> a = NaiveDateSpan.parse("2017-04-15 - 2017-08-15")
        >>> b = NaiveDateSpan.parse_from_str("15.04.17 - 15.08.17", "{start} - {end}", "%d.%m.%y", "%d.%m.%y")
        >>> a == b
        True
        >>> str(a.format("from {start} to {end}", "%m/%d", "%m/%d"))
        'from 04/15 to 08/15'
    """

    point_kind: ClassVar[PointKind] = NaiveDateKind()
    serializable: ClassVar[bool] = True


class NaiveTimeSpan(Span[time]):
    """Span of datetime.time values within a single day.

    Example:
        >>> a = NaiveTimeSpan.parse("17:30:00 - 19:15:00")
        >>> b = NaiveTimeSpan.parse_from_str("05.30 PM - 07.15 PM", "{start} - {end}", "%I.%M %p", "%I.%M %p")
        >>> a == b
        True
        >>> str(a.format("from {start} to {end}", "%H:%M", "%H:%M"))
        'from 17:30 to 19:15'
    """

    point_kind: ClassVar[PointKind] = NaiveTimeKind()
    serializable: ClassVar[bool] = True


class NaiveDateTimeSpan(Span[datetime]):
    """Span of naive datetime.datetime values."""

    point_kind: ClassVar[PointKind] = NaiveDateTimeKind()
    serializable: ClassVar[bool] = True
