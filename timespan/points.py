"""Temporal point kinds that can be held by a span.

A span only needs a handful of things from its points: ordering, the
distance between two of them, moving one by a timedelta, and reading and
writing text. PointKind wraps those for each kind of value from the datetime
module so the span code stays the same for dates, times and datetimes.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timespan.errors import AmbiguousLocalTimeError, UnsupportedOperationError

_TIME_ANCHOR = date(2000, 1, 1)
_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True, order=True)
class ZonedDate:
    """A calendar date labelled with a time zone.

    Comparison and hashing only look at the calendar date, the zone is a
    label used for display.
    """

    date: date
    tz: tzinfo = field(compare=False, hash=False)

    def _midnight(self) -> datetime:
        return datetime.combine(self.date, time(), tzinfo=self.tz)

    def tzname(self) -> str | None:
        return self._midnight().tzname()

    def strftime(self, fmt: str) -> str:
        return self._midnight().strftime(fmt)

    def __add__(self, other: Any) -> ZonedDate:
        if isinstance(other, timedelta):
            return ZonedDate(self.date + other, self.tz)
        return NotImplemented

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, ZonedDate):
            return self.date - other.date
        if isinstance(other, timedelta):
            return ZonedDate(self.date - other, self.tz)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.date.isoformat()}{self.tzname() or ''}"


class PointKind(ABC):
    """Interface between spans and the temporal values they hold."""

    name = "point"
    parseable = True

    def format(self, value: Any, fmt: str) -> str:
        """Render a point with a strftime pattern."""
        return value.strftime(fmt)

    def format_default(self, value: Any) -> str:
        """Render a point in its canonical ISO-8601 form."""
        return value.isoformat()

    @abstractmethod
    def parse(self, text: str, fmt: str) -> Any:
        """Read a point from text with a strptime pattern.

        Raises:
            ValueError: If the text does not match the pattern
        """

    @abstractmethod
    def parse_default(self, text: str) -> Any:
        """Read a point from its canonical ISO-8601 form.

        Raises:
            ValueError: If the text is not in canonical form
        """

    def key(self, value: Any) -> Any:
        """Return what a point is ordered and compared by."""
        return value

    def difference(self, start: Any, end: Any) -> timedelta:
        return end - start

    def add(self, value: Any, delta: timedelta) -> Any:
        return value + delta


class GenericPointKind(PointKind):
    """Any ordered, subtractable value. Formatting goes through format()."""

    name = "generic"
    parseable = False

    def format(self, value: Any, fmt: str) -> str:
        return format(value, fmt)

    def format_default(self, value: Any) -> str:
        return str(value)

    def parse(self, text: str, fmt: str) -> Any:
        raise UnsupportedOperationError("Generic spans cannot be parsed, use a concrete span variant")

    def parse_default(self, text: str) -> Any:
        raise UnsupportedOperationError("Generic spans cannot be parsed, use a concrete span variant")


class NaiveDateKind(PointKind):
    name = "date"

    def parse(self, text: str, fmt: str) -> date:
        return datetime.strptime(text, fmt).date()

    def parse_default(self, text: str) -> date:
        return date.fromisoformat(text)


class NaiveTimeKind(PointKind):
    """Times of day. Moving a time wraps around midnight."""

    name = "time"

    def parse(self, text: str, fmt: str) -> time:
        return datetime.strptime(text, fmt).time()

    def parse_default(self, text: str) -> time:
        return time.fromisoformat(text)

    def difference(self, start: time, end: time) -> timedelta:
        return datetime.combine(_TIME_ANCHOR, end) - datetime.combine(_TIME_ANCHOR, start)

    def add(self, value: time, delta: timedelta) -> time:
        return (datetime.combine(_TIME_ANCHOR, value) + delta % _ONE_DAY).time()


class NaiveDateTimeKind(PointKind):
    name = "datetime"

    def format_default(self, value: datetime) -> str:
        return value.isoformat(sep=" ")

    def parse(self, text: str, fmt: str) -> datetime:
        return self._require_naive(datetime.strptime(text, fmt))

    def parse_default(self, text: str) -> datetime:
        return self._require_naive(datetime.fromisoformat(text))

    @staticmethod
    def _require_naive(value: datetime) -> datetime:
        if value.tzinfo is not None:
            raise ValueError(f"expected a date and time without UTC offset, got {value.isoformat()}")
        return value


class DateTimeKind(PointKind):
    """Zone-aware datetimes, optionally bound to a target zone.

    With a zone, text carrying a UTC offset is converted into that zone and
    text without one is read as wall time in that zone. Without a zone, the
    offset comes from %z, or from a trailing IANA zone name when the pattern
    has no %z (e.g. "2017-04-02 20:15:00 Europe/Berlin").
    """

    name = "zoned datetime"

    _ZONE_SUFFIX_RE = re.compile(r"^(.*\S)\s+(\S+)$")

    def __init__(self, tz: tzinfo | None = None):
        self.tz = tz

    def key(self, value: datetime) -> datetime:
        # same-zone datetimes compare by wall clock and ignore fold
        if value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc)

    def difference(self, start: datetime, end: datetime) -> timedelta:
        return self.key(end) - self.key(start)

    def add(self, value: datetime, delta: timedelta) -> datetime:
        return (self.key(value) + delta).astimezone(value.tzinfo)

    def format_default(self, value: datetime) -> str:
        return value.isoformat(sep=" ")

    def parse(self, text: str, fmt: str) -> datetime:
        if self.tz is None and "%z" not in fmt:
            return self._parse_with_zone_name(text, fmt)
        return self._attach_zone(datetime.strptime(text, fmt))

    def parse_default(self, text: str) -> datetime:
        return self._attach_zone(datetime.fromisoformat(text))

    def _attach_zone(self, value: datetime) -> datetime:
        if value.tzinfo is None:
            if self.tz is None:
                raise ValueError(f"no UTC offset or time zone given for {value.isoformat()}")
            return localize(value, self.tz)
        if self.tz is None:
            return value
        return value.astimezone(self.tz)

    def _parse_with_zone_name(self, text: str, fmt: str) -> datetime:
        m = self._ZONE_SUFFIX_RE.match(text.strip())
        if not m:
            raise ValueError(f"expected a time zone name after {text!r}")
        zone = load_zone(m.group(2))
        return localize(datetime.strptime(m.group(1), fmt), zone)


class ZonedDateKind(PointKind):
    """Dates labelled with a zone. The zone cannot be recovered from text."""

    name = "zoned date"
    parseable = False

    def format_default(self, value: ZonedDate) -> str:
        return str(value)

    def parse(self, text: str, fmt: str) -> ZonedDate:
        raise UnsupportedOperationError(
            "Zoned date spans cannot be parsed, use DateSpan.from_reference_datespan"
        )

    def parse_default(self, text: str) -> ZonedDate:
        raise UnsupportedOperationError(
            "Zoned date spans cannot be parsed, use DateSpan.from_reference_datespan"
        )


def load_zone(name: str) -> tzinfo:
    """Look up a zone by IANA name; "UTC" and "Z" map to datetime.timezone.utc.

    Raises:
        ValueError: If the zone name is unknown
    """
    if name in ("UTC", "Z"):
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ValueError(f"unknown time zone {name!r}") from e


def localize(value: datetime, tz: tzinfo) -> datetime:
    """Attach tz to a naive wall time.

    Raises:
        AmbiguousLocalTimeError: If the wall time falls in a DST fold or gap of tz
    """
    earlier = value.replace(tzinfo=tz, fold=0)
    later = value.replace(tzinfo=tz, fold=1)
    if earlier.utcoffset() != later.utcoffset():
        raise AmbiguousLocalTimeError(f"Local time {value.isoformat()} does not map to a single instant in {tz}")
    return earlier
