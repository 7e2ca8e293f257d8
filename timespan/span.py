"""Span value type: an ordered pair of temporal points."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Any, ClassVar, Generic, TypeVar

from timespan import serialization, span_parser
from timespan.delayed_format import RenderedSpan
from timespan.errors import EmptySpanError, InvalidOrderError, NotContinuousError, OutOfRangeError
from timespan.points import GenericPointKind, PointKind

T = TypeVar("T")
S = TypeVar("S", bound="Span")


@dataclass(frozen=True, eq=False)
class Span(Generic[T]):
    """Immutable span between two points, both ends inclusive.

    The start never lies after the end; a span whose start equals its end is
    allowed and has zero duration. Spans compare by start, then end, and only
    against spans of the same class.

    Subclasses bind the kind of point they hold through ``point_kind``, which
    is what makes them parseable and formattable. The base class accepts any
    ordered values that support subtraction. Points are always compared
    through ``point_kind.key``, so zone-aware datetimes compare as instants.

    Attributes:
        start: First point of the span
        end: Last point of the span

    Raises:
        InvalidOrderError: On construction, if start lies after end
    """

    start: T
    end: T

    point_kind: ClassVar[PointKind] = GenericPointKind()
    serializable: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if self._key(self.start) > self._key(self.end):
            raise InvalidOrderError(self.start, self.end)

    def _key(self, point: T) -> Any:
        return self.point_kind.key(point)

    def _keys(self) -> tuple[Any, Any]:
        return self._key(self.start), self._key(self.end)

    def __eq__(self, other: Any) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._keys() == other._keys()

    def __hash__(self) -> int:
        return hash(self._keys())

    def __lt__(self, other: Any) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._keys() < other._keys()

    def __le__(self, other: Any) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._keys() <= other._keys()

    def __gt__(self, other: Any) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._keys() > other._keys()

    def __ge__(self, other: Any) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self._keys() >= other._keys()

    @classmethod
    def parse_from_str(cls: type[S], text: str, template: str, start_format: str, end_format: str) -> S:
        """Parse a span from text laid out by a template.

        Example:
            NaiveTimeSpan.parse_from_str("from 10.30 to 14.00", "from {start} to {end}", "%H.%M", "%H.%M")
        """
        return span_parser.parse_from_str(cls, text, template, start_format, end_format)

    @classmethod
    def parse(cls: type[S], text: str) -> S:
        """Parse a span in canonical form, e.g. "2017-04-15 - 2017-08-15"."""
        return span_parser.parse_span(cls, text)

    from_str = parse

    def format(self, template: str, start_format: str, end_format: str) -> RenderedSpan:
        """Return a lazily rendered view of this span in a template."""
        return RenderedSpan(self, template, start_format, end_format)

    def duration(self) -> timedelta:
        return self.point_kind.difference(self.start, self.end)

    def contains(self, point: T) -> bool:
        start, end = self._keys()
        return start <= self._key(point) <= end

    def __contains__(self, point: T) -> bool:
        return self.contains(point)

    def difference(self: S, other: S) -> S:
        """Return the part of this span not covered by other.

        Raises:
            EmptySpanError: If other covers this span entirely
            NotContinuousError: If other lies strictly inside this span
        """
        start, end = self._keys()
        other_start, other_end = other._keys()
        if start >= other_start and end <= other_end:
            raise EmptySpanError(f"{other} covers {self}")
        if end <= other_start or start >= other_end:
            return self
        if start < other_start < end <= other_end:
            return replace(self, end=other.start)
        if other_start <= start < other_end < end:
            return replace(self, start=other.end)
        raise NotContinuousError(f"Removing {other} from {self} leaves two spans")

    def symmetric_difference(self: S, other: S) -> S:
        """Join two spans where one ends exactly where the other starts.

        Raises:
            NotContinuousError: If the spans do not touch end to start
        """
        start, end = self._keys()
        other_start, other_end = other._keys()
        if end == other_start:
            return replace(self, end=other.end)
        if other_end == start:
            return replace(self, start=other.start)
        raise NotContinuousError(f"{self} and {other} do not touch")

    def intersection(self: S, other: S) -> S:
        """Return the span covered by both spans.

        Raises:
            NotContinuousError: If the spans do not overlap
            EmptySpanError: If the spans only share a single point
        """
        start = max(self.start, other.start, key=self._key)
        end = min(self.end, other.end, key=self._key)
        if self._key(start) > self._key(end):
            raise NotContinuousError(f"{self} and {other} do not overlap")
        if self._key(start) == self._key(end):
            raise EmptySpanError(f"{self} and {other} only share {start}")
        return replace(self, start=start, end=end)

    def union(self: S, other: S) -> S:
        """Return the span covering both spans.

        Raises:
            NotContinuousError: If there is a gap between the spans
        """
        start, end = self._keys()
        other_start, other_end = other._keys()
        if end < other_start or other_end < start:
            raise NotContinuousError(f"There is a gap between {self} and {other}")
        return replace(
            self,
            start=min(self.start, other.start, key=self._key),
            end=max(self.end, other.end, key=self._key),
        )

    def is_disjoint(self, other: Span[T]) -> bool:
        start, end = self._keys()
        other_start, other_end = other._keys()
        return end <= other_start or start >= other_end

    def is_subset(self, other: Span[T]) -> bool:
        start, end = self._keys()
        other_start, other_end = other._keys()
        return start >= other_start and end <= other_end

    def is_superset(self, other: Span[T]) -> bool:
        start, end = self._keys()
        other_start, other_end = other._keys()
        return start <= other_start and end >= other_end

    def split_off(self: S, at: T) -> tuple[S, S]:
        """Split the span in two at an interior point.

        Raises:
            OutOfRangeError: If the point is not strictly inside the span
        """
        start, end = self._keys()
        if not start < self._key(at) < end:
            raise OutOfRangeError(f"{at} is not strictly inside {self}")
        return replace(self, end=at), replace(self, start=at)

    def append(self: S, delta: timedelta) -> S:
        """Move the end later by delta."""
        return self._with_end(self.point_kind.add(self.end, delta))

    def pop(self: S, delta: timedelta) -> S:
        """Move the end earlier by delta."""
        return self._with_end(self.point_kind.add(self.end, -delta))

    def prepend(self: S, delta: timedelta) -> S:
        """Move the start earlier by delta."""
        return self._with_start(self.point_kind.add(self.start, -delta))

    def shift(self: S, delta: timedelta) -> S:
        """Move the start later by delta."""
        return self._with_start(self.point_kind.add(self.start, delta))

    def _with_end(self: S, end: T) -> S:
        if self._key(end) <= self._key(self.start):
            raise EmptySpanError(f"Moving the end of {self} to {end} leaves an empty span")
        return replace(self, end=end)

    def _with_start(self: S, start: T) -> S:
        if self._key(start) >= self._key(self.end):
            raise EmptySpanError(f"Moving the start of {self} to {start} leaves an empty span")
        return replace(self, start=start)

    def to_dict(self) -> dict[str, str]:
        """Return the span as a {"start": ..., "end": ...} record of ISO-8601 strings."""
        return serialization.span_to_record(self)

    @classmethod
    def from_dict(cls: type[S], record: Any) -> S:
        return serialization.span_from_record(cls, record)

    def to_json(self) -> str:
        return serialization.span_to_json(self)

    @classmethod
    def from_json(cls: type[S], payload: str) -> S:
        return serialization.span_from_json(cls, payload)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        return serialization.span_core_schema(cls)

    def __str__(self) -> str:
        kind = self.point_kind
        return f"{kind.format_default(self.start)} - {kind.format_default(self.end)}"
