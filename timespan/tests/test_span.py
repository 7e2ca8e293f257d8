"""
Tests for the Span value type: construction, ordering, containment and the
set and resize operations.
"""

import dataclasses
from datetime import date, time, timedelta

import pytest

from timespan.errors import (
    EmptySpanError,
    InvalidOrderError,
    NotContinuousError,
    OutOfRangeError,
    UnsupportedOperationError,
)
from timespan.naive import NaiveDateSpan, NaiveTimeSpan
from timespan.span import Span


def t(text):
    """Shorthand for a time span in "HH:MM - HH:MM" form."""
    start, end = text.split(" - ")
    return NaiveTimeSpan(time.fromisoformat(start), time.fromisoformat(end))


class TestConstruction:
    """Tests for building spans."""

    def test_valid_span(self):
        span = NaiveTimeSpan(time(12), time(12, 30))
        assert span.start == time(12)
        assert span.end == time(12, 30)

    def test_zero_length_span_is_allowed(self):
        span = NaiveTimeSpan(time(12), time(12))
        assert span.duration() == timedelta(0)

    def test_reversed_span_is_rejected(self):
        with pytest.raises(InvalidOrderError) as exc_info:
            NaiveDateSpan(start=date(2017, 1, 2), end=date(2017, 1, 1))
        assert exc_info.value.start == date(2017, 1, 2)
        assert exc_info.value.end == date(2017, 1, 1)

    def test_spans_are_immutable(self):
        span = t("09:00 - 10:00")
        with pytest.raises(dataclasses.FrozenInstanceError):
            span.start = time(8)

    def test_str(self):
        assert str(t("12:00 - 12:30")) == "12:00:00 - 12:30:00"

    def test_repr_names_the_variant(self):
        assert repr(t("12:00 - 12:30")).startswith("NaiveTimeSpan(")


class TestEqualityAndOrdering:
    """Tests for comparing spans."""

    def test_equal_spans(self):
        assert t("09:00 - 10:00") == t("09:00 - 10:00")
        assert t("09:00 - 10:00") != t("09:00 - 11:00")

    def test_equal_spans_hash_alike(self):
        assert len({t("09:00 - 10:00"), t("09:00 - 10:00")}) == 1

    def test_sorted_by_start_then_end(self):
        spans = [t("10:00 - 11:00"), t("09:00 - 12:00"), t("09:00 - 10:00")]
        assert sorted(spans) == [t("09:00 - 10:00"), t("09:00 - 12:00"), t("10:00 - 11:00")]

    def test_different_variants_are_not_equal(self):
        assert NaiveDateSpan(date(2017, 1, 1), date(2017, 1, 2)) != Span(date(2017, 1, 1), date(2017, 1, 2))

    def test_different_variants_do_not_order(self):
        with pytest.raises(TypeError):
            NaiveDateSpan(date(2017, 1, 1), date(2017, 1, 2)) < Span(date(2017, 1, 1), date(2017, 1, 2))


class TestDurationAndContains:
    """Tests for duration and containment."""

    @pytest.mark.parametrize("span,expected", [
        (t("13:00 - 14:00"), timedelta(hours=1)),
        (t("17:30 - 19:15"), timedelta(hours=1, minutes=45)),
        (t("00:00 - 23:59"), timedelta(hours=23, minutes=59)),
        (t("08:00 - 08:00"), timedelta(0)),
    ])
    def test_duration(self, span, expected):
        assert span.duration() == expected

    def test_date_duration(self):
        span = NaiveDateSpan(date(2017, 4, 15), date(2017, 8, 15))
        assert span.duration() == timedelta(days=122)

    @pytest.mark.parametrize("point,expected", [
        (time(9), True),
        (time(9, 30), True),
        (time(10), True),
        (time(10, 30), False),
        (time(8, 30), False),
    ])
    def test_contains_includes_both_ends(self, point, expected):
        span = t("09:00 - 10:00")
        assert span.contains(point) is expected
        assert (point in span) is expected


class TestGenericSpan:
    """Tests for the base Span with arbitrary ordered values."""

    def test_integers(self):
        span = Span(1, 5)
        assert span.duration() == 4
        assert 3 in span
        assert 6 not in span
        assert str(span) == "1 - 5"

    def test_format_uses_builtin_format(self):
        assert Span(1, 5).format("{start}..{end}", "03d", "d").render() == "001..5"

    def test_cannot_be_parsed(self):
        with pytest.raises(UnsupportedOperationError):
            Span.parse("1 - 5")

    def test_cannot_be_serialized(self):
        with pytest.raises(UnsupportedOperationError):
            Span(1, 5).to_dict()


class TestDifference:
    """Tests for Span.difference."""

    def test_overlap_at_end(self):
        assert t("09:00 - 11:00").difference(t("10:00 - 12:00")) == t("09:00 - 10:00")

    def test_overlap_at_start(self):
        assert t("10:00 - 12:00").difference(t("09:00 - 11:00")) == t("11:00 - 12:00")

    def test_disjoint_returns_self(self):
        assert t("09:00 - 10:00").difference(t("11:00 - 12:00")) == t("09:00 - 10:00")
        assert t("10:00 - 11:00").difference(t("09:00 - 10:00")) == t("10:00 - 11:00")

    def test_shared_start(self):
        assert t("09:00 - 12:00").difference(t("09:00 - 10:00")) == t("10:00 - 12:00")

    def test_shared_end(self):
        assert t("09:00 - 12:00").difference(t("11:00 - 12:00")) == t("09:00 - 11:00")

    def test_hole_in_the_middle(self):
        with pytest.raises(NotContinuousError):
            t("09:00 - 12:00").difference(t("10:00 - 11:00"))

    @pytest.mark.parametrize("other", ["09:00 - 12:00", "08:00 - 10:00", "09:00 - 10:00"])
    def test_fully_covered(self, other):
        with pytest.raises(EmptySpanError):
            t("09:00 - 10:00").difference(t(other))


class TestSymmetricDifference:
    """Tests for Span.symmetric_difference."""

    def test_touching_spans(self):
        assert t("09:00 - 10:00").symmetric_difference(t("10:00 - 11:00")) == t("09:00 - 11:00")
        assert t("10:00 - 11:00").symmetric_difference(t("09:00 - 10:00")) == t("09:00 - 11:00")

    def test_gap(self):
        with pytest.raises(NotContinuousError):
            t("09:00 - 10:00").symmetric_difference(t("11:00 - 12:00"))

    def test_overlap(self):
        with pytest.raises(NotContinuousError):
            t("09:00 - 11:00").symmetric_difference(t("10:00 - 12:00"))


class TestIntersection:
    """Tests for Span.intersection."""

    def setup_method(self):
        self.span = t("09:00 - 12:00")

    @pytest.mark.parametrize("other,expected", [
        ("09:00 - 10:00", "09:00 - 10:00"),
        ("10:00 - 11:00", "10:00 - 11:00"),
        ("11:00 - 12:00", "11:00 - 12:00"),
        ("11:00 - 13:00", "11:00 - 12:00"),
        ("08:00 - 13:00", "09:00 - 12:00"),
    ])
    def test_overlap(self, other, expected):
        assert self.span.intersection(t(other)) == t(expected)

    def test_single_shared_point(self):
        with pytest.raises(EmptySpanError):
            self.span.intersection(t("12:00 - 13:00"))

    def test_disjoint(self):
        with pytest.raises(NotContinuousError):
            self.span.intersection(t("13:00 - 14:00"))


class TestUnion:
    """Tests for Span.union."""

    def test_overlap(self):
        assert t("09:00 - 11:00").union(t("10:00 - 12:00")) == t("09:00 - 12:00")

    def test_touching(self):
        assert t("09:00 - 11:00").union(t("11:00 - 13:00")) == t("09:00 - 13:00")

    def test_contained(self):
        assert t("09:00 - 13:00").union(t("10:00 - 11:00")) == t("09:00 - 13:00")

    def test_gap(self):
        with pytest.raises(NotContinuousError):
            t("09:00 - 11:00").union(t("12:00 - 14:00"))


class TestRelations:
    """Tests for is_disjoint, is_subset and is_superset."""

    @pytest.mark.parametrize("other,expected", [
        ("10:00 - 12:00", False),
        ("11:00 - 13:00", True),
        ("12:00 - 14:00", True),
        ("07:00 - 09:00", True),
    ])
    def test_is_disjoint(self, other, expected):
        assert t("09:00 - 11:00").is_disjoint(t(other)) is expected

    @pytest.mark.parametrize("other,expected", [
        ("09:00 - 10:00", False),
        ("09:00 - 11:00", True),
        ("09:00 - 12:00", True),
        ("08:00 - 11:00", True),
        ("10:00 - 12:00", False),
    ])
    def test_is_subset(self, other, expected):
        assert t("09:00 - 11:00").is_subset(t(other)) is expected

    @pytest.mark.parametrize("other,expected", [
        ("09:00 - 10:00", True),
        ("10:00 - 11:00", True),
        ("09:00 - 11:00", True),
        ("09:00 - 12:00", False),
        ("08:00 - 10:00", False),
    ])
    def test_is_superset(self, other, expected):
        assert t("09:00 - 11:00").is_superset(t(other)) is expected


class TestSplitOff:
    """Tests for Span.split_off."""

    def test_interior_point(self):
        assert t("10:00 - 12:00").split_off(time(11)) == (t("10:00 - 11:00"), t("11:00 - 12:00"))

    @pytest.mark.parametrize("at", [time(9), time(10), time(12), time(13)])
    def test_point_not_strictly_inside(self, at):
        with pytest.raises(OutOfRangeError):
            t("10:00 - 12:00").split_off(at)


class TestResize:
    """Tests for append, prepend, pop and shift."""

    def setup_method(self):
        self.span = t("10:00 - 11:00")
        self.hour = timedelta(hours=1)

    def test_append(self):
        assert self.span.append(self.hour) == t("10:00 - 12:00")

    def test_append_negative_empties(self):
        with pytest.raises(EmptySpanError):
            self.span.append(-self.hour)

    def test_prepend(self):
        assert self.span.prepend(self.hour) == t("09:00 - 11:00")

    def test_prepend_negative_empties(self):
        with pytest.raises(EmptySpanError):
            self.span.prepend(-self.hour)

    def test_pop(self):
        assert self.span.pop(timedelta(minutes=30)) == t("10:00 - 10:30")

    def test_pop_whole_span_empties(self):
        with pytest.raises(EmptySpanError):
            self.span.pop(self.hour)

    def test_pop_negative_extends(self):
        assert self.span.pop(-self.hour) == t("10:00 - 12:00")

    def test_shift(self):
        assert self.span.shift(timedelta(minutes=15)) == t("10:15 - 11:00")

    def test_shift_whole_span_empties(self):
        with pytest.raises(EmptySpanError):
            self.span.shift(self.hour)

    def test_shift_negative_extends(self):
        assert self.span.shift(-self.hour) == t("09:00 - 11:00")

    def test_time_past_midnight_wraps(self):
        with pytest.raises(EmptySpanError):
            t("22:00 - 23:00").append(timedelta(hours=2))

    def test_date_span_append(self):
        span = NaiveDateSpan(date(2017, 12, 24), date(2017, 12, 26))
        assert span.append(timedelta(days=1)).end == date(2017, 12, 27)

    def test_original_is_unchanged(self):
        self.span.append(self.hour)
        self.span.shift(-self.hour)
        assert self.span == t("10:00 - 11:00")
