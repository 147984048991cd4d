"""Tests for interval construction, adoption and relations."""

from dataclasses import FrozenInstanceError, dataclass
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from dateutil.relativedelta import relativedelta

from intervalic import (
    InstantInterval,
    IntervalError,
    InvalidOrderingError,
    NullInputError,
    PointTypeError,
    Span,
    TimestampInterval,
    UnsupportedStepUnitError,
)

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)
HOUR = timedelta(hours=1)


@dataclass(frozen=True, kw_only=True)
class LabeledInterval(InstantInterval):
    label: str


@dataclass
class Window:
    """Interval-like value from elsewhere that enforces nothing."""

    start: datetime
    end: datetime


def test_of_keeps_points() -> None:
    interval = InstantInterval.of(T0, T0 + HOUR)

    assert interval.start == T0
    assert interval.end == T0 + HOUR
    assert interval == InstantInterval(start=T0, end=T0 + HOUR)


def test_end_before_start_rejected() -> None:
    with pytest.raises(InvalidOrderingError) as exc_info:
        InstantInterval.of(T0 + HOUR, T0)

    assert exc_info.value.start == T0 + HOUR
    assert exc_info.value.end == T0
    assert isinstance(exc_info.value, ValueError)


def test_direct_constructor_validates_too() -> None:
    with pytest.raises(InvalidOrderingError):
        TimestampInterval(start=10, end=5)


def test_degenerate_interval_is_valid() -> None:
    interval = InstantInterval.of(T0, T0)

    assert interval.is_empty
    assert interval.duration == timedelta(0)
    assert not InstantInterval.of(T0, T0 + HOUR).is_empty


@pytest.mark.parametrize(
    "start, end, name",
    [(None, T0, "start"), (T0, None, "end")],
)
def test_missing_points_rejected(start, end, name) -> None:
    with pytest.raises(NullInputError) as exc_info:
        InstantInterval.of(start, end)

    assert exc_info.value.name == name
    assert isinstance(exc_info.value, TypeError)
    assert isinstance(exc_info.value, IntervalError)


def test_naive_datetime_rejected() -> None:
    naive = datetime(2025, 1, 1)

    with pytest.raises(PointTypeError) as exc_info:
        InstantInterval.of(naive, naive + HOUR)

    assert exc_info.value.kind == "instant"
    assert "naive" in str(exc_info.value)


@pytest.mark.parametrize("point", [True, 1.5, "10"])
def test_timestamp_requires_int(point) -> None:
    with pytest.raises(PointTypeError):
        TimestampInterval.of(point, 20)


def test_intervals_are_immutable() -> None:
    interval = TimestampInterval.of(0, 10)

    with pytest.raises(FrozenInstanceError):
        interval.start = 5  # type: ignore[misc]


def test_equality_is_structural() -> None:
    pacific = ZoneInfo("US/Pacific")
    utc_interval = InstantInterval.of(T0, T0 + HOUR)
    pacific_interval = InstantInterval.of(
        T0.astimezone(pacific), (T0 + HOUR).astimezone(pacific)
    )

    assert utc_interval == pacific_interval
    assert hash(utc_interval) == hash(pacific_interval)
    assert TimestampInterval.of(0, 10) == TimestampInterval.of(0, 10)
    assert TimestampInterval.of(0, 10) != TimestampInterval.of(0, 11)


def test_duration() -> None:
    assert InstantInterval.of(T0, T0 + 2 * HOUR).duration == 2 * HOUR
    assert TimestampInterval.of(100, 160).duration == 60


def test_duration_across_dst_change() -> None:
    """Duration counts elapsed time, not wall-clock difference."""
    new_york = ZoneInfo("America/New_York")
    # Clocks jump from 02:00 to 03:00 on this date
    start = datetime(2025, 3, 9, 1, 0, tzinfo=new_york)
    end = datetime(2025, 3, 9, 4, 0, tzinfo=new_york)

    assert InstantInterval.of(start, end).duration == 2 * HOUR


def test_of_duration() -> None:
    interval = InstantInterval.of_duration(T0, 3 * HOUR)

    assert interval == InstantInterval.of(T0, T0 + 3 * HOUR)
    assert TimestampInterval.of_duration(100, 50) == TimestampInterval.of(100, 150)
    assert InstantInterval.of_duration(T0, relativedelta(days=1)).end == T0 + timedelta(
        days=1
    )


def test_of_duration_rejects_negative_and_calendar_amounts() -> None:
    with pytest.raises(InvalidOrderingError):
        InstantInterval.of_duration(T0, -HOUR)

    with pytest.raises(UnsupportedStepUnitError) as exc_info:
        InstantInterval.of_duration(T0, relativedelta(months=1))
    assert exc_info.value.unit == "months"

    with pytest.raises(NullInputError):
        InstantInterval.of_duration(T0, None)


def test_span_round_trip() -> None:
    interval = InstantInterval.of(T0, T0 + 2 * HOUR)
    span = interval.to_span()

    assert span == Span(start=T0, duration=2 * HOUR)
    assert InstantInterval.from_span(span) == interval


class TestAdopt:
    def test_same_class_is_returned_unchanged(self) -> None:
        interval = InstantInterval.of(T0, T0 + HOUR)

        assert InstantInterval.adopt(interval) is interval

    def test_foreign_value_is_rebuilt(self) -> None:
        adopted = InstantInterval.adopt(Window(start=T0, end=T0 + HOUR))

        assert type(adopted) is InstantInterval
        assert adopted == InstantInterval.of(T0, T0 + HOUR)

    def test_foreign_value_is_revalidated(self) -> None:
        with pytest.raises(InvalidOrderingError):
            InstantInterval.adopt(Window(start=T0 + HOUR, end=T0))

    def test_subclass_is_rebuilt_as_exact_class(self) -> None:
        labeled = LabeledInterval(start=T0, end=T0 + HOUR, label="standup")
        adopted = InstantInterval.adopt(labeled)

        assert adopted is not labeled
        assert type(adopted) is InstantInterval
        assert (adopted.start, adopted.end) == (labeled.start, labeled.end)

    def test_other_point_kind_rejected(self) -> None:
        with pytest.raises(PointTypeError):
            TimestampInterval.adopt(InstantInterval.of(T0, T0 + HOUR))

    def test_none_rejected(self) -> None:
        with pytest.raises(NullInputError):
            InstantInterval.adopt(None)  # type: ignore[arg-type]


class TestRelations:
    def test_contains_is_half_open(self) -> None:
        interval = TimestampInterval.of(10, 20)

        assert interval.contains(10)
        assert interval.contains(19)
        assert not interval.contains(20)
        assert not interval.contains(9)
        assert not TimestampInterval.of(10, 10).contains(10)

    def test_encloses(self) -> None:
        outer = TimestampInterval.of(0, 100)

        assert outer.encloses(TimestampInterval.of(10, 20))
        assert outer.encloses(outer)
        assert not outer.encloses(TimestampInterval.of(90, 110))

    def test_overlaps(self) -> None:
        interval = TimestampInterval.of(10, 20)

        assert interval.overlaps(TimestampInterval.of(15, 25))
        assert interval.overlaps(TimestampInterval.of(0, 11))
        assert not interval.overlaps(TimestampInterval.of(20, 30))
        assert not interval.overlaps(TimestampInterval.of(0, 10))

    def test_abuts(self) -> None:
        interval = TimestampInterval.of(10, 20)

        assert interval.abuts(TimestampInterval.of(20, 30))
        assert interval.abuts(TimestampInterval.of(0, 10))
        assert not interval.abuts(TimestampInterval.of(15, 30))

    def test_before_and_after(self) -> None:
        interval = TimestampInterval.of(10, 20)

        assert interval.is_before(20)
        assert not interval.is_before(19)
        assert interval.is_before(TimestampInterval.of(20, 30))
        assert interval.is_after(9)
        assert not interval.is_after(10)
        assert interval.is_after(TimestampInterval.of(0, 10))
        assert not interval.is_after(TimestampInterval.of(0, 11))

    def test_intersection(self) -> None:
        interval = TimestampInterval.of(10, 20)

        assert interval.intersection(TimestampInterval.of(15, 30)) == (
            TimestampInterval.of(15, 20)
        )
        assert interval.intersection(TimestampInterval.of(20, 30)) == (
            TimestampInterval.of(20, 20)
        )
        assert interval.intersection(TimestampInterval.of(25, 30)) is None

    def test_with_start_and_end(self) -> None:
        interval = TimestampInterval.of(10, 20)

        assert interval.with_start(15) == TimestampInterval.of(15, 20)
        assert interval.with_end(30) == TimestampInterval.of(10, 30)
        with pytest.raises(InvalidOrderingError):
            interval.with_start(25)
