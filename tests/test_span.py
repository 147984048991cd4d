"""Tests for projecting intervals onto spans."""

from datetime import datetime, timedelta, timezone

from intervalic import InstantInterval, Span, TimestampInterval, to_span

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def test_span_of_instant_interval() -> None:
    interval = InstantInterval.of(T0, T0 + timedelta(hours=2))
    span = to_span(interval)

    assert span.start == interval.start
    assert span.duration == timedelta(hours=2)


def test_span_of_timestamp_interval() -> None:
    assert TimestampInterval.of(100, 400).to_span() == Span(start=100, duration=300)


def test_span_of_degenerate_interval() -> None:
    assert to_span(InstantInterval.of(T0, T0)).duration == timedelta(0)


def test_spans_are_values() -> None:
    assert Span(start=T0, duration=timedelta(1)) == Span(start=T0, duration=timedelta(1))
    assert len({Span(start=1, duration=2), Span(start=1, duration=2)}) == 1
