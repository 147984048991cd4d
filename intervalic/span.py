from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from intervalic.interval import Interval

P = TypeVar("P")
A = TypeVar("A")


@dataclass(frozen=True, kw_only=True)
class Span(Generic[P, A]):
    """A start point and the amount of time that follows it.

    Spans are derived from already-validated intervals, so the duration is
    not checked again.
    """

    start: P
    duration: A


def to_span(interval: "Interval[P, A]") -> Span[P, A]:
    """Project an interval onto its (start, duration) form."""
    return Span(start=interval.start, duration=interval.duration)
