import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import (
    Any,
    ClassVar,
    Generic,
    Protocol,
    Self,
    TypeAlias,
    TypeVar,
    runtime_checkable,
)

from intervalic.errors import (
    FormatError,
    InvalidOrderingError,
    NullInputError,
)
from intervalic.points import INSTANT, TIMESTAMP, PointKind
from intervalic.span import Span, to_span
from intervalic.stepper import Stepper, stream
from intervalic.util import SEPARATOR

logger = logging.getLogger(__name__)

P = TypeVar("P")
A = TypeVar("A")
IntervalT = TypeVar("IntervalT", bound="Interval[Any, Any]")

IntervalFactory: TypeAlias = Callable[[P, P], IntervalT]


@runtime_checkable
class IntervalLike(Protocol[P]):
    """Anything exposing `start` and `end` points."""

    @property
    def start(self) -> P: ...

    @property
    def end(self) -> P: ...


@dataclass(frozen=True, kw_only=True)
class Interval(Generic[P, A]):
    """Half-open interval `[start, end)` between two points of one kind.

    Subclasses bind `kind`, the point capability used for validation,
    arithmetic and text conversion. Construction always checks that both
    points are present, belong to the kind and satisfy `start <= end`.
    """

    start: P
    end: P

    kind: ClassVar[PointKind[Any, Any]]

    def __post_init__(self) -> None:
        if self.start is None:
            raise NullInputError("start")
        if self.end is None:
            raise NullInputError("end")
        self.kind.check(self.start)
        self.kind.check(self.end)
        if self.end < self.start:  # pyright: ignore[reportOperatorIssue]
            raise InvalidOrderingError(self.start, self.end)

    @classmethod
    def of(cls, start: P, end: P) -> Self:
        return cls(start=start, end=end)

    @classmethod
    def of_duration(cls, start: P, duration: A) -> Self:
        """Build the interval covering `duration` from `start`."""
        if start is None:
            raise NullInputError("start")
        if duration is None:
            raise NullInputError("duration")
        cls.kind.check(start)
        return cls.of(start, cls.kind.advance(start, duration))

    @classmethod
    def from_span(cls, span: Span[P, A]) -> Self:
        return cls.of_duration(span.start, span.duration)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse `"<start>/<end>"`, e.g. `"2025-01-01T00:00:00Z/2025-01-02T00:00:00Z"`."""
        return parse_interval(text, cls.kind, cls._factory())

    @classmethod
    def adopt(cls, other: IntervalLike[P]) -> Self:
        """Return `other` as this class, rebuilding it only when necessary."""
        return adopt_interval(other, cls, cls._factory())

    @classmethod
    def _factory(cls) -> "IntervalFactory[P, Self]":
        return cls.of

    @property
    def duration(self) -> A:
        return self.kind.elapsed(self.start, self.end)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def to_span(self) -> Span[P, A]:
        return to_span(self)

    def stream(self, step: Any) -> Stepper[P]:
        return stream(self, step)

    def contains(self, point: P) -> bool:
        return self.start <= point < self.end  # pyright: ignore[reportOperatorIssue]

    def encloses(self, other: IntervalLike[P]) -> bool:
        return self.start <= other.start and other.end <= self.end  # pyright: ignore[reportOperatorIssue]

    def overlaps(self, other: IntervalLike[P]) -> bool:
        """True if both intervals share at least one point."""
        return self.start < other.end and other.start < self.end  # pyright: ignore[reportOperatorIssue]

    def abuts(self, other: IntervalLike[P]) -> bool:
        """True if one interval ends exactly where the other starts."""
        return self.end == other.start or other.end == self.start

    def is_before(self, other: "P | IntervalLike[P]") -> bool:
        boundary = other.start if isinstance(other, IntervalLike) else other
        return self.end <= boundary  # pyright: ignore[reportOperatorIssue]

    def is_after(self, other: "P | IntervalLike[P]") -> bool:
        if isinstance(other, IntervalLike):
            return other.end <= self.start  # pyright: ignore[reportOperatorIssue]
        return other < self.start  # pyright: ignore[reportOperatorIssue]

    def intersection(self, other: IntervalLike[P]) -> Self | None:
        """Return the shared part, or None if the intervals are disjoint.

        Abutting intervals intersect in an empty interval at the shared bound.
        """
        start = max(self.start, other.start)  # pyright: ignore[reportArgumentType]
        end = min(self.end, other.end)  # pyright: ignore[reportArgumentType]
        if end < start:
            return None
        return self._factory()(start, end)

    def with_start(self, start: P) -> Self:
        return replace(self, start=start)

    def with_end(self, end: P) -> Self:
        return replace(self, end=end)

    def __str__(self) -> str:
        """Canonical text form, accepted by `parse`."""
        return f"{self.kind.format(self.start)}{SEPARATOR}{self.kind.format(self.end)}"


@dataclass(frozen=True, kw_only=True)
class InstantInterval(Interval[datetime, timedelta]):
    """Interval between two timezone-aware datetimes."""

    kind: ClassVar[PointKind[Any, Any]] = INSTANT


@dataclass(frozen=True, kw_only=True)
class TimestampInterval(Interval[int, int]):
    """Interval between two Unix timestamps in seconds."""

    kind: ClassVar[PointKind[Any, Any]] = TIMESTAMP


def parse_interval(
    text: str, kind: PointKind[P, Any], factory: IntervalFactory[P, IntervalT]
) -> IntervalT:
    """Split `text` on its first slash and build an interval from both halves.

    Point formats that themselves contain a slash are not supported: the
    remainder after the first slash is handed to the point parser as is.
    """
    if text is None:
        raise NullInputError("text")
    if not isinstance(text, str):
        raise TypeError(
            f"Interval text must be str.\n"
            f"Got {type(text).__name__!r}: {text!r}\n"
            f"Example: InstantInterval.parse('2025-01-01T00:00:00Z/2025-01-02T00:00:00Z')"
        )

    slash = text.find(SEPARATOR)
    if slash < 0:
        raise FormatError("Interval cannot be parsed, no forward slash found", text, 0)

    start = _parse_point(kind, text, 0, slash)
    end = _parse_point(kind, text, slash + 1, len(text))
    return factory(start, end)


def _parse_point(kind: PointKind[P, Any], text: str, begin: int, stop: int) -> P:
    try:
        return kind.parse(text[begin:stop])
    except ValueError as exc:
        logger.debug("Invalid %s at %d in %r: %s", kind.name, begin, text, exc)
        raise FormatError(
            f"Interval cannot be parsed, invalid {kind.name}", text, begin
        ) from exc


def adopt_interval(
    other: IntervalLike[P],
    target: type[IntervalT],
    factory: IntervalFactory[P, IntervalT],
) -> IntervalT:
    """Coerce an interval-like value to `target`.

    An instance of exactly `target` is returned unchanged. Anything else,
    including subclasses and foreign implementations, is rebuilt through
    `factory` so the ordering invariant is checked again.
    """
    if other is None:
        raise NullInputError("interval")
    if type(other) is target:
        return other  # pyright: ignore[reportReturnType]
    return factory(other.start, other.end)
