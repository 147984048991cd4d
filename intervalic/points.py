"""Timeline point kinds.

A point kind is the capability an interval needs from its point type:
validation, advancing by a step amount, measuring elapsed time, reporting the
units of an amount and the canonical text form. Intervals and the stepper are
generic over this capability instead of over point subclasses.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar, Generic, TypeVar, override

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from intervalic.errors import PointTypeError, UnsupportedStepUnitError
from intervalic.util import ABSOLUTE_FIELDS, DAY, RELATIVE_FIELDS, SCALES

P = TypeVar("P")
A = TypeVar("A")

_INTEGER = re.compile(r"-?[0-9]+")


class PointKind(ABC, Generic[P, A]):
    """Operations on points of one type, with amounts of type `A`."""

    name: ClassVar[str] = "point"
    supported_units: ClassVar[frozenset[str]] = frozenset()

    @abstractmethod
    def check(self, point: Any) -> None:
        """Raise `PointTypeError` unless `point` belongs to this kind."""
        pass

    @abstractmethod
    def advance(self, point: P, amount: Any) -> P:
        pass

    @abstractmethod
    def elapsed(self, start: P, end: P) -> A:
        pass

    @abstractmethod
    def is_positive(self, amount: Any) -> bool:
        """True if `amount` moves a point strictly forward.

        Only called with amounts whose units are all supported.
        """
        pass

    @abstractmethod
    def parse(self, text: str) -> P:
        """Parse the canonical text form, raising `ValueError` on bad input."""
        pass

    @abstractmethod
    def format(self, point: P) -> str:
        pass

    def units(self, amount: Any) -> Iterable[str]:
        """Return the names of the non-zero units making up `amount`.

        Absolute relativedelta fields are reported by field name ("weekday",
        "hour", ...). They replace a component rather than add to it, so no
        kind supports them.

        Fractional relativedelta values are normalized first, so half a second
        is reported as "microseconds".
        """
        if isinstance(amount, relativedelta):
            amount = amount.normalized()
            units = [
                field
                for field in ABSOLUTE_FIELDS
                if getattr(amount, field) is not None
                and (field != "leapdays" or amount.leapdays)
            ]
            units.extend(field for field in RELATIVE_FIELDS if getattr(amount, field))
            return units
        if isinstance(amount, timedelta):
            return [
                unit
                for unit, value in (
                    ("days", amount.days),
                    ("seconds", amount.seconds),
                    ("microseconds", amount.microseconds),
                )
                if value
            ]
        raise TypeError(
            f"Step amount for {self.name} points must be timedelta or relativedelta.\n"
            f"Got {type(amount).__name__!r}: {amount!r}\n"
            f"Examples:\n"
            f"  timedelta(hours=1)\n"
            f"  relativedelta(minutes=15)"
        )

    def is_supported(self, unit: str) -> bool:
        return unit in self.supported_units

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def unsupported_unit(kind: PointKind[Any, Any], amount: Any) -> str | None:
    """Return the first unit of `amount` that `kind` cannot step by, if any."""
    for unit in kind.units(amount):
        if not kind.is_supported(unit):
            return unit
    return None


def _require_supported(kind: PointKind[Any, Any], amount: Any) -> None:
    unit = unsupported_unit(kind, amount)
    if unit is not None:
        raise UnsupportedStepUnitError(unit, amount)


class InstantKind(PointKind[datetime, timedelta]):
    """Timezone-aware datetimes placed on the UTC timeline.

    Arithmetic happens in UTC so that a step always covers the same elapsed
    time, whatever zone the point was expressed in.
    """

    name: ClassVar[str] = "instant"
    supported_units: ClassVar[frozenset[str]] = frozenset(
        {"microseconds", "seconds", "minutes", "hours", "days"}
    )

    @override
    def check(self, point: Any) -> None:
        if not isinstance(point, datetime):
            raise PointTypeError(
                point,
                self.name,
                "Hint: Use a timezone-aware datetime:\n"
                "  datetime(2025, 1, 1, tzinfo=timezone.utc)",
            )
        if point.utcoffset() is None:
            raise PointTypeError(
                point,
                self.name,
                "Got naive datetime. Hint: Add timezone info:\n"
                "  from zoneinfo import ZoneInfo\n"
                "  dt = datetime(..., tzinfo=ZoneInfo('UTC'))",
            )

    @override
    def advance(self, point: datetime, amount: Any) -> datetime:
        return point.astimezone(timezone.utc) + self._fixed(amount)

    @override
    def elapsed(self, start: datetime, end: datetime) -> timedelta:
        # Same-zone subtraction ignores offsets, which is wrong across DST
        return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)

    @override
    def is_positive(self, amount: Any) -> bool:
        return self._fixed(amount) > timedelta(0)

    @override
    def parse(self, text: str) -> datetime:
        point = isoparse(text)
        if point.utcoffset() is None:
            raise ValueError(f"Instant {text!r} has no UTC offset")
        return point

    @override
    def format(self, point: datetime) -> str:
        return point.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

    def _fixed(self, amount: Any) -> timedelta:
        """Convert a step amount to the elapsed time it represents."""
        _require_supported(self, amount)
        if isinstance(amount, timedelta):
            return amount
        return timedelta(
            days=amount.days,
            hours=amount.hours,
            minutes=amount.minutes,
            seconds=amount.seconds,
            microseconds=amount.microseconds,
        )


class TimestampKind(PointKind[int, int]):
    """Integer Unix seconds."""

    name: ClassVar[str] = "timestamp"
    supported_units: ClassVar[frozenset[str]] = frozenset(
        {"seconds", "minutes", "hours", "days"}
    )

    @override
    def check(self, point: Any) -> None:
        if isinstance(point, bool) or not isinstance(point, int):
            raise PointTypeError(
                point,
                self.name,
                "Hint: Use integer Unix seconds, e.g. int(dt.timestamp())",
            )

    @override
    def units(self, amount: Any) -> Iterable[str]:
        if isinstance(amount, int) and not isinstance(amount, bool):
            return ["seconds"] if amount else []
        return super().units(amount)

    @override
    def advance(self, point: int, amount: Any) -> int:
        return point + self._seconds(amount)

    @override
    def elapsed(self, start: int, end: int) -> int:
        return end - start

    @override
    def is_positive(self, amount: Any) -> bool:
        return self._seconds(amount) > 0

    @override
    def parse(self, text: str) -> int:
        if not _INTEGER.fullmatch(text):
            raise ValueError(f"Timestamp {text!r} is not an integer")
        return int(text)

    @override
    def format(self, point: int) -> str:
        return str(point)

    def _seconds(self, amount: Any) -> int:
        _require_supported(self, amount)
        if isinstance(amount, int):
            return amount
        if isinstance(amount, timedelta):
            return amount.days * DAY + amount.seconds
        amount = amount.normalized()
        return sum(
            getattr(amount, unit) * SCALES[unit]
            for unit in ("days", "hours", "minutes", "seconds")
        )


INSTANT: InstantKind = InstantKind()
TIMESTAMP: TimestampKind = TimestampKind()
