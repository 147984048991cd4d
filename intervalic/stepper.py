"""Lazy stepping through an interval.

`stream()` validates the step up front and hands back a `Stepper`, an
explicit iterator that walks from the interval's start towards its end one
step at a time, computing each point only when it is pulled.
"""

import logging
from collections.abc import Callable, Iterator
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar, override

from intervalic.errors import (
    NonPositiveStepError,
    NullInputError,
    UnsupportedStepUnitError,
)
from intervalic.points import unsupported_unit

if TYPE_CHECKING:
    from intervalic.interval import Interval

logger = logging.getLogger(__name__)

P = TypeVar("P")


class StepperState(Enum):
    READY = "ready"
    EMITTING = "emitting"
    EXHAUSTED = "exhausted"


class Stepper(Iterator[P], Generic[P]):
    """Iterator over `start, start + step, ...` while the value is `< end`.

    States:
    - READY: nothing pulled yet; the next candidate is `start`.
    - EMITTING: the last value returned is kept as `previous`; the next
      candidate is `advance(previous, step)`.
    - EXHAUSTED: a candidate reached `end`, or advancing overflowed the
      point type. Further pulls stop immediately and `advance` is never
      called again.
    """

    def __init__(
        self,
        start: P,
        end: P,
        step: Any,
        advance: Callable[[P, Any], P],
    ):
        self._end: P = end
        self._step: Any = step
        self._advance: Callable[[P, Any], P] = advance
        self._previous: P = start
        self._emitted: int = 0
        self.state: StepperState = StepperState.READY

    @override
    def __iter__(self) -> "Stepper[P]":
        return self

    @override
    def __next__(self) -> P:
        if self.state is StepperState.EXHAUSTED:
            raise StopIteration

        if self.state is StepperState.READY:
            self.state = StepperState.EMITTING
            candidate = self._previous
        else:
            try:
                candidate = self._advance(self._previous, self._step)
            except OverflowError:
                # Past the largest representable point, so also past `end`
                candidate = None

        if candidate is not None and candidate < self._end:  # pyright: ignore[reportOperatorIssue]
            self._previous = candidate
            self._emitted += 1
            return candidate

        self.state = StepperState.EXHAUSTED
        logger.debug("Stepper exhausted after %d value(s)", self._emitted)
        raise StopIteration


def stream(interval: "Interval[P, Any]", step: Any) -> Stepper[P]:
    """Return a lazy iterator of points in `interval`, `step` apart.

    The first value is `interval.start` unless the interval is empty. Values
    stay strictly below `interval.end`.

    The step is checked before anything is produced, so a bad step fails here
    rather than partway through iteration.

    Raises:
        NullInputError: If `step` is None
        UnsupportedStepUnitError: If the interval's points cannot be advanced
            by one of the step's units (e.g. months on instants)
        NonPositiveStepError: If the step does not move forward in time

    Example:
        >>> from datetime import timedelta
        >>> day = InstantInterval.parse("2025-01-01T00:00:00Z/2025-01-02T00:00:00Z")
        >>> hours = list(stream(day, timedelta(hours=1)))  # 24 points
    """
    if step is None:
        raise NullInputError("step")

    kind = interval.kind
    unit = unsupported_unit(kind, step)
    if unit is not None:
        raise UnsupportedStepUnitError(unit, step)
    if not kind.is_positive(step):
        raise NonPositiveStepError(step)

    logger.debug("Stepping through %s by %r", interval, step)
    return Stepper(interval.start, interval.end, step, kind.advance)
