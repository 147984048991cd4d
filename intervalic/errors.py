"""Exceptions raised by intervalic.

Every error derives from `IntervalError` and from the built-in exception it
refines, so callers may catch either.
"""

from typing import Any


class IntervalError(Exception):
    """Base class for all intervalic errors."""


class NullInputError(IntervalError, TypeError):
    def __init__(self, name: str):
        self.name: str = name
        super().__init__(f"{name} must not be None")


class PointTypeError(IntervalError, TypeError):
    def __init__(self, value: Any, kind: str, hint: str = ""):
        self.value: Any = value
        self.kind: str = kind
        message = (
            f"Expected a {kind} point.\n"
            f"Got {type(value).__name__!r}: {value!r}"
        )
        if hint:
            message += f"\n{hint}"
        super().__init__(message)


class InvalidOrderingError(IntervalError, ValueError):
    def __init__(self, start: Any, end: Any):
        self.start: Any = start
        self.end: Any = end
        super().__init__(f"Interval start ({start}) must be <= end ({end})")


class FormatError(IntervalError, ValueError):
    """Text could not be parsed as an interval.

    `position` is the offset into `text` where parsing failed.
    """

    def __init__(self, message: str, text: str, position: int):
        self.text: str = text
        self.position: int = position
        super().__init__(f"{message}: {text!r} (at position {position})")


class UnsupportedStepUnitError(IntervalError, ValueError):
    def __init__(self, unit: str, step: Any):
        self.unit: str = unit
        self.step: Any = step
        super().__init__(f"Unsupported unit: {unit} (in step {step!r})")


class NonPositiveStepError(IntervalError, ValueError):
    def __init__(self, step: Any):
        self.step: Any = step
        super().__init__(
            f"Step must move forward in time, got {step!r}.\n"
            f"A zero or negative step never leaves the interval.\n"
            f"Example: interval.stream(timedelta(hours=1))"
        )
