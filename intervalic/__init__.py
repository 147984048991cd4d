import logging
from importlib.resources import files

from .errors import (
    FormatError,
    IntervalError,
    InvalidOrderingError,
    NonPositiveStepError,
    NullInputError,
    PointTypeError,
    UnsupportedStepUnitError,
)
from .interval import (
    InstantInterval,
    Interval,
    IntervalLike,
    TimestampInterval,
    adopt_interval,
    parse_interval,
)
from .points import INSTANT, TIMESTAMP, InstantKind, PointKind, TimestampKind
from .span import Span, to_span
from .stepper import Stepper, StepperState, stream
from .util import DAY, HOUR, MINUTE, SECOND, WEEK

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Interval",
    "InstantInterval",
    "TimestampInterval",
    "IntervalLike",
    "parse_interval",
    "adopt_interval",
    "PointKind",
    "InstantKind",
    "TimestampKind",
    "INSTANT",
    "TIMESTAMP",
    "Span",
    "to_span",
    "Stepper",
    "StepperState",
    "stream",
    "IntervalError",
    "NullInputError",
    "PointTypeError",
    "InvalidOrderingError",
    "FormatError",
    "UnsupportedStepUnitError",
    "NonPositiveStepError",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "docs",
]
