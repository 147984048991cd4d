"""Utility constants and helpers for intervalic.

Time unit constants represent durations in seconds.
Unit names are the strings reported when a step amount is decomposed.
"""

from typing import Literal, TypeAlias

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Separator between the start and end halves of an interval's text form
SEPARATOR = "/"

Unit: TypeAlias = Literal[
    "microseconds", "seconds", "minutes", "hours", "days", "weeks", "months", "years"
]

# Relative relativedelta fields, in the order they are reported
RELATIVE_FIELDS: tuple[Unit, ...] = (
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
    "microseconds",
)

# Absolute relativedelta fields replace a component instead of adding to it,
# so no point kind can step by them
ABSOLUTE_FIELDS: tuple[str, ...] = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
    "leapdays",
)

# Fixed-length units expressed in seconds
SCALES: dict[str, int] = {
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
}
