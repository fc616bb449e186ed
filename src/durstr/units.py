"""Time unit registry and precompiled patterns.

Every pattern here is compiled once at import and never modified. Alias
alternations are literal so that no alias can match text meant for another
unit.
"""

from __future__ import annotations

import re
from enum import Enum


class TimeUnit(str, Enum):
    """Canonical time units, valued by their short code."""

    MILLISECOND = "ms"
    SECOND = "s"
    MINUTE = "m"
    HOUR = "h"
    DAY = "d"
    MONTH = "mo"
    YEAR = "y"


_DAY_MS = 24 * 60 * 60 * 1000

# Month and year are fixed approximations, not calendar-aware
_MULTIPLIERS: dict[TimeUnit, int] = {
    TimeUnit.MILLISECOND: 1,
    TimeUnit.SECOND: 1_000,
    TimeUnit.MINUTE: 60_000,
    TimeUnit.HOUR: 3_600_000,
    TimeUnit.DAY: _DAY_MS,
    TimeUnit.MONTH: 30 * _DAY_MS,
    TimeUnit.YEAR: 365 * _DAY_MS,
}

UNIT_ALIASES: dict[TimeUnit, tuple[str, ...]] = {
    TimeUnit.MILLISECOND: ("milliseconds", "millisecond", "msecs", "msec", "ms"),
    TimeUnit.SECOND: ("seconds", "second", "secs", "sec", "s"),
    TimeUnit.MINUTE: ("minutes", "minute", "mins", "min", "m"),
    TimeUnit.HOUR: ("hours", "hour", "hrs", "hr", "h"),
    TimeUnit.DAY: ("days", "day", "d"),
    TimeUnit.MONTH: ("months", "month", "mth", "mo"),
    TimeUnit.YEAR: ("years", "year", "yrs", "yr", "y"),
}

TIME_UNITS: frozenset[str] = frozenset(unit.value for unit in TimeUnit)


def _alternation(aliases: tuple[str, ...]) -> str:
    return "|".join(re.escape(alias) for alias in aliases)


_VALUE_PATTERN = r"(-?(?:[0-9]*\.)?[0-9]+)"
_UNITS_PATTERN = "|".join(_alternation(UNIT_ALIASES[unit]) for unit in TimeUnit)

FULL_PATTERN = re.compile(
    rf"^\s*{_VALUE_PATTERN}\s*({_UNITS_PATTERN})?\s*$", re.IGNORECASE | re.ASCII
)
POSSIBLE_UNIT_PATTERN = re.compile(rf"^{_VALUE_PATTERN}\s*([a-zA-Z]+)$")

_UNIT_PATTERNS: dict[TimeUnit, re.Pattern[str]] = {
    unit: re.compile(_alternation(UNIT_ALIASES[unit]), re.IGNORECASE | re.ASCII)
    for unit in TimeUnit
}


def multiplier_of(unit: TimeUnit | str) -> int:
    """Milliseconds in one ``unit``."""
    return _MULTIPLIERS[TimeUnit(unit)]


def resolve_unit(text: str) -> TimeUnit | None:
    """Resolve an alias such as ``"Mins"`` to its unit, or None if unknown."""
    lowered = text.lower()
    for unit in TimeUnit:
        if _UNIT_PATTERNS[unit].fullmatch(lowered):
            return unit
    return None


__all__ = [
    "FULL_PATTERN",
    "POSSIBLE_UNIT_PATTERN",
    "TIME_UNITS",
    "UNIT_ALIASES",
    "TimeUnit",
    "multiplier_of",
    "resolve_unit",
]
