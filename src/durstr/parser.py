"""Time string normalization and parsing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from enum import Enum

from durstr.units import (
    FULL_PATTERN,
    POSSIBLE_UNIT_PATTERN,
    TimeUnit,
    multiplier_of,
    resolve_unit,
)

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    """Why a time string could not be parsed."""

    FORMAT = "format"
    VALUE = "value"
    UNIT = "unit"


@dataclass(frozen=True, slots=True)
class ParsedValue:
    """A magnitude and its unit; no unit means milliseconds."""

    magnitude: Decimal
    unit: TimeUnit | None = None

    @property
    def milliseconds(self) -> int:
        """Scaled value, truncated toward zero."""
        if self.unit is None:
            return int(self.magnitude)
        # Enough precision for an exact product before truncating
        with localcontext() as ctx:
            ctx.prec = len(self.magnitude.as_tuple().digits) + 12
            return int(self.magnitude * multiplier_of(self.unit))


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """A failed parse and the text that caused it."""

    kind: FailureKind
    offending_text: str
    input: str


def split_time_string(raw: str) -> ParsedValue | ParseFailure:
    """Split ``raw`` into magnitude and unit without scaling.

    Returns a ``ParseFailure`` rather than raising, so callers can pick the
    message for each failure kind.
    """
    value = raw.strip()

    match = FULL_PATTERN.match(value)
    if match is None:
        # A number followed by a word looks like a duration with a bad unit
        possible = POSSIBLE_UNIT_PATTERN.match(value)
        if possible is not None:
            return _fail(FailureKind.UNIT, possible.group(2), value)
        return _fail(FailureKind.FORMAT, value, value)

    value_str, unit_str = match.groups()
    if not value_str:
        return _fail(FailureKind.VALUE, value, value)

    try:
        magnitude = Decimal(value_str)
    except InvalidOperation:
        return _fail(FailureKind.VALUE, value, value)

    if not unit_str:
        return ParsedValue(magnitude)

    unit = resolve_unit(unit_str)
    if unit is None:
        return _fail(FailureKind.UNIT, unit_str, value)

    return ParsedValue(magnitude, unit)


def parse_time_string(raw: str) -> int | ParseFailure:
    """Parse ``raw`` into integer milliseconds, or describe the failure."""
    parsed = split_time_string(raw)
    if isinstance(parsed, ParseFailure):
        return parsed
    return parsed.milliseconds


def _fail(kind: FailureKind, offending: str, value: str) -> ParseFailure:
    logger.debug("Rejected time string %r (%s: %r)", value, kind.value, offending)
    return ParseFailure(kind, offending, value)


__all__ = [
    "FailureKind",
    "ParseFailure",
    "ParsedValue",
    "parse_time_string",
    "split_time_string",
]
