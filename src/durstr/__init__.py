"""durstr - Human-readable duration strings to milliseconds."""

# Duration parsing
from durstr.duration import parse_duration
from durstr.errors import TimeStringError
from durstr.messages import DynamicMessage, LiteralMessage, resolve_error_message
from durstr.parser import (
    FailureKind,
    ParsedValue,
    ParseFailure,
    parse_time_string,
    split_time_string,
)

# Schema API
from durstr.schema import Constraint, ParseResult, TimeStringSchema, time_string_schema

# Core types
from durstr.types import (
    Duration,
    ErrorParam,
    ErrorParams,
    Issue,
    TimeStringOptions,
)
from durstr.units import TIME_UNITS, TimeUnit, multiplier_of, resolve_unit

__version__ = "0.1.0"

__all__ = [
    "TIME_UNITS",
    "Constraint",
    "Duration",
    "DynamicMessage",
    "ErrorParam",
    "ErrorParams",
    "FailureKind",
    "Issue",
    "LiteralMessage",
    "ParseFailure",
    "ParseResult",
    "ParsedValue",
    "TimeStringError",
    "TimeStringOptions",
    "TimeStringSchema",
    "TimeUnit",
    "multiplier_of",
    "parse_duration",
    "parse_time_string",
    "resolve_error_message",
    "resolve_unit",
    "split_time_string",
    "time_string_schema",
]
