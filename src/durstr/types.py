"""Core types for durstr."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

# Error message parameter shapes accepted at configuration boundaries
MessageFn = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class ErrorParams:
    """Structured error parameter: a message literal or a message function."""

    message: str | MessageFn


ErrorParam = str | MessageFn | ErrorParams | dict[str, Any] | None

IssueKind = Literal["format", "value", "unit", "positive", "negative", "min", "max"]


@dataclass(frozen=True, slots=True)
class TimeStringOptions:
    """Custom messages for the three base failure kinds."""

    invalid_format_error: ErrorParam = None
    invalid_value_error: ErrorParam = None
    invalid_unit_error: ErrorParam = None


@dataclass(frozen=True, slots=True)
class Issue:
    """A single reported validation failure."""

    code: str  # "invalid_format", "invalid_type" or "custom"
    message: str
    input: Any
    kind: IssueKind


# Duration type alias
Duration = str | int  # "30s", "1.5h", "2 days" or milliseconds
