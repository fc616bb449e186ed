"""TimeStringSchema: an immutable, chainable time string validator.

Every chaining call returns a new schema, so a base schema can be shared and
refined independently:

    timeout = time_string_schema.positive().max(60_000)
    timeout.parse("30s")  # 30000

Schemas also work as pydantic annotations:

    class Config(BaseModel):
        ttl: Annotated[int, time_string_schema.positive()]
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from durstr.errors import TimeStringError
from durstr.messages import Message, to_message
from durstr.parser import FailureKind, ParseFailure, parse_time_string
from durstr.types import ErrorParam, Issue, IssueKind, TimeStringOptions

# Accepted mapping keys for with_error_messages, camelCase aliases included
_OPTION_KEYS = {
    "invalid_format_error": "invalid_format_error",
    "invalid_value_error": "invalid_value_error",
    "invalid_unit_error": "invalid_unit_error",
    "invalidFormatError": "invalid_format_error",
    "invalidValueError": "invalid_value_error",
    "invalidUnitError": "invalid_unit_error",
}


@dataclass(frozen=True, slots=True)
class Constraint:
    """A sign or range check applied after a successful parse."""

    kind: IssueKind
    check: Callable[[int], bool]
    message: Message
    bound: int | None = None

    def __call__(self, value: int) -> bool:
        return self.check(value)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of ``safe_parse``."""

    success: bool
    data: int | None = None
    error: TimeStringError | None = None


@dataclass(frozen=True, slots=True, eq=False)
class TimeStringSchema:
    """Validates time strings into integer milliseconds."""

    options: TimeStringOptions = field(default_factory=TimeStringOptions)
    constraints: tuple[Constraint, ...] = ()

    # =========================================================================
    # Chaining
    # =========================================================================

    def positive(self, params: ErrorParam = None) -> TimeStringSchema:
        """Require a value greater than zero."""
        return self._refine(
            "positive", lambda v: v > 0, params, "Value must be positive"
        )

    def negative(self, params: ErrorParam = None) -> TimeStringSchema:
        """Require a value less than zero."""
        return self._refine(
            "negative", lambda v: v < 0, params, "Value must be negative"
        )

    def min(self, min_value: int, params: ErrorParam = None) -> TimeStringSchema:
        """Require a value of at least ``min_value`` milliseconds."""
        return self._refine(
            "min",
            lambda v: v >= min_value,
            params,
            f"Value must be greater than or equal to {min_value}",
            bound=min_value,
        )

    def max(self, max_value: int, params: ErrorParam = None) -> TimeStringSchema:
        """Require a value of at most ``max_value`` milliseconds."""
        return self._refine(
            "max",
            lambda v: v <= max_value,
            params,
            f"Value must be less than or equal to {max_value}",
            bound=max_value,
        )

    def with_error_messages(
        self,
        options: TimeStringOptions | Mapping[str, ErrorParam] | None = None,
        **kwargs: ErrorParam,
    ) -> TimeStringSchema:
        """Return a new base schema with custom parse failure messages.

        Constraints chained onto this schema are not carried over; configure
        messages first, then chain constraints.
        """
        if isinstance(options, TimeStringOptions):
            base, overrides = options, dict(kwargs)
        else:
            base, overrides = TimeStringOptions(), {**dict(options or {}), **kwargs}

        merged: dict[str, ErrorParam] = {}
        for key, value in overrides.items():
            if key not in _OPTION_KEYS:
                raise TypeError(f"Unknown error message option: {key!r}")
            merged[_OPTION_KEYS[key]] = value
        resolved = replace(base, **merged)
        # Reject unsupported message shapes at configuration time
        for param in (
            resolved.invalid_format_error,
            resolved.invalid_value_error,
            resolved.invalid_unit_error,
        ):
            to_message(param, "")
        return TimeStringSchema(options=resolved)

    def _refine(
        self,
        kind: IssueKind,
        check: Callable[[int], bool],
        params: ErrorParam,
        default: str,
        bound: int | None = None,
    ) -> TimeStringSchema:
        constraint = Constraint(kind, check, to_message(params, default), bound)
        return TimeStringSchema(self.options, (*self.constraints, constraint))

    # =========================================================================
    # Validation
    # =========================================================================

    def parse(self, value: Any) -> int:
        """Parse ``value`` into milliseconds.

        Raises:
            TimeStringError: with exactly one issue, for the first failure.
        """
        issue, result = self._validate(value)
        if issue is not None:
            raise TimeStringError([issue])
        return result

    def safe_parse(self, value: Any) -> ParseResult:
        """Parse ``value`` without raising on invalid input."""
        issue, result = self._validate(value)
        if issue is not None:
            return ParseResult(False, error=TimeStringError([issue]))
        return ParseResult(True, data=result)

    def is_valid(self, value: Any) -> bool:
        return self._validate(value)[0] is None

    def _validate(self, value: Any) -> tuple[Issue | None, int]:
        if not isinstance(value, str):
            message = f"Expected string, received {type(value).__name__}"
            return Issue("invalid_type", message, value, "format"), 0

        parsed = parse_time_string(value)
        if isinstance(parsed, ParseFailure):
            return self._failure_issue(parsed, value), 0

        for constraint in self.constraints:
            if not constraint(parsed):
                message = constraint.message.render(str(parsed))
                return Issue("custom", message, value, constraint.kind), 0

        return None, parsed

    def _failure_issue(self, failure: ParseFailure, value: str) -> Issue:
        if failure.kind is FailureKind.UNIT:
            param = self.options.invalid_unit_error
            default = f"Invalid time unit: {failure.offending_text}"
        elif failure.kind is FailureKind.VALUE:
            param = self.options.invalid_value_error
            default = f"Invalid time value: {failure.offending_text}"
        else:
            param = self.options.invalid_format_error
            default = f"Invalid time format: {failure.offending_text}"

        message = to_message(param, default).render(failure.offending_text)
        return Issue("invalid_format", message, value, failure.kind.value)

    # =========================================================================
    # pydantic integration
    # =========================================================================

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            self._validate_for_pydantic, core_schema.str_schema()
        )

    def _validate_for_pydantic(self, value: str) -> int:
        issue, result = self._validate(value)
        if issue is not None:
            context = {"message": issue.message}
            raise PydanticCustomError(issue.code, "{message}", context)
        return result

    def __repr__(self) -> str:
        chain = "".join(
            f".{c.kind}()" if c.bound is None else f".{c.kind}({c.bound})"
            for c in self.constraints
        )
        return f"TimeStringSchema(){chain}"


# Base schema: default messages, no constraints
time_string_schema = TimeStringSchema()


__all__ = [
    "Constraint",
    "ParseResult",
    "TimeStringSchema",
    "time_string_schema",
]
