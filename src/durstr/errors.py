"""Exceptions raised by durstr."""

from __future__ import annotations

from durstr.types import Issue


class TimeStringError(ValueError):
    """Raised when a time string fails parsing or a chained constraint."""

    def __init__(self, issues: list[Issue] | tuple[Issue, ...]) -> None:
        self.issues: tuple[Issue, ...] = tuple(issues)
        super().__init__(self.issues[0].message if self.issues else "Invalid time")

    @property
    def issue(self) -> Issue:
        """The first (and under fail-fast semantics, only) issue."""
        return self.issues[0]

    def __repr__(self) -> str:
        return f"TimeStringError({list(self.issues)!r})"
