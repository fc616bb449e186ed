"""Error message resolution.

Callers may describe a message in several shapes:
- a literal string
- a function receiving the offending text
- an ``ErrorParams`` (or a mapping) whose ``message`` is either of the above

``to_message`` normalizes those shapes into ``LiteralMessage`` or
``DynamicMessage`` once, when a schema is configured, so that validation only
ever sees the two-member union.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from durstr.types import ErrorParam, ErrorParams, MessageFn


@dataclass(frozen=True, slots=True)
class LiteralMessage:
    """A fixed message."""

    text: str

    def render(self, offending: str) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class DynamicMessage:
    """A message computed from the offending text."""

    fn: MessageFn

    def render(self, offending: str) -> str:
        return self.fn(offending)


Message = LiteralMessage | DynamicMessage


def to_message(param: ErrorParam, default: str) -> Message:
    """Normalize an error parameter, falling back to ``default`` when absent."""
    if param is None:
        return LiteralMessage(default)
    if isinstance(param, str):
        return LiteralMessage(param)
    if isinstance(param, ErrorParams):
        return _from_message_field(param.message, default)
    if isinstance(param, Mapping):
        return _from_message_field(param.get("message"), default)
    if callable(param):
        return DynamicMessage(param)
    raise TypeError(f"Unsupported error message parameter: {param!r}")


def _from_message_field(message: object, default: str) -> Message:
    if message is None:
        return LiteralMessage(default)
    if isinstance(message, str):
        return LiteralMessage(message)
    if callable(message):
        return DynamicMessage(message)
    raise TypeError(f"Unsupported error message: {message!r}")


def resolve_error_message(param: ErrorParam, default_text: str, offending: str) -> str:
    """Resolve ``param`` into final message text for ``offending``."""
    return to_message(param, default_text).render(offending)


__all__ = [
    "DynamicMessage",
    "LiteralMessage",
    "Message",
    "resolve_error_message",
    "to_message",
]
