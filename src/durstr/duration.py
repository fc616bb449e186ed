"""Duration parsing utilities."""

from durstr.schema import time_string_schema
from durstr.types import Duration


def parse_duration(duration: Duration) -> int:
    """Parse duration string to milliseconds. Passthrough if already int."""
    if isinstance(duration, int):
        return duration
    return time_string_schema.parse(duration)
