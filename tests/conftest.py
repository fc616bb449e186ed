"""Shared pytest fixtures."""

import pytest

from durstr import TimeStringSchema, time_string_schema


@pytest.fixture
def schema() -> TimeStringSchema:
    """The shared base schema."""
    return time_string_schema


@pytest.fixture
def bounded() -> TimeStringSchema:
    """A positive schema bounded to [1s, 1h]."""
    return time_string_schema.positive().min(1000).max(3_600_000)
