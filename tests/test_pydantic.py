"""Tests for pydantic integration."""

from typing import Annotated

import pytest
from pydantic import BaseModel, ValidationError

from durstr import time_string_schema


class Settings(BaseModel):
    ttl: Annotated[int, time_string_schema.positive().max(86_400_000)]
    offset: Annotated[int, time_string_schema] = 0


class TestPydanticField:
    def test_parses_into_milliseconds(self) -> None:
        settings = Settings(ttl="5m", offset="-1h")
        assert settings.ttl == 300_000
        assert settings.offset == -3_600_000

    def test_constraint_failure(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Settings(ttl="-5m")
        error = exc_info.value.errors()[0]
        assert error["type"] == "custom"
        assert error["msg"] == "Value must be positive"
        assert error["loc"] == ("ttl",)

    def test_format_failure(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Settings(ttl="soon")
        error = exc_info.value.errors()[0]
        assert error["type"] == "invalid_format"
        assert error["msg"] == "Invalid time format: soon"

    def test_custom_messages_flow_through(self) -> None:
        class Job(BaseModel):
            every: Annotated[
                int,
                time_string_schema.with_error_messages(
                    invalid_unit_error=lambda u: f"unknown unit {u}"
                ).positive(),
            ]

        with pytest.raises(ValidationError) as exc_info:
            Job(every="5 fortnights")
        assert exc_info.value.errors()[0]["msg"] == "unknown unit fortnights"

    def test_rejects_non_string(self) -> None:
        with pytest.raises(ValidationError):
            Settings(ttl=1000)


class TestPydanticMessagesVerbatim:
    def test_braces_in_input_not_interpolated(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Settings(ttl="{kind}")
        assert exc_info.value.errors()[0]["msg"] == "Invalid time format: {kind}"

    def test_braces_in_custom_message_not_interpolated(self) -> None:
        class Window(BaseModel):
            span: Annotated[int, time_string_schema.max(1000, "{message} {kind}")]

        with pytest.raises(ValidationError) as exc_info:
            Window(span="2s")
        assert exc_info.value.errors()[0]["msg"] == "{message} {kind}"
