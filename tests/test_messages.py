"""Tests for error message resolution."""

import pytest

from durstr import DynamicMessage, ErrorParams, LiteralMessage, resolve_error_message
from durstr.messages import to_message


class TestResolveErrorMessage:
    def test_absent_uses_default(self) -> None:
        assert resolve_error_message(None, "default", "x") == "default"

    def test_literal(self) -> None:
        assert resolve_error_message("custom", "default", "x") == "custom"

    def test_function(self) -> None:
        assert resolve_error_message(lambda s: f"<{s}>", "default", "x") == "<x>"

    def test_object_with_literal(self) -> None:
        assert resolve_error_message(ErrorParams("obj"), "default", "x") == "obj"

    def test_object_with_function(self) -> None:
        params = ErrorParams(lambda s: s.upper())
        assert resolve_error_message(params, "default", "abc") == "ABC"

    def test_mapping(self) -> None:
        assert resolve_error_message({"message": "m"}, "default", "x") == "m"
        assert resolve_error_message({}, "default", "x") == "default"


class TestToMessage:
    def test_normalizes_to_union(self) -> None:
        assert to_message("a", "d") == LiteralMessage("a")
        assert to_message(None, "d") == LiteralMessage("d")
        assert isinstance(to_message(str.upper, "d"), DynamicMessage)
        assert isinstance(to_message(ErrorParams(str.upper), "d"), DynamicMessage)

    def test_rejects_unsupported(self) -> None:
        with pytest.raises(TypeError):
            to_message(3.5, "d")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            to_message({"message": 3}, "d")
