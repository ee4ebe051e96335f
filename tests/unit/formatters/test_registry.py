"""Unit tests for FormatterRegistry."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from mustache_resolver.exceptions import FormatterError
from mustache_resolver.formatters import (
    ALLOWED_FORMATTERS,
    Formatter,
    FormatterRegistry,
)


class ShoutFormatter(Formatter):
    name = "shout"

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return str(value).upper() + "!"


class LoudUppercaseFormatter(Formatter):
    name = "uppercase"
    supported_types = (str,)

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return value.upper() + "!!"


class TestRegistry:
    """Tests for registration and lookup."""

    def test_builtins_cover_allow_list(self) -> None:
        registry = FormatterRegistry.with_builtins()

        assert sorted(registry.registered_names()) == sorted(ALLOWED_FORMATTERS)
        assert len(registry) == 26
        assert registry.allowed_names() == list(ALLOWED_FORMATTERS)

    def test_register_rejects_unlisted_names(self) -> None:
        with pytest.raises(FormatterError, match="not in the allowed list"):
            FormatterRegistry().register(ShoutFormatter())

    def test_register_replaces_builtin(self) -> None:
        registry = FormatterRegistry.with_builtins().register(LoudUppercaseFormatter())

        assert registry.apply("uppercase", "hi") == "HI!!"

    def test_get_unknown(self) -> None:
        registry = FormatterRegistry()

        with pytest.raises(FormatterError, match="not in the allowed list"):
            registry.get("shout")
        with pytest.raises(FormatterError, match="not registered"):
            registry.get("slug")


class TestApply:
    """Tests for applying formatters."""

    def test_unsupported_type(self) -> None:
        registry = FormatterRegistry.with_builtins()

        with pytest.raises(FormatterError, match='type "list"'):
            registry.apply("uppercase", ["a"])

    def test_bool_only_where_listed(self) -> None:
        registry = FormatterRegistry.with_builtins()

        assert registry.apply("toInt", True) == 1
        with pytest.raises(FormatterError):
            registry.apply("round", True)

    def test_failure_is_wrapped(self) -> None:
        registry = FormatterRegistry.with_builtins()

        with pytest.raises(FormatterError, match="Cannot interpret"):
            registry.apply("toDateString", "not a date")
