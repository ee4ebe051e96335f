"""Unit tests for ResolutionContext."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from mustache_resolver.accessors import (
    MappingAccessor,
    ModelAccessor,
    ObjectAccessor,
)
from mustache_resolver.context import ResolutionContext


class Account(BaseModel):
    name: str


@dataclass
class Point:
    x: int


class TestFromData:
    """Tests for building contexts from caller data."""

    def test_mapping(self) -> None:
        ctx = ResolutionContext.from_data({"a": 1})

        assert isinstance(ctx.accessor, MappingAccessor)

    def test_model(self) -> None:
        ctx = ResolutionContext.from_data(Account(name="Ann"))

        assert isinstance(ctx.accessor, ModelAccessor)
        assert ctx.get("name") == "Ann"

    def test_object(self) -> None:
        ctx = ResolutionContext.from_data(Point(x=3))

        assert isinstance(ctx.accessor, ObjectAccessor)
        assert ctx.get("x") == 3

    def test_none_is_empty(self) -> None:
        ctx = ResolutionContext.from_data(None)

        assert ctx.accessor.keys() == []

    def test_context_passes_through(self) -> None:
        ctx = ResolutionContext.from_mapping({})

        assert ResolutionContext.from_data(ctx) is ctx

    def test_accessor_wrapped(self) -> None:
        accessor = MappingAccessor({"a": 1})

        assert ResolutionContext.from_data(accessor).accessor is accessor


class TestVariables:
    """Tests for variable shadowing and immutability."""

    def test_variables_shadow_data(self) -> None:
        ctx = ResolutionContext.from_mapping({"name": "Ann"})
        shadowed = ctx.with_variable("name", "Bob")

        assert shadowed.get("name") == "Bob"
        assert ctx.get("name") == "Ann"

    def test_with_variables_merges(self) -> None:
        ctx = ResolutionContext.from_mapping({}).with_variables({"a": 1})
        ctx = ctx.with_variables({"b": 2})

        assert ctx.variables == {"a": 1, "b": 2}
        assert ctx.has("a")
        assert not ctx.has("c")

    def test_is_frozen(self) -> None:
        ctx = ResolutionContext.from_mapping({})

        with pytest.raises(AttributeError):
            ctx.strict = False  # type: ignore[misc]


class TestModes:
    def test_with_strict_and_prefix(self) -> None:
        ctx = ResolutionContext.from_mapping({})

        assert ctx.with_strict(False).strict is False
        assert ctx.with_prefix("User").expected_prefix == "User"
        assert ctx.expected_prefix is None

    def test_config_value_default(self) -> None:
        ctx = ResolutionContext.from_mapping({}).with_config({"a": None, "b": 2})

        assert ctx.config_value("a", "fallback") == "fallback"
        assert ctx.config_value("b") == 2
