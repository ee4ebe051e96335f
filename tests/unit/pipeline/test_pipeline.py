"""Unit tests for ResolutionPipeline and PipelineBuilder."""

from __future__ import annotations

from typing import Any

import pytest

from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import UnresolvableError
from mustache_resolver.pipeline import (
    DEFAULT_RESOLVER_NAMES,
    PipelineBuilder,
    ResolutionPipeline,
)
from mustache_resolver.resolvers import BaseResolver, MathResolver
from mustache_resolver.tokens import Token, TokenType


class ConstantResolver(BaseResolver):
    """Returns a fixed value for MODEL tokens."""

    resolver_name = "constant"
    resolver_priority = 100
    supported_types = frozenset({TokenType.MODEL})

    def __init__(self, value: Any, name: str = "constant") -> None:
        self.value = value
        self.resolver_name = name  # type: ignore[misc]

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        return self.value


@pytest.fixture
def context() -> ResolutionContext:
    return ResolutionContext.from_mapping({"name": "Ann"})


class TestResolutionPipeline:
    """Tests for dispatching tokens."""

    def test_highest_priority_wins(self, context: ResolutionContext) -> None:
        pipeline = PipelineBuilder.create().add_resolver(ConstantResolver("X")).build()

        assert pipeline.resolve(Token.from_string("User.name"), context) == "X"

    def test_none_result_is_final(self, context: ResolutionContext) -> None:
        pipeline = PipelineBuilder.create().add_resolver(ConstantResolver(None)).build()

        assert pipeline.resolve(Token.from_string("User.name"), context) is None

    def test_equal_priority_keeps_insertion_order(
        self, context: ResolutionContext
    ) -> None:
        pipeline = ResolutionPipeline(
            [ConstantResolver("first", "a"), ConstantResolver("second", "b")]
        )

        assert pipeline.resolve(Token.from_string("User.name"), context) == "first"

    def test_unresolvable(self, context: ResolutionContext) -> None:
        pipeline = ResolutionPipeline()
        token = Token.from_string("User.name")

        assert not pipeline.can_resolve(token, context)
        with pytest.raises(UnresolvableError, match="No resolver found for token"):
            pipeline.resolve(token, context)

    def test_add_resolver_resorts(self, context: ResolutionContext) -> None:
        pipeline = ResolutionPipeline([MathResolver()])
        pipeline.add_resolver(ConstantResolver("X"))

        assert pipeline.resolver_names == ["constant", "math"]
        assert len(pipeline) == 2

    def test_get_resolver_for(self, context: ResolutionContext) -> None:
        pipeline = PipelineBuilder.create().build()
        resolver = pipeline.get_resolver_for(Token.from_string("$x"), context)

        assert resolver is not None
        assert resolver.name == "variable"


class TestPipelineBuilder:
    """Tests for PipelineBuilder."""

    def test_defaults_in_priority_order(self) -> None:
        pipeline = PipelineBuilder.create().build()

        assert pipeline.resolver_names == list(DEFAULT_RESOLVER_NAMES)

    def test_without_defaults(self) -> None:
        pipeline = (
            PipelineBuilder.create()
            .without_defaults()
            .add_resolver(MathResolver())
            .build()
        )

        assert pipeline.resolver_names == ["math"]

    def test_exclude_defaults_and_custom(self) -> None:
        pipeline = (
            PipelineBuilder.create()
            .add_resolver(ConstantResolver("X"))
            .exclude("table", "constant")
            .build()
        )

        assert "table" not in pipeline.resolver_names
        assert "constant" not in pipeline.resolver_names
        assert len(pipeline) == len(DEFAULT_RESOLVER_NAMES) - 1
