"""Arithmetic placeholder resolution."""

from __future__ import annotations

from typing import Any

from mustache_resolver.arithmetic import MathExpressionEvaluator
from mustache_resolver.constants import PRIORITY_MATH
from mustache_resolver.context import ResolutionContext
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.tokens import Token, TokenType

__all__ = ["MathResolver"]


class MathResolver(BaseResolver):
    """Evaluates MATH tokens such as ``{{2 + 3 * 4}}``."""

    resolver_name = "math"
    resolver_priority = PRIORITY_MATH
    supported_types = frozenset({TokenType.MATH})

    def __init__(self, evaluator: MathExpressionEvaluator | None = None) -> None:
        self.evaluator = evaluator or MathExpressionEvaluator()

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        expression = token.metadata.get("expression", token.raw)
        return self.evaluator.evaluate(str(expression))
