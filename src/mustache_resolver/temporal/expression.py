"""Evaluation of temporal expressions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime

from mustache_resolver.exceptions import ResolutionError
from mustache_resolver.logging import get_logger
from mustache_resolver.temporal.ast import (
    BUILTIN_KEYWORDS,
    AndNode,
    CronNode,
    CustomNode,
    KeywordNode,
    LastWeekdayNode,
    LiteralNode,
    Node,
    NotNode,
    NthWeekdayNode,
    OrNode,
    TimeRangeNode,
)
from mustache_resolver.temporal.conditions import (
    AlwaysCondition,
    Condition,
    CronCondition,
    Evaluator,
    LastWeekdayCondition,
    NeverCondition,
    NthWeekdayCondition,
    TimeRangeCondition,
    WeekdayCondition,
    WeekendCondition,
)
from mustache_resolver.temporal.parser import (
    CRON_PREFIX,
    LAST_PREFIX,
    NTH_PREFIX,
    ExpressionParser,
)
from mustache_resolver.temporal.time_range import TIME_RANGE_PATTERN

__all__ = ["TemporalExpression"]

logger = get_logger(__name__)

_KEYWORD_CONDITIONS: dict[str, Condition] = {
    "always": AlwaysCondition(),
    "never": NeverCondition(),
    "weekday": WeekdayCondition(),
    "weekend": WeekendCondition(),
}


class TemporalExpression:
    """A temporal boolean expression such as ``weekday && 08:00-18:00``.

    The expression is parsed on first evaluation and the AST is cached.
    Registering an evaluator drops the cached AST.

    Args:
        expression: Expression source.
        evaluators: Initial custom keyword evaluators.

    Example:
        >>> expr = TemporalExpression("weekday && !holiday")
        >>> expr.register_evaluator("holiday", lambda at: False)
        >>> expr.missing_evaluators()
        []
    """

    def __init__(
        self,
        expression: str,
        evaluators: Mapping[str, Evaluator] | None = None,
    ) -> None:
        self.expression = expression
        self._evaluators: dict[str, Evaluator] = dict(evaluators or {})
        self._ast: Node | None = None

    def evaluate(self, at: datetime | None = None) -> bool:
        """Evaluate the expression at ``at`` (defaults to now).

        Raises:
            InvalidSyntaxError: If the expression does not parse.
            ResolutionError: If it uses a custom keyword with no evaluator.
        """
        at = at or datetime.now()
        if self._ast is None:
            self._ast = ExpressionParser(self.expression).parse()
            logger.debug("temporal_ast_parsed", expression=self.expression)
        return self._evaluate(self._ast, at)

    def register_evaluator(
        self, keyword: str, evaluator: Evaluator
    ) -> TemporalExpression:
        self._evaluators[keyword] = evaluator
        self._ast = None
        return self

    def has_evaluator(self, keyword: str) -> bool:
        return keyword in self._evaluators

    def registered_keywords(self) -> list[str]:
        return list(self._evaluators)

    def used_keywords(self) -> list[str]:
        return ExpressionParser(self.expression).extract_keywords()

    def missing_evaluators(self) -> list[str]:
        """Custom keywords used by the expression that have no evaluator."""
        missing = []
        for keyword in self.used_keywords():
            if keyword in BUILTIN_KEYWORDS:
                continue
            if keyword.startswith((CRON_PREFIX, NTH_PREFIX, LAST_PREFIX)):
                continue
            if TIME_RANGE_PATTERN.fullmatch(keyword):
                continue
            if keyword not in self._evaluators:
                missing.append(keyword)
        return missing

    def _evaluate(self, node: Node, at: datetime) -> bool:
        if isinstance(node, AndNode):
            return self._evaluate(node.left, at) and self._evaluate(node.right, at)
        if isinstance(node, OrNode):
            return self._evaluate(node.left, at) or self._evaluate(node.right, at)
        if isinstance(node, NotNode):
            return not self._evaluate(node.operand, at)
        if isinstance(node, CustomNode):
            return self._evaluate_custom(node.keyword, at)
        if isinstance(node, LiteralNode):
            return node.value
        return _leaf_condition(node).evaluate(at)

    def _evaluate_custom(self, keyword: str, at: datetime) -> bool:
        evaluator = self._evaluators.get(keyword)
        if evaluator is None:
            raise ResolutionError(
                f'No evaluator registered for custom condition: "{keyword}"'
            )
        return bool(evaluator(at))

    def __repr__(self) -> str:
        return f"TemporalExpression({self.expression!r})"


def _keyword_condition(node: KeywordNode) -> Condition:
    return _KEYWORD_CONDITIONS[node.keyword]


_LEAF_FACTORIES: dict[type, Callable[..., Condition]] = {
    KeywordNode: _keyword_condition,
    TimeRangeNode: lambda node: TimeRangeCondition(node.range),
    CronNode: lambda node: CronCondition(node.expression),
    NthWeekdayNode: lambda node: NthWeekdayCondition(node.day, node.occurrences),
    LastWeekdayNode: lambda node: LastWeekdayCondition(node.day),
}


def _leaf_condition(node: Node) -> Condition:
    factory = _LEAF_FACTORIES.get(type(node))
    if factory is None:
        raise ResolutionError(f"Unknown AST node type: {type(node).__name__}")
    return factory(node)
