"""Keyword registry for temporal conditions.

Registries are plain objects passed to whoever needs them. A lazily created
default instance is available through ``get_registry()`` and can be
discarded with ``reset_registry()``, mainly for test isolation.
"""

from __future__ import annotations

from datetime import datetime

from mustache_resolver.temporal.conditions import (
    AlwaysCondition,
    Condition,
    CustomCondition,
    Evaluator,
    NeverCondition,
    WeekdayCondition,
    WeekendCondition,
)
from mustache_resolver.temporal.expression import TemporalExpression

__all__ = ["ConditionRegistry", "get_registry", "reset_registry"]


class ConditionRegistry:
    """Built-in conditions plus caller-registered keyword evaluators.

    Registration is not thread-safe; do it during single-threaded setup.

    Example:
        >>> registry = ConditionRegistry()
        >>> registry.register_evaluator("holiday", lambda at: at.month == 12)
        ConditionRegistry(keywords=[...])
        >>> expr = registry.create_expression("weekday && !holiday")
        >>> expr.has_evaluator("holiday")
        True
    """

    def __init__(self) -> None:
        self._conditions: dict[str, Condition] = {}
        self._evaluators: dict[str, Evaluator] = {}
        for condition in (
            AlwaysCondition(),
            NeverCondition(),
            WeekdayCondition(),
            WeekendCondition(),
        ):
            self.register(condition)

    def register(self, condition: Condition) -> ConditionRegistry:
        for keyword in condition.keywords:
            self._conditions[keyword] = condition
        return self

    def register_evaluator(
        self, keyword: str, evaluator: Evaluator
    ) -> ConditionRegistry:
        self._evaluators[keyword] = evaluator
        self._conditions[keyword] = CustomCondition(keyword, evaluator)
        return self

    def has(self, keyword: str) -> bool:
        return keyword in self._conditions or keyword in self._evaluators

    def get(self, keyword: str) -> Condition | None:
        return self._conditions.get(keyword)

    def evaluate(self, keyword: str, at: datetime | None = None) -> bool:
        """Evaluate ``keyword`` at ``at``. Unknown keywords are false."""
        condition = self.get(keyword)
        if condition is not None:
            return condition.evaluate(at)
        return False

    def keywords(self) -> list[str]:
        return list(self._conditions)

    def custom_keywords(self) -> list[str]:
        return list(self._evaluators)

    def evaluators(self) -> dict[str, Evaluator]:
        return dict(self._evaluators)

    def remove(self, keyword: str) -> ConditionRegistry:
        self._conditions.pop(keyword, None)
        self._evaluators.pop(keyword, None)
        return self

    def clear_custom(self) -> ConditionRegistry:
        for keyword in self._evaluators:
            self._conditions.pop(keyword, None)
        self._evaluators.clear()
        return self

    def create_expression(self, expression: str) -> TemporalExpression:
        """Build an expression that knows every registered custom keyword."""
        return TemporalExpression(expression, self._evaluators)

    def __repr__(self) -> str:
        return f"ConditionRegistry(keywords={self.keywords()!r})"


_default_registry: ConditionRegistry | None = None


def get_registry() -> ConditionRegistry:
    """Return the default registry, creating it on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ConditionRegistry()
    return _default_registry


def reset_registry() -> None:
    """Discard the default registry; the next access creates a fresh one."""
    global _default_registry
    _default_registry = None
