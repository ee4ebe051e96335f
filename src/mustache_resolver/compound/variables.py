"""Resolution of USE variable declarations."""

from __future__ import annotations

from typing import Any

from mustache_resolver.compound.conditions import ConditionEvaluator
from mustache_resolver.compound.models import CompoundExpression, UseVariable
from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import UnresolvableError, VariableNotResolvedError
from mustache_resolver.logging import get_logger
from mustache_resolver.parser import MustacheParser
from mustache_resolver.pipeline import ResolutionPipeline

__all__ = ["UseVariableResolver"]

logger = get_logger(__name__)


class UseVariableResolver:
    """Resolves each declaration's ``{{expression}}`` through the pipeline."""

    def __init__(
        self,
        pipeline: ResolutionPipeline,
        parser: MustacheParser | None = None,
        conditions: ConditionEvaluator | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.parser = parser or MustacheParser()
        self.conditions = conditions or ConditionEvaluator()

    def resolve(self, variable: UseVariable, context: ResolutionContext) -> Any:
        """Resolve one variable and apply its condition.

        Raises:
            VariableNotResolvedError: If the expression has no token, no
                resolver claims it, or it resolves to None.
            ConditionNotMetError: If the value fails the inline condition.
        """
        tokens = self.parser.parse(variable.expression)
        if not tokens:
            raise VariableNotResolvedError(
                variable.name, variable.expression, "Invalid mustache expression"
            )

        try:
            value = self.pipeline.resolve(tokens[0], context)
        except UnresolvableError as e:
            raise VariableNotResolvedError(
                variable.name,
                variable.expression,
                f"No resolver could handle the expression: {e.message}",
            ) from e

        if value is None:
            raise VariableNotResolvedError(
                variable.name,
                variable.expression,
                "Mustache expression resolved to null",
            )

        if variable.condition is not None:
            self.conditions.evaluate(
                variable.name, value, variable.condition, variable.expression
            )

        logger.debug(
            "compound_variable_resolved",
            variable=variable.name,
            expression=variable.expression,
        )
        return value

    def resolve_all(
        self, compound: CompoundExpression, context: ResolutionContext
    ) -> dict[str, Any]:
        return {
            variable.name: self.resolve(variable, context)
            for variable in compound.variables
        }
