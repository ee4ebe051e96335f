"""Compound ``USE ... && ...`` template resolution."""

from __future__ import annotations

from typing import Any

from mustache_resolver.compound.parser import CompoundExpressionParser
from mustache_resolver.compound.replacer import LocalVariableReplacer
from mustache_resolver.compound.variables import UseVariableResolver
from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import ConditionNotMetError, InvalidUseSyntaxError
from mustache_resolver.pipeline import ResolutionPipeline

__all__ = ["CompoundResolver"]


class CompoundResolver:
    """Resolves compound templates into a final statement.

    Every declared variable is resolved through ``pipeline`` and checked
    against its condition, then substituted into the statement.

    Example:
        >>> resolver = CompoundResolver(PipelineBuilder.create().build())
        >>> ctx = ResolutionContext.from_mapping({"max_power": 100})
        >>> resolver.resolve(
        ...     "USE {p} => {{Device.max_power}} > 0 && SET power={p}", ctx
        ... )
        'SET power=100'
    """

    def __init__(self, pipeline: ResolutionPipeline) -> None:
        self.pipeline = pipeline
        self.parser = CompoundExpressionParser()
        self.variable_resolver = UseVariableResolver(pipeline)
        self.replacer = LocalVariableReplacer()

    def is_compound(self, template: str) -> bool:
        return self.parser.is_compound(template)

    def resolve(self, template: str, context: ResolutionContext) -> str:
        """Resolve ``template`` to its statement.

        Raises:
            InvalidUseSyntaxError: If the template is malformed.
            VariableNotResolvedError: If a variable cannot be resolved.
            ConditionNotMetError: If a variable fails its condition.
        """
        return self.resolve_detailed(template, context)["statement"]

    def resolve_detailed(
        self, template: str, context: ResolutionContext
    ) -> dict[str, Any]:
        """Resolve ``template`` and report the variables that went into it."""
        compound = self.parser.parse(template)
        variables = self.variable_resolver.resolve_all(compound, context)
        return {
            "statement": self.replacer.replace(compound.statement, variables),
            "variables": variables,
            "original": compound.original,
        }

    def try_resolve(self, template: str, context: ResolutionContext) -> str | None:
        """Like ``resolve`` but returns None when a condition is not met.

        Other errors still propagate.
        """
        try:
            return self.resolve(template, context)
        except ConditionNotMetError:
            return None

    def validate(self, template: str) -> dict[str, Any]:
        """Statically check ``template`` without resolving anything.

        Returns:
            ``{"valid": bool, "errors": [str, ...]}``. Syntax errors and
            statement references to undeclared variables are reported.
        """
        errors: list[str] = []
        try:
            compound = self.parser.parse(template)
        except InvalidUseSyntaxError as e:
            errors.append(e.message)
        else:
            declared = set(compound.variable_names)
            used = self.replacer.extract_variable_names(compound.statement)
            undeclared = [name for name in used if name not in declared]
            if undeclared:
                references = ", ".join("{" + name + "}" for name in undeclared)
                errors.append(f"Undeclared variables used in statement: {references}")
        return {"valid": not errors, "errors": errors}
