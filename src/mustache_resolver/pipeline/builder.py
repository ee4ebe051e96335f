"""Fluent construction of resolution pipelines."""

from __future__ import annotations

from mustache_resolver.pipeline.pipeline import ResolutionPipeline
from mustache_resolver.resolvers import (
    CollectionResolver,
    DynamicFieldResolver,
    ModelResolver,
    NullCoalesceResolver,
    RelationResolver,
    Resolver,
    TableResolver,
    TemporalResolver,
    VariableResolver,
)
from mustache_resolver.security import SecurityValidator
from mustache_resolver.temporal import ConditionRegistry

__all__ = ["DEFAULT_RESOLVER_NAMES", "PipelineBuilder"]

#: Names of the resolvers ``with_defaults()`` installs, in priority order
DEFAULT_RESOLVER_NAMES: tuple[str, ...] = (
    "temporal",
    "null_coalesce",
    "variable",
    "dynamic",
    "collection",
    "relation",
    "model",
    "table",
)


class PipelineBuilder:
    """Builds a ``ResolutionPipeline`` from defaults, additions and exclusions.

    Exclusions apply to every resolver by name, custom ones included.

    Args:
        registry: Condition registry handed to the default temporal
            resolver. The process-wide default is used when omitted.
        security: Validator whose table allow-list the default table
            resolver enforces.

    Example:
        >>> pipeline = (
        ...     PipelineBuilder.create()
        ...     .exclude("table")
        ...     .add_resolver(MathResolver())
        ...     .build()
        ... )
        >>> pipeline.resolver_names[:2]
        ['temporal', 'null_coalesce']
    """

    def __init__(
        self,
        registry: ConditionRegistry | None = None,
        security: SecurityValidator | None = None,
    ) -> None:
        self._registry = registry
        self._security = security
        self._resolvers: list[Resolver] = []
        self._include_defaults = True
        self._excluded: list[str] = []

    @classmethod
    def create(
        cls,
        registry: ConditionRegistry | None = None,
        security: SecurityValidator | None = None,
    ) -> PipelineBuilder:
        return cls(registry, security)

    def with_defaults(self) -> PipelineBuilder:
        self._include_defaults = True
        return self

    def without_defaults(self) -> PipelineBuilder:
        self._include_defaults = False
        return self

    def exclude(self, *names: str) -> PipelineBuilder:
        self._excluded.extend(names)
        return self

    def add_resolver(self, resolver: Resolver) -> PipelineBuilder:
        self._resolvers.append(resolver)
        return self

    def build(self) -> ResolutionPipeline:
        resolvers: list[Resolver] = []
        if self._include_defaults:
            resolvers.extend(self._default_resolvers())
        resolvers.extend(self._resolvers)
        return ResolutionPipeline(
            resolver for resolver in resolvers if resolver.name not in self._excluded
        )

    def _default_resolvers(self) -> list[Resolver]:
        return [
            TemporalResolver(self._registry),
            NullCoalesceResolver(),
            VariableResolver(),
            DynamicFieldResolver(),
            CollectionResolver(),
            RelationResolver(),
            ModelResolver(),
            TableResolver(self._security),
        ]
