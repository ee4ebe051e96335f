"""Priority-ordered resolver chain."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import UnresolvableError
from mustache_resolver.logging import get_logger
from mustache_resolver.resolvers import Resolver
from mustache_resolver.tokens import Token

__all__ = ["ResolutionPipeline"]

logger = get_logger(__name__)


class ResolutionPipeline:
    """Dispatches each token to the first resolver that supports it.

    Resolvers are kept sorted by descending priority. The sort is stable,
    so resolvers of equal priority keep their insertion order. The first
    supporting resolver's result is returned as-is, None included; later
    resolvers are never consulted.

    Example:
        >>> pipeline = PipelineBuilder.create().build()
        >>> ctx = ResolutionContext.from_mapping({"x": 1})
        >>> pipeline.resolve(Token.from_string("$x"), ctx.with_variable("x", 5))
        5
    """

    def __init__(self, resolvers: Iterable[Resolver] = ()) -> None:
        self._resolvers: list[Resolver] = []
        for resolver in resolvers:
            self._resolvers.append(resolver)
        self._sort()

    def add_resolver(self, resolver: Resolver) -> ResolutionPipeline:
        self._resolvers.append(resolver)
        self._sort()
        return self

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        """Resolve ``token`` with the highest-priority supporting resolver.

        Raises:
            UnresolvableError: If no resolver supports the token.
        """
        resolver = self.get_resolver_for(token, context)
        if resolver is None:
            raise UnresolvableError.for_token(token)

        logger.debug(
            "resolver_selected",
            token=token.raw,
            token_type=token.type.value,
            resolver=resolver.name,
        )
        value = resolver.resolve(token, context)
        logger.debug("token_resolved", token=token.raw, found=value is not None)
        return value

    def can_resolve(self, token: Token, context: ResolutionContext) -> bool:
        return self.get_resolver_for(token, context) is not None

    def get_resolver_for(
        self, token: Token, context: ResolutionContext
    ) -> Resolver | None:
        for resolver in self._resolvers:
            if resolver.supports(token, context):
                return resolver
        return None

    @property
    def resolvers(self) -> list[Resolver]:
        return list(self._resolvers)

    @property
    def resolver_names(self) -> list[str]:
        return [resolver.name for resolver in self._resolvers]

    def __len__(self) -> int:
        return len(self._resolvers)

    def _sort(self) -> None:
        self._resolvers.sort(key=lambda resolver: resolver.priority, reverse=True)
