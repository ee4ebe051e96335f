"""``$name`` resolution."""

from __future__ import annotations

from typing import Any

from mustache_resolver.constants import PRIORITY_VARIABLE
from mustache_resolver.context import ResolutionContext
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.tokens import Token, TokenType

__all__ = ["VariableResolver"]


class VariableResolver(BaseResolver):
    """Looks a VARIABLE token up in the context variables, never the accessor."""

    resolver_name = "variable"
    resolver_priority = PRIORITY_VARIABLE
    supported_types = frozenset({TokenType.VARIABLE})

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        if not token.path:
            return None
        return context.variables.get(token.path[0])
