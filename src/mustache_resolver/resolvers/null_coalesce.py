"""``path ?? default`` resolution."""

from __future__ import annotations

from typing import Any

from mustache_resolver.constants import PRIORITY_NULL_COALESCE
from mustache_resolver.context import ResolutionContext
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.tokens import Token, TokenType

__all__ = ["NullCoalesceResolver"]


class NullCoalesceResolver(BaseResolver):
    """Falls back to the token's default string when the path is absent.

    The default is returned verbatim, never converted to another type.
    """

    resolver_name = "null_coalesce"
    resolver_priority = PRIORITY_NULL_COALESCE
    supported_types = frozenset({TokenType.NULL_COALESCE})

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        value = None
        if token.field_path:
            value = self.navigate_path(token.field_path, context)
        if value is None:
            return token.default_value
        return value
