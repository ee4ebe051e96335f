"""``Model.relation.field`` resolution."""

from __future__ import annotations

from typing import Any

from mustache_resolver.constants import PRIORITY_RELATION
from mustache_resolver.context import ResolutionContext
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.tokens import Token, TokenType

__all__ = ["RelationResolver"]


class RelationResolver(BaseResolver):
    """Follows a relation chain below the model prefix.

    Needs at least two segments after the prefix (relation and field).
    """

    resolver_name = "relation"
    resolver_priority = PRIORITY_RELATION
    supported_types = frozenset({TokenType.RELATION})

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        if not self.prefix_matches(token, context):
            return None
        if len(token.field_path) < 2:
            return None
        return self.navigate_path(token.field_path, context)
