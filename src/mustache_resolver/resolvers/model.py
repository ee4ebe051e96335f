"""``Model.field`` resolution."""

from __future__ import annotations

from typing import Any

from mustache_resolver.constants import PRIORITY_MODEL
from mustache_resolver.context import ResolutionContext
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.tokens import Token, TokenType

__all__ = ["ModelResolver"]


class ModelResolver(BaseResolver):
    """Reads the field path of a MODEL token from the accessor.

    The prefix names the model the accessor wraps, so only the segments
    after it are looked up. A prefix other than the context's expected
    prefix yields None.
    """

    resolver_name = "model"
    resolver_priority = PRIORITY_MODEL
    supported_types = frozenset({TokenType.MODEL})

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        if not self.prefix_matches(token, context):
            return None
        if not token.field_path:
            return None
        return self.navigate_path(token.field_path, context)
