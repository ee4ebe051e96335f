"""``Model.$indicator`` resolution."""

from __future__ import annotations

from typing import Any

from mustache_resolver.constants import DYNAMIC_MARKER, PRIORITY_DYNAMIC
from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import ResolutionError
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.tokens import Token, TokenType

__all__ = ["DynamicFieldResolver"]


class DynamicFieldResolver(BaseResolver):
    """Resolves a field whose name is itself stored in the data.

    For ``Device.$field_name`` the value at ``field_name`` names the field
    to read, and that field is read from the top level of the accessor.

    Example:
        With data ``{"field_name": "voltage", "voltage": 230}`` the token
        ``Device.$field_name`` resolves to ``230``.
    """

    resolver_name = "dynamic"
    resolver_priority = PRIORITY_DYNAMIC
    supported_types = frozenset({TokenType.DYNAMIC})

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        path = token.field_path
        index = next(
            (i for i, segment in enumerate(path) if segment.startswith(DYNAMIC_MARKER)),
            None,
        )
        if index is None:
            return None

        indicator_path = [path[index][len(DYNAMIC_MARKER) :], *path[index + 1 :]]
        field_name = self.navigate_path(indicator_path, context)
        if field_name is None:
            return None
        if not isinstance(field_name, str):
            raise ResolutionError.for_token(
                token,
                "Dynamic field indicator must resolve to string, "
                f"got: {type(field_name).__name__}",
            )
        return context.accessor.get(field_name)
