"""``table.column`` resolution."""

from __future__ import annotations

from typing import Any

from mustache_resolver.constants import PRIORITY_TABLE
from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import SecurityError
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.security import SecurityValidator
from mustache_resolver.tokens import Token, TokenType

__all__ = ["TableResolver"]


class TableResolver(BaseResolver):
    """Reads the full path of a TABLE token, prefix included.

    The prefix is the top-level key holding the table's data. Expected
    prefixes are ignored. With a security validator, tables outside its
    ``allowed_tables`` are rejected.
    """

    resolver_name = "table"
    resolver_priority = PRIORITY_TABLE
    supported_types = frozenset({TokenType.TABLE})

    def __init__(self, security: SecurityValidator | None = None) -> None:
        self.security = security

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        if not token.field_path:
            return None
        if self.security is not None and not self.security.is_table_allowed(
            token.prefix
        ):
            raise SecurityError.restricted_path(token.raw)
        return self.navigate_path(token.path, context)
