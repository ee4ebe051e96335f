"""Resolver protocol and shared base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar, Protocol, runtime_checkable

from mustache_resolver.context import ResolutionContext
from mustache_resolver.tokens import Token, TokenType

__all__ = ["BaseResolver", "Resolver"]


@runtime_checkable
class Resolver(Protocol):
    """Strategy that turns a token into a value.

    ``supports`` decides by token type alone. Once a resolver claims a
    token its result is final, even when it is None.
    """

    @property
    def name(self) -> str:
        """Stable identifier used by exclusion lists."""
        ...

    @property
    def priority(self) -> int:
        """Higher priorities are tried first."""
        ...

    def supports(self, token: Token, context: ResolutionContext) -> bool: ...

    def resolve(self, token: Token, context: ResolutionContext) -> Any: ...


class BaseResolver(ABC):
    """Base for resolvers that claim a fixed set of token types.

    Subclasses set ``resolver_name``, ``resolver_priority`` and
    ``supported_types`` and implement ``resolve``.
    """

    resolver_name: ClassVar[str]
    resolver_priority: ClassVar[int] = 50
    supported_types: ClassVar[frozenset[TokenType]] = frozenset()

    @property
    def name(self) -> str:
        return self.resolver_name

    @property
    def priority(self) -> int:
        return self.resolver_priority

    def supports(self, token: Token, context: ResolutionContext) -> bool:
        return token.type in self.supported_types

    @abstractmethod
    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        """Return the token's value, or None when it is absent."""
        ...

    def navigate_path(self, path: Sequence[str], context: ResolutionContext) -> Any:
        return context.accessor.get(".".join(path))

    def prefix_matches(self, token: Token, context: ResolutionContext) -> bool:
        expected = context.expected_prefix
        return expected is None or token.prefix == expected

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"
