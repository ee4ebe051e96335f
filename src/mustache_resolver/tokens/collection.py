"""Immutable ordered collection of tokens."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from mustache_resolver.tokens.token import Token
from mustache_resolver.tokens.types import TokenType

__all__ = ["TokenCollection"]


class TokenCollection:
    """Ordered, read-only group of tokens parsed from one template.

    Examples:
        >>> tokens = TokenCollection([Token.from_string("User.name")])
        >>> tokens.unique_prefixes()
        ['User']
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)

    def add(self, token: Token) -> TokenCollection:
        """Return a new collection with ``token`` appended."""
        return TokenCollection((*self._tokens, token))

    def of_type(self, token_type: TokenType) -> TokenCollection:
        return TokenCollection(t for t in self._tokens if t.type is token_type)

    def of_types(self, *token_types: TokenType) -> TokenCollection:
        wanted = set(token_types)
        return TokenCollection(t for t in self._tokens if t.type in wanted)

    def requiring_accessor(self) -> TokenCollection:
        return TokenCollection(t for t in self._tokens if t.type.requires_accessor)

    def unique_prefixes(self) -> list[str]:
        """Distinct non-empty prefixes in first-seen order."""
        seen: dict[str, None] = {}
        for token in self._tokens:
            if token.prefix:
                seen.setdefault(token.prefix, None)
        return list(seen)

    def has_dynamic(self) -> bool:
        return any(t.is_dynamic for t in self._tokens)

    def raw_strings(self) -> list[str]:
        return [t.raw for t in self._tokens]

    def full_strings(self) -> list[str]:
        return [t.full for t in self._tokens]

    def first(self) -> Token | None:
        return self._tokens[0] if self._tokens else None

    def last(self) -> Token | None:
        return self._tokens[-1] if self._tokens else None

    def map(self, fn: Callable[[Token], Any]) -> list[Any]:
        return [fn(t) for t in self._tokens]

    def is_empty(self) -> bool:
        return not self._tokens

    def to_list(self) -> list[Token]:
        return list(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenCollection):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"TokenCollection({list(self._tokens)!r})"
