"""Immutable token produced by classifying a placeholder."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from mustache_resolver.tokens.types import TokenType


@dataclass(frozen=True, slots=True)
class Token:
    """Classified content of one ``{{...}}`` placeholder.

    Attributes:
        raw: Trimmed placeholder content, never including the braces.
        type: Classification of the content.
        path: Dot-separated path segments (empty for non-path tokens).
        function_name: Function name for FUNCTION and TEMPORAL tokens.
        function_args: Decoded function arguments.
        default_value: Fallback string for NULL_COALESCE tokens.
        metadata: Free-form details recorded by the classifier.

    Examples:
        >>> token = Token("User.name", TokenType.MODEL, ("User", "name"))
        >>> token.prefix
        'User'
        >>> token.field_path
        ('name',)
    """

    raw: str
    type: TokenType
    path: tuple[str, ...] = ()
    function_name: str | None = None
    function_args: tuple[Any, ...] = ()
    default_value: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_string(cls, raw: str) -> Token:
        """Classify raw placeholder content into a token."""
        from mustache_resolver.tokens.classifier import TokenClassifier

        return TokenClassifier().classify(raw)

    @property
    def full(self) -> str:
        """The placeholder as it appears in a template."""
        return "{{" + self.raw + "}}"

    @property
    def prefix(self) -> str:
        return self.path[0] if self.path else ""

    @property
    def field_path(self) -> tuple[str, ...]:
        return self.path[1:]

    @property
    def is_dynamic(self) -> bool:
        return any(segment.startswith("$") for segment in self.path)

    def with_type(self, token_type: TokenType) -> Token:
        return replace(self, type=token_type)

    def with_metadata(self, metadata: dict[str, Any]) -> Token:
        return replace(self, metadata={**self.metadata, **metadata})
