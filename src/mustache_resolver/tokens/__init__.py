"""Token model: types, immutable tokens, classification and collections."""

from __future__ import annotations

from mustache_resolver.tokens.classifier import (
    TokenClassifier,
    is_reference_arg,
    parse_function_args,
    split_function_args,
    split_path,
)
from mustache_resolver.tokens.collection import TokenCollection
from mustache_resolver.tokens.token import Token
from mustache_resolver.tokens.types import TokenType

__all__ = [
    "Token",
    "TokenClassifier",
    "TokenCollection",
    "TokenType",
    "is_reference_arg",
    "parse_function_args",
    "split_function_args",
    "split_path",
]
