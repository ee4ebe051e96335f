"""Named function and formatter calls."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from mustache_resolver.constants import PRIORITY_FUNCTION
from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import SecurityError
from mustache_resolver.formatters import FormatterRegistry
from mustache_resolver.logging import get_logger
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.tokens import (
    Token,
    TokenClassifier,
    TokenType,
    is_reference_arg,
)

__all__ = ["FunctionResolver"]

logger = get_logger(__name__)


class FunctionResolver(BaseResolver):
    """Resolves ``name(arg, ...)`` tokens.

    Unquoted arguments that are not literals are references: ``$name``
    reads a context variable, a nested call is resolved recursively and
    anything else is looked up as a dot path. The call then goes to a
    registered custom function, or to the formatter of the same name with
    the first argument as its input. Other names are rejected.

    Args:
        functions: Custom callables by name, called with the resolved args.
        formatters: Registry consulted when no custom function matches.

    Example:
        With data ``{"user": {"name": "ann"}}`` the token
        ``uppercase(user.name)`` resolves to ``"ANN"``.
    """

    resolver_name = "function"
    resolver_priority = PRIORITY_FUNCTION
    supported_types = frozenset({TokenType.FUNCTION})

    def __init__(
        self,
        functions: Mapping[str, Callable[..., Any]] | None = None,
        formatters: FormatterRegistry | None = None,
    ) -> None:
        self._functions: dict[str, Callable[..., Any]] = dict(functions or {})
        self.formatters = formatters or FormatterRegistry.with_builtins()
        self._classifier = TokenClassifier()

    def register_function(
        self, name: str, function: Callable[..., Any]
    ) -> FunctionResolver:
        self._functions[name] = function
        return self

    def has_function(self, name: str) -> bool:
        return name in self._functions or self.formatters.has(name)

    @property
    def function_names(self) -> list[str]:
        return list(self._functions)

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        name = token.function_name or ""
        args = self._resolve_args(token, context)

        function = self._functions.get(name)
        if function is not None:
            logger.debug("function_called", function=name, arg_count=len(args))
            return function(*args)
        if self.formatters.has(name):
            value = args[0] if args else None
            return self.formatters.apply(name, value, args[1:])
        raise SecurityError.unregistered_function(name)

    def _resolve_args(self, token: Token, context: ResolutionContext) -> list[Any]:
        raw_args = token.metadata.get("raw_args", ())
        resolved = list(token.function_args)
        for index, raw in enumerate(raw_args):
            if index < len(resolved) and is_reference_arg(raw):
                resolved[index] = self._resolve_reference(raw, context)
        return resolved

    def _resolve_reference(self, reference: str, context: ResolutionContext) -> Any:
        nested = self._classifier.classify(reference)
        if nested.type is TokenType.FUNCTION:
            return self.resolve(nested, context)
        if nested.type is TokenType.VARIABLE:
            return context.variables.get(nested.path[0])
        return context.get(reference)
