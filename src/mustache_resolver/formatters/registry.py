"""Closed registry of value formatters."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mustache_resolver.exceptions import FormatterError
from mustache_resolver.formatters.base import Formatter
from mustache_resolver.formatters.builtins import BUILTIN_FORMATTERS

__all__ = ["ALLOWED_FORMATTERS", "FormatterRegistry"]

#: The only names a formatter may be registered under
ALLOWED_FORMATTERS: tuple[str, ...] = (
    "toTimeString",
    "toDateString",
    "toDateTime",
    "toUnixTime",
    "toIso8601",
    "formatDate",
    "toInt",
    "toFloat",
    "toCents",
    "fromCents",
    "round",
    "floor",
    "ceil",
    "number",
    "percent",
    "abs",
    "uppercase",
    "lowercase",
    "trim",
    "substr",
    "replace",
    "concat",
    "slug",
    "camel",
    "snake",
    "title",
)


class FormatterRegistry:
    """Formatters keyed by name, restricted to ``ALLOWED_FORMATTERS``.

    Example:
        >>> registry = FormatterRegistry.with_builtins()
        >>> registry.apply("number", 1234.567)
        '1,234.57'
    """

    def __init__(self) -> None:
        self._formatters: dict[str, Formatter] = {}

    @classmethod
    def with_builtins(cls) -> FormatterRegistry:
        registry = cls()
        for formatter_class in BUILTIN_FORMATTERS:
            registry.register(formatter_class())
        return registry

    def register(self, formatter: Formatter) -> FormatterRegistry:
        """Register ``formatter`` under its name.

        Raises:
            FormatterError: If the name is not on the allow-list.
        """
        if not self.is_allowed(formatter.name):
            raise FormatterError.not_allowed(formatter.name, list(ALLOWED_FORMATTERS))
        self._formatters[formatter.name] = formatter
        return self

    def is_allowed(self, name: str) -> bool:
        return name in ALLOWED_FORMATTERS

    def has(self, name: str) -> bool:
        return name in self._formatters

    def get(self, name: str) -> Formatter:
        formatter = self._formatters.get(name)
        if formatter is None:
            if not self.is_allowed(name):
                raise FormatterError.not_allowed(name, list(ALLOWED_FORMATTERS))
            raise FormatterError.not_registered(name)
        return formatter

    def apply(self, name: str, value: Any, args: Sequence[Any] = ()) -> Any:
        """Format ``value`` with the formatter called ``name``.

        Raises:
            FormatterError: If the formatter is unknown, rejects the value's
                type, or fails while formatting.
        """
        formatter = self.get(name)
        if not formatter.supports(value):
            raise FormatterError.unsupported_type(name, type(value).__name__)
        try:
            return formatter.format(value, args)
        except FormatterError:
            raise
        except (ArithmeticError, TypeError, ValueError) as e:
            raise FormatterError.formatting_failed(name, str(e)) from e

    def registered_names(self) -> list[str]:
        return list(self._formatters)

    def allowed_names(self) -> list[str]:
        return list(ALLOWED_FORMATTERS)

    def __len__(self) -> int:
        return len(self._formatters)
