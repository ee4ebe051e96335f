"""Value formatters behind a closed allow-list."""

from __future__ import annotations

from mustache_resolver.formatters.base import Formatter
from mustache_resolver.formatters.builtins import BUILTIN_FORMATTERS
from mustache_resolver.formatters.registry import ALLOWED_FORMATTERS, FormatterRegistry

__all__ = [
    "ALLOWED_FORMATTERS",
    "BUILTIN_FORMATTERS",
    "Formatter",
    "FormatterRegistry",
]
