"""mustache-resolver exception hierarchy.

All exceptions can be imported from this package:
    from mustache_resolver.exceptions import InvalidSyntaxError, ResolutionError
"""

from __future__ import annotations

from mustache_resolver.exceptions.base import MustacheError
from mustache_resolver.exceptions.config import ConfigError
from mustache_resolver.exceptions.parse import (
    InvalidSyntaxError,
    InvalidUseSyntaxError,
    ParseError,
)
from mustache_resolver.exceptions.resolution import (
    ConditionNotMetError,
    FormatterError,
    ResolutionError,
    UnresolvableError,
    VariableNotResolvedError,
)
from mustache_resolver.exceptions.security import (
    AttributeBlacklistedError,
    DepthExceededError,
    MathExpressionError,
    ModelNotAllowedError,
    SecurityError,
)

__all__ = [
    # Base
    "MustacheError",
    # Configuration
    "ConfigError",
    # Parsing
    "ParseError",
    "InvalidSyntaxError",
    "InvalidUseSyntaxError",
    # Resolution
    "ResolutionError",
    "UnresolvableError",
    "ConditionNotMetError",
    "VariableNotResolvedError",
    "FormatterError",
    # Security
    "SecurityError",
    "ModelNotAllowedError",
    "AttributeBlacklistedError",
    "DepthExceededError",
    "MathExpressionError",
]
