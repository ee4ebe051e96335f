"""Resolution engine for ``{{mustache}}`` templates.

Placeholders reference structured data (``{{User.name}}``), variables
(``{{$count}}``), functions and formatters (``{{uppercase(User.name)}}``),
arithmetic (``{{2 + 3}}``) and time-based conditions
(``{{TEMPORAL:isDue(weekday && 08:00-18:00)}}``). Compound templates
(``USE {p} => {{Device.power}} > 0 && SET {p}``) bind checked values into a
statement.

Example:
    ```python
    from mustache_resolver import MustacheResolver

    resolver = MustacheResolver()
    result = resolver.translate("Hi {{User.name}}", {"name": "Ann"})
    assert result.translated == "Hi Ann"
    ```
"""

from __future__ import annotations

from mustache_resolver.compound import CompoundResolver
from mustache_resolver.config import MustacheConfig, load_config
from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import (
    ConditionNotMetError,
    InvalidSyntaxError,
    InvalidUseSyntaxError,
    MustacheError,
    ResolutionError,
    SecurityError,
    UnresolvableError,
    VariableNotResolvedError,
)
from mustache_resolver.factory import create_resolver
from mustache_resolver.parser import MustacheParser
from mustache_resolver.pipeline import PipelineBuilder, ResolutionPipeline
from mustache_resolver.results import TranslationResult
from mustache_resolver.security import SecurityValidator
from mustache_resolver.temporal import (
    ConditionRegistry,
    TemporalExpression,
    get_registry,
    reset_registry,
)
from mustache_resolver.tokens import Token, TokenType
from mustache_resolver.translator import MustacheResolver

__version__ = "0.4.0"

__all__ = [
    "CompoundResolver",
    "ConditionNotMetError",
    "ConditionRegistry",
    "InvalidSyntaxError",
    "InvalidUseSyntaxError",
    "MustacheConfig",
    "MustacheError",
    "MustacheParser",
    "MustacheResolver",
    "PipelineBuilder",
    "ResolutionContext",
    "ResolutionError",
    "ResolutionPipeline",
    "SecurityError",
    "SecurityValidator",
    "TemporalExpression",
    "Token",
    "TokenType",
    "TranslationResult",
    "UnresolvableError",
    "VariableNotResolvedError",
    "__version__",
    "create_resolver",
    "get_registry",
    "load_config",
    "reset_registry",
]
