"""Builds ready-to-use resolvers from ``MustacheConfig``.

Example:
    ```python
    from mustache_resolver.config import load_config
    from mustache_resolver.factory import create_resolver

    resolver = create_resolver(load_config())
    result = resolver.translate("{{User.name}}", user)
    ```
"""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable
from typing import Any

from mustache_resolver.cache import Cache, MemoryCache, NullCache
from mustache_resolver.config import MustacheConfig
from mustache_resolver.exceptions import ConfigError
from mustache_resolver.formatters import FormatterRegistry
from mustache_resolver.logging import get_logger
from mustache_resolver.parser import MustacheParser
from mustache_resolver.pipeline import PipelineBuilder, ResolutionPipeline
from mustache_resolver.resolvers import FunctionResolver, MathResolver, Resolver
from mustache_resolver.security import SecurityValidator
from mustache_resolver.temporal import ConditionRegistry
from mustache_resolver.translator import MustacheResolver

__all__ = [
    "create_cache",
    "create_pipeline",
    "create_resolver",
    "create_security",
    "import_object",
]

logger = get_logger(__name__)


def import_object(path: str, field: str) -> Any:
    """Import ``package.module.Name``.

    Raises:
        ConfigError: If the module or attribute cannot be loaded.
    """
    module_name, _, attribute = path.rpartition(".")
    if not module_name:
        raise ConfigError.invalid_import(field, path, "not a dotted path")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError.invalid_import(field, path, str(e)) from e
    try:
        return getattr(module, attribute)
    except AttributeError as e:
        raise ConfigError.invalid_import(
            field, path, f"module has no attribute '{attribute}'"
        ) from e


def create_cache(config: MustacheConfig) -> Cache:
    if not config.cache.enabled:
        return NullCache()
    return MemoryCache(default_ttl=config.cache.ttl)


def create_security(config: MustacheConfig) -> SecurityValidator:
    return SecurityValidator.create(
        allowed_models=config.security.allowed_models,
        blacklisted_attributes=config.security.blacklisted_attributes,
        max_depth=config.security.max_depth,
        allowed_tables=config.security.allowed_tables,
    )


def _load_functions(config: MustacheConfig) -> dict[str, Callable[..., Any]]:
    functions: dict[str, Callable[..., Any]] = {}
    for name, path in config.functions.items():
        function = import_object(path, f"functions.{name}")
        if not callable(function):
            raise ConfigError.invalid_import(
                f"functions.{name}", path, "object is not callable"
            )
        functions[name] = function
    return functions


def _load_resolvers(config: MustacheConfig) -> list[Resolver]:
    resolvers: list[Resolver] = []
    for path in config.resolvers:
        resolver_class = import_object(path, "resolvers")
        resolver = resolver_class()
        if not isinstance(resolver, Resolver):
            raise ConfigError.invalid_import(
                "resolvers", path, "class does not implement the Resolver protocol"
            )
        resolvers.append(resolver)
    return resolvers


def create_pipeline(
    config: MustacheConfig,
    extra_resolvers: Iterable[Resolver] = (),
    registry: ConditionRegistry | None = None,
) -> ResolutionPipeline:
    """Build the pipeline described by ``config``.

    The eight default resolvers are joined by the math and function
    resolvers, every configured resolver class and ``extra_resolvers``;
    ``excluded_resolvers`` then removes any of them by name.

    Raises:
        ConfigError: If a configured resolver or function cannot be imported.
    """
    builder = PipelineBuilder.create(registry, create_security(config))
    builder.with_defaults()
    builder.add_resolver(MathResolver())
    builder.add_resolver(
        FunctionResolver(_load_functions(config), FormatterRegistry.with_builtins())
    )
    for resolver in [*_load_resolvers(config), *extra_resolvers]:
        builder.add_resolver(resolver)
    builder.exclude(*config.excluded_resolvers)

    pipeline = builder.build()
    logger.debug("pipeline_built", resolvers=pipeline.resolver_names)
    return pipeline


def create_resolver(
    config: MustacheConfig | None = None,
    extra_resolvers: Iterable[Resolver] = (),
    registry: ConditionRegistry | None = None,
) -> MustacheResolver:
    """Build a ``MustacheResolver`` from ``config`` (defaults when omitted)."""
    config = config or MustacheConfig()
    return MustacheResolver(
        MustacheParser(),
        create_pipeline(config, extra_resolvers, registry),
        create_cache(config),
        strict=config.strict,
        keep_unresolved=config.keep_unresolved,
        security=create_security(config),
        cache_ttl=config.cache.ttl,
        cache_prefix=config.cache.prefix,
    )
