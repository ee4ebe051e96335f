"""Template translation entry point."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Mapping
from typing import Any

from mustache_resolver.cache import Cache, NullCache
from mustache_resolver.compound import CompoundResolver
from mustache_resolver.constants import DEFAULT_CACHE_PREFIX
from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import (
    ResolutionError,
    SecurityError,
    UnresolvableError,
)
from mustache_resolver.logging import get_logger
from mustache_resolver.parser import MUSTACHE_PATTERN, MustacheParser
from mustache_resolver.pipeline import PipelineBuilder, ResolutionPipeline
from mustache_resolver.results import TranslationResult
from mustache_resolver.security import SecurityValidator
from mustache_resolver.tokens import Token
from mustache_resolver.values import to_display_string

__all__ = ["MustacheResolver"]

logger = get_logger(__name__)

_RECOVERABLE_ERRORS = (ResolutionError, UnresolvableError, SecurityError)


class MustacheResolver:
    """Translates templates by resolving every ``{{...}}`` placeholder.

    In strict mode the first token that fails to resolve produces a failed
    result. In non-strict mode failures become warnings and the placeholder
    is replaced with an empty string, or kept verbatim when
    ``keep_unresolved`` is set; the result is always a success. A token that
    resolves to None is not a failure and renders as an empty string.

    Args:
        parser: Template parser; a default one is created when omitted.
        pipeline: Resolver chain; the default pipeline when omitted.
        cache: Cache for parsed token lists; caching is off when omitted.
        strict: Default mode for ``translate``.
        keep_unresolved: Keep failed placeholders in non-strict mode.
        security: Validator applied when wrapping pydantic models.
        cache_ttl: Lifetime of cached token lists in seconds.
        cache_prefix: Prefix for cache keys.

    Example:
        >>> resolver = MustacheResolver()
        >>> resolver.translate("Hi {{User.name}}", {"name": "Ann"}).translated
        'Hi Ann'
    """

    def __init__(
        self,
        parser: MustacheParser | None = None,
        pipeline: ResolutionPipeline | None = None,
        cache: Cache | None = None,
        *,
        strict: bool = True,
        keep_unresolved: bool = False,
        security: SecurityValidator | None = None,
        cache_ttl: int | None = None,
        cache_prefix: str = DEFAULT_CACHE_PREFIX,
    ) -> None:
        self.parser = parser or MustacheParser()
        self.pipeline = pipeline or PipelineBuilder.create().build()
        self.cache = cache or NullCache()
        self.strict = strict
        self.keep_unresolved = keep_unresolved
        self.security = security
        self.cache_ttl = cache_ttl
        self.cache_prefix = cache_prefix
        self.compound = CompoundResolver(self.pipeline)

    def translate(
        self,
        template: str,
        data: Any = None,
        variables: Mapping[str, Any] | None = None,
        strict: bool | None = None,
    ) -> TranslationResult:
        """Resolve every placeholder in ``template`` against ``data``.

        Args:
            template: Text containing ``{{...}}`` placeholders.
            data: A ``ResolutionContext``, a ``DataAccessor``, a mapping, a
                pydantic model or any other object.
            variables: Values for ``$name`` tokens.
            strict: Overrides the resolver's default mode.

        Raises:
            InvalidSyntaxError: If the template's placeholders are malformed.
        """
        strict = self.strict if strict is None else strict
        self.parser.validate(template)
        if not self.parser.has_mustaches(template):
            return TranslationResult.succeeded(template, template)

        context = self._create_context(data, variables, strict)
        tokens = self._parse_cached(template)
        rendered: dict[str, str] = {}
        resolved: dict[str, Any] = {}
        warnings: list[str] = []

        for token in tokens:
            try:
                value = self.pipeline.resolve(token, context)
            except _RECOVERABLE_ERRORS as e:
                if strict:
                    logger.debug("translation_failed", token=token.raw, error=e.message)
                    return TranslationResult.failed(template, [token.raw], [e.message])
                logger.warning(
                    "token_resolution_failed", token=token.raw, error=e.message
                )
                warnings.append(e.message)
                if not self.keep_unresolved:
                    rendered[token.raw] = ""
                continue

            rendered[token.raw] = to_display_string(value)
            resolved[token.raw] = value

        translated = MUSTACHE_PATTERN.sub(
            lambda match: rendered.get(match.group(1).strip(), match.group(0)),
            template,
        )
        return TranslationResult.succeeded(
            template, translated, tokens, resolved, warnings
        )

    def translate_batch(
        self,
        templates: Iterable[str],
        data: Any = None,
        variables: Mapping[str, Any] | None = None,
        strict: bool | None = None,
    ) -> list[TranslationResult]:
        return [
            self.translate(template, data, variables, strict) for template in templates
        ]

    def has_mustaches(self, template: str) -> bool:
        return self.parser.has_mustaches(template)

    def parse(self, template: str) -> list[Token]:
        return self.parser.parse(template)

    def resolve_compound(
        self,
        template: str,
        data: Any = None,
        variables: Mapping[str, Any] | None = None,
    ) -> str:
        """Resolve a ``USE ... && ...`` template to its statement.

        Raises:
            InvalidUseSyntaxError: If the template is malformed.
            VariableNotResolvedError: If a declared variable has no value.
            ConditionNotMetError: If a variable fails its condition.
        """
        context = self._create_context(data, variables, True)
        return self.compound.resolve(template, context)

    def try_resolve_compound(
        self,
        template: str,
        data: Any = None,
        variables: Mapping[str, Any] | None = None,
    ) -> str | None:
        """Like ``resolve_compound`` but None when a condition is not met."""
        context = self._create_context(data, variables, True)
        return self.compound.try_resolve(template, context)

    def _create_context(
        self,
        data: Any,
        variables: Mapping[str, Any] | None,
        strict: bool,
    ) -> ResolutionContext:
        if isinstance(data, ResolutionContext):
            context = data
        else:
            context = ResolutionContext.from_data(data, self.security).with_strict(
                strict
            )
        if variables:
            context = context.with_variables(variables)
        return context

    def _parse_cached(self, template: str) -> list[Token]:
        key = self.cache_prefix + hashlib.sha256(template.encode()).hexdigest()
        tokens = self.cache.get(key)
        if tokens is None:
            tokens = self.parser.parse(template)
            self.cache.set(key, tokens, self.cache_ttl)
        return tokens
