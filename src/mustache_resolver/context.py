"""Immutable resolution context."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import BaseModel

from mustache_resolver.accessors import (
    DataAccessor,
    MappingAccessor,
    ModelAccessor,
    ObjectAccessor,
)
from mustache_resolver.security import SecurityValidator

__all__ = ["ResolutionContext"]


@dataclass(frozen=True, slots=True)
class ResolutionContext:
    """Data source, variables and mode flags for one resolution.

    Variables shadow accessor data: ``get`` and ``has`` check them first.
    All ``with_*`` methods return a new context and leave this one intact.

    Attributes:
        accessor: Data source for path-based tokens.
        variables: Named values for ``$name`` tokens.
        strict: Whether resolution failures abort a translation.
        expected_prefix: When set, model, relation and collection tokens
            must use this prefix to resolve.
        config: Free-form settings for custom resolvers.

    Example:
        >>> ctx = ResolutionContext.from_mapping({"name": "Ann"})
        >>> ctx.with_variable("name", "Bob").get("name")
        'Bob'
    """

    accessor: DataAccessor
    variables: dict[str, Any] = field(default_factory=dict)
    strict: bool = True
    expected_prefix: str | None = None
    config: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(cls, accessor: DataAccessor) -> ResolutionContext:
        return cls(accessor=accessor)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ResolutionContext:
        return cls(accessor=MappingAccessor(data))

    @classmethod
    def from_model(
        cls,
        model: BaseModel,
        security: SecurityValidator | None = None,
    ) -> ResolutionContext:
        return cls(accessor=ModelAccessor(model, security))

    @classmethod
    def from_data(
        cls,
        data: Any,
        security: SecurityValidator | None = None,
    ) -> ResolutionContext:
        """Build a context from whatever the caller hands over.

        Contexts pass through unchanged, accessors are wrapped directly,
        mappings get a ``MappingAccessor``, pydantic models a
        ``ModelAccessor`` and any other object an ``ObjectAccessor``.
        """
        if isinstance(data, ResolutionContext):
            return data
        if isinstance(data, DataAccessor):
            return cls(accessor=data)
        if data is None:
            return cls(accessor=MappingAccessor({}))
        if isinstance(data, Mapping):
            return cls.from_mapping(data)
        if isinstance(data, BaseModel):
            return cls.from_model(data, security)
        return cls(accessor=ObjectAccessor(data))

    def get(self, key: str) -> Any:
        if key in self.variables:
            return self.variables[key]
        return self.accessor.get(key)

    def has(self, key: str) -> bool:
        return key in self.variables or self.accessor.has(key)

    def with_variable(self, key: str, value: Any) -> ResolutionContext:
        return replace(self, variables={**self.variables, key: value})

    def with_variables(self, variables: Mapping[str, Any]) -> ResolutionContext:
        return replace(self, variables={**self.variables, **variables})

    def with_accessor(self, accessor: DataAccessor) -> ResolutionContext:
        return replace(self, accessor=accessor)

    def with_strict(self, strict: bool) -> ResolutionContext:
        return replace(self, strict=strict)

    def with_prefix(self, prefix: str | None) -> ResolutionContext:
        return replace(self, expected_prefix=prefix)

    def with_config(self, config: Mapping[str, Any]) -> ResolutionContext:
        return replace(self, config={**self.config, **config})

    def config_value(self, key: str, default: Any = None) -> Any:
        value = self.config.get(key)
        return default if value is None else value
