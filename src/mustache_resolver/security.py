"""Security policy applied by accessors and resolvers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mustache_resolver.constants import DEFAULT_MAX_DEPTH
from mustache_resolver.exceptions import (
    AttributeBlacklistedError,
    DepthExceededError,
    ModelNotAllowedError,
)

__all__ = ["SecurityValidator"]


def _short_name(class_name: str) -> str:
    return class_name.rsplit(".", 1)[-1]


@dataclass(frozen=True, slots=True)
class SecurityValidator:
    """Allow-list, deny-list and depth limit for data access.

    Attributes:
        allowed_models: Model class names that may be accessed. Matched
            against the fully qualified or the short class name. Empty
            allows every model.
        blacklisted_attributes: Attribute names that may never be read.
            Checked against the first path segment only.
        max_depth: Maximum number of path segments.

    Example:
        >>> validator = SecurityValidator(allowed_models=("User",))
        >>> validator.validate_model("app.models.User")
    """

    allowed_models: tuple[str, ...] = ()
    blacklisted_attributes: tuple[str, ...] = ()
    max_depth: int = DEFAULT_MAX_DEPTH
    allowed_tables: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        allowed_models: Iterable[str] = (),
        blacklisted_attributes: Iterable[str] = (),
        max_depth: int = DEFAULT_MAX_DEPTH,
        allowed_tables: Iterable[str] = (),
    ) -> SecurityValidator:
        return cls(
            allowed_models=tuple(allowed_models),
            blacklisted_attributes=tuple(blacklisted_attributes),
            max_depth=max_depth,
            allowed_tables=tuple(allowed_tables),
        )

    def is_model_allowed(self, model_class: str) -> bool:
        if not self.allowed_models:
            return True
        return (
            model_class in self.allowed_models
            or _short_name(model_class) in self.allowed_models
        )

    def validate_model(self, model_class: str) -> None:
        """Raise ``ModelNotAllowedError`` unless the class is allowed."""
        if not self.is_model_allowed(model_class):
            raise ModelNotAllowedError(model_class, list(self.allowed_models))

    def is_table_allowed(self, table: str) -> bool:
        return not self.allowed_tables or table in self.allowed_tables

    def is_attribute_blacklisted(self, attribute: str) -> bool:
        return attribute in self.blacklisted_attributes

    def validate_attribute(self, attribute: str, path: str) -> None:
        if self.is_attribute_blacklisted(attribute):
            raise AttributeBlacklistedError(attribute, path)

    def is_depth_exceeded(self, depth: int) -> bool:
        return depth > self.max_depth

    def validate_depth(self, path: str) -> None:
        """Raise ``DepthExceededError`` when ``path`` has too many segments."""
        depth = len(path.split("."))
        if self.is_depth_exceeded(depth):
            raise DepthExceededError(path, depth, self.max_depth)
