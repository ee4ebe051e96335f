from __future__ import annotations

from typing import Any

from mustache_resolver.exceptions.base import MustacheError


class ConfigError(MustacheError):
    """Exception for configuration loading, parsing, and validation errors.

    Raised when configuration cannot be loaded, parsed, or validated. This
    includes YAML parsing failures, Pydantic validation errors, invalid
    environment variable values and import paths that cannot be loaded.

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional field name that caused the error (e.g., "security.max_depth").
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        raise ConfigError(
            "Invalid configuration value",
            field="security.max_depth",
            value=-1,
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)

    @classmethod
    def missing_resolver(cls, name: str) -> ConfigError:
        return cls(f"Resolver not found: {name}", field="resolvers", value=name)

    @classmethod
    def invalid_import(cls, field: str, path: str, reason: str) -> ConfigError:
        return cls(
            f"Cannot import '{path}' configured in {field}: {reason}",
            field=field,
            value=path,
        )
