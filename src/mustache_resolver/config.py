from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from mustache_resolver.constants import (
    DEFAULT_BLACKLISTED_ATTRIBUTES,
    DEFAULT_CACHE_PREFIX,
    DEFAULT_CACHE_TTL,
    DEFAULT_MAX_DEPTH,
)
from mustache_resolver.exceptions import ConfigError
from mustache_resolver.logging import get_logger

__all__ = [
    "MustacheConfig",
    "CacheConfig",
    "SecurityConfig",
    "PROJECT_CONFIG_FILENAME",
    "load_config",
    "get_user_config_path",
    "get_project_config_path",
]

logger = get_logger(__name__)

PROJECT_CONFIG_FILENAME = "mustache-resolver.yaml"


class CacheConfig(BaseModel):
    """Settings for caching parsed templates.

    Attributes:
        enabled: Cache token lists per template (default: False).
        ttl: Seconds a cached entry lives (default: 3600).
        prefix: Prefix for cache keys.
    """

    enabled: bool = False
    ttl: int = Field(default=DEFAULT_CACHE_TTL, ge=0)
    prefix: str = DEFAULT_CACHE_PREFIX


class SecurityConfig(BaseModel):
    """Settings for data-access restrictions.

    Attributes:
        allowed_models: Model class names (qualified or short) that may be
            read. Empty allows every model.
        allowed_tables: Table names that may be read. Empty allows all.
        max_depth: Maximum number of path segments in a lookup.
        blacklisted_attributes: Attribute names that always read as absent.

    Example mustache-resolver.yaml:
        security:
          allowed_models: ["app.models.User"]
          max_depth: 5
          blacklisted_attributes: ["password", "ssn"]
    """

    allowed_models: list[str] = Field(default_factory=list)
    allowed_tables: list[str] = Field(default_factory=list)
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=100)
    blacklisted_attributes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BLACKLISTED_ATTRIBUTES)
    )


class YamlConfigSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from YAML files."""

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        yaml_file: Path | None = None,
    ):
        super().__init__(settings_cls)
        self.yaml_file = yaml_file
        self._config_data: dict[str, Any] = {}
        if yaml_file and yaml_file.exists():
            try:
                with open(yaml_file) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(
                    message=f"Invalid YAML in {yaml_file}: {e}",
                    field=None,
                    value=None,
                ) from e
            if loaded is None:
                logger.warning("config_file_empty", path=str(yaml_file))
            elif not isinstance(loaded, dict):
                raise ConfigError(
                    message=f"Config file {yaml_file} must contain a mapping",
                    field=None,
                    value=type(loaded).__name__,
                )
            else:
                self._config_data = loaded

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> tuple[Any, str, bool]:
        """Get value for a specific field from the YAML config."""
        if field_name in self._config_data:
            return self._config_data[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        """Return the complete config data."""
        return self._config_data


class MustacheConfig(BaseSettings):
    """Root configuration for building a resolver.

    Attributes:
        strict: Fail a translation on the first unresolvable token.
        keep_unresolved: In non-strict mode keep the original ``{{...}}``
            text instead of replacing it with an empty string.
        cache: Parsed-template cache settings.
        excluded_resolvers: Names of resolvers to leave out of the pipeline.
        resolvers: Dotted import paths of extra resolver classes.
        functions: Function name -> dotted import path of a callable.
        security: Data-access restrictions.
    """

    model_config = SettingsConfigDict(
        env_prefix="MUSTACHE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    strict: bool = True
    keep_unresolved: bool = False
    cache: CacheConfig = Field(default_factory=CacheConfig)
    excluded_resolvers: list[str] = Field(default_factory=list)
    resolvers: list[str] = Field(default_factory=list)
    functions: dict[str, str] = Field(default_factory=dict)
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    @field_validator("resolvers")
    @classmethod
    def check_import_paths(cls, v: list[str]) -> list[str]:
        for path in v:
            if "." not in path:
                raise ValueError(f"'{path}' is not a dotted import path")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the order of settings sources.

        Priority (highest to lowest):
        1. Environment variables (MUSTACHE_*)
        2. Init settings (an explicit config file passed to load_config)
        3. Project YAML config (./mustache-resolver.yaml)
        4. User YAML config (~/.config/mustache-resolver/config.yaml)
        5. Field defaults
        """
        return (
            env_settings,
            init_settings,
            YamlConfigSource(settings_cls, get_project_config_path()),
            YamlConfigSource(settings_cls, get_user_config_path()),
        )


def get_user_config_path() -> Path:
    """Get the path to the user configuration file.

    Returns:
        Path to ~/.config/mustache-resolver/config.yaml
    """
    return Path.home() / ".config" / "mustache-resolver" / "config.yaml"


def get_project_config_path() -> Path:
    return Path.cwd() / PROJECT_CONFIG_FILENAME


def load_config(config_path: Path | None = None) -> MustacheConfig:
    """Load configuration with hierarchy: defaults -> user -> project -> env.

    Args:
        config_path: Optional config file. Its values override
            ./mustache-resolver.yaml and the user config; keys it leaves
            unset still come from those files. Environment variables win
            over all files.

    Returns:
        MustacheConfig instance with merged configuration

    Raises:
        ConfigError: If a file is not valid YAML or a value is invalid
    """
    overrides: dict[str, Any] = {}
    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(
                message=f"Config file not found: {config_path}",
                field=None,
                value=str(config_path),
            )
        overrides = YamlConfigSource(MustacheConfig, config_path)()
    elif not get_project_config_path().exists():
        logger.debug("project_config_not_found", using="defaults")

    try:
        return MustacheConfig(**overrides)
    except ValidationError as e:
        first_error = e.errors()[0]
        field = ".".join(str(loc) for loc in first_error["loc"])
        raise ConfigError(
            message=f"Invalid configuration: {first_error['msg']}",
            field=field,
            value=first_error.get("input"),
        ) from e
