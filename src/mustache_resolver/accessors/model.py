"""Accessor over pydantic models, guarded by the security policy."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from mustache_resolver.accessors.base import data_get
from mustache_resolver.logging import get_logger
from mustache_resolver.security import SecurityValidator

__all__ = ["ModelAccessor"]

logger = get_logger(__name__)


def _class_path(model: BaseModel) -> str:
    cls = type(model)
    return f"{cls.__module__}.{cls.__qualname__}"


class ModelAccessor:
    """Dot-path access over a pydantic model and its nested models.

    Construction checks the model class against the allow-list. Reads whose
    first segment is blacklisted yield None, and paths deeper than the
    configured maximum raise ``DepthExceededError``.

    Args:
        model: The model instance to read from.
        security: Security policy. Defaults to an unrestricted validator.

    Raises:
        ModelNotAllowedError: If the model class is not allowed.
    """

    __slots__ = ("_model", "_security")

    def __init__(
        self,
        model: BaseModel,
        security: SecurityValidator | None = None,
    ) -> None:
        self._model = model
        self._security = security or SecurityValidator()
        self._security.validate_model(_class_path(model))

    @property
    def model_class(self) -> str:
        return _class_path(self._model)

    @property
    def model_name(self) -> str:
        return type(self._model).__name__

    def get(self, path: str) -> Any:
        first = path.split(".", 1)[0]
        if self._security.is_attribute_blacklisted(first):
            logger.debug("blacklisted_attribute_skipped", attribute=first)
            return None
        self._security.validate_depth(path)
        return data_get(self._model, path)

    def has(self, path: str) -> bool:
        return self.get(path) is not None

    def keys(self) -> list[str]:
        keys = list(type(self._model).model_fields)
        keys.extend(self._model.model_extra or {})
        return [key for key in keys if not self._security.is_attribute_blacklisted(key)]

    def source_type(self) -> str:
        return "model"

    def raw(self) -> BaseModel:
        return self._model
