"""Accessor over arbitrary Python objects."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from mustache_resolver.accessors.base import data_get
from mustache_resolver.accessors.lookup import OBJECT_ORDER

__all__ = ["ObjectAccessor"]


class ObjectAccessor:
    """Dot-path access over an object graph.

    Each segment is read as a key, an index, a public attribute, a
    ``get<Segment>()`` getter and finally through ``__getitem__``.
    """

    __slots__ = ("_object",)

    def __init__(self, obj: Any) -> None:
        self._object = obj

    def get(self, path: str) -> Any:
        return data_get(self._object, path, OBJECT_ORDER)

    def has(self, path: str) -> bool:
        return self.get(path) is not None

    def keys(self) -> list[str]:
        obj = self._object
        to_dict = getattr(obj, "to_dict", None)
        if callable(to_dict):
            return [str(key) for key in to_dict()]
        if isinstance(obj, Mapping):
            return [str(key) for key in obj]
        if dataclasses.is_dataclass(obj):
            return [f.name for f in dataclasses.fields(obj)]
        return [key for key in getattr(obj, "__dict__", {}) if not key.startswith("_")]

    def source_type(self) -> str:
        return "object"

    def raw(self) -> Any:
        return self._object
