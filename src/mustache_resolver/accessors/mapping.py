"""Accessor over plain dicts and lists."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mustache_resolver.accessors.base import data_get

__all__ = ["MappingAccessor"]


class MappingAccessor:
    """Dot-path access over a mapping of nested dicts and lists.

    Example:
        >>> MappingAccessor({"User": {"name": "Ann"}}).get("User.name")
        'Ann'
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def get(self, path: str) -> Any:
        return data_get(self._data, path)

    def has(self, path: str) -> bool:
        return self.get(path) is not None

    def keys(self) -> list[str]:
        return [str(key) for key in self._data]

    def source_type(self) -> str:
        return "array"

    def raw(self) -> Mapping[str, Any]:
        return self._data

    def __repr__(self) -> str:
        return f"MappingAccessor(keys={self.keys()!r})"
