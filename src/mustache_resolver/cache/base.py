"""Cache protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["Cache"]


@runtime_checkable
class Cache(Protocol):
    """Key/value store with optional per-entry expiry in seconds."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def has(self, key: str) -> bool: ...

    def set(self, key: str, value: Any, ttl: int | None = None) -> None: ...

    def forget(self, key: str) -> None: ...

    def flush(self) -> None: ...
