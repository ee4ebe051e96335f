"""Cache that stores nothing."""

from __future__ import annotations

from typing import Any

__all__ = ["NullCache"]


class NullCache:
    """Used when caching is disabled; every lookup misses."""

    def get(self, key: str, default: Any = None) -> Any:
        return default

    def has(self, key: str) -> bool:
        return False

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        return None

    def forget(self, key: str) -> None:
        return None

    def flush(self) -> None:
        return None
