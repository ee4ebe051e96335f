"""In-process cache with TTL expiry."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = ["MemoryCache"]


@dataclass(slots=True)
class _Entry:
    value: Any
    expires_at: float | None

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class MemoryCache:
    """Thread-safe dict-backed cache.

    Expired entries are dropped when they are next read. A ``ttl`` of None
    (the default unless ``default_ttl`` is given) never expires.

    Args:
        default_ttl: Seconds applied when ``set`` is called without a ttl.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        default_ttl: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.RLock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            entry = self._live_entry(key)
            return default if entry is None else entry.value

    def has(self, key: str) -> bool:
        with self._lock:
            return self._live_entry(key) is not None

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        ttl = self._default_ttl if ttl is None else ttl
        expires_at = None if ttl is None else self._clock() + ttl
        with self._lock:
            self._entries[key] = _Entry(value, expires_at)

    def forget(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def flush(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            return sum(1 for e in self._entries.values() if not e.is_expired(now))

    def _live_entry(self, key: str) -> _Entry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            return None
        return entry
