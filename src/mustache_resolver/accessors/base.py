"""DataAccessor protocol and dot-path lookup."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from mustache_resolver.accessors.lookup import (
    DATA_GET_ORDER,
    MISSING,
    LookupStrategy,
    lookup,
)

__all__ = ["DataAccessor", "data_get"]


@runtime_checkable
class DataAccessor(Protocol):
    """Read-only view over the data a template is resolved against.

    Every implementation walks dot paths segment by segment and yields
    ``None`` as soon as one hop is missing.
    """

    def get(self, path: str) -> Any:
        """Return the value at ``path`` or None."""
        ...

    def has(self, path: str) -> bool:
        """True when ``path`` resolves to a non-None value."""
        ...

    def keys(self) -> list[str]:
        """Top-level keys of the source."""
        ...

    def source_type(self) -> str:
        """Short name of the kind of source (``array``, ``object``, ...)."""
        ...

    def raw(self) -> Any:
        """The wrapped data, unchanged."""
        ...


def data_get(
    target: Any,
    path: str,
    order: Sequence[LookupStrategy] = DATA_GET_ORDER,
) -> Any:
    """Resolve a dot path over nested mappings, sequences and objects.

    Args:
        target: Root value.
        path: Dot-separated segments. Numeric segments index sequences.
        order: Lookup strategies tried for every segment.

    Returns:
        The value found, or None when any hop is missing.

    Example:
        >>> data_get({"users": [{"name": "Ann"}]}, "users.0.name")
        'Ann'
        >>> data_get({"users": []}, "users.0.name") is None
        True
    """
    current = target
    for segment in path.split("."):
        current = lookup(current, segment, order)
        if current is MISSING:
            return None
    return current
