"""Single-segment lookup strategies shared by accessors and resolvers.

A segment is looked up on a value by trying an ordered list of strategies.
Each strategy either finds the segment or reports ``MISSING``; the first hit
wins. Plain dicts, sequences, dataclasses, pydantic models and arbitrary
objects all go through the same table.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, Final

__all__ = [
    "MISSING",
    "LookupStrategy",
    "DATA_GET_ORDER",
    "OBJECT_ORDER",
    "PROPERTY_ORDER",
    "lookup",
    "getter_name",
]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class LookupStrategy(str, Enum):
    """Ways a path segment can be read from a value."""

    KEY = "key"
    INDEX = "index"
    ATTRIBUTE = "attribute"
    GETTER = "getter"
    ITEM = "item"


def getter_name(segment: str) -> str:
    """``"name"`` -> ``"getName"``."""
    return "get" + segment[:1].upper() + segment[1:]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)


def _by_key(target: Any, segment: str) -> Any:
    if isinstance(target, Mapping) and segment in target:
        return target[segment]
    return MISSING


def _by_index(target: Any, segment: str) -> Any:
    if not _is_sequence(target) or not segment.isdigit():
        return MISSING
    index = int(segment)
    if index < len(target):
        return target[index]
    return MISSING


def _by_attribute(target: Any, segment: str) -> Any:
    if (
        segment.startswith("_")
        or isinstance(target, Mapping)
        or _is_sequence(target)
        or isinstance(target, str | bytes)
    ):
        return MISSING
    value = getattr(target, segment, MISSING)
    if inspect.isroutine(value):
        return MISSING
    return value


def _by_getter(target: Any, segment: str) -> Any:
    if not segment or isinstance(target, Mapping) or _is_sequence(target):
        return MISSING
    method = getattr(target, getter_name(segment), None)
    if method is None or not callable(method):
        return MISSING
    return method()


def _by_item(target: Any, segment: str) -> Any:
    if isinstance(target, str | bytes) or not hasattr(target, "__getitem__"):
        return MISSING
    try:
        return target[segment]
    except (KeyError, IndexError, TypeError):
        return MISSING


_STRATEGIES: dict[LookupStrategy, Callable[[Any, str], Any]] = {
    LookupStrategy.KEY: _by_key,
    LookupStrategy.INDEX: _by_index,
    LookupStrategy.ATTRIBUTE: _by_attribute,
    LookupStrategy.GETTER: _by_getter,
    LookupStrategy.ITEM: _by_item,
}

#: Plain dot-path lookup over mappings, sequences and attributes
DATA_GET_ORDER: tuple[LookupStrategy, ...] = (
    LookupStrategy.KEY,
    LookupStrategy.INDEX,
    LookupStrategy.ATTRIBUTE,
)

#: Generic objects: getters and ``__getitem__`` as fallbacks
OBJECT_ORDER: tuple[LookupStrategy, ...] = (
    LookupStrategy.KEY,
    LookupStrategy.INDEX,
    LookupStrategy.ATTRIBUTE,
    LookupStrategy.GETTER,
    LookupStrategy.ITEM,
)

#: Named property of a collection element (numeric segments handled apart)
PROPERTY_ORDER: tuple[LookupStrategy, ...] = (
    LookupStrategy.KEY,
    LookupStrategy.ATTRIBUTE,
    LookupStrategy.GETTER,
    LookupStrategy.ITEM,
)


def lookup(
    target: Any,
    segment: str,
    order: Sequence[LookupStrategy] = DATA_GET_ORDER,
) -> Any:
    """Read ``segment`` from ``target`` with the first matching strategy.

    Returns:
        The value found, or ``MISSING`` when no strategy applies.

    Example:
        >>> lookup({"a": 1}, "a")
        1
        >>> lookup(["x", "y"], "1")
        'y'
    """
    if target is None:
        return MISSING
    for strategy in order:
        value = _STRATEGIES[strategy](target, segment)
        if value is not MISSING:
            return value
    return MISSING
