"""Indexed, positional and wildcard access into collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from mustache_resolver.accessors.lookup import MISSING, PROPERTY_ORDER, lookup
from mustache_resolver.constants import COLLECTION_WILDCARD, PRIORITY_COLLECTION
from mustache_resolver.context import ResolutionContext
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.tokens import Token, TokenType
from mustache_resolver.values import is_numeric

__all__ = ["CollectionResolver"]


def _is_iterable(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, str | bytes)


def _first(collection: Any) -> Any:
    if isinstance(collection, Mapping):
        return next(iter(collection.values()), None)
    if _is_iterable(collection):
        return next(iter(collection), None)
    return None


def _last(collection: Any) -> Any:
    if isinstance(collection, Mapping):
        values = list(collection.values())
        return values[-1] if values else None
    if isinstance(collection, Sequence) and not isinstance(collection, str | bytes):
        return collection[-1] if collection else None
    if _is_iterable(collection):
        last = None
        for item in collection:
            last = item
        return last
    return None


def _by_index(collection: Any, index: int) -> Any:
    if isinstance(collection, Mapping):
        if index in collection:
            return collection[index]
        return collection.get(str(index))
    if isinstance(collection, Sequence) and not isinstance(collection, str | bytes):
        return collection[index] if 0 <= index < len(collection) else None
    return None


def _property(item: Any, segment: str) -> Any:
    value = lookup(item, segment, PROPERTY_ORDER)
    return None if value is MISSING else value


class CollectionResolver(BaseResolver):
    """Walks the field path over the accessor's raw data.

    Segments are handled as follows:

    - ``*`` applies the rest of the path to every element and returns the
      non-None results as a list
    - ``first`` / ``last`` pick the first or last element
    - numeric segments index into the collection
    - anything else is a key or property lookup

    Example:
        With raw data ``{"posts": [{"title": "A"}, {"title": "B"}]}`` the
        token ``User.posts.*.title`` resolves to ``["A", "B"]``.
    """

    resolver_name = "collection"
    resolver_priority = PRIORITY_COLLECTION
    supported_types = frozenset({TokenType.COLLECTION})

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        if not self.prefix_matches(token, context):
            return None

        path = token.field_path
        current = context.accessor.raw()

        for index, segment in enumerate(path):
            if current is None:
                return None
            if segment == COLLECTION_WILDCARD:
                return self._resolve_wildcard(current, path[index + 1 :])
            if segment == "first":
                current = _first(current)
            elif segment == "last":
                current = _last(current)
            elif is_numeric(segment):
                current = _by_index(current, int(float(segment)))
            else:
                current = _property(current, segment)

        return current

    def _resolve_wildcard(self, collection: Any, remaining: Sequence[str]) -> list[Any]:
        if not _is_iterable(collection):
            return []

        items = collection.values() if isinstance(collection, Mapping) else collection
        results = []
        for item in items:
            value = item
            for segment in remaining:
                if value is None:
                    break
                value = _property(value, segment)
            if value is not None:
                results.append(value)
        return results
