"""Data accessors: the read-only data sources templates resolve against."""

from __future__ import annotations

from mustache_resolver.accessors.base import DataAccessor, data_get
from mustache_resolver.accessors.lookup import MISSING, LookupStrategy, lookup
from mustache_resolver.accessors.mapping import MappingAccessor
from mustache_resolver.accessors.model import ModelAccessor
from mustache_resolver.accessors.object import ObjectAccessor

__all__ = [
    "MISSING",
    "DataAccessor",
    "LookupStrategy",
    "MappingAccessor",
    "ModelAccessor",
    "ObjectAccessor",
    "data_get",
    "lookup",
]
