"""Token resolvers.

Each resolver claims a fixed set of token types and turns a token into a
value using the resolution context. The pipeline tries them in descending
priority order.
"""

from __future__ import annotations

from mustache_resolver.resolvers.base import BaseResolver, Resolver
from mustache_resolver.resolvers.collection import CollectionResolver
from mustache_resolver.resolvers.dynamic import DynamicFieldResolver
from mustache_resolver.resolvers.function import FunctionResolver
from mustache_resolver.resolvers.math import MathResolver
from mustache_resolver.resolvers.model import ModelResolver
from mustache_resolver.resolvers.null_coalesce import NullCoalesceResolver
from mustache_resolver.resolvers.relation import RelationResolver
from mustache_resolver.resolvers.table import TableResolver
from mustache_resolver.resolvers.temporal import TemporalResolver
from mustache_resolver.resolvers.variable import VariableResolver

__all__ = [
    "BaseResolver",
    "CollectionResolver",
    "DynamicFieldResolver",
    "FunctionResolver",
    "MathResolver",
    "ModelResolver",
    "NullCoalesceResolver",
    "RelationResolver",
    "Resolver",
    "TableResolver",
    "TemporalResolver",
    "VariableResolver",
]
