"""Compound ``USE {var} => {{expr}} [condition] && statement`` templates."""

from __future__ import annotations

from mustache_resolver.compound.conditions import ConditionEvaluator
from mustache_resolver.compound.models import CompoundExpression, UseVariable
from mustache_resolver.compound.parser import CompoundExpressionParser
from mustache_resolver.compound.replacer import LocalVariableReplacer
from mustache_resolver.compound.resolver import CompoundResolver
from mustache_resolver.compound.variables import UseVariableResolver

__all__ = [
    "CompoundExpression",
    "CompoundExpressionParser",
    "CompoundResolver",
    "ConditionEvaluator",
    "LocalVariableReplacer",
    "UseVariable",
    "UseVariableResolver",
]
