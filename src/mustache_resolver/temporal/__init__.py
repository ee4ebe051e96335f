"""Temporal boolean expressions: ``weekday && 08:00-18:00 && !holiday``."""

from __future__ import annotations

from mustache_resolver.temporal.ast import BUILTIN_KEYWORDS, Node
from mustache_resolver.temporal.conditions import (
    AlwaysCondition,
    Condition,
    CronCondition,
    CustomCondition,
    Evaluator,
    LastWeekdayCondition,
    NeverCondition,
    NthWeekdayCondition,
    TimeRangeCondition,
    WeekdayCondition,
    WeekendCondition,
)
from mustache_resolver.temporal.cron import DAY_MAP, CronSchedule
from mustache_resolver.temporal.expression import TemporalExpression
from mustache_resolver.temporal.parser import ExpressionParser
from mustache_resolver.temporal.registry import (
    ConditionRegistry,
    get_registry,
    reset_registry,
)
from mustache_resolver.temporal.time_range import TimeRange

__all__ = [
    "AlwaysCondition",
    "BUILTIN_KEYWORDS",
    "Condition",
    "ConditionRegistry",
    "CronCondition",
    "CronSchedule",
    "CustomCondition",
    "DAY_MAP",
    "Evaluator",
    "ExpressionParser",
    "LastWeekdayCondition",
    "NeverCondition",
    "Node",
    "NthWeekdayCondition",
    "TemporalExpression",
    "TimeRange",
    "TimeRangeCondition",
    "WeekdayCondition",
    "WeekendCondition",
    "get_registry",
    "reset_registry",
]
