"""AST nodes for temporal boolean expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

__all__ = [
    "AndNode",
    "CronNode",
    "CustomNode",
    "KeywordNode",
    "LastWeekdayNode",
    "LiteralNode",
    "Node",
    "NotNode",
    "NthWeekdayNode",
    "OrNode",
    "TimeRangeNode",
    "BUILTIN_KEYWORDS",
]

#: Keywords evaluated without a registered evaluator
BUILTIN_KEYWORDS: frozenset[str] = frozenset({"always", "never", "weekday", "weekend"})


@dataclass(frozen=True, slots=True)
class AndNode:
    left: Node
    right: Node


@dataclass(frozen=True, slots=True)
class OrNode:
    left: Node
    right: Node


@dataclass(frozen=True, slots=True)
class NotNode:
    operand: Node


@dataclass(frozen=True, slots=True)
class KeywordNode:
    """One of ``always``, ``never``, ``weekday`` or ``weekend``."""

    keyword: str


@dataclass(frozen=True, slots=True)
class TimeRangeNode:
    """``H[H]:MM-H[H]:MM`` window, kept as written."""

    range: str


@dataclass(frozen=True, slots=True)
class CronNode:
    expression: str


@dataclass(frozen=True, slots=True)
class NthWeekdayNode:
    day: str
    occurrences: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class LastWeekdayNode:
    day: str


@dataclass(frozen=True, slots=True)
class CustomNode:
    """Bare identifier resolved through a registered evaluator."""

    keyword: str


@dataclass(frozen=True, slots=True)
class LiteralNode:
    """Constant produced for an empty expression."""

    value: bool = True


Node: TypeAlias = (
    AndNode
    | OrNode
    | NotNode
    | KeywordNode
    | TimeRangeNode
    | CronNode
    | NthWeekdayNode
    | LastWeekdayNode
    | CustomNode
    | LiteralNode
)
