"""Inline conditions on USE variables."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable
from typing import Any

from mustache_resolver.exceptions import ConditionNotMetError
from mustache_resolver.values import (
    is_numeric,
    loose_equals,
    parse_number,
    strict_equals,
    to_number,
)

__all__ = ["ConditionEvaluator"]

BETWEEN_PATTERN = re.compile(r"^BETWEEN\s+(.+?)\s+AND\s+(.+)$", re.IGNORECASE)
COMPARISON_PATTERN = re.compile(r"^([><=!]+)\s*(.+)$")


def _ordered(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    return lambda left, right: compare(to_number(left), to_number(right))


_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "=": loose_equals,
    "==": loose_equals,
    "!=": lambda left, right: not loose_equals(left, right),
    "<>": lambda left, right: not loose_equals(left, right),
    "===": strict_equals,
    "!==": lambda left, right: not strict_equals(left, right),
    "<": _ordered(operator.lt),
    "<=": _ordered(operator.le),
    ">": _ordered(operator.gt),
    ">=": _ordered(operator.ge),
}


def parse_operand(operand: str) -> Any:
    """Decode a condition operand: quoted text, true/false/null or a number."""
    if len(operand) >= 2 and operand[0] in "'\"" and operand[-1] == operand[0]:
        return operand[1:-1]
    lowered = operand.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered == "null":
        return None
    if is_numeric(operand):
        return parse_number(operand)
    return operand


class ConditionEvaluator:
    """Checks a resolved value against a condition such as ``> 0``.

    ``=``, ``==``, ``!=`` and ``<>`` compare loosely, ``===`` and ``!==``
    require the same type, and ordering operators compare numerically.
    ``BETWEEN a AND b`` is inclusive on both ends. Unknown operators and
    unrecognized condition text pass.
    """

    def evaluate(
        self,
        variable_name: str,
        value: Any,
        condition: str,
        expression: str,
    ) -> bool:
        """Return True when ``value`` satisfies ``condition``.

        Raises:
            ConditionNotMetError: When it does not.
        """
        condition = condition.strip()

        if match := BETWEEN_PATTERN.match(condition):
            low, high = match.group(1).strip(), match.group(2).strip()
            number = to_number(value)
            if not to_number(low) <= number <= to_number(high):
                raise ConditionNotMetError(
                    variable_name, value, f"BETWEEN {low} AND {high}", expression
                )
            return True

        if match := COMPARISON_PATTERN.match(condition):
            symbol, operand = match.group(1), match.group(2).strip()
            compare = _OPERATORS.get(symbol)
            if compare is not None and not compare(value, parse_operand(operand)):
                raise ConditionNotMetError(
                    variable_name, value, f"{symbol} {operand}", expression
                )
            return True

        return True

    def check(self, value: Any, condition: str) -> bool:
        """Like ``evaluate`` but answers False instead of raising."""
        try:
            return self.evaluate("check", value, condition, "")
        except ConditionNotMetError:
            return False
