"""``TEMPORAL:``, ``NOW`` and ``TODAY`` resolution."""

from __future__ import annotations

import calendar
from collections.abc import Callable
from datetime import datetime
from typing import Any

from mustache_resolver.constants import DATE_FORMAT, DATETIME_FORMAT, PRIORITY_TEMPORAL
from mustache_resolver.context import ResolutionContext
from mustache_resolver.dates import ATOM_FORMAT, end_of_day, format_date, start_of_day
from mustache_resolver.exceptions import ResolutionError
from mustache_resolver.resolvers.base import BaseResolver
from mustache_resolver.temporal import (
    ConditionRegistry,
    CronSchedule,
    Evaluator,
    get_registry,
)
from mustache_resolver.temporal.parser import CRON_PREFIX
from mustache_resolver.tokens import Token, TokenType
from mustache_resolver.values import is_numeric, parse_number

__all__ = ["TemporalResolver"]

_SATURDAY = 5

_NOW_FUNCTIONS: dict[str, Callable[[datetime], Any]] = {
    "default": lambda now: format_date(now, DATETIME_FORMAT),
    "datetime": lambda now: format_date(now, DATETIME_FORMAT),
    "timestamp": lambda now: int(now.timestamp()),
    "iso8601": lambda now: format_date(now, ATOM_FORMAT),
    "atom": lambda now: format_date(now, ATOM_FORMAT),
    "rfc3339": lambda now: format_date(now, ATOM_FORMAT),
    "date": lambda now: format_date(now, DATE_FORMAT),
    "time": lambda now: format_date(now, "H:i:s"),
    "dayOfWeek": lambda now: now.isoweekday() % 7,
    "dayOfMonth": lambda now: now.day,
    "month": lambda now: now.month,
    "year": lambda now: now.year,
    "hour": lambda now: now.hour,
    "minute": lambda now: now.minute,
    "second": lambda now: now.second,
    "isWeekday": lambda now: now.weekday() < _SATURDAY,
    "isWeekend": lambda now: now.weekday() >= _SATURDAY,
}

_TODAY_FUNCTIONS: dict[str, Callable[[datetime], Any]] = {
    "default": lambda today: format_date(today, DATE_FORMAT),
    "startOfDay": lambda today: format_date(today, DATETIME_FORMAT),
    "endOfDay": lambda today: format_date(end_of_day(today), DATETIME_FORMAT),
    "timestamp": lambda today: int(today.timestamp()),
    "dayOfWeek": lambda today: today.isoweekday() % 7,
    "dayOfMonth": lambda today: today.day,
    "dayOfYear": lambda today: today.timetuple().tm_yday,
    "weekOfYear": lambda today: today.isocalendar()[1],
    "month": lambda today: today.month,
    "year": lambda today: today.year,
    "isWeekday": lambda today: today.weekday() < _SATURDAY,
    "isWeekend": lambda today: today.weekday() >= _SATURDAY,
    "isFirstDayOfMonth": lambda today: today.day == 1,
    "isLastDayOfMonth": (
        lambda today: today.day == calendar.monthrange(today.year, today.month)[1]
    ),
}


class TemporalResolver(BaseResolver):
    """Resolves time-based tokens.

    ``TEMPORAL:`` functions:

    - ``isDue(expr)`` evaluates a temporal expression
    - ``nextRun('cron:...')`` / ``previousRun('cron:...')`` return
      ``Y-m-d H:i:s`` strings
    - ``isNthWeekday(day, n)`` / ``isLastWeekday(day)``

    ``NOW`` returns facts about the current instant (``NOW``,
    ``NOW:format('d/m/Y')``, ``NOW:hour``, ...). ``TODAY`` does the same for
    the start of the current day.

    Args:
        registry: Registry whose custom keywords ``isDue`` understands.
            The default registry is used when omitted.
    """

    resolver_name = "temporal"
    resolver_priority = PRIORITY_TEMPORAL
    supported_types = frozenset({TokenType.TEMPORAL})

    def __init__(self, registry: ConditionRegistry | None = None) -> None:
        self._registry = registry
        self._evaluators: dict[str, Evaluator] = {}
        self._test_now: datetime | None = None

    @property
    def registry(self) -> ConditionRegistry:
        return self._registry if self._registry is not None else get_registry()

    def register_evaluator(
        self, keyword: str, evaluator: Evaluator
    ) -> TemporalResolver:
        self._evaluators[keyword] = evaluator
        return self

    def set_test_now(self, now: datetime | None) -> TemporalResolver:
        """Freeze the clock at ``now``; None restores the real clock."""
        self._test_now = now
        return self

    def now(self) -> datetime:
        return self._test_now if self._test_now is not None else datetime.now()

    def resolve(self, token: Token, context: ResolutionContext) -> Any:
        temporal_type = token.metadata.get("temporal_type", "unknown")
        if temporal_type == "temporal":
            return self._resolve_temporal(token)
        if temporal_type == "now":
            now = self.now()
            return self._call(_NOW_FUNCTIONS, "NOW", token, now, DATETIME_FORMAT)
        if temporal_type == "today":
            today = start_of_day(self.now())
            return self._call(_TODAY_FUNCTIONS, "TODAY", token, today, DATE_FORMAT)
        raise ResolutionError.for_token(
            token, f"Unknown temporal type: {temporal_type}"
        )

    def _call(
        self,
        functions: dict[str, Callable[[datetime], Any]],
        label: str,
        token: Token,
        at: datetime,
        default_format: str,
    ) -> Any:
        name = token.function_name or "default"
        if name == "format":
            fmt = token.function_args[0] if token.function_args else default_format
            return format_date(at, str(fmt))
        function = functions.get(name)
        if function is None:
            raise ResolutionError.for_token(token, f"Unknown {label} function: {name}")
        return function(at)

    def _resolve_temporal(self, token: Token) -> Any:
        name = token.function_name
        args = token.function_args
        expression = token.metadata.get("expression", "")

        if name == "isDue":
            temporal = self.registry.create_expression(expression)
            for keyword, evaluator in self._evaluators.items():
                temporal.register_evaluator(keyword, evaluator)
            return temporal.evaluate(self.now())
        if name in ("nextRun", "previousRun"):
            if not expression.startswith(CRON_PREFIX):
                raise ResolutionError.for_token(
                    token, f"{name} requires a CRON expression (cron:...)"
                )
            schedule = CronSchedule(expression[len(CRON_PREFIX) :])
            if name == "nextRun":
                run = schedule.next_run(self.now())
            else:
                run = schedule.previous_run(self.now())
            return format_date(run, DATETIME_FORMAT)
        if name == "isNthWeekday":
            if len(args) < 2:
                raise ResolutionError.for_token(
                    token, "isNthWeekday requires 2 arguments: dayOfWeek, occurrence"
                )
            occurrence = args[1]
            if isinstance(occurrence, str) and is_numeric(occurrence):
                occurrence = parse_number(occurrence)
            if isinstance(occurrence, bool) or not isinstance(occurrence, int):
                raise ResolutionError.for_token(
                    token,
                    "isNthWeekday occurrence must be an integer, "
                    f"got: {occurrence!r}",
                )
            return CronSchedule.is_nth_weekday(str(args[0]), occurrence, self.now())
        if name == "isLastWeekday":
            if not args:
                raise ResolutionError.for_token(
                    token, "isLastWeekday requires 1 argument: dayOfWeek"
                )
            return CronSchedule.is_last_weekday(str(args[0]), self.now())
        raise ResolutionError.for_token(token, f"Unknown TEMPORAL function: {name}")
