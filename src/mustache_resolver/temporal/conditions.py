"""Named temporal conditions.

Each condition answers one yes/no question about an instant and is known
under one or more keywords. The registry maps keywords to conditions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from datetime import datetime

from mustache_resolver.temporal.cron import CronSchedule
from mustache_resolver.temporal.time_range import TimeRange

__all__ = [
    "AlwaysCondition",
    "Condition",
    "CronCondition",
    "CustomCondition",
    "Evaluator",
    "LastWeekdayCondition",
    "NeverCondition",
    "NthWeekdayCondition",
    "TimeRangeCondition",
    "WeekdayCondition",
    "WeekendCondition",
]

#: Caller-supplied predicate of the evaluation instant
Evaluator = Callable[[datetime], bool]

_SATURDAY = 5


class Condition(ABC):
    """A boolean predicate of an instant."""

    name: str = "condition"

    @property
    @abstractmethod
    def keywords(self) -> tuple[str, ...]:
        """Keywords this condition is registered under."""
        ...

    @abstractmethod
    def evaluate(self, at: datetime | None = None) -> bool:
        """Evaluate at ``at`` (defaults to now)."""
        ...

    def supports(self, keyword: str) -> bool:
        return keyword.lower() in self.keywords

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keywords={self.keywords!r})"


class AlwaysCondition(Condition):
    name = "always"

    @property
    def keywords(self) -> tuple[str, ...]:
        return ("always",)

    def evaluate(self, at: datetime | None = None) -> bool:
        return True


class NeverCondition(Condition):
    name = "never"

    @property
    def keywords(self) -> tuple[str, ...]:
        return ("never",)

    def evaluate(self, at: datetime | None = None) -> bool:
        return False


class WeekdayCondition(Condition):
    """Monday through Friday."""

    name = "weekday"

    @property
    def keywords(self) -> tuple[str, ...]:
        return ("weekday", "weekdays")

    def evaluate(self, at: datetime | None = None) -> bool:
        return (at or datetime.now()).weekday() < _SATURDAY


class WeekendCondition(Condition):
    """Saturday and Sunday."""

    name = "weekend"

    @property
    def keywords(self) -> tuple[str, ...]:
        return ("weekend", "weekends")

    def evaluate(self, at: datetime | None = None) -> bool:
        return (at or datetime.now()).weekday() >= _SATURDAY


class TimeRangeCondition(Condition):
    name = "time_range"

    def __init__(self, time_range: str | TimeRange) -> None:
        if isinstance(time_range, str):
            time_range = TimeRange.from_string(time_range)
        self.time_range = time_range

    @property
    def keywords(self) -> tuple[str, ...]:
        return (str(self.time_range),)

    def evaluate(self, at: datetime | None = None) -> bool:
        return self.time_range.contains(at)


class CronCondition(Condition):
    name = "cron"

    def __init__(self, expression: str) -> None:
        self.schedule = CronSchedule(expression)

    @property
    def keywords(self) -> tuple[str, ...]:
        return (f"cron:{self.schedule.expression}",)

    def evaluate(self, at: datetime | None = None) -> bool:
        return self.schedule.is_due(at)


class NthWeekdayCondition(Condition):
    """Any of the given occurrences of a weekday within the month."""

    name = "nth_weekday"

    def __init__(self, day: str, occurrences: Iterable[int]) -> None:
        self.day = day
        self.occurrences = tuple(occurrences)

    @property
    def keywords(self) -> tuple[str, ...]:
        occurrences = ",".join(str(n) for n in self.occurrences)
        return (f"nth:{self.day}:{occurrences}",)

    def evaluate(self, at: datetime | None = None) -> bool:
        return CronSchedule.is_any_nth_weekday(self.day, self.occurrences, at)


class LastWeekdayCondition(Condition):
    name = "last_weekday"

    def __init__(self, day: str) -> None:
        self.day = day

    @property
    def keywords(self) -> tuple[str, ...]:
        return (f"last:{self.day}",)

    def evaluate(self, at: datetime | None = None) -> bool:
        return CronSchedule.is_last_weekday(self.day, at)


class CustomCondition(Condition):
    """Keyword bound to a caller-supplied evaluator."""

    def __init__(self, keyword: str, evaluator: Evaluator) -> None:
        self.keyword = keyword
        self.evaluator = evaluator
        self.name = f"custom:{keyword}"

    @property
    def keywords(self) -> tuple[str, ...]:
        return (self.keyword,)

    def evaluate(self, at: datetime | None = None) -> bool:
        return bool(self.evaluator(at or datetime.now()))
