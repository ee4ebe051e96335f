"""Cron schedules and nth-weekday calendar rules."""

from __future__ import annotations

import calendar
import math
from collections.abc import Iterable
from datetime import datetime

from croniter import croniter

from mustache_resolver.exceptions import InvalidSyntaxError

__all__ = ["CronSchedule", "DAY_MAP", "day_number"]

#: Day names to cron day numbers (0 = Sunday)
DAY_MAP: dict[str, int] = {
    "sunday": 0,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
    "sun": 0,
    "mon": 1,
    "tue": 2,
    "wed": 3,
    "thu": 4,
    "fri": 5,
    "sat": 6,
}

LAST_OCCURRENCE = -1


def day_number(day: str) -> int:
    """Cron number of a full or three-letter day name, case-insensitive.

    Raises:
        InvalidSyntaxError: For unknown day names.
    """
    key = day.strip().lower()
    if key not in DAY_MAP:
        raise InvalidSyntaxError(
            f'Invalid day of week: "{key}". Expected: monday, tuesday, etc.'
        )
    return DAY_MAP[key]


def _cron_weekday(at: datetime) -> int:
    # datetime.weekday() is 0 = Monday
    return (at.weekday() + 1) % 7


class CronSchedule:
    """A five-field cron expression backed by croniter.

    Args:
        expression: Five cron fields, e.g. ``"0 9 * * 1-5"``.

    Raises:
        InvalidSyntaxError: If croniter rejects the expression.

    Example:
        >>> CronSchedule("0 9 * * *").is_due(datetime(2025, 12, 10, 9, 0))
        True
    """

    __slots__ = ("expression",)

    def __init__(self, expression: str) -> None:
        expression = expression.strip()
        try:
            croniter(expression)
        except (KeyError, ValueError) as e:
            raise InvalidSyntaxError(
                f'Invalid CRON expression: "{expression}". {e}'
            ) from e
        self.expression = expression

    def is_due(self, at: datetime | None = None) -> bool:
        """True when ``at`` falls in a minute the schedule fires on."""
        at = (at or datetime.now()).replace(second=0, microsecond=0)
        return bool(croniter.match(self.expression, at))

    def next_run(self, start: datetime | None = None) -> datetime:
        """First run strictly after ``start``."""
        result: datetime = croniter(self.expression, start or datetime.now()).get_next(
            datetime
        )
        return result

    def previous_run(self, start: datetime | None = None) -> datetime:
        """Last run strictly before ``start``."""
        result: datetime = croniter(self.expression, start or datetime.now()).get_prev(
            datetime
        )
        return result

    @staticmethod
    def is_nth_weekday(day: str, occurrence: int, at: datetime | None = None) -> bool:
        """True when ``at`` is the ``occurrence``-th ``day`` of its month.

        ``occurrence`` is 1..5, or -1 for the last such day of the month.

        Raises:
            InvalidSyntaxError: For unknown days or out-of-range occurrences.
        """
        target = day_number(day)
        if occurrence != LAST_OCCURRENCE and not 1 <= occurrence <= 5:
            raise InvalidSyntaxError(
                f"Invalid occurrence: {occurrence}. Expected 1-5 or -1 for last."
            )

        at = at or datetime.now()
        if _cron_weekday(at) != target:
            return False

        days_in_month = calendar.monthrange(at.year, at.month)[1]
        if occurrence == LAST_OCCURRENCE:
            return at.day + 7 > days_in_month
        return math.ceil(at.day / 7) == occurrence

    @classmethod
    def is_any_nth_weekday(
        cls,
        day: str,
        occurrences: Iterable[int],
        at: datetime | None = None,
    ) -> bool:
        return any(cls.is_nth_weekday(day, n, at) for n in occurrences)

    @classmethod
    def is_last_weekday(cls, day: str, at: datetime | None = None) -> bool:
        return cls.is_nth_weekday(day, LAST_OCCURRENCE, at)

    @classmethod
    def nth_weekday_cron(
        cls,
        day: str,
        occurrence: int,
        time: str = "00:00",
    ) -> CronSchedule:
        """Schedule firing at ``time`` on the ``occurrence``-th ``day``.

        Example:
            >>> CronSchedule.nth_weekday_cron("monday", 2, "09:30").expression
            '30 9 * * 1#2'
        """
        number = day_number(day)
        if not 1 <= occurrence <= 5:
            raise InvalidSyntaxError(
                f"Invalid occurrence: {occurrence}. Expected 1-5."
            )
        hours, minutes = time.split(":")
        return cls(f"{int(minutes)} {int(hours)} * * {number}#{occurrence}")

    def __repr__(self) -> str:
        return f"CronSchedule({self.expression!r})"
