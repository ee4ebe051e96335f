"""Daily time windows such as ``08:00-18:00`` or ``22:00-06:00``."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime

from mustache_resolver.exceptions import InvalidSyntaxError

__all__ = ["TimeRange", "TIME_RANGE_PATTERN"]

_HOUR = r"([01]?[0-9]|2[0-3])"
_MINUTE = r"([0-5][0-9])"

TIME_PATTERN = re.compile(rf"^{_HOUR}:{_MINUTE}$")
TIME_RANGE_PATTERN = re.compile(rf"{_HOUR}:{_MINUTE}-{_HOUR}:{_MINUTE}")


def _to_minutes(time: str) -> int:
    hours, minutes = time.split(":")
    return int(hours) * 60 + int(minutes)


@dataclass(frozen=True, slots=True)
class TimeRange:
    """A window between two wall-clock times.

    The start is inclusive and the end exclusive. A range whose start is
    later than its end wraps past midnight.

    Attributes:
        start: Start time as ``HH:MM``.
        end: End time as ``HH:MM``.

    Example:
        >>> TimeRange.from_string("22:00-06:00").overnight
        True
    """

    start: str
    end: str
    start_minutes: int = field(init=False, repr=False)
    end_minutes: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        for time in (self.start, self.end):
            if not TIME_PATTERN.match(time):
                raise InvalidSyntaxError(
                    f'Invalid time format: "{time}". Expected format: HH:MM'
                )
        object.__setattr__(self, "start_minutes", _to_minutes(self.start))
        object.__setattr__(self, "end_minutes", _to_minutes(self.end))

    @property
    def overnight(self) -> bool:
        return self.start_minutes > self.end_minutes

    def contains(self, at: datetime | None = None) -> bool:
        at = at or datetime.now()
        minutes = at.hour * 60 + at.minute
        if self.overnight:
            return minutes >= self.start_minutes or minutes < self.end_minutes
        return self.start_minutes <= minutes < self.end_minutes

    @classmethod
    def from_string(cls, value: str) -> TimeRange:
        """Parse ``H[H]:MM-H[H]:MM`` and normalize both ends to ``HH:MM``.

        Raises:
            InvalidSyntaxError: If the text is not a time range.
        """
        value = value.strip()
        match = TIME_RANGE_PATTERN.fullmatch(value)
        if match is None:
            raise InvalidSyntaxError(
                f'Invalid time range format: "{value}". Expected format: HH:MM-HH:MM'
            )
        h1, m1, h2, m2 = (int(part) for part in match.groups())
        return cls(f"{h1:02d}:{m1:02d}", f"{h2:02d}:{m2:02d}")

    @classmethod
    def from_multiple(cls, value: str) -> list[TimeRange]:
        """Parse a comma-separated list of ranges, skipping empty entries."""
        return [cls.from_string(part) for part in value.split(",") if part.strip()]

    @staticmethod
    def any_contains(ranges: Iterable[TimeRange], at: datetime | None = None) -> bool:
        return any(time_range.contains(at) for time_range in ranges)

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"
