"""Date formatting with PHP-style format characters.

Templates written for the resolver use format strings such as ``Y-m-d H:i:s``
(``NOW:format('d/m/Y')``, the ``formatDate`` formatter). This module renders
them with :mod:`datetime`. A backslash escapes the next character.

Example:
    >>> from datetime import datetime
    >>> format_date(datetime(2025, 12, 10, 14, 30), "Y-m-d H:i")
    '2025-12-10 14:30'
"""

from __future__ import annotations

import calendar
from collections.abc import Callable
from datetime import date, datetime, timedelta
from typing import Any

__all__ = [
    "ATOM_FORMAT",
    "format_date",
    "parse_datetime",
    "start_of_day",
    "end_of_day",
]

#: ISO 8601 with offset, e.g. 2025-12-10T14:30:00+00:00
ATOM_FORMAT = "Y-m-d\\TH:i:sP"


def _suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _offset(dt: datetime, colon: bool) -> str:
    offset = dt.utcoffset() or timedelta(0)
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, minutes = divmod(abs(total) // 60, 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


_FORMATTERS: dict[str, Callable[[datetime], str]] = {
    # Day
    "d": lambda dt: f"{dt.day:02d}",
    "D": lambda dt: dt.strftime("%a"),
    "j": lambda dt: str(dt.day),
    "l": lambda dt: dt.strftime("%A"),
    "N": lambda dt: str(dt.isoweekday()),
    "S": lambda dt: _suffix(dt.day),
    "w": lambda dt: str(dt.isoweekday() % 7),
    "z": lambda dt: str(dt.timetuple().tm_yday - 1),
    # Week
    "W": lambda dt: f"{dt.isocalendar()[1]:02d}",
    # Month
    "F": lambda dt: dt.strftime("%B"),
    "m": lambda dt: f"{dt.month:02d}",
    "M": lambda dt: dt.strftime("%b"),
    "n": lambda dt: str(dt.month),
    "t": lambda dt: str(calendar.monthrange(dt.year, dt.month)[1]),
    # Year
    "L": lambda dt: "1" if calendar.isleap(dt.year) else "0",
    "o": lambda dt: str(dt.isocalendar()[0]),
    "Y": lambda dt: str(dt.year),
    "y": lambda dt: f"{dt.year % 100:02d}",
    # Time
    "a": lambda dt: "am" if dt.hour < 12 else "pm",
    "A": lambda dt: "AM" if dt.hour < 12 else "PM",
    "g": lambda dt: str(_hour12(dt)),
    "G": lambda dt: str(dt.hour),
    "h": lambda dt: f"{_hour12(dt):02d}",
    "H": lambda dt: f"{dt.hour:02d}",
    "i": lambda dt: f"{dt.minute:02d}",
    "s": lambda dt: f"{dt.second:02d}",
    "u": lambda dt: f"{dt.microsecond:06d}",
    "v": lambda dt: f"{dt.microsecond // 1000:03d}",
    # Timezone
    "e": lambda dt: str(dt.tzinfo) if dt.tzinfo else "UTC",
    "T": lambda dt: dt.tzname() or "UTC",
    "P": lambda dt: _offset(dt, colon=True),
    "O": lambda dt: _offset(dt, colon=False),
    "Z": lambda dt: str(int((dt.utcoffset() or timedelta(0)).total_seconds())),
    # Full date/time
    "c": lambda dt: format_date(dt, ATOM_FORMAT),
    "r": lambda dt: format_date(dt, "D, d M Y H:i:s O"),
    "U": lambda dt: str(int(dt.timestamp())),
}


def format_date(value: datetime, fmt: str) -> str:
    """Render ``value`` using PHP ``date()`` format characters.

    Unknown characters are copied through unchanged.
    """
    parts: list[str] = []
    escaped = False
    for char in fmt:
        if escaped:
            parts.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _FORMATTERS:
            parts.append(_FORMATTERS[char](value))
        else:
            parts.append(char)
    return "".join(parts)


def parse_datetime(value: Any) -> datetime | None:
    """Interpret a value as a datetime.

    Accepts datetimes, dates, Unix timestamps (int/float or digit strings)
    and ISO 8601 strings. Returns None for anything else.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return datetime.fromtimestamp(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return datetime.fromtimestamp(int(text))
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    return value.replace(hour=23, minute=59, second=59, microsecond=999999)
