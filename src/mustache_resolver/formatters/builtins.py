"""Built-in formatters, one per allow-listed name."""

from __future__ import annotations

import math
import re
import unicodedata
from collections.abc import Sequence
from datetime import date
from typing import Any

from mustache_resolver.constants import DATETIME_FORMAT
from mustache_resolver.dates import ATOM_FORMAT, format_date
from mustache_resolver.formatters.base import Formatter

__all__ = ["BUILTIN_FORMATTERS"]

_DATE_TYPES: tuple[type, ...] = (int, str, date)
_NUMERIC_TYPES: tuple[type, ...] = (int, float, str)
_CASTABLE_TYPES: tuple[type, ...] = (int, float, str, bool)
_STRING_TYPES: tuple[type, ...] = (str, int, float)


def _number_format(
    value: float,
    decimals: int,
    decimal_point: str = ".",
    thousands_separator: str = ",",
) -> str:
    rounded = Formatter.round_half_up(value, decimals)
    text = f"{rounded:,.{decimals}f}"
    return (
        text.replace(",", "\0")
        .replace(".", decimal_point)
        .replace("\0", thousands_separator)
    )


# -- dates --


class ToTimeStringFormatter(Formatter):
    name = "toTimeString"
    supported_types = _DATE_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return format_date(self.to_datetime(value), "H:i:s")


class ToDateStringFormatter(Formatter):
    name = "toDateString"
    supported_types = _DATE_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return format_date(self.to_datetime(value), "Y-m-d")


class ToDateTimeFormatter(Formatter):
    name = "toDateTime"
    supported_types = _DATE_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return format_date(self.to_datetime(value), DATETIME_FORMAT)


class ToUnixTimeFormatter(Formatter):
    name = "toUnixTime"
    supported_types = _DATE_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> int:
        if isinstance(value, int):
            return value
        return int(self.to_datetime(value).timestamp())


class ToIso8601Formatter(Formatter):
    name = "toIso8601"
    supported_types = _DATE_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return format_date(self.to_datetime(value), ATOM_FORMAT)


class FormatDateFormatter(Formatter):
    """``formatDate(value, 'd/m/Y')``; defaults to ``Y-m-d H:i:s``."""

    name = "formatDate"
    supported_types = _DATE_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        fmt = str(self.arg(args, 0, DATETIME_FORMAT))
        return format_date(self.to_datetime(value), fmt)


# -- numbers --


class ToIntFormatter(Formatter):
    name = "toInt"
    supported_types = _CASTABLE_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> int:
        return int(self.to_numeric(value))


class ToFloatFormatter(Formatter):
    name = "toFloat"
    supported_types = _CASTABLE_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> float:
        return float(self.to_numeric(value))


class ToCentsFormatter(Formatter):
    name = "toCents"
    supported_types = _NUMERIC_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> int:
        return int(self.round_half_up(self.to_numeric(value) * 100))


class FromCentsFormatter(Formatter):
    name = "fromCents"
    supported_types = _NUMERIC_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> float:
        return self.to_numeric(value) / 100


class RoundFormatter(Formatter):
    name = "round"
    supported_types = _NUMERIC_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> float:
        precision = int(self.arg(args, 0, 0))
        return self.round_half_up(self.to_numeric(value), precision)


class FloorFormatter(Formatter):
    name = "floor"
    supported_types = _NUMERIC_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> int:
        return math.floor(self.to_numeric(value))


class CeilFormatter(Formatter):
    name = "ceil"
    supported_types = _NUMERIC_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> int:
        return math.ceil(self.to_numeric(value))


class NumberFormatter(Formatter):
    """``number(value, decimals=2, '.', ',')`` -> ``1,234.57``."""

    name = "number"
    supported_types = _NUMERIC_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return _number_format(
            float(self.to_numeric(value)),
            int(self.arg(args, 0, 2)),
            str(self.arg(args, 1, ".")),
            str(self.arg(args, 2, ",")),
        )


class PercentFormatter(Formatter):
    """``percent(0.256, 1)`` -> ``25.6%``."""

    name = "percent"
    supported_types = _NUMERIC_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        decimals = int(self.arg(args, 0, 0))
        return _number_format(float(self.to_numeric(value)) * 100, decimals) + "%"


class AbsFormatter(Formatter):
    name = "abs"
    supported_types = _NUMERIC_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> int | float:
        return abs(self.to_numeric(value))


# -- strings --


class UppercaseFormatter(Formatter):
    name = "uppercase"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return self.to_string(value).upper()


class LowercaseFormatter(Formatter):
    name = "lowercase"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return self.to_string(value).lower()


class TrimFormatter(Formatter):
    name = "trim"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return self.to_string(value).strip()


class SubstrFormatter(Formatter):
    """``substr(value, start, length?)``; negative values count from the end."""

    name = "substr"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        text = self.to_string(value)
        start = int(self.arg(args, 0, 0))
        length = self.arg(args, 1)
        tail = text[start:] if start >= 0 else text[max(len(text) + start, 0) :]
        if length is None:
            return tail
        length = int(length)
        return tail[:length] if length >= 0 else tail[: max(len(tail) + length, 0)]


class ReplaceFormatter(Formatter):
    name = "replace"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        text = self.to_string(value)
        search = str(self.arg(args, 0, ""))
        if not search:
            return text
        return text.replace(search, str(self.arg(args, 1, "")))


class ConcatFormatter(Formatter):
    """One argument appends; two arguments wrap as prefix and suffix."""

    name = "concat"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        text = self.to_string(value)
        if not args:
            return text
        if len(args) == 1:
            return text + self.to_string(args[0])
        return self.to_string(args[0]) + text + self.to_string(args[1])


class SlugFormatter(Formatter):
    """``"Héllo World!"`` -> ``"hello-world"``."""

    name = "slug"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        separator = str(self.arg(args, 0, "-"))
        text = unicodedata.normalize("NFKD", self.to_string(value))
        text = text.encode("ascii", "ignore").decode("ascii").lower()
        text = re.sub(r"[^a-z0-9]+", separator, text)
        return text.strip(separator) if separator else text


class CamelFormatter(Formatter):
    name = "camel"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        words = [w for w in re.split(r"[^a-zA-Z0-9]+", self.to_string(value)) if w]
        if not words:
            return ""
        return words[0].lower() + "".join(w.lower().capitalize() for w in words[1:])


class SnakeFormatter(Formatter):
    name = "snake"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        text = re.sub(r"([a-z])([A-Z])", r"\1_\2", self.to_string(value))
        text = re.sub(r"[^a-zA-Z0-9]+", "_", text)
        return text.lower().strip("_")


class TitleFormatter(Formatter):
    name = "title"
    supported_types = _STRING_TYPES

    def format(self, value: Any, args: Sequence[Any] = ()) -> str:
        return self.to_string(value).title()


BUILTIN_FORMATTERS: tuple[type[Formatter], ...] = (
    ToTimeStringFormatter,
    ToDateStringFormatter,
    ToDateTimeFormatter,
    ToUnixTimeFormatter,
    ToIso8601Formatter,
    FormatDateFormatter,
    ToIntFormatter,
    ToFloatFormatter,
    ToCentsFormatter,
    FromCentsFormatter,
    RoundFormatter,
    FloorFormatter,
    CeilFormatter,
    NumberFormatter,
    PercentFormatter,
    AbsFormatter,
    UppercaseFormatter,
    LowercaseFormatter,
    TrimFormatter,
    SubstrFormatter,
    ReplaceFormatter,
    ConcatFormatter,
    SlugFormatter,
    CamelFormatter,
    SnakeFormatter,
    TitleFormatter,
)
