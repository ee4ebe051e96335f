"""Formatter base class and value helpers."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, ClassVar

from mustache_resolver.dates import parse_datetime
from mustache_resolver.values import is_numeric, parse_number

__all__ = ["Formatter"]


class Formatter(ABC):
    """Transforms one resolved value, optionally driven by arguments.

    Subclasses set ``name`` (which must be on the registry's allow-list) and
    ``supported_types``. An empty ``supported_types`` accepts any value.
    """

    name: ClassVar[str]
    supported_types: ClassVar[tuple[type, ...]] = ()

    def supports(self, value: Any) -> bool:
        if not self.supported_types:
            return True
        # bool is an int subclass but only counts when listed explicitly
        if isinstance(value, bool):
            return bool in self.supported_types
        return isinstance(value, self.supported_types)

    @abstractmethod
    def format(self, value: Any, args: Sequence[Any] = ()) -> Any:
        """Return the formatted value."""
        ...

    @staticmethod
    def arg(args: Sequence[Any], index: int, default: Any = None) -> Any:
        if index < len(args) and args[index] is not None:
            return args[index]
        return default

    @staticmethod
    def to_string(value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return ""
        if isinstance(value, int | float):
            return str(value)
        if isinstance(value, list | dict):
            return json.dumps(value, default=str)
        return str(value)

    @staticmethod
    def to_numeric(value: Any) -> int | float:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int | float):
            return value
        if isinstance(value, str) and is_numeric(value):
            return parse_number(value)
        return 0

    @staticmethod
    def to_datetime(value: Any) -> datetime:
        result = parse_datetime(value)
        if result is None:
            raise ValueError(f"Cannot interpret {value!r} as a date")
        return result

    @staticmethod
    def round_half_up(value: int | float, precision: int = 0) -> float:
        """Round halves away from zero, e.g. 2.5 -> 3.0 and -2.5 -> -3.0."""
        exponent = Decimal(1).scaleb(-precision)
        return float(Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
