"""Value coercion helpers shared by resolvers, formatters and the compound engine.

Values flowing through the pipeline are plain Python objects. ``None`` stands
for an absent value; everything else is passed through untouched until it has
to be compared numerically or rendered into text.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable, Mapping
from datetime import date, datetime
from typing import Any

__all__ = [
    "is_numeric",
    "is_truthy",
    "loose_equals",
    "strict_equals",
    "value_kind",
    "parse_number",
    "to_number",
    "to_display_string",
    "to_statement_string",
]

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric(value: Any) -> bool:
    """Return True for ints, floats and numeric strings (``"42"``, ``" 1.5"``).

    Booleans are not numeric.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int | float):
        return True
    if isinstance(value, str):
        return _NUMERIC_RE.match(value) is not None
    return False


def parse_number(text: str) -> int | float:
    """Parse a numeric string: a decimal point makes it a float, else an int."""
    stripped = text.strip()
    if "." in stripped:
        return float(stripped)
    try:
        return int(stripped)
    except ValueError:
        # Exponent notation without a decimal point, e.g. "1e3"
        return float(stripped)


def to_number(value: Any) -> int | float:
    """Coerce a value for numeric comparison.

    Numbers pass through, numeric strings are parsed, booleans become 0/1
    and anything else (including None) becomes 0.
    """
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int | float):
        return value
    if isinstance(value, str) and is_numeric(value):
        return parse_number(value)
    return 0


def _number_text(value: int | float) -> str:
    # Integral floats render without a trailing ".0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_display_string(value: Any) -> str:
    """Render a resolved value into template text.

    None renders as an empty string, booleans as ``true``/``false`` and
    lists as their items joined with ``", "``.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list | tuple):
        return ", ".join(to_display_string(item) for item in value)
    if isinstance(value, int | float):
        return _number_text(value)
    return str(value)


def to_statement_string(value: Any) -> str:
    """Render a USE variable's value for substitution into a statement."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, int | float):
        return _number_text(value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d 00:00:00")
    if isinstance(value, list | tuple | dict):
        return json.dumps(value, default=str, separators=(",", ":"))
    return str(value)


def value_kind(value: Any) -> str:
    """Name the comparison category of a value.

    One of ``null``, ``bool``, ``int``, ``float``, ``string``, ``list``,
    ``map`` or ``object``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list | tuple):
        return "list"
    if isinstance(value, Mapping):
        return "map"
    return "object"


def is_truthy(value: Any) -> bool:
    """Truthiness used by loose comparison: ``"0"`` is falsy like ``""``."""
    if isinstance(value, str):
        return value not in ("", "0")
    return bool(value)


def _compare_as_bool(left: Any, right: Any) -> bool:
    return is_truthy(left) == is_truthy(right)


def _compare_null_string(left: Any, right: Any) -> bool:
    # null compares as the empty string against strings
    return (left if left is not None else "") == (right if right is not None else "")


def _compare_numbers(left: Any, right: Any) -> bool:
    return to_number(left) == to_number(right)


def _compare_number_string(left: Any, right: Any) -> bool:
    number, text = (left, right) if isinstance(right, str) else (right, left)
    if is_numeric(text):
        return number == parse_number(text)
    return _number_text(number) == text


def _compare_strings(left: str, right: str) -> bool:
    if is_numeric(left) and is_numeric(right):
        return parse_number(left) == parse_number(right)
    return left == right


def _compare_native(left: Any, right: Any) -> bool:
    return bool(left == right)


def _never_equal(left: Any, right: Any) -> bool:
    return False


_Comparator = Callable[[Any, Any], bool]

#: Loose (``==``) comparison by value kind pair; pairs are looked up in
#: either order and missing pairs are never equal.
_LOOSE_EQUALITY: dict[tuple[str, str], _Comparator] = {
    ("null", "null"): _compare_as_bool,
    ("null", "bool"): _compare_as_bool,
    ("null", "int"): _compare_as_bool,
    ("null", "float"): _compare_as_bool,
    ("null", "string"): _compare_null_string,
    ("null", "list"): _compare_as_bool,
    ("null", "map"): _compare_as_bool,
    ("null", "object"): _never_equal,
    ("bool", "bool"): _compare_native,
    ("bool", "int"): _compare_as_bool,
    ("bool", "float"): _compare_as_bool,
    ("bool", "string"): _compare_as_bool,
    ("bool", "list"): _compare_as_bool,
    ("bool", "map"): _compare_as_bool,
    ("bool", "object"): _compare_as_bool,
    ("int", "int"): _compare_numbers,
    ("int", "float"): _compare_numbers,
    ("float", "float"): _compare_numbers,
    ("int", "string"): _compare_number_string,
    ("float", "string"): _compare_number_string,
    ("string", "string"): _compare_strings,
    ("list", "list"): _compare_native,
    ("map", "map"): _compare_native,
    ("object", "object"): _compare_native,
}


def loose_equals(left: Any, right: Any) -> bool:
    """Cross-type equality used by ``=``, ``==``, ``!=`` and ``<>``.

    Numbers compare numerically with each other and with numeric strings,
    booleans and ``None`` compare by truthiness, and ``None`` equals the
    empty string.

    Examples:
        >>> loose_equals(100, "100"), loose_equals("1.0", "1"), loose_equals(None, 0)
        (True, True, True)
        >>> loose_equals("abc", 0)
        False
    """
    kinds = (value_kind(left), value_kind(right))
    comparator = _LOOSE_EQUALITY.get(kinds)
    if comparator is not None:
        return comparator(left, right)
    comparator = _LOOSE_EQUALITY.get((kinds[1], kinds[0]))
    if comparator is not None:
        return comparator(right, left)
    return False


def strict_equals(left: Any, right: Any) -> bool:
    """Same-kind equality used by ``===`` and ``!==``; ``1 !== 1.0``."""
    if value_kind(left) != value_kind(right):
        return False
    return bool(left == right)
