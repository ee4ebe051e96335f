"""Unit tests for the built-in formatters."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import pytest

from mustache_resolver.formatters import FormatterRegistry


@pytest.fixture(scope="module")
def registry() -> FormatterRegistry:
    return FormatterRegistry.with_builtins()


class TestDateFormatters:
    """Tests for date formatters."""

    @pytest.mark.parametrize(
        ("name", "value", "args", "expected"),
        [
            ("toDateString", "2025-12-10 14:30:00", (), "2025-12-10"),
            ("toTimeString", "2025-12-10T14:30:05", (), "14:30:05"),
            ("toDateTime", date(2025, 12, 10), (), "2025-12-10 00:00:00"),
            ("formatDate", datetime(2025, 12, 10), ("d/m/Y",), "10/12/2025"),
            ("formatDate", "2025-12-10 08:05", (), "2025-12-10 08:05:00"),
            ("toUnixTime", 1765000000, (), 1765000000),
        ],
    )
    def test_values(
        self,
        registry: FormatterRegistry,
        name: str,
        value: Any,
        args: tuple[Any, ...],
        expected: Any,
    ) -> None:
        assert registry.apply(name, value, args) == expected

    def test_iso8601(self, registry: FormatterRegistry) -> None:
        result = registry.apply("toIso8601", "2025-12-10T14:30:00+02:00")

        assert result == "2025-12-10T14:30:00+02:00"


class TestNumberFormatters:
    """Tests for numeric formatters."""

    @pytest.mark.parametrize(
        ("name", "value", "args", "expected"),
        [
            ("toInt", "42.9", (), 42),
            ("toFloat", "3", (), 3.0),
            ("toCents", 19.99, (), 1999),
            ("toCents", "0.125", (), 13),
            ("fromCents", 1999, (), 19.99),
            ("round", 2.5, (), 3.0),
            ("round", -2.5, (), -3.0),
            ("round", 1.005, (2,), 1.01),
            ("floor", 2.7, (), 2),
            ("ceil", 2.1, (), 3),
            ("abs", "-4", (), 4),
            ("number", 1234.567, (), "1,234.57"),
            ("number", 1234.5, (2, ",", "."), "1.234,50"),
            ("number", 1000, (0,), "1,000"),
            ("percent", 0.256, (1,), "25.6%"),
            ("percent", "0.5", (), "50%"),
        ],
    )
    def test_values(
        self,
        registry: FormatterRegistry,
        name: str,
        value: Any,
        args: tuple[Any, ...],
        expected: Any,
    ) -> None:
        assert registry.apply(name, value, args) == expected

    def test_non_numeric_string_is_zero(self, registry: FormatterRegistry) -> None:
        assert registry.apply("number", "abc") == "0.00"


class TestStringFormatters:
    """Tests for string formatters."""

    @pytest.mark.parametrize(
        ("name", "value", "args", "expected"),
        [
            ("uppercase", "abc", (), "ABC"),
            ("lowercase", "ABC", (), "abc"),
            ("trim", "  a  ", (), "a"),
            ("substr", "abcdef", (1, 3), "bcd"),
            ("substr", "abcdef", (-2,), "ef"),
            ("substr", "abcdef", (0, -2), "abcd"),
            ("replace", "a-b-c", ("-", "+"), "a+b+c"),
            ("replace", "abc", ("",), "abc"),
            ("concat", "user", ("@example.com",), "user@example.com"),
            ("concat", "x", ("[", "]"), "[x]"),
            ("slug", "Héllo World!", (), "hello-world"),
            ("slug", "Héllo World", ("_",), "hello_world"),
            ("camel", "hello big_world", (), "helloBigWorld"),
            ("snake", "helloBigWorld", (), "hello_big_world"),
            ("snake", "Hello World", (), "hello_world"),
            ("title", "hello world", (), "Hello World"),
            ("uppercase", 12, (), "12"),
        ],
    )
    def test_values(
        self,
        registry: FormatterRegistry,
        name: str,
        value: Any,
        args: tuple[Any, ...],
        expected: Any,
    ) -> None:
        assert registry.apply(name, value, args) == expected
