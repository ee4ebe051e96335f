"""Unit tests for ExpressionParser."""

from __future__ import annotations

import pytest

from mustache_resolver.exceptions import InvalidSyntaxError
from mustache_resolver.temporal import ExpressionParser
from mustache_resolver.temporal.ast import (
    AndNode,
    CronNode,
    CustomNode,
    KeywordNode,
    LastWeekdayNode,
    LiteralNode,
    NotNode,
    NthWeekdayNode,
    OrNode,
    TimeRangeNode,
)


def parse(expression: str) -> object:
    return ExpressionParser(expression).parse()


class TestParse:
    """Tests for AST construction."""

    def test_and_binds_tighter_than_or(self) -> None:
        assert parse("weekend || weekday && 08:00-18:00") == OrNode(
            KeywordNode("weekend"),
            AndNode(KeywordNode("weekday"), TimeRangeNode("08:00-18:00")),
        )

    def test_parentheses_group(self) -> None:
        assert parse("(weekend || weekday) && !holiday") == AndNode(
            OrNode(KeywordNode("weekend"), KeywordNode("weekday")),
            NotNode(CustomNode("holiday")),
        )

    def test_double_negation(self) -> None:
        assert parse("!!never") == NotNode(NotNode(KeywordNode("never")))

    def test_cron_spec_keeps_spaces(self) -> None:
        assert parse("cron:0 9 * * 1-5 && weekday") == AndNode(
            CronNode("0 9 * * 1-5"), KeywordNode("weekday")
        )

    def test_nth_and_last(self) -> None:
        assert parse("nth:friday:1,3") == NthWeekdayNode("friday", (1, 3))
        assert parse("last:saturday") == LastWeekdayNode("saturday")

    def test_empty_is_true(self) -> None:
        assert parse("   ") == LiteralNode(True)


class TestErrors:
    """Tests for malformed expressions."""

    @pytest.mark.parametrize(
        "expression",
        ["weekday &&", "(weekday", "weekday)", "weekday # x", "&& weekday"],
    )
    def test_invalid(self, expression: str) -> None:
        with pytest.raises(InvalidSyntaxError):
            parse(expression)

    def test_bad_nth_syntax(self) -> None:
        with pytest.raises(InvalidSyntaxError, match="Expected nth:DAY:N"):
            parse("nth:friday")

    def test_bad_nth_occurrence(self) -> None:
        with pytest.raises(InvalidSyntaxError, match="occurrences"):
            parse("nth:friday:first")


def test_extract_keywords_deduplicates() -> None:
    parser = ExpressionParser("weekday && (holiday || !holiday) && 08:00-18:00")

    assert parser.extract_keywords() == ["weekday", "holiday", "08:00-18:00"]
