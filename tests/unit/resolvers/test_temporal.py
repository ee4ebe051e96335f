"""Unit tests for TemporalResolver."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from mustache_resolver.context import ResolutionContext
from mustache_resolver.exceptions import InvalidSyntaxError, ResolutionError
from mustache_resolver.resolvers import TemporalResolver
from mustache_resolver.temporal import ConditionRegistry
from mustache_resolver.tokens import TokenClassifier
from tests.conftest import SATURDAY_10AM, WEDNESDAY_10AM

AFTERNOON = datetime(2025, 12, 10, 14, 30)


@pytest.fixture
def context() -> ResolutionContext:
    return ResolutionContext.from_mapping({})


def resolve(
    raw: str,
    context: ResolutionContext,
    at: datetime = AFTERNOON,
    registry: ConditionRegistry | None = None,
) -> Any:
    resolver = TemporalResolver(registry).set_test_now(at)
    return resolver.resolve(TokenClassifier().classify(raw), context)


class TestNow:
    """Tests for NOW tokens."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("NOW", "2025-12-10 14:30:00"),
            ("NOW:date", "2025-12-10"),
            ("NOW:time", "14:30:00"),
            ("NOW:format('d/m/Y')", "10/12/2025"),
            ("NOW:hour", 14),
            ("NOW:minute", 30),
            ("NOW:dayOfWeek", 3),
            ("NOW:isWeekday", True),
            ("NOW:isWeekend", False),
        ],
    )
    def test_functions(
        self, context: ResolutionContext, raw: str, expected: Any
    ) -> None:
        assert resolve(raw, context) == expected

    def test_unknown_function(self, context: ResolutionContext) -> None:
        with pytest.raises(ResolutionError, match="Unknown NOW function: century"):
            resolve("NOW:century", context)


class TestToday:
    """Tests for TODAY tokens."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("TODAY", "2025-12-10"),
            ("TODAY:startOfDay", "2025-12-10 00:00:00"),
            ("TODAY:endOfDay", "2025-12-10 23:59:59"),
            ("TODAY:dayOfYear", 344),
            ("TODAY:isFirstDayOfMonth", False),
            ("TODAY:isLastDayOfMonth", False),
        ],
    )
    def test_functions(
        self, context: ResolutionContext, raw: str, expected: Any
    ) -> None:
        assert resolve(raw, context) == expected

    def test_last_day_of_month(self, context: ResolutionContext) -> None:
        at = datetime(2025, 12, 31, 8, 0)

        assert resolve("TODAY:isLastDayOfMonth", context, at) is True


class TestIsDue:
    """Tests for TEMPORAL:isDue."""

    def test_business_hours(self, context: ResolutionContext) -> None:
        raw = "TEMPORAL:isDue('weekday && 08:00-18:00')"

        assert resolve(raw, context, WEDNESDAY_10AM) is True
        assert resolve(raw, context, SATURDAY_10AM) is False

    def test_registry_keywords(self, context: ResolutionContext) -> None:
        registry = ConditionRegistry().register_evaluator(
            "holiday", lambda at: at.day == 25
        )
        raw = "TEMPORAL:isDue(weekday && !holiday)"

        assert resolve(raw, context, WEDNESDAY_10AM, registry) is True
        assert resolve(raw, context, datetime(2025, 12, 25, 10), registry) is False

    def test_resolver_evaluators(self, context: ResolutionContext) -> None:
        resolver = TemporalResolver(ConditionRegistry()).set_test_now(WEDNESDAY_10AM)
        resolver.register_evaluator("maintenance", lambda at: True)
        token = TokenClassifier().classify("TEMPORAL:isDue(maintenance)")

        assert resolver.resolve(token, context) is True

    def test_missing_evaluator(self, context: ResolutionContext) -> None:
        with pytest.raises(ResolutionError, match="holiday"):
            resolve("TEMPORAL:isDue(holiday)", context, registry=ConditionRegistry())

    def test_invalid_expression(self, context: ResolutionContext) -> None:
        with pytest.raises(InvalidSyntaxError):
            resolve("TEMPORAL:isDue(weekday &&)", context)


class TestCronFunctions:
    """Tests for the cron and calendar helpers."""

    def test_next_and_previous_run(self, context: ResolutionContext) -> None:
        assert resolve("TEMPORAL:nextRun('cron:0 9 * * *')", context) == (
            "2025-12-11 09:00:00"
        )
        assert resolve("TEMPORAL:previousRun('cron:0 9 * * *')", context) == (
            "2025-12-10 09:00:00"
        )

    def test_next_run_requires_cron(self, context: ResolutionContext) -> None:
        with pytest.raises(ResolutionError, match="requires a CRON expression"):
            resolve("TEMPORAL:nextRun('weekday')", context)

    def test_nth_weekday(self, context: ResolutionContext) -> None:
        assert resolve("TEMPORAL:isNthWeekday('wednesday', 2)", context) is True
        assert resolve("TEMPORAL:isNthWeekday('wednesday', 1)", context) is False

    def test_nth_weekday_requires_two_args(self, context: ResolutionContext) -> None:
        with pytest.raises(ResolutionError, match="requires 2 arguments"):
            resolve("TEMPORAL:isNthWeekday('wednesday')", context)

    def test_nth_weekday_numeric_string(self, context: ResolutionContext) -> None:
        assert resolve("TEMPORAL:isNthWeekday('wednesday', '2')", context) is True

    @pytest.mark.parametrize(
        "raw",
        [
            "TEMPORAL:isNthWeekday('saturday', 'first')",
            "TEMPORAL:isNthWeekday('saturday', null)",
            "TEMPORAL:isNthWeekday('saturday', 1.5)",
        ],
    )
    def test_nth_weekday_rejects_non_integer_occurrence(
        self, context: ResolutionContext, raw: str
    ) -> None:
        with pytest.raises(ResolutionError, match="occurrence must be an integer"):
            resolve(raw, context)

    def test_last_weekday(self, context: ResolutionContext) -> None:
        last_friday = datetime(2025, 12, 26, 12, 0)

        assert resolve("TEMPORAL:isLastWeekday('friday')", context, last_friday)
        assert not resolve("TEMPORAL:isLastWeekday('wednesday')", context)

    def test_unknown_function(self, context: ResolutionContext) -> None:
        with pytest.raises(ResolutionError, match="Unknown TEMPORAL function"):
            resolve("TEMPORAL:sometime()", context)
