"""Unit tests for TimeRange and CronSchedule."""

from __future__ import annotations

from datetime import datetime

import pytest

from mustache_resolver.exceptions import InvalidSyntaxError
from mustache_resolver.temporal import CronSchedule, TimeRange


class TestTimeRange:
    """Tests for TimeRange."""

    def test_normalizes_hours(self) -> None:
        time_range = TimeRange.from_string("8:00-18:00")

        assert str(time_range) == "08:00-18:00"
        assert not time_range.overnight

    def test_end_is_exclusive(self) -> None:
        time_range = TimeRange.from_string("08:00-18:00")

        assert time_range.contains(datetime(2025, 12, 10, 8, 0))
        assert not time_range.contains(datetime(2025, 12, 10, 18, 0))

    def test_overnight(self) -> None:
        time_range = TimeRange.from_string("22:00-06:00")

        assert time_range.overnight
        assert time_range.contains(datetime(2025, 12, 10, 2, 0))
        assert not time_range.contains(datetime(2025, 12, 10, 12, 0))

    def test_multiple(self) -> None:
        ranges = TimeRange.from_multiple("08:00-12:00, 13:00-17:00,")

        assert len(ranges) == 2
        assert not TimeRange.any_contains(ranges, datetime(2025, 12, 10, 12, 30))
        assert TimeRange.any_contains(ranges, datetime(2025, 12, 10, 13, 0))

    @pytest.mark.parametrize("value", ["25:00-26:00", "08:00", "8-18", "08:60-09:00"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidSyntaxError):
            TimeRange.from_string(value)


class TestCronSchedule:
    """Tests for CronSchedule."""

    def test_is_due_ignores_seconds(self) -> None:
        assert CronSchedule("30 14 * * *").is_due(datetime(2025, 12, 10, 14, 30, 45))

    def test_next_and_previous(self) -> None:
        schedule = CronSchedule("0 9 * * 1-5")
        friday_evening = datetime(2025, 12, 12, 18, 0)

        assert schedule.next_run(friday_evening) == datetime(2025, 12, 15, 9, 0)
        assert schedule.previous_run(friday_evening) == datetime(2025, 12, 12, 9, 0)

    def test_invalid(self) -> None:
        with pytest.raises(InvalidSyntaxError, match="Invalid CRON expression"):
            CronSchedule("not a cron")

    @pytest.mark.parametrize(
        ("day", "occurrence", "at", "expected"),
        [
            ("monday", 1, datetime(2025, 12, 1), True),
            ("mon", 2, datetime(2025, 12, 8), True),
            ("Monday", 2, datetime(2025, 12, 1), False),
            ("friday", -1, datetime(2025, 12, 26), True),
            ("friday", -1, datetime(2025, 12, 19), False),
            ("tuesday", 1, datetime(2025, 12, 1), False),
        ],
    )
    def test_nth_weekday(
        self, day: str, occurrence: int, at: datetime, expected: bool
    ) -> None:
        assert CronSchedule.is_nth_weekday(day, occurrence, at) is expected

    @pytest.mark.parametrize(
        ("day", "occurrence", "expected_days"),
        [
            ("saturday", 1, [6]),
            ("saturday", 2, [13]),
            ("friday", -1, [26]),
            ("saturday", -1, [27]),
        ],
    )
    def test_nth_weekday_december_2025(
        self, day: str, occurrence: int, expected_days: list[int]
    ) -> None:
        matching = [
            d
            for d in range(1, 32)
            if CronSchedule.is_nth_weekday(day, occurrence, datetime(2025, 12, d, 10))
        ]

        assert matching == expected_days

    def test_nth_weekday_validation(self) -> None:
        with pytest.raises(InvalidSyntaxError, match="Invalid day of week"):
            CronSchedule.is_nth_weekday("funday", 1)
        with pytest.raises(InvalidSyntaxError, match="Invalid occurrence"):
            CronSchedule.is_nth_weekday("monday", 6)

    def test_nth_weekday_cron(self) -> None:
        schedule = CronSchedule.nth_weekday_cron("monday", 2, "09:30")

        assert schedule.expression == "30 9 * * 1#2"
        assert schedule.is_due(datetime(2025, 12, 8, 9, 30))
