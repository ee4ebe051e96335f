"""Unit tests for PHP-style date formatting."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from mustache_resolver.dates import (
    ATOM_FORMAT,
    end_of_day,
    format_date,
    parse_datetime,
    start_of_day,
)

AFTERNOON = datetime(2025, 12, 10, 14, 30, 5)


class TestFormatDate:
    """Tests for format_date."""

    @pytest.mark.parametrize(
        ("fmt", "expected"),
        [
            ("Y-m-d H:i:s", "2025-12-10 14:30:05"),
            ("d/m/Y", "10/12/2025"),
            ("D, j M y", "Wed, 10 Dec 25"),
            ("l jS F", "Wednesday 10th December"),
            ("g:i A", "2:30 PM"),
            ("h a", "02 pm"),
            ("N w t L", "3 3 31 0"),
            ("z", "343"),
        ],
    )
    def test_format_characters(self, fmt: str, expected: str) -> None:
        assert format_date(AFTERNOON, fmt) == expected

    def test_escaped_characters_are_literal(self) -> None:
        assert format_date(AFTERNOON, "\\Y Y") == "Y 2025"

    def test_atom_with_offset(self) -> None:
        aware = AFTERNOON.replace(tzinfo=timezone(timedelta(hours=2)))

        assert format_date(aware, ATOM_FORMAT) == "2025-12-10T14:30:05+02:00"
        assert format_date(aware, "O") == "+0200"

    @pytest.mark.parametrize(
        ("day", "suffix"), [(1, "st"), (2, "nd"), (3, "rd"), (11, "th"), (22, "nd")]
    )
    def test_ordinal_suffix(self, day: int, suffix: str) -> None:
        assert format_date(datetime(2025, 12, day), "S") == suffix


class TestParseDatetime:
    """Tests for parse_datetime."""

    def test_datetime_passes_through(self) -> None:
        assert parse_datetime(AFTERNOON) is AFTERNOON

    def test_date_becomes_midnight(self) -> None:
        assert parse_datetime(date(2025, 12, 10)) == datetime(2025, 12, 10)

    def test_iso_string(self) -> None:
        assert parse_datetime("2025-12-10T14:30:05") == AFTERNOON

    def test_utc_suffix(self) -> None:
        parsed = parse_datetime("2025-12-10T14:30:05Z")

        assert parsed is not None
        assert parsed.utcoffset() == timedelta(0)

    def test_timestamp(self) -> None:
        assert parse_datetime(0) == datetime.fromtimestamp(0)
        assert parse_datetime("0") == datetime.fromtimestamp(0)

    @pytest.mark.parametrize("value", ["not a date", True, None, [2025]])
    def test_unparseable(self, value: object) -> None:
        assert parse_datetime(value) is None


def test_day_bounds() -> None:
    assert start_of_day(AFTERNOON) == datetime(2025, 12, 10)
    assert end_of_day(AFTERNOON) == datetime(2025, 12, 10, 23, 59, 59, 999999)
