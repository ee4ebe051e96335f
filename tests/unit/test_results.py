"""Unit tests for TranslationResult."""

from __future__ import annotations

import pytest

from mustache_resolver.results import TranslationResult
from mustache_resolver.tokens import Token


class TestTranslationResult:
    """Tests for TranslationResult."""

    def test_succeeded(self) -> None:
        token = Token.from_string("User.name")
        result = TranslationResult.succeeded(
            "Hi {{User.name}}", "Hi Ann", [token], {"User.name": "Ann"}
        )

        assert result.success
        assert not result.is_failed
        assert result.failure_reason is None
        assert result.to_dict()["tokens"] == ["User.name"]

    def test_failed_with_missing_fields(self) -> None:
        result = TranslationResult.failed("{{a.b}} {{c.d}}", ["a.b", "c.d"])

        assert result.is_failed
        assert result.translated is None
        assert result.failure_reason == "Missing fields: a.b, c.d"

    def test_failed_with_errors_only(self) -> None:
        result = TranslationResult.failed("x", [], ["boom", "bang"])

        assert result.failure_reason == "boom; bang"

    def test_failed_without_details(self) -> None:
        assert TranslationResult.failed("x", []).failure_reason == "Unknown error"

    def test_is_immutable(self) -> None:
        result = TranslationResult.succeeded("a", "a")

        with pytest.raises(AttributeError):
            result.success = False  # type: ignore[misc]
