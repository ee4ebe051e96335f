"""End-to-end scenarios through ``create_resolver``."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import pytest
from pydantic import BaseModel

from mustache_resolver.config import MustacheConfig
from mustache_resolver.exceptions import ConditionNotMetError, InvalidSyntaxError
from mustache_resolver.factory import create_resolver
from mustache_resolver.resolvers import TemporalResolver
from mustache_resolver.temporal import get_registry
from mustache_resolver.translator import MustacheResolver
from tests.conftest import SATURDAY_10AM, WEDNESDAY_10AM


class FrozenTemporalResolver(TemporalResolver):
    resolver_name = "frozen_temporal"


def resolver_at(now: datetime) -> MustacheResolver:
    config = MustacheConfig(excluded_resolvers=["temporal"])
    return create_resolver(config, [FrozenTemporalResolver().set_test_now(now)])


@pytest.fixture
def resolver(isolated_config: Path) -> MustacheResolver:
    return create_resolver()


class TestBusinessHours:
    """A schedule check used to gate notifications."""

    @pytest.mark.parametrize(
        ("now", "expected"), [(WEDNESDAY_10AM, True), (SATURDAY_10AM, False)]
    )
    def test_expression(self, now: datetime, expected: bool) -> None:
        expression = get_registry().create_expression("weekday && 08:00-18:00")

        assert expression.evaluate(now) is expected

    @pytest.mark.parametrize(
        ("now", "expected"), [(WEDNESDAY_10AM, "true"), (SATURDAY_10AM, "false")]
    )
    def test_in_template(
        self, isolated_config: Path, now: datetime, expected: str
    ) -> None:
        template = "{{TEMPORAL:isDue('weekday && 08:00-18:00')}}"

        result = resolver_at(now).translate(template)

        assert result.translated == expected

    def test_custom_keyword(self, isolated_config: Path) -> None:
        get_registry().register_evaluator("maintenance", lambda now: now.day == 10)

        result = resolver_at(WEDNESDAY_10AM).translate(
            "{{TEMPORAL:isDue('maintenance && !weekend')}}"
        )

        assert result.translated == "true"


class TestDeviceCommand:
    """Compound templates that build device commands."""

    template = "USE {p} => {{Device.max_power}} > 0 && SET power={p}"

    def test_statement(self, resolver: MustacheResolver) -> None:
        statement = resolver.resolve_compound(self.template, {"max_power": 100})

        assert statement == "SET power=100"

    def test_condition_not_met(self, resolver: MustacheResolver) -> None:
        with pytest.raises(ConditionNotMetError) as exc_info:
            resolver.resolve_compound(self.template, {"max_power": 0})

        assert exc_info.value.context["variable"] == "p"
        assert exc_info.value.context["value"] == 0

    def test_try_resolve(self, resolver: MustacheResolver) -> None:
        assert resolver.try_resolve_compound(self.template, {"max_power": 0}) is None


class TestTemplates:
    """Ordinary translation of mixed templates."""

    def test_unclosed_raises(self, resolver: MustacheResolver) -> None:
        with pytest.raises(InvalidSyntaxError, match="Unclosed mustache"):
            resolver.translate("Hello {{User.name", {"name": "Ann"})

    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("{{2 + 3 * 4}}", "14"),
            ("{{(2 + 3) * 4}}", "20"),
            ("{{10 / 4}}", "2.5"),
        ],
    )
    def test_math(
        self, resolver: MustacheResolver, template: str, expected: str
    ) -> None:
        assert resolver.translate(template).translated == expected

    def test_formatters(self, resolver: MustacheResolver) -> None:
        data = {"user": {"name": "ann lee", "balance": 1234.5}}

        result = resolver.translate(
            "{{title(user.name)}} owes {{number(user.balance, 2)}}", data
        )

        assert result.success
        assert result.translated == "Ann Lee owes 1,234.50"

    def test_mixed_tokens(
        self, resolver: MustacheResolver, user_data: dict[str, Any]
    ) -> None:
        result = resolver.translate(
            "{{User.name}} ({{User.nickname ?? 'none'}}) has {{$count}} alerts",
            user_data,
            {"count": 3},
        )

        assert result.translated == "Ann (none) has 3 alerts"


class Account(BaseModel):
    owner: str
    api_token: str


class TestConfiguredResolver:
    """Resolvers built from configuration."""

    def test_custom_function(self, isolated_config: Path) -> None:
        config = MustacheConfig(
            functions={"shout": "tests.integration.test_scenarios.shout"}
        )

        result = create_resolver(config).translate(
            "{{shout(user.name)}}", {"user": {"name": "ann"}}
        )

        assert result.translated == "ANN!"

    def test_lenient_keeps_placeholders(self, isolated_config: Path) -> None:
        config = MustacheConfig(strict=False, keep_unresolved=True)

        result = create_resolver(config).translate("Hi {{User-Name}}")

        assert result.success
        assert result.translated == "Hi {{User-Name}}"
        assert result.warnings

    def test_pydantic_model(self, isolated_config: Path) -> None:
        account = Account(owner="Ann", api_token="abc")

        result = create_resolver().translate(
            "{{Account.owner}}:{{Account.api_token}}", account
        )

        assert result.translated == "Ann:"


def shout(value: Any) -> str:
    return f"{str(value).upper()}!"
