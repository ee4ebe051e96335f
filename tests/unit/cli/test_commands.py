"""Tests for the mustache-resolver CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from mustache_resolver import __version__
from mustache_resolver.main import cli


@pytest.fixture
def data_file(isolated_config: Path) -> Path:
    path = isolated_config / "user.yaml"
    path.write_text(yaml.safe_dump({"name": "Ann", "max_power": 100}))
    return path


class TestGroup:
    """Tests for the top-level group."""

    def test_version(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_help_without_command(
        self, cli_runner: CliRunner, isolated_config: Path
    ) -> None:
        result = cli_runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "translate" in result.stdout

    def test_missing_config_file(
        self, cli_runner: CliRunner, isolated_config: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["-c", "absent.yaml", "math", "1 + 1"])

        assert result.exit_code == 1
        assert "Config file not found" in result.stderr


class TestTranslate:
    """Tests for the translate command."""

    def test_with_data_file(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["translate", "Hello {{User.name}}", "--data", str(data_file)]
        )

        assert result.exit_code == 0
        assert result.stdout == "Hello Ann\n"

    def test_with_variables(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(
            cli, ["translate", "{{$count}} items", "--var", "$count=3"]
        )

        assert result.stdout == "3 items\n"

    def test_failure(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(cli, ["translate", "Hi {{User-Name}}"])

        assert result.exit_code == 1
        assert "Missing fields: User-Name" in result.stderr

    def test_lenient(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(cli, ["translate", "Hi {{User-Name}}!", "--lenient"])

        assert result.exit_code == 0
        assert result.stdout == "Hi !\n"
        assert "Warning:" in result.stderr

    def test_json(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["translate", "{{User.name}}", "-d", str(data_file), "--json"]
        )

        assert '"translated": "Ann"' in result.stdout

    def test_invalid_syntax(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(cli, ["translate", "Hi {{User.name"])

        assert result.exit_code == 1
        assert "Unclosed mustache" in result.stderr

    def test_bad_variable(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(cli, ["translate", "{{$a}}", "--var", "oops"])

        assert result.exit_code == 2


class TestCompound:
    """Tests for the compound command."""

    template = "USE {p} => {{Device.max_power}} > 0 && SET power={p}"

    def test_resolves(self, cli_runner: CliRunner, data_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["compound", self.template, "--data", str(data_file)]
        )

        assert result.exit_code == 0
        assert result.stdout == "SET power=100\n"

    def test_condition_not_met(
        self, cli_runner: CliRunner, isolated_config: Path
    ) -> None:
        data = isolated_config / "off.yaml"
        data.write_text("max_power: 0\n")

        result = cli_runner.invoke(cli, ["compound", self.template, "-d", str(data)])

        assert result.exit_code == 1
        assert "Condition failed" in result.stderr

    def test_check(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        valid = cli_runner.invoke(cli, ["compound", "--check", self.template])
        invalid = cli_runner.invoke(
            cli, ["compound", "--check", "USE {a} => {{X.a}} && {a} {b}"]
        )

        assert valid.stdout == "valid\n"
        assert invalid.exit_code == 1
        assert "Undeclared variables used in statement: {b}" in invalid.stderr


class TestTemporalAndMath:
    """Tests for the temporal and math commands."""

    @pytest.mark.parametrize(
        ("at", "expected"),
        [("2025-12-10T10:00", "true\n"), ("2025-12-13T10:00", "false\n")],
    )
    def test_temporal(
        self, cli_runner: CliRunner, isolated_config: Path, at: str, expected: str
    ) -> None:
        result = cli_runner.invoke(
            cli, ["temporal", "weekday && 08:00-18:00", "--at", at]
        )

        assert result.stdout == expected

    def test_temporal_invalid(
        self, cli_runner: CliRunner, isolated_config: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["temporal", "weekday &&"])

        assert result.exit_code == 1

    def test_math(self, cli_runner: CliRunner, isolated_config: Path) -> None:
        result = cli_runner.invoke(cli, ["math", "(2 + 3) * 4"])

        assert result.stdout == "20\n"

    def test_math_division_by_zero(
        self, cli_runner: CliRunner, isolated_config: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["math", "1 / 0"])

        assert result.exit_code == 1
        assert "Division by zero" in result.stderr
