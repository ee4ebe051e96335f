from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Generator, Iterator
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from mustache_resolver.context import ResolutionContext

if TYPE_CHECKING:
    from click.testing import CliRunner

# Wednesday
WEDNESDAY_10AM = datetime(2025, 12, 10, 10, 0)
# Saturday
SATURDAY_10AM = datetime(2025, 12, 13, 10, 0)


@pytest.fixture(autouse=True)
def configure_test_logging() -> Generator[None, None, None]:
    """Configure structlog for test environment.

    Logs go to stderr at WARNING level so they never mix with the output
    the CLI tests assert on.
    """
    from mustache_resolver.logging import configure_logging

    configure_logging(level=logging.WARNING)
    yield


@pytest.fixture(autouse=True)
def reset_condition_registry() -> Generator[None, None, None]:
    """Give every test a fresh default ConditionRegistry."""
    from mustache_resolver.temporal import reset_registry

    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files.

    Also saves and restores the current working directory to prevent
    tests that use os.chdir() from affecting other tests.
    """
    original_cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
    os.chdir(original_cwd)


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Remove all MUSTACHE_ environment variables for clean testing."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("MUSTACHE_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def isolated_config(
    clean_env: None, temp_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Run in an empty directory with no user or project config files."""
    os.chdir(temp_dir)
    monkeypatch.setattr(Path, "home", lambda: temp_dir)
    return temp_dir


@pytest.fixture
def user_data() -> dict[str, Any]:
    """Data shaped like a serialized User model."""
    return {
        "name": "Ann",
        "email": "ann@example.com",
        "age": 34,
        "password": "hunter2",
        "profile": {"city": "Lisbon", "field": "city"},
        "posts": [
            {"title": "First", "views": 10},
            {"title": "Second", "views": 0},
            {"title": "Third", "views": 7},
        ],
        "tags": {"a": "red", "b": "blue"},
    }


@pytest.fixture
def user_context(user_data: dict[str, Any]) -> ResolutionContext:
    return ResolutionContext.from_mapping(user_data)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
