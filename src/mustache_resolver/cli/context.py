"""CLI context and exit codes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from mustache_resolver.config import MustacheConfig

__all__ = ["CLIContext", "ExitCode"]


class ExitCode(IntEnum):
    """Exit codes for the mustache-resolver CLI.

    - 0 for success
    - 1 for failure (unresolvable template, failed condition, bad input)
    """

    SUCCESS = 0
    FAILURE = 1


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global options shared by every command.

    Attributes:
        config: Loaded configuration.
        config_path: Path to config file (if specified via --config).
        verbosity: Verbosity level (0=default, 1=INFO, 2+=DEBUG).
    """

    config: MustacheConfig
    config_path: Path | None = None
    verbosity: int = 0
