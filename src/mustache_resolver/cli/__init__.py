"""Command-line interface for mustache-resolver."""

from __future__ import annotations

from mustache_resolver.cli.context import CLIContext, ExitCode
from mustache_resolver.cli.output import format_error, format_json, format_warning

__all__ = [
    "CLIContext",
    "ExitCode",
    "format_error",
    "format_json",
    "format_warning",
]
