"""Input helpers shared by CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
import yaml

from mustache_resolver.cli.context import CLIContext

__all__ = ["get_cli_context", "load_data_file", "parse_variables"]


def get_cli_context(ctx: click.Context) -> CLIContext:
    return ctx.obj["cli_ctx"]


def load_data_file(path: Path | None) -> dict[str, Any]:
    """Read template data from a YAML or JSON file.

    Raises:
        click.BadParameter: If the file is not valid or not a mapping.
    """
    if path is None:
        return {}
    try:
        with open(path) as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.BadParameter(f"Invalid data file {path}: {e}") from e
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise click.BadParameter(f"Data file {path} must contain a mapping")
    return loaded


def parse_variables(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Turn ``name=value`` pairs into a dict.

    Values are read as YAML scalars, so ``n=5`` gives an int and
    ``flag=true`` a bool.

    Raises:
        click.BadParameter: If a pair has no ``=``.
    """
    variables: dict[str, Any] = {}
    for pair in pairs:
        name, separator, raw = pair.partition("=")
        if not separator or not name.strip():
            raise click.BadParameter(f"Expected name=value, got '{pair}'")
        try:
            value = yaml.safe_load(raw) if raw else ""
        except yaml.YAMLError:
            value = raw
        variables[name.strip().lstrip("$")] = value
    return variables
