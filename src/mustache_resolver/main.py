"""CLI entry point for mustache-resolver.

This module defines the Click-based command-line interface.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from mustache_resolver import __version__
from mustache_resolver.cli.commands.compound import compound
from mustache_resolver.cli.commands.math import math_command
from mustache_resolver.cli.commands.temporal import temporal
from mustache_resolver.cli.commands.translate import translate
from mustache_resolver.cli.context import CLIContext, ExitCode
from mustache_resolver.cli.output import format_error
from mustache_resolver.config import load_config
from mustache_resolver.exceptions import ConfigError
from mustache_resolver.logging import configure_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="mustache-resolver")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=False, path_type=str),
    default=None,
    help="Path to config file (overrides project/user config).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG).",
)
@click.pass_context
def cli(ctx: click.Context, config_file: str | None, verbose: int) -> None:
    """mustache-resolver - resolve {{mustache}} templates against data."""
    ctx.ensure_object(dict)

    # 0: MUSTACHE_LOG_LEVEL or WARNING, 1 (-v): INFO, 2+ (-vv): DEBUG
    level: int | None = None
    if verbose:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    configure_logging(level=level)

    config_path = Path(config_file) if config_file else None
    try:
        config = load_config(config_path)
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details), err=True)
        ctx.exit(ExitCode.FAILURE)

    ctx.obj["cli_ctx"] = CLIContext(
        config=config,
        config_path=config_path,
        verbosity=verbose,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(translate)
cli.add_command(compound)
cli.add_command(temporal)
cli.add_command(math_command)

if __name__ == "__main__":
    cli()
