from __future__ import annotations

from datetime import datetime

import click

from mustache_resolver.cli.context import ExitCode
from mustache_resolver.cli.output import format_error
from mustache_resolver.exceptions import MustacheError
from mustache_resolver.temporal import get_registry


@click.command()
@click.argument("expression")
@click.option(
    "--at",
    "at",
    type=click.DateTime(
        formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"]
    ),
    default=None,
    help="Instant to evaluate at (default: now).",
)
@click.pass_context
def temporal(ctx: click.Context, expression: str, at: datetime | None) -> None:
    """Evaluate a temporal EXPRESSION and print true or false.

    Examples:
        mustache-resolver temporal "weekday && 08:00-18:00"
        mustache-resolver temporal "nth:friday:1,3" --at 2025-12-05T10:00
    """
    try:
        due = get_registry().create_expression(expression).evaluate(at)
    except MustacheError as e:
        click.echo(format_error(e.message), err=True)
        ctx.exit(ExitCode.FAILURE)

    click.echo("true" if due else "false")
