from __future__ import annotations

import click

from mustache_resolver.arithmetic import MathExpressionEvaluator
from mustache_resolver.cli.context import ExitCode
from mustache_resolver.cli.output import format_error
from mustache_resolver.exceptions import MustacheError
from mustache_resolver.values import to_display_string


@click.command("math")
@click.argument("expression")
@click.pass_context
def math_command(ctx: click.Context, expression: str) -> None:
    """Evaluate an arithmetic EXPRESSION.

    Examples:
        mustache-resolver math "(2 + 3) * 4"
    """
    try:
        value = MathExpressionEvaluator().evaluate(expression)
    except MustacheError as e:
        click.echo(format_error(e.message), err=True)
        ctx.exit(ExitCode.FAILURE)

    click.echo(to_display_string(value))
