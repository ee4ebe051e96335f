from __future__ import annotations

from pathlib import Path

import click

from mustache_resolver.cli.context import ExitCode
from mustache_resolver.cli.helpers import (
    get_cli_context,
    load_data_file,
    parse_variables,
)
from mustache_resolver.cli.output import format_error, format_json, format_warning
from mustache_resolver.exceptions import MustacheError
from mustache_resolver.factory import create_resolver
from mustache_resolver.logging import get_logger

logger = get_logger(__name__)


@click.command()
@click.argument("template")
@click.option(
    "-d",
    "--data",
    "data_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML or JSON file with the template data.",
)
@click.option(
    "--var",
    "variables",
    multiple=True,
    help="Variable for $name tokens, as name=value. Repeatable.",
)
@click.option(
    "--lenient",
    is_flag=True,
    default=False,
    help="Replace unresolvable placeholders instead of failing.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the full translation result as JSON.",
)
@click.pass_context
def translate(
    ctx: click.Context,
    template: str,
    data_file: Path | None,
    variables: tuple[str, ...],
    lenient: bool,
    as_json: bool,
) -> None:
    """Resolve every {{placeholder}} in TEMPLATE.

    Examples:
        mustache-resolver translate "Hello {{User.name}}" --data user.yaml
        mustache-resolver translate "Total: {{$count}}" --var count=3
    """
    cli_ctx = get_cli_context(ctx)
    data = load_data_file(data_file)
    resolver = create_resolver(cli_ctx.config)

    try:
        result = resolver.translate(
            template,
            data,
            parse_variables(variables),
            strict=False if lenient else None,
        )
    except MustacheError as e:
        click.echo(format_error(e.message), err=True)
        ctx.exit(ExitCode.FAILURE)

    logger.info("template_translated", success=result.success)

    if as_json:
        click.echo(format_json(result.to_dict()))
    elif result.success:
        click.echo(result.translated)

    for warning in result.warnings:
        click.echo(format_warning(warning), err=True)

    if not result.success:
        if not as_json:
            click.echo(
                format_error(result.failure_reason or "Translation failed"), err=True
            )
        ctx.exit(ExitCode.FAILURE)
