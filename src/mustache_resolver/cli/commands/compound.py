from __future__ import annotations

from pathlib import Path

import click

from mustache_resolver.cli.context import ExitCode
from mustache_resolver.cli.helpers import (
    get_cli_context,
    load_data_file,
    parse_variables,
)
from mustache_resolver.cli.output import format_error
from mustache_resolver.exceptions import MustacheError
from mustache_resolver.factory import create_resolver


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
    "--check",
    is_flag=True,
    default=False,
    help="Only validate the template's syntax and variable references.",
)
@click.pass_context
def compound(
    ctx: click.Context,
    template: str,
    data_file: Path | None,
    variables: tuple[str, ...],
    check: bool,
) -> None:
    """Resolve a USE {var} => {{expr}} [condition] && statement TEMPLATE.

    Examples:
        mustache-resolver compound \\
            "USE {p} => {{Device.max_power}} > 0 && SET power={p}" -d device.yaml
        mustache-resolver compound --check "USE {a} => {{X.a}} && {a} {b}"
    """
    resolver = create_resolver(get_cli_context(ctx).config)

    if check:
        report = resolver.compound.validate(template)
        if report["valid"]:
            click.echo("valid")
            return
        message = format_error("Invalid compound template", report["errors"])
        click.echo(message, err=True)
        ctx.exit(ExitCode.FAILURE)

    try:
        statement = resolver.resolve_compound(
            template, load_data_file(data_file), parse_variables(variables)
        )
    except MustacheError as e:
        click.echo(format_error(e.message), err=True)
        ctx.exit(ExitCode.FAILURE)

    click.echo(statement)
