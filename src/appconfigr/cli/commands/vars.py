"""CLI command listing the variables a configuration file references."""

import sys
from pathlib import Path

import click

from appconfigr.cli.options import (
    build_resolver,
    parse_defines,
    split_location,
    variable_options,
)
from appconfigr.config.loader import AppConfigr
from appconfigr.lib.errors import AppConfigrError
from appconfigr.lib.logging_config import setup_logging
from appconfigr.lib.ui import status_label
from appconfigr.properties import override_properties
from appconfigr.variables.expressions import find
from appconfigr.variables.resolvers import Resolved


@click.command(name="vars")
@click.argument("file")
@variable_options
@click.option(
    "--show-values",
    is_flag=True,
    help="Print resolved values (hidden by default, they may be secrets).",
)
def vars_command(
    file: str,
    directory: Path | None,
    defines: tuple[str, ...],
    no_env: bool,
    no_properties: bool,
    verbose: bool,
    quiet: bool,
    show_values: bool,
) -> None:
    """List the distinct variables in FILE and whether they resolve.

    Exits with status 1 when at least one variable cannot be resolved.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    values = parse_defines(defines)
    resolver = build_resolver(no_env, no_properties)
    base_path, file_name = split_location(file, directory)

    try:
        with override_properties(values):
            loader = AppConfigr.from_directory(base_path).with_resolver(resolver).build()
            path = loader.resolve_path(None, file_name)
            names = list(dict.fromkeys(e.name for e in find(path.read_text("utf-8"))))
            outcomes = [(name, resolver.resolve(name)) for name in names]
    except AppConfigrError as e:
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(2)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Configuration Error: cannot read {file_name}: {e}", err=True)
        sys.exit(2)

    if not outcomes:
        click.echo(f"No placeholders found in {path}")
        return

    missing = 0
    for name, outcome in outcomes:
        if isinstance(outcome, Resolved):
            detail = outcome.value if show_values else ""
            click.echo(f"{status_label(True)}  {name}  {detail}".rstrip())
        else:
            missing += 1
            click.echo(f"{status_label(False)}  {name}  {outcome.message}")

    if missing:
        click.echo(f"{missing} of {len(outcomes)} variable(s) unresolved", err=True)
        sys.exit(1)
