"""Options and helpers shared by the appconfigr commands."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from appconfigr.variables.resolvers import (
    VariableResolver,
    from_environment,
    from_properties,
)


def variable_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the file location and variable source options to a command."""
    decorators = [
        click.option(
            "--dir",
            "directory",
            type=click.Path(file_okay=False, path_type=Path),
            default=None,
            help="Base directory; FILE is taken relative to it. "
            "Defaults to the directory containing FILE.",
        ),
        click.option(
            "-D",
            "--define",
            "defines",
            multiple=True,
            metavar="NAME=VALUE",
            help="Set a process property for this run (repeatable).",
        ),
        click.option(
            "--no-env",
            is_flag=True,
            help="Do not resolve variables from environment variables.",
        ),
        click.option(
            "--no-properties",
            is_flag=True,
            help="Do not resolve variables from process properties.",
        ),
        click.option("--verbose", "-v", is_flag=True, help="Enable debug logging."),
        click.option("--quiet", "-q", is_flag=True, help="Only log errors."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def parse_defines(defines: tuple[str, ...]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` pairs given with ``-D``.

    Raises:
        click.BadParameter: If a pair has no ``=`` or an empty name
    """
    values: dict[str, str] = {}
    for define in defines:
        name, sep, value = define.partition("=")
        if not sep or not name:
            raise click.BadParameter(
                f"expected NAME=VALUE, got {define!r}", param_hint="'-D'"
            )
        values[name] = value
    return values


def split_location(file: str, directory: Path | None) -> tuple[Path, str]:
    """Return the base directory and file name for a FILE argument."""
    if directory is not None:
        return directory, file
    path = Path(file)
    return path.parent, path.name


def build_resolver(no_env: bool, no_properties: bool) -> VariableResolver:
    """Build the resolver chain selected by the command line flags.

    Raises:
        click.UsageError: If both sources are disabled
    """
    if no_env and no_properties:
        raise click.UsageError("--no-env and --no-properties cannot be combined")
    if no_properties:
        return from_environment()
    if no_env:
        return from_properties()
    return from_properties().with_fallback(from_environment())
