"""CLI command for printing configuration files with variables expanded.

Implements 'appconfigr render', which runs the same substitution as the
library loader and prints the result, optionally parsed or validated into a
model class.
"""

import importlib
import json
import sys
from pathlib import Path
from typing import Any

import click
import yaml
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from appconfigr.cli.options import (
    build_resolver,
    parse_defines,
    split_location,
    variable_options,
)
from appconfigr.config.formats import FORMATS
from appconfigr.config.loader import AppConfigr
from appconfigr.config.validator import flatten_pydantic_errors
from appconfigr.lib.errors import AppConfigrError, VariableResolutionError
from appconfigr.lib.logging_config import get_logger, setup_logging
from appconfigr.properties import override_properties

logger = get_logger(__name__)


def _guess_format(file_name: str) -> str:
    return "json" if file_name.lower().endswith(".json") else "yaml"


def _import_type(target: str) -> Any:
    """Import ``module:Class`` (or ``module.Class``) and return the object."""
    module_name, sep, attr = target.partition(":")
    if not sep:
        module_name, _, attr = target.rpartition(".")
    if not module_name or not attr:
        raise click.BadParameter(
            f"expected MODULE:CLASS, got {target!r}", param_hint="'--model'"
        )
    try:
        module = importlib.import_module(module_name)
        return getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise click.BadParameter(
            f"cannot import {target!r}: {e}", param_hint="'--model'"
        ) from e


@click.command(name="render")
@click.argument("file")
@variable_options
@click.option(
    "--format",
    "format_name",
    type=click.Choice(sorted(FORMATS)),
    default=None,
    help="File format. Defaults to json for *.json files, yaml otherwise.",
)
@click.option(
    "--parse",
    is_flag=True,
    help="Parse the expanded text and print the document as JSON.",
)
@click.option(
    "--model",
    default=None,
    metavar="MODULE:CLASS",
    help="Validate the document into this type and print it as JSON.",
)
def render(
    file: str,
    directory: Path | None,
    defines: tuple[str, ...],
    no_env: bool,
    no_properties: bool,
    verbose: bool,
    quiet: bool,
    format_name: str | None,
    parse: bool,
    model: str | None,
) -> None:
    """Print FILE with every ${name} placeholder expanded.

    \b
    EXAMPLES:

        appconfigr render config/app.conf

        appconfigr render app.conf --dir config -D db.host=localhost

        appconfigr render app.conf --model myapp.settings:AppConfig
    """
    setup_logging(verbose=verbose, quiet=quiet)

    values = parse_defines(defines)
    resolver = build_resolver(no_env, no_properties)
    base_path, file_name = split_location(file, directory)
    config_type = _import_type(model) if model else None

    try:
        with override_properties(values):
            loader = (
                AppConfigr.from_directory(base_path)
                .with_format(format_name or _guess_format(file_name))
                .with_resolver(resolver)
                .build()
            )
            logger.debug(f"Rendering {file_name} with {loader!r}")

            if config_type is not None:
                config = loader.get_config(config_type, file_name)
                dumped = TypeAdapter(config_type).dump_python(config, mode="json")
                output = json.dumps(dumped, indent=2)
            elif parse:
                content = loader.format.load(loader.render(file_name))
                output = json.dumps(content, indent=2, default=str)
            else:
                output = loader.render(file_name)

    except VariableResolutionError as e:
        click.echo(f"Variable Error: {e}", err=True)
        sys.exit(1)
    except AppConfigrError as e:
        click.echo(f"Configuration Error: {e}", err=True)
        sys.exit(2)
    except PydanticValidationError as e:
        click.echo(f"Validation Error in {file_name}:", err=True)
        for line in flatten_pydantic_errors(e):
            click.echo(f"  {line}", err=True)
        sys.exit(2)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        click.echo(f"Parse Error in {file_name}: {e}", err=True)
        sys.exit(3)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Configuration Error: cannot read {file_name}: {e}", err=True)
        sys.exit(2)

    click.echo(output, nl=not output.endswith("\n"))
