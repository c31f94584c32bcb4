"""Entry point for the ``appconfigr`` command line."""

import click

from appconfigr import __version__
from appconfigr.cli.commands.render import render
from appconfigr.cli.commands.vars import vars_command


@click.group(name="appconfigr")
@click.version_option(__version__, prog_name="appconfigr")
def main() -> None:
    """Render and check configuration files with ${variable} placeholders.

    Placeholders are resolved from process properties (set with -D) first
    and environment variables second.

    \b
    EXAMPLES:

        Print a file with its variables expanded:
            appconfigr render config/database-config.conf

        Check which variables a file needs:
            appconfigr vars config/database-config.conf -D db.host=localhost
    """
    pass


main.add_command(render)
main.add_command(vars_command)


if __name__ == "__main__":
    main()
