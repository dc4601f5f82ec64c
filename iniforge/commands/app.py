"""
Defines the main Click command group for iniforge.

This module provides:
- The root `cli` command group for the application.
- The `dump` command printing the serialized configuration.
- Registration of subcommands from other modules.

Usage:
Import `cli` to run the command palette against a loaded configuration.
"""

import click
from iniforge.commands.base import RichGroup, RichCommand, rich_help, context_get
from iniforge.commands.section import section
from iniforge.commands.key import key


@click.group(
    cls=RichGroup,
    help="""
    iniforge Command Palette

    Inspect and edit INI configuration files.
    """,
)
def cli() -> None:
    """
    The root Click command group for iniforge.
    """
    pass


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli


@cli.command(
    cls=RichCommand,
    help=rich_help(
        description="Print the whole configuration as it would be saved.",
        usage="dump",
        args={"<None>": "no arguments"},
    ),
)
@click.pass_context
def dump(ctx: click.Context) -> None:
    """
    Prints the serialized configuration; comments are not preserved.
    """
    click.echo(context_get(ctx).parser.to_string(), nl=False)


# Register subcommands
cli.add_command(section)
cli.add_command(key)
