"""
Section Management Commands

This module provides CLI commands for listing, adding and removing sections of
the loaded configuration.

Commands:
- section list: List all sections.
- section add <name>: Add an empty section.
- section remove <name>: Remove a section and its keys.
"""

from rich.console import Console
from rich.markup import escape
import click
from iniforge.commands.base import RichGroup, RichCommand, rich_help, context_get
from iniforge.lib.errors import DuplicateSectionError
from iniforge.models.dataModel import CommandContext

console: Console = Console()


@click.group(
    cls=RichGroup,
    short_help="Manage sections",
    help="""
    Section Management

    Commands to list, add and remove sections.
    """,
)
def section() -> None:
    """
    Root group for section-related commands.
    """
    pass


section: click.Group = section


@section.command(
    name="list",
    cls=RichCommand,
    help=rich_help(
        description="List all sections in file order.",
        usage="section list",
        args={"<None>": "no arguments"},
    ),
)
@click.pass_context
def list_(ctx: click.Context) -> None:
    """
    Prints every section name on its own line.
    """
    config: CommandContext = context_get(ctx)
    for name in config.parser.sections():
        console.print(name, markup=False, highlight=False, soft_wrap=True)


@section.command(
    cls=RichCommand,
    help=rich_help(
        description="Add an empty section.",
        usage="section add <name>",
        args={"<name>": "The name of the section to add."},
    ),
)
@click.argument("name", type=str)
@click.pass_context
def add(ctx: click.Context, name: str) -> None:
    """
    Adds a section; fails if it already exists.
    """
    config: CommandContext = context_get(ctx)
    try:
        config.parser.add_section(name)
    except DuplicateSectionError as e:
        raise click.ClickException(e.message) from e
    config.dirty = True
    console.print(f"[bold green]Section '{escape(name)}' added.[/bold green]")


@section.command(
    cls=RichCommand,
    help=rich_help(
        description="Remove a section and all of its keys.",
        usage="section remove <name>",
        args={"<name>": "The name of the section to remove."},
    ),
)
@click.argument("name", type=str)
@click.pass_context
def remove(ctx: click.Context, name: str) -> None:
    """
    Removes a section if it exists.
    """
    config: CommandContext = context_get(ctx)
    if not config.parser.remove_section(name):
        raise click.ClickException(f"Section '{name}' not found.")
    config.dirty = True
    console.print(f"[bold green]Section '{escape(name)}' removed.[/bold green]")
