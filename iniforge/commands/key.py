"""
Key Management Commands

This module provides CLI commands for reading and changing keys of the loaded
configuration. Values are interpolated unless `--raw` is given.

Commands:
- key list <section>: List key names.
- key items <section>: List raw key=value pairs.
- key get <section> <key> [--raw]: Show a value.
- key int <section> <key> [--radix N]: Show a value as an integer.
- key float <section> <key>: Show a value as a float.
- key set <section> <key> <value>: Set a value.
- key remove <section> <key>: Remove a key.
"""

import math
from rich.console import Console
from rich.markup import escape
import click
from iniforge.commands.base import RichGroup, RichCommand, rich_help, context_get
from iniforge.lib.errors import NoSectionError
from iniforge.models.dataModel import CommandContext

console: Console = Console()


def _number_show(value: int | float | None, section: str, key: str) -> None:
    if value is None:
        raise click.ClickException(f"Section '{section}' not found.")
    if isinstance(value, float) and math.isnan(value):
        raise click.ClickException(f"Key '{key}' in [{section}] is not a number.")
    console.print(str(value), markup=False, highlight=False, soft_wrap=True)


@click.group(
    cls=RichGroup,
    short_help="Manage keys",
    help="""
    Key Management

    Commands to read, set and remove keys within a section.
    """,
)
def key() -> None:
    """
    Root group for key-related commands.
    """
    pass


key: click.Group = key


@key.command(
    name="list",
    cls=RichCommand,
    help=rich_help(
        description="List the keys of a section.",
        usage="key list <section>",
        args={"<section>": "The section to enumerate."},
    ),
)
@click.argument("section", type=str)
@click.pass_context
def list_(ctx: click.Context, section: str) -> None:
    """
    Prints every key of a section on its own line.
    """
    config: CommandContext = context_get(ctx)
    try:
        names: list[str] = config.parser.keys(section)
    except NoSectionError as e:
        raise click.ClickException(e.message) from e
    for name in names:
        console.print(name, markup=False, highlight=False, soft_wrap=True)


@key.command(
    cls=RichCommand,
    help=rich_help(
        description="List raw key=value pairs of a section.",
        usage="key items <section>",
        args={"<section>": "The section to show."},
    ),
)
@click.argument("section", type=str)
@click.pass_context
def items(ctx: click.Context, section: str) -> None:
    """
    Prints the raw pairs of a section.
    """
    config: CommandContext = context_get(ctx)
    pairs: dict[str, str] | None = config.parser.items(section)
    if pairs is None:
        raise click.ClickException(f"Section '{section}' not found.")
    for name, value in pairs.items():
        console.print(f"{name}={value}", markup=False, highlight=False, soft_wrap=True)


@key.command(
    cls=RichCommand,
    help=rich_help(
        description="Show the value of a key, placeholders expanded.",
        usage="key get <section> <key> [--raw]",
        args={
            "<section>": "The section holding the key.",
            "<key>": "The key to show.",
            "--raw": "Show the stored value without expanding placeholders.",
        },
    ),
)
@click.argument("section", type=str)
@click.argument("name", type=str)
@click.option("--raw", is_flag=True, help="Do not expand placeholders")
@click.pass_context
def get(ctx: click.Context, section: str, name: str, raw: bool) -> None:
    """
    Prints a single value.
    """
    config: CommandContext = context_get(ctx)
    value: str | None = config.parser.get(section, name, raw=raw)
    if value is None:
        raise click.ClickException(f"Key '{name}' not found in [{section}].")
    console.print(value, markup=False, highlight=False, soft_wrap=True)


@key.command(
    name="int",
    cls=RichCommand,
    help=rich_help(
        description="Show the value of a key as an integer.",
        usage="key int <section> <key> [--radix N]",
        args={
            "<section>": "The section holding the key.",
            "<key>": "The key to show.",
            "--radix": "Base of the number, 2 to 36.",
        },
    ),
)
@click.argument("section", type=str)
@click.argument("name", type=str)
@click.option("--radix", type=click.IntRange(2, 36), default=10, help="Number base")
@click.pass_context
def int_(ctx: click.Context, section: str, name: str, radix: int) -> None:
    """
    Prints a value coerced to an integer.
    """
    config: CommandContext = context_get(ctx)
    _number_show(config.parser.get_int(section, name, radix), section, name)


@key.command(
    name="float",
    cls=RichCommand,
    help=rich_help(
        description="Show the value of a key as a float.",
        usage="key float <section> <key>",
        args={"<section>": "The section holding the key.", "<key>": "The key to show."},
    ),
)
@click.argument("section", type=str)
@click.argument("name", type=str)
@click.pass_context
def float_(ctx: click.Context, section: str, name: str) -> None:
    """
    Prints a value coerced to a float.
    """
    config: CommandContext = context_get(ctx)
    _number_show(config.parser.get_float(section, name), section, name)


@key.command(
    cls=RichCommand,
    help=rich_help(
        description="Set the value of a key in an existing section.",
        usage="key set <section> <key> <value>",
        args={
            "<section>": "The section holding the key.",
            "<key>": "The key to set.",
            "<value>": "The raw value to store.",
        },
    ),
)
@click.argument("section", type=str)
@click.argument("name", type=str)
@click.argument("value", type=str)
@click.pass_context
def set(ctx: click.Context, section: str, name: str, value: str) -> None:
    """
    Stores a raw value.
    """
    config: CommandContext = context_get(ctx)
    if not config.parser.set(section, name, value):
        raise click.ClickException(f"Section '{section}' not found.")
    config.dirty = True
    console.print(f"[bold green]Key '{escape(name)}' set in section '{escape(section)}'.[/bold green]")


@key.command(
    cls=RichCommand,
    help=rich_help(
        description="Remove a key from a section.",
        usage="key remove <section> <key>",
        args={"<section>": "The section holding the key.", "<key>": "The key to remove."},
    ),
)
@click.argument("section", type=str)
@click.argument("name", type=str)
@click.pass_context
def remove(ctx: click.Context, section: str, name: str) -> None:
    """
    Removes a key if it exists.
    """
    config: CommandContext = context_get(ctx)
    if not config.parser.remove_key(section, name):
        raise click.ClickException(f"Key '{name}' not found in [{section}].")
    config.dirty = True
    console.print(f"[bold green]Key '{escape(name)}' removed from section '{escape(section)}'.[/bold green]")
