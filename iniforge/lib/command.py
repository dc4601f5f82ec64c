"""
Command processing for iniforge.

Loads the configuration file, runs one command of the click palette against
it and saves the file back when the command changed anything. Handles:
- Loading (missing files start out empty)
- Command execution
- Help system integration
- Error reporting
"""

import click
from pathlib import Path
from typing import Final
from rich.console import Console
from rich.markup import escape
from iniforge.commands.app import cli
from iniforge.lib.configparser import ConfigParser
from iniforge.lib.errors import Error
from iniforge.lib.log import LOG
from iniforge.models.dataModel import CommandContext, InvalidLine

console: Final[Console] = Console()


def invalidLine_report(invalid: InvalidLine) -> None:
    """`on_invalid_line` callback used in lenient mode: report and carry on."""
    LOG(f"Skipping invalid line {invalid.lineNumber} in {invalid.file}: {invalid.line!r}")
    console.print(
        f"[bold yellow]Skipped invalid line {invalid.lineNumber}:[/bold yellow] "
        f"{escape(invalid.line)}"
    )


async def config_load(path: Path, parser: ConfigParser) -> CommandContext:
    """Read `path` into `parser`; a file that does not exist yet loads empty.

    Raises:
        ParseError: If the file is malformed
    """
    try:
        await parser.read_async(path)
    except FileNotFoundError:
        LOG(f"{path} does not exist yet, starting empty")
    return CommandContext(parser=parser, path=path)


async def command_process(args: list[str], path: Path, parser: ConfigParser) -> int:
    """Run a palette command against the configuration stored at `path`.

    Args:
        args: Command and its arguments, e.g. ["key", "get", "db", "port"]
        path: Configuration file to load and, after mutations, save
        parser: Unloaded parser carrying the requested options

    Returns:
        int: Process exit code

    Note:
        Without a command, the palette help is shown.
    """
    if not args:
        args = ["--help"]

    try:
        context: CommandContext = await config_load(path, parser)
        result = cli.main(
            args=args, prog_name="iniforge", obj=context, standalone_mode=False
        )
        if context.dirty:
            path.parent.mkdir(parents=True, exist_ok=True)
            await parser.write_async(path)
        return result if isinstance(result, int) else 0

    except click.exceptions.UsageError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.format_message())}")
        return 2
    except click.ClickException as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.format_message())}")
        return 1
    except click.exceptions.Abort:
        return 1
    except Error as e:
        LOG(f"Command processing error: {e.message}")
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        return 1
