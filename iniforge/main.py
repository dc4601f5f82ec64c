"""
iniforge Main Module.

Command line entry point: loads an INI file, runs one command of the palette
against it and saves the file back when the command changed it.

Examples:
    List sections of the default configuration file:
        $ iniforge section list

    Expanded and raw value of a key:
        $ iniforge --file app.ini key get db port
        $ iniforge --file app.ini key get db port --raw

    Case-fold names and keep going past malformed lines:
        $ iniforge --file legacy.ini --transform lower --lenient dump

Note:
    Without --file the configuration lives in the user config directory.
"""

from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter, REMAINDER
from pathlib import Path
from typing import Final, Optional
import asyncio
import sys
from rich.console import Console
from iniforge.config.settings import CONFIG_FILE, appsettings
from iniforge.lib.command import command_process, invalidLine_report
from iniforge.lib.configparser import ConfigParser
from iniforge.models.dataModel import Transform

__version__: Final[str] = "0.1.0"

console: Final[Console] = Console()

# Define the argument parser
parser: Final[ArgumentParser] = ArgumentParser(
    prog="iniforge",
    description="Read, query and edit INI configuration files.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument(
    "--file", type=Path, default=CONFIG_FILE, help="Configuration file to operate on"
)
parser.add_argument(
    "--transform",
    choices=[t.value for t in Transform],
    default=appsettings.transform.value,
    help="Case transform applied to section and key names",
)
parser.add_argument(
    "--lenient",
    action="store_true",
    default=appsettings.lenient,
    help="Report invalid lines and keep parsing instead of failing",
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)
parser.add_argument("command", nargs=REMAINDER, help="Palette command and arguments")


async def async_main(options: Namespace) -> int:
    """Asynchronous main function.

    Args:
        options: Parsed command-line arguments

    Returns:
        int: Process exit code
    """
    config: ConfigParser = ConfigParser(
        transform=options.transform,
        on_invalid_line=invalidLine_report if options.lenient else None,
    )
    return await command_process(options.command, options.file, config)


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the iniforge console script."""
    options: Namespace = parser.parse_args(argv)
    try:
        sys.exit(asyncio.run(async_main(options)))
    except KeyboardInterrupt:
        console.print("\n[bold cyan]Program interrupted by user. Exiting.[/bold cyan]")
        sys.exit(130)


if __name__ == "__main__":
    main()
