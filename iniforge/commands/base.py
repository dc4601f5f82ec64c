"""
Base classes for Rich-enhanced Click commands and groups.

This module defines:
- `RichGroup`: A Click group with Rich-enhanced help rendering.
- `RichCommand`: A Click command with Rich-enhanced help rendering.
- `context_get`: Access to the loaded configuration from inside a command.
"""

from rich.console import Console
from rich.panel import Panel
import click
from iniforge.lib.log import LOG
from iniforge.models.dataModel import CommandContext

console: Console = Console()


def rich_help(description: str, usage: str, args: dict) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold cyan]{description}[/bold cyan]\n\n"
    help_text += f"[bold yellow]Usage:[/bold yellow]\n    [green]{usage}[/green]\n\n"
    help_text += "[bold yellow]Arguments:[/bold yellow]\n"
    for arg, desc in args.items():
        help_text += f"    [green]{arg}[/green]: {desc}\n"
    return help_text


def context_get(ctx: click.Context) -> CommandContext:
    """
    The `CommandContext` the command palette was invoked with.

    :raises click.UsageError: If the palette was invoked without a loaded configuration.
    """
    obj = ctx.find_object(CommandContext)
    if obj is None:
        raise click.UsageError("No configuration loaded.")
    return obj


class RichGroup(click.Group):
    """
    A Click Group that uses Rich for rendering help messages with enhanced colorization.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the help message for the group using Rich.

        :param ctx: The Click context for the command group.
        :param formatter: The Click help formatter.
        """
        try:
            usage: str = (
                f"[bold yellow]Usage:[/bold yellow] [cyan]{ctx.command_path}[/cyan] "
                f"[magenta][OPTIONS] COMMAND [ARGS]...[/magenta]\n"
            )
            console.print(usage)

            if self.help:
                console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")

            if self.commands:
                console.print("[bold green]Available Commands:[/bold green]")
                for name, command in self.commands.items():
                    console.print(
                        f"- [cyan]{name}[/cyan]: [white]{command.short_help or 'No description available.'}[/white]"
                    )
                console.print()
        except Exception as e:
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")


class RichCommand(click.Command):
    """
    A Click Command that uses Rich for rendering help messages.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the help message for the command inside a Rich panel.

        :param ctx: The Click context for the command.
        :param formatter: The Click help formatter.
        """
        try:
            help_text = self.help or "No help text available."
            panel_width = max(len(line) for line in help_text.splitlines()) + 10
            panel_width = min(panel_width, 80)  # Cap the width to avoid excessive size
            panel = Panel(
                help_text, expand=False, width=panel_width, border_style="cyan"
            )
            console.print(panel)
        except Exception as e:
            LOG(f"Help rendering error: {e}")
            console.print(f"[bold red]Help rendering error:[/bold red] {e}")
