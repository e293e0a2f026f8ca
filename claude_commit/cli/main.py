"""Root callback: global flags and the no-command default."""

import typer

from claude_commit.cli.help import help_callback, show_help, version_callback
from claude_commit.cli.utils import get_application
from claude_commit.logging_utils import configure_logging


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information and exit",
        is_eager=True,
        callback=version_callback,
    ),
    show_help_flag: bool = typer.Option(
        False,
        "--help",
        "-h",
        help="Show help and exit",
        is_eager=True,
        callback=help_callback,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        count=True,
        help="Show diagnostic logging (repeat for debug output)",
    ),
) -> None:
    """Generate conventional commit messages with Claude AI."""
    configure_logging(verbose)

    # Without a subcommand, show help
    if ctx.invoked_subcommand is None:
        show_help(get_application(ctx).printer)
