"""CLI entry point for claude-commit.

This module provides the typer application and main(), the single place
where errors are reported and the exit status is decided.
"""

import sys
from typing import Optional

import typer

from claude_commit.app import Application
from claude_commit.cli.commit import commit_command
from claude_commit.cli.config import config_command, models_command, view_command
from claude_commit.cli.help import help_command
from claude_commit.cli.main import main_command
from claude_commit.cli.utils import CommitGroup, get_application
from claude_commit.config import PROG_NAME
from claude_commit.exceptions import ClaudeCommitError, FlagParseError

# Main application
app = typer.Typer(
    name=PROG_NAME,
    cls=CommitGroup,
    help="Generate conventional commit messages with Claude AI",
    add_completion=False,
    add_help_option=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("config")(config_command)
app.command("view")(view_command)
app.command("models")(models_command)
app.command("commit")(commit_command)
app.command(
    "help",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)(help_command)

# -h/--help on the root show our own help screen
app.callback(invoke_without_command=True, add_help_option=False)(main_command)


def _report(application: Application, error: Exception) -> int:
    application.printer.error(str(error))
    return 1


def _dispatch(argv: Optional[list[str]], application: Application) -> int:
    try:
        result = app(
            args=argv,
            prog_name=PROG_NAME,
            standalone_mode=False,
            obj=application,
        )
    except ClaudeCommitError as e:
        return _report(application, e)
    except typer.TyperException as e:
        # Parser failures: unknown options, missing values, extra arguments
        return _report(application, FlagParseError(f"Error parsing arguments: {e.format_message()}"))
    except typer.Abort:
        return _report(application, ClaudeCommitError("Aborted"))

    return result if isinstance(result, int) else 0


def main(argv: Optional[list[str]] = None, application: Optional[Application] = None) -> int:
    """Run the CLI and return the process exit status.

    Args:
        argv: Command-line arguments without the program name. Defaults to sys.argv[1:].
        application: Services to run with. Defaults to Application.create(),
            which is closed again before returning.

    Returns:
        0 on success or help, 1 on any reported error.
    """
    if application is not None:
        return _dispatch(argv, application)

    with Application.create() as application:
        return _dispatch(argv, application)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


__all__ = [
    "app",
    "main",
    "run",
    "get_application",
    "config_command",
    "view_command",
    "models_command",
    "commit_command",
    "help_command",
    "main_command",
]
