"""CLI command for suggesting a commit message."""

import typer

from claude_commit.cli.utils import get_application


def commit_command(ctx: typer.Context) -> None:
    """Suggest a commit message for the staged changes.

    The suggestion is printed as a `git commit -m` command; nothing is
    committed.
    """
    get_application(ctx).generator.generate_commit_message()
