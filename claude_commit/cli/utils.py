"""Shared helpers for CLI commands."""

import typer
from typer.core import TyperGroup

from claude_commit.app import Application
from claude_commit.exceptions import UnknownCommandError


def get_application(ctx: typer.Context) -> Application:
    """Return the Application for this invocation, creating it on first use.

    The application lives on the root context so that every subcommand
    shares the same services.
    """
    root = ctx.find_root()
    if root.obj is None:
        root.obj = Application.create()
    return root.obj


class CommitGroup(TyperGroup):
    """Command group that reports unknown verbs as UnknownCommandError."""

    def resolve_command(self, ctx: typer.Context, args: list[str]):
        cmd_name = args[0]
        if not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            raise UnknownCommandError(f"Unknown command: {cmd_name}")
        return super().resolve_command(ctx, args)
