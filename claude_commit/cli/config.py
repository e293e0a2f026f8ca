"""CLI commands for configuration: config, view and models."""

from typing import Optional

import typer

from claude_commit.cli.help import show_config_help
from claude_commit.cli.utils import get_application
from claude_commit.config import DEFAULT_MODEL


def config_command(
    ctx: typer.Context,
    api_key: Optional[str] = typer.Option(
        None,
        "-api-key",
        "--api-key",
        help="Anthropic API key",
    ),
    model: Optional[str] = typer.Option(
        None,
        "-model",
        "--model",
        help=f"Model to use (default: {DEFAULT_MODEL})",
    ),
) -> None:
    """Configure API key and model settings.

    Options that are left out keep their saved value.
    """
    application = get_application(ctx)

    if api_key is None and model is None:
        show_config_help(application.printer)
        return

    application.config_store.save(api_key or "", model or "")


def view_command(ctx: typer.Context) -> None:
    """Show the current configuration."""
    get_application(ctx).config_store.view()


def models_command(ctx: typer.Context) -> None:
    """List available models."""
    get_application(ctx).catalog.show_models()
