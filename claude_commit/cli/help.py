"""Help and version output."""

import typer

from claude_commit import BUILD_DATE, COMMIT_SHA, __version__
from claude_commit.config import AVAILABLE_MODELS, COMMIT_TYPES, DEFAULT_MODEL, PROG_NAME
from claude_commit.output import OutputKind, Printer
from claude_commit.cli.utils import get_application


def show_help(printer: Printer) -> None:
    """Print the main help screen."""
    printer.render(OutputKind.TITLE, "Claude Commit")
    printer.render(OutputKind.SUBTITLE, "Generate conventional commit messages with Claude AI")

    printer.print("Usage:")
    printer.print(f"  {PROG_NAME} <command> [flags]")
    printer.print()
    printer.print("Commands:")
    printer.print("  config    Configure API key and model settings")
    printer.print("  view      Show the current configuration")
    printer.print("  models    List available models")
    printer.print("  commit    Suggest a commit message for staged changes")
    printer.print("  help      Show this help")
    printer.print()
    printer.print("Flags:")
    printer.print("  -v, --version    Show version information")
    printer.print("  -h, --help       Show this help")
    printer.print("      --verbose    Show diagnostic logging (repeat for more)")
    printer.print()
    printer.render(
        OutputKind.BOX,
        "Examples:\n"
        f"  {PROG_NAME} config -api-key \"your-api-key\"\n"
        f"  {PROG_NAME} commit",
    )
    printer.print()
    printer.print("Commit Types:")
    for name, description in COMMIT_TYPES.items():
        printer.render(OutputKind.INFO, f"  {name:<9} {description}")


def show_config_help(printer: Printer) -> None:
    """Print help for the config command."""
    printer.render(OutputKind.TITLE, "Claude Commit Config")
    printer.render(OutputKind.SUBTITLE, "Configure API key and model settings")

    printer.print("Usage:")
    printer.print(f"  {PROG_NAME} config [flags]")
    printer.print()
    printer.print("Flags:")
    printer.print("  -api-key string    Anthropic API key")
    printer.print(f"  -model string      Model to use (default \"{DEFAULT_MODEL}\")")
    printer.print()
    printer.render(
        OutputKind.BOX,
        "Examples:\n"
        "  # Initial setup\n"
        f"  {PROG_NAME} config -api-key \"your-api-key\" -model \"{DEFAULT_MODEL}\"\n"
        "\n"
        "  # Update only API key\n"
        f"  {PROG_NAME} config -api-key \"new-api-key\"\n"
        "\n"
        "  # Update only model\n"
        f"  {PROG_NAME} config -model \"{AVAILABLE_MODELS[0]}\"",
    )
    printer.print()
    printer.render(OutputKind.INFO, f"Run '{PROG_NAME} view' to see the current configuration.")
    printer.render(OutputKind.INFO, f"Run '{PROG_NAME} models' to list available models.")


def show_version(printer: Printer) -> None:
    """Print version and build information."""
    printer.render(OutputKind.TITLE, "Claude Commit")
    printer.print(f"Version:    v{__version__}")
    printer.print(f"Build date: {BUILD_DATE}")
    if COMMIT_SHA != "unknown":
        printer.print(f"Commit:     {COMMIT_SHA}")


def help_command(ctx: typer.Context) -> None:
    """Show help."""
    show_help(get_application(ctx).printer)


def version_callback(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    show_version(get_application(ctx).printer)
    raise typer.Exit()


def help_callback(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    show_help(get_application(ctx).printer)
    raise typer.Exit()
