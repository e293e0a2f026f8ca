"""Terminal output for claude-commit.

Services never write to the terminal directly. They receive a Printer and
describe what they want shown with an OutputKind; the printer decides how
it looks.
"""

from abc import ABC, abstractmethod
from enum import Enum

import typer


class OutputKind(str, Enum):
    """Kinds of messages a service can emit."""

    TITLE = "title"
    SUBTITLE = "subtitle"
    TEXT = "text"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    COMMAND = "command"
    BOX = "box"


class Printer(ABC):
    """Output capability injected into every service."""

    @abstractmethod
    def render(self, kind: OutputKind, text: str) -> None:
        """Show text as the given kind of message."""
        pass

    def print(self, text: str = "") -> None:
        self.render(OutputKind.TEXT, text)

    def info(self, text: str) -> None:
        self.render(OutputKind.INFO, text)

    def success(self, text: str) -> None:
        self.render(OutputKind.SUCCESS, text)

    def warning(self, text: str) -> None:
        self.render(OutputKind.WARNING, text)

    def error(self, text: str) -> None:
        self.render(OutputKind.ERROR, text)


# (foreground, bold) per kind; None means plain text
_STYLES = {
    OutputKind.TITLE: (typer.colors.MAGENTA, True),
    OutputKind.SUBTITLE: (typer.colors.BRIGHT_MAGENTA, False),
    OutputKind.TEXT: None,
    OutputKind.INFO: (typer.colors.BRIGHT_BLACK, False),
    OutputKind.SUCCESS: (typer.colors.GREEN, False),
    OutputKind.WARNING: (typer.colors.YELLOW, False),
    OutputKind.ERROR: (typer.colors.RED, False),
    OutputKind.COMMAND: (typer.colors.GREEN, True),
    OutputKind.BOX: None,
}

_STDERR_KINDS = {OutputKind.ERROR, OutputKind.WARNING}


def draw_box(text: str, padding: int = 2) -> str:
    """Surround text with a rounded border.

    Args:
        text: The (possibly multi-line) text to frame.
        padding: Spaces between the border and the text on each side.

    Returns:
        The framed text.
    """
    lines = text.splitlines() or [""]
    width = max(len(line) for line in lines) + padding * 2
    pad = " " * padding
    framed = ["╭" + "─" * width + "╮"]
    framed.append("│" + " " * width + "│")
    for line in lines:
        framed.append("│" + pad + line.ljust(width - padding * 2) + pad + "│")
    framed.append("│" + " " * width + "│")
    framed.append("╰" + "─" * width + "╯")
    return "\n".join(framed)


class TerminalPrinter(Printer):
    """Printer that writes styled text with typer.

    Errors and warnings go to stderr, everything else to stdout. Colors are
    dropped automatically when the stream is not a terminal.
    """

    def render(self, kind: OutputKind, text: str) -> None:
        if kind == OutputKind.ERROR:
            text = f"✗ {text}"

        styled = text
        style = _STYLES[kind]
        if style is not None:
            fg, bold = style
            styled = typer.style(text, fg=fg, bold=bold)

        if kind == OutputKind.BOX:
            styled = draw_box(text)
        elif kind == OutputKind.COMMAND:
            # Measure the box on the plain text, then color the content line
            styled = draw_box(text).replace(text, styled)

        typer.echo(styled, err=kind in _STDERR_KINDS)
