"""Listing of the Claude models claude-commit knows about."""

from claude_commit.config import AVAILABLE_MODELS, DEFAULT_MODEL
from claude_commit.global_config import ConfigStore
from claude_commit.output import OutputKind, Printer


def describe_model(model: str, current_model: str) -> str:
    """Format one model entry with its [CURRENT] and [DEFAULT] tags."""
    line = model
    if model == current_model:
        line += " [CURRENT]"
    if model == DEFAULT_MODEL:
        line += " [DEFAULT]"
    return line


class ModelCatalog:
    """Shows the supported models next to the configured one."""

    def __init__(self, config_store: ConfigStore, printer: Printer):
        self.config_store = config_store
        self.printer = printer

    def show_models(self) -> None:
        """List every supported model, marking the current and default ones.

        Raises:
            NotConfiguredError: If no configuration has been saved.
            ConfigParseError: If the configuration cannot be parsed.
        """
        config = self.config_store.load()

        self.printer.render(OutputKind.TITLE, "Available Models:")
        for model in AVAILABLE_MODELS:
            kind = OutputKind.SUCCESS if model == config.model else OutputKind.TEXT
            self.printer.render(kind, f"  • {describe_model(model, config.model)}")

        if config.model not in AVAILABLE_MODELS:
            self.printer.warning(
                f"Current model {config.model} is not in the list of known models"
            )
