"""User configuration management for claude-commit.

Handles the per-user configuration stored in ~/.claude-commit/:
- config.yaml: Anthropic API key and model selection
"""

import logging
import os
import stat
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from claude_commit.config import CONFIG_DIR_NAME, CONFIG_FILE_NAME, PROG_NAME
from claude_commit.exceptions import (
    ClaudeCommitError,
    ConfigParseError,
    ConfigWriteError,
    NotConfiguredError,
    ValidationError,
)
from claude_commit.formatters import mask_api_key
from claude_commit.models import Config
from claude_commit.output import OutputKind, Printer

logger = logging.getLogger(__name__)


def get_default_config_dir() -> Path:
    """Get the per-user configuration directory.

    Returns:
        Path to ~/.claude-commit/
    """
    return Path.home() / CONFIG_DIR_NAME


class ConfigStore:
    """Loads and saves the user configuration.

    Args:
        printer: Where progress and results are reported.
        config_dir: Directory holding config.yaml. Defaults to
            ~/.claude-commit/, resolved on each access.
    """

    def __init__(self, printer: Printer, config_dir: Optional[Path] = None):
        self.printer = printer
        self._config_dir = config_dir

    @property
    def config_dir(self) -> Path:
        return self._config_dir or get_default_config_dir()

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def _read(self) -> Config:
        """Read and validate the config file without checking the API key."""
        config_file = self.config_file
        try:
            content = config_file.read_text()
        except OSError as e:
            raise NotConfiguredError(
                f"Error reading config file {config_file}: {e}\n"
                f"Please run '{PROG_NAME} config' first"
            ) from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"Error parsing config file {config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigParseError(
                f"Error parsing config file {config_file}: expected a mapping, "
                f"got {type(data).__name__}"
            )

        try:
            return Config.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigParseError(f"Error parsing config file {config_file}: {e}") from e

    def load(self) -> Config:
        """Load the saved configuration.

        Returns:
            The stored Config.

        Raises:
            NotConfiguredError: If the file is missing, unreadable or has no API key.
            ConfigParseError: If the file is not a valid config record.
        """
        config = self._read()
        if not config.api_key:
            raise NotConfiguredError(
                f"No API key configured in {self.config_file}\n"
                f"Please run '{PROG_NAME} config' first"
            )
        logger.debug("Loaded configuration from %s", self.config_file)
        return config

    def save(self, api_key: str, model: str) -> Config:
        """Merge the given values into the stored configuration and save it.

        Empty arguments keep the previously stored value (or the default
        model when nothing was stored yet).

        Args:
            api_key: New API key, or "" to keep the current one.
            model: New model, or "" to keep the current one.

        Returns:
            The configuration that was written.

        Raises:
            ValidationError: If no API key is given and none is stored.
        """
        try:
            config = self._read()
        except ClaudeCommitError as e:
            logger.debug("Ignoring existing configuration: %s", e)
            config = Config()

        if api_key:
            config.api_key = api_key
        if model:
            config.model = model

        if not config.api_key:
            raise ValidationError("API key is required")

        config_file = self.config_file
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(config_file, "w") as f:
                yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
            # Owner read/write only, the file holds a secret
            os.chmod(config_file, stat.S_IRUSR | stat.S_IWUSR)
        except OSError as e:
            raise ConfigWriteError(f"Error writing config file {config_file}: {e}") from e
        logger.info("Saved configuration to %s", config_file)

        self.printer.success("Configuration saved successfully")
        self.printer.render(OutputKind.BOX, self._describe(config))
        return config

    def view(self) -> Config:
        """Show the current configuration with the API key masked."""
        config = self.load()
        self.printer.render(OutputKind.TITLE, "Current Configuration")
        self.printer.render(OutputKind.BOX, self._describe(config))
        return config

    @staticmethod
    def _describe(config: Config) -> str:
        return f"API Key: {mask_api_key(config.api_key)}\nModel: {config.model}"
