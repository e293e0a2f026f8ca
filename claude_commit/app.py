"""Service wiring for the command-line interface."""

from dataclasses import dataclass
from typing import Optional

import requests

from claude_commit.catalog import ModelCatalog
from claude_commit.generator import CommitMessageGenerator
from claude_commit.git import GitClient
from claude_commit.global_config import ConfigStore
from claude_commit.llm import AnthropicProvider
from claude_commit.output import Printer, TerminalPrinter


@dataclass
class Application:
    """The services a CLI invocation works with.

    Use it as a context manager to close the HTTP session afterwards.
    """

    printer: Printer
    config_store: ConfigStore
    provider: AnthropicProvider
    catalog: ModelCatalog
    generator: CommitMessageGenerator

    @classmethod
    def create(
        cls,
        printer: Optional[Printer] = None,
        config_store: Optional[ConfigStore] = None,
        provider: Optional[AnthropicProvider] = None,
        git: Optional[GitClient] = None,
    ) -> "Application":
        """Build the application, creating defaults for any missing collaborator."""
        printer = printer or TerminalPrinter()
        config_store = config_store or ConfigStore(printer)
        provider = provider or AnthropicProvider(requests.Session(), printer)
        git = git or GitClient()
        return cls(
            printer=printer,
            config_store=config_store,
            provider=provider,
            catalog=ModelCatalog(config_store, printer),
            generator=CommitMessageGenerator(config_store, provider, git, printer),
        )

    def close(self) -> None:
        self.provider.close()

    def __enter__(self) -> "Application":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
