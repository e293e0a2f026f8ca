"""Commit message generation from staged changes."""

import logging

from claude_commit.formatters import format_commit_command
from claude_commit.git import GitClient, NoStagedChangesError
from claude_commit.global_config import ConfigStore
from claude_commit.llm import AnthropicProvider, build_commit_prompt
from claude_commit.output import OutputKind, Printer

logger = logging.getLogger(__name__)


class CommitMessageGenerator:
    """Turns the staged diff into a suggested `git commit` command."""

    def __init__(
        self,
        config_store: ConfigStore,
        provider: AnthropicProvider,
        git: GitClient,
        printer: Printer,
    ):
        self.config_store = config_store
        self.provider = provider
        self.git = git
        self.printer = printer

    def generate_commit_message(self) -> str:
        """Suggest a commit command for the staged changes.

        The command is printed and returned, never executed.

        Returns:
            The suggested `git commit -m "..."` command.

        Raises:
            NotConfiguredError: If no configuration has been saved.
            GitError: If git cannot be queried.
            NoStagedChangesError: If nothing is staged.
            LLMError: If the API call fails.
        """
        config = self.config_store.load()
        diff = self.git.get_staged_diff()
        files = self.git.get_staged_files()

        if not diff.strip():
            raise NoStagedChangesError(
                "no staged changes found. Use 'git add' to stage changes."
            )

        self.printer.info("⚙️  Analyzing staged changes with Claude...")
        logger.info("Staged diff: %d chars, %d files", len(diff), len(files.splitlines()))

        prompt = build_commit_prompt(files, diff)
        suggestion = self.provider.generate(config, prompt).strip()
        command = format_commit_command(suggestion)

        self.printer.success("✓ Commit message generated")
        self.printer.render(OutputKind.COMMAND, command)
        return command
