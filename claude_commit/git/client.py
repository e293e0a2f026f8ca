"""Read-only queries against the git staging area."""

from claude_commit.git.runner import _run_git_command


class GitClient:
    """Collaborator that reads staged changes through the git CLI."""

    def get_staged_diff(self) -> str:
        """Return the full diff of staged changes (`git diff --staged`)."""
        return _run_git_command(["diff", "--staged"])

    def get_staged_files(self) -> str:
        """Return the staged file names, one per line."""
        return _run_git_command(["diff", "--staged", "--name-only"])
