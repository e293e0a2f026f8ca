"""Git access for claude-commit.

This package provides read-only queries against the staging area:
- exceptions: GitError, NoStagedChangesError
- runner: _run_git_command
- client: GitClient (staged diff and staged file names)
"""

from claude_commit.git.exceptions import (
    GitError,
    NoStagedChangesError,
)
from claude_commit.git.runner import _run_git_command
from claude_commit.git.client import GitClient

__all__ = [
    "GitError",
    "NoStagedChangesError",
    "_run_git_command",
    "GitClient",
]
