"""Git command runner."""

import logging
import subprocess

from claude_commit.git.exceptions import GitError

logger = logging.getLogger(__name__)


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The raw stdout of the git command.

    Raises:
        GitError: If the command fails or git is not installed.
    """
    logger.debug("Running git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}") from e
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e
