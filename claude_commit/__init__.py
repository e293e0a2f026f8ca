"""Generate conventional commit messages for staged changes with Claude."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("claude-commit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

# Overridden by release builds
BUILD_DATE = "unknown"
COMMIT_SHA = "unknown"
