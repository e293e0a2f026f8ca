"""Static configuration for claude-commit.

User settings (API key and model) are stored separately, see
claude_commit.global_config.
"""

PROG_NAME = "claude-commit"

# Anthropic Messages API
ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
MAX_TOKENS = 100

AVAILABLE_MODELS = [
    "claude-opus-4-0",
    "claude-sonnet-4-0",
    "claude-3-7-sonnet-latest",
    "claude-3-5-sonnet-latest",
    "claude-3-5-haiku-latest",
    "claude-3-opus-latest",
]

DEFAULT_MODEL = "claude-sonnet-4-0"

# Per-user configuration location: ~/.claude-commit/config.yaml
CONFIG_DIR_NAME = ".claude-commit"
CONFIG_FILE_NAME = "config.yaml"

# Conventional commit types, in the order they are presented to the model
COMMIT_TYPES = {
    "feat": "a new feature",
    "fix": "a bug fix",
    "docs": "documentation only changes",
    "style": "formatting, whitespace, missing semicolons (no logic change)",
    "refactor": "code change that neither fixes a bug nor adds a feature",
    "perf": "performance improvement",
    "test": "adding or updating tests",
    "build": "build system or external dependencies",
    "ci": "CI configuration files and scripts",
    "chore": "maintenance tasks and tooling",
    "revert": "reverting a previous commit",
}
