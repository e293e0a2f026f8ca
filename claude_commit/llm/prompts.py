"""Prompt template for commit message generation.

The model is asked for a single conventional commit line, which is shown to
the user inside a `git commit -m` command.
"""

from claude_commit.config import COMMIT_TYPES

COMMIT_PROMPT_TEMPLATE = """Generate a conventional commit message for the staged changes below.

Format: <type>: <description>

Types:
{commit_types}

Rules:
- Use the imperative mood ("add feature" not "added feature").
- Write the description in lowercase.
- Do not end the message with a period.
- Maximum 50 characters in total.
- Choose the type that best describes the primary purpose of the change.
- Output ONLY the commit message on a single line. No quotes, no explanation.

Staged files:
{files}

Staged diff:
{diff}"""


def format_commit_types() -> str:
    """Render COMMIT_TYPES as one `- type: description` line per type."""
    return "\n".join(f"- {name}: {description}" for name, description in COMMIT_TYPES.items())


def build_commit_prompt(files: str, diff: str) -> str:
    """Build the instruction sent to the model.

    Args:
        files: Staged file names, one per line.
        diff: The staged diff.

    Returns:
        The complete prompt text.
    """
    return COMMIT_PROMPT_TEMPLATE.format(
        commit_types=format_commit_types(),
        files=files.strip(),
        diff=diff,
    )
